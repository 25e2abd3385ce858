from flask import jsonify

from julaaz.api import api_bp
from julaaz.services.realtor_service import RealtorService


@api_bp.route("/realtor/dashboard", methods=["GET"])
def realtor_dashboard():
    return jsonify(RealtorService.dashboard_summary())


@api_bp.route("/realtor/earnings", methods=["GET"])
def realtor_earnings():
    return jsonify(RealtorService.earnings_summary())
