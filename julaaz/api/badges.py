from flask import jsonify, request

from julaaz.api import api_bp
from julaaz.services.badge_service import BadgeService


@api_bp.route("/badges", methods=["GET"])
def list_badge_roles():
    return jsonify({"roles": BadgeService.roles()})


@api_bp.route("/badges/<role>", methods=["POST"])
def compute_badge(role: str):
    body = request.get_json(silent=True) or {}
    result = BadgeService.compute(role, body.get("metrics"), body.get("targets"))
    return jsonify(result)


@api_bp.route("/badges/<role>/tiers", methods=["GET"])
def badge_catalog(role: str):
    return jsonify(BadgeService.catalog(role))
