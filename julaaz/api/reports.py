from flask import jsonify, request

from julaaz.api import api_bp
from julaaz.schema import ReportContext
from julaaz.services.report_service import check_report_eligibility, get_report_type
from julaaz.utils.parser import parse_report_type, parse_role
from julaaz.utils.system.errors import ValidationError


@api_bp.route("/reports/eligibility", methods=["POST"])
def report_eligibility():
    body = request.get_json(silent=True) or {}
    role = parse_role(body.get("role"))
    report_type = parse_report_type(body.get("report_type"))
    ctx = body.get("context") or {}
    context = ReportContext(
        has_viewed=bool(ctx.get("has_viewed")),
        has_moved_in=bool(ctx.get("has_moved_in")),
        has_booking=bool(ctx.get("has_booking")),
        booking_status=ctx.get("booking_status"),
    )
    return jsonify(check_report_eligibility(role, report_type, context).to_dict())


@api_bp.route("/reports/type", methods=["GET"])
def report_type():
    entity_type = request.args.get("entity_type")
    if entity_type not in ("user", "property", "service"):
        raise ValidationError("entity_type must be one of: user, property, service")
    resolved = get_report_type(entity_type, request.args.get("entity_role"))
    return jsonify({"report_type": resolved.value})
