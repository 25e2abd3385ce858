from flask import jsonify, request

from julaaz.access import resolve_guard
from julaaz.api import api_bp
from julaaz.utils.parser import parse_role
from julaaz.utils.system.errors import ValidationError


def _role_list(body: dict, key: str):
    values = body.get(key)
    if values is None:
        return None
    if not isinstance(values, list):
        raise ValidationError(f"{key} must be a list")
    return [parse_role(v) for v in values]


@api_bp.route("/access/check", methods=["POST"])
def check_access():
    body = request.get_json(silent=True) or {}
    decision = resolve_guard(
        active_role=parse_role(body.get("active_role")),
        allowed=_role_list(body, "allowed_roles"),
        disallowed=_role_list(body, "disallowed_roles"),
        redirect_to=body.get("redirect_to"),
        allow_unauthenticated=bool(body.get("allow_unauthenticated", False)),
    )
    return jsonify({"allowed": decision.allowed, "redirect_to": decision.redirect_to})
