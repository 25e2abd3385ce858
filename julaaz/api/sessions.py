from flask import jsonify, request

from julaaz.api import api_bp
from julaaz.db import get_connection
from julaaz.schema import role_to_dashboard
from julaaz.services.session_service import SessionService
from julaaz.utils.parser import parse_role
from julaaz.utils.system.errors import ForbiddenError, ValidationError


def _session_body(role, auth) -> dict:
    return {
        "role": role.to_dict(),
        "is_authenticated": auth.is_authenticated,
        "user": auth.user.to_dict() if auth.user else None,
    }


@api_bp.route("/sessions/<user_id>", methods=["GET"])
def get_session(user_id: str):
    with get_connection() as conn:
        role, auth = SessionService(conn).hydrate(user_id)
    return jsonify(_session_body(role, auth))


@api_bp.route("/sessions/<user_id>/active-role", methods=["POST"])
def switch_role(user_id: str):
    body = request.get_json(silent=True) or {}
    target = parse_role(body.get("role"))
    if target is None:
        raise ValidationError("role required")

    with get_connection() as conn:
        service = SessionService(conn)
        role, auth = service.hydrate(user_id)
        if target not in {r.type for r in role.roles}:
            raise ForbiddenError(f"User {user_id} does not hold role '{target.value}'")
        role.set_active_role(target)
        service.persist(user_id, role, auth)

    return jsonify({**_session_body(role, auth), "redirect_to": role_to_dashboard(target)})


@api_bp.route("/sessions/<user_id>", methods=["DELETE"])
def logout(user_id: str):
    with get_connection() as conn:
        service = SessionService(conn)
        role, auth = service.hydrate(user_id)
        service.logout(user_id, role, auth)
    return "", 204
