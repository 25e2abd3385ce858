from datetime import date, datetime

from flask import current_app, jsonify, request

from julaaz.api import api_bp
from julaaz.schema import RentalCategory, ViewingRequest, ViewingSlot, ViewingTenant
from julaaz.services.messaging_service import MessagingStore
from julaaz.utils.parser import parse_number
from julaaz.utils.system.errors import NotFoundError, ValidationError

REQUIRED_FIELDS = ("property_id", "property_name", "owner_name", "tenant", "slots")
STRING_FIELDS = ("property_name", "owner_name", "tenancy_duration", "owner_phone", "property_image", "note")
TENANT_STRING_FIELDS = ("id", "name", "phone", "email")


def _store() -> MessagingStore:
    return current_app.extensions["messaging"]


@api_bp.route("/messaging/viewing-requests", methods=["POST"])
def create_viewing_request():
    body = request.get_json(silent=True) or {}
    viewing = _parse_viewing_request(body)
    conversation_id = _store().create_viewing_conversation(viewing)
    conversation = _store().get_conversation(conversation_id)
    return jsonify({
        "conversation_id": conversation_id,
        "participants": conversation.participants,
        "message": conversation.last_message.content,
    }), 201


@api_bp.route("/messaging/conversations/<conversation_id>/messages", methods=["GET"])
def list_messages(conversation_id: str):
    if _store().get_conversation(conversation_id) is None:
        raise NotFoundError(f"Conversation not found: {conversation_id}")
    return jsonify([
        {
            "id": m.id,
            "sender_id": m.sender_id,
            "content": m.content,
            "status": m.status.value,
            "created_at": m.created_at.isoformat(),
        }
        for m in _store().list_messages(conversation_id)
    ])


def _check_str(key: str, value) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"'{key}' must be a string")


def _parse_viewing_request(body: dict) -> ViewingRequest:
    missing = [f for f in REQUIRED_FIELDS if not body.get(f)]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")

    tenant = body["tenant"]
    if not isinstance(tenant, dict):
        raise ValidationError("tenant must be an object")

    for key in STRING_FIELDS:
        _check_str(key, body.get(key))
    for key in TENANT_STRING_FIELDS:
        _check_str(f"tenant.{key}", tenant.get(key))

    try:
        slots = [
            ViewingSlot(date=datetime.fromisoformat(s["date"]), label=s.get("label", ""))
            for s in body["slots"]
        ]
        move_in = body.get("move_in_date")
        move_in_date = date.fromisoformat(move_in) if move_in else None
        preference = RentalCategory(body.get("rental_preference", RentalCategory.LONG_TERM.value))
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid viewing request: {e}")

    nights = body.get("shortlet_stay_length_nights")
    return ViewingRequest(
        property_id=body["property_id"],
        property_name=body["property_name"],
        owner_name=body["owner_name"],
        tenant=ViewingTenant(
            id=tenant.get("id", ""),
            name=tenant.get("name"),
            phone=tenant.get("phone"),
            email=tenant.get("email"),
        ),
        slots=slots,
        move_in_date=move_in_date,
        tenancy_duration=body.get("tenancy_duration", ""),
        minimum_budget=parse_number("minimum_budget", body.get("minimum_budget", 0)),
        rental_preference=preference,
        property_image=body.get("property_image"),
        owner_phone=body.get("owner_phone"),
        owner_id=body.get("owner_id"),
        shortlet_stay_length_nights=int(parse_number("shortlet_stay_length_nights", nights)) if nights else None,
        note=body.get("note"),
    )
