import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime
from urllib.parse import quote

from julaaz.schema import (
    Conversation, ConversationStatus, ConversationType, Message, Participant,
    RentalCategory, ViewingRequest, ViewingSlot,
)

logger = logging.getLogger(__name__)

SUPPORT_PARTICIPANT = Participant(
    id="julaaz-admin",
    name="Julaaz Support",
    avatar="https://api.dicebear.com/7.x/initials/svg?seed=Julaaz%20Support",
)
AVATAR_URL = "https://api.dicebear.com/7.x/initials/svg?seed={seed}"


def generate_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4()}"


def format_slot(slot: ViewingSlot) -> str:
    d = slot.date
    hour = d.hour % 12 or 12
    meridiem = "AM" if d.hour < 12 else "PM"
    return f"{d:%A, %b} {d.day} @ {hour}:{d:%M} {meridiem}"


def format_budget(amount: float) -> str:
    return f"{amount:,.0f}"


def compose_viewing_message(request: ViewingRequest) -> str:
    tenant = request.tenant
    lines = [
        f"Viewing request for {request.property_name}",
        "",
        f"Tenant: {'Guest user' if tenant.name is None else tenant.name}",
    ]
    if tenant.phone:
        lines.append(f"Phone: {tenant.phone}")
    if tenant.email:
        lines.append(f"Email: {tenant.email}")
    if request.owner_phone:
        lines.append(f"Owner Contact: {request.owner_phone}")

    move_in = f"{request.move_in_date:%B %d, %Y}" if request.move_in_date else None
    budget = format_budget(request.minimum_budget)
    is_shortlet = request.rental_preference == RentalCategory.SHORTLET

    lines += [
        "",
        f"Rental preference: {'Serviced shortlet stay' if is_shortlet else 'Annual lease'}",
        "",
    ]
    if is_shortlet:
        nights = request.shortlet_stay_length_nights
        lines += [
            "Stay details:",
            f"• Preferred check-in date: {move_in}" if move_in else "• Check-in date: Flexible",
            f"• Stay length: {nights} night{'s' if nights > 1 else ''}"
            if nights else "• Stay length: Not specified",
            f"• Budget: ₦{budget} per night",
        ]
    else:
        lines += [
            "Move-in preferences:",
            f"• Move-in date: {move_in}" if move_in else "• Move-in date: Not specified",
            f"• Tenancy duration: {request.tenancy_duration}",
            f"• Budget: ₦{budget} per month",
        ]

    slot_summary = "\n".join(
        f"{i}. {format_slot(slot)}" for i, slot in enumerate(request.slots, start=1)
    )
    lines += ["", "Preferred slots:", slot_summary]

    if request.note:
        lines += ["", "Additional notes:", request.note]

    return "\n".join(lines)


class MessagingStore:
    def __init__(
        self,
        conversations: list[Conversation] | None = None,
        messages: dict[str, list[Message]] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.conversations: list[Conversation] = _by_recent(conversations or [])
        self.messages: dict[str, list[Message]] = dict(messages or {})
        self._clock = clock
        self._lock = threading.Lock()

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        with self._lock:
            return self._find(conversation_id)

    def list_messages(self, conversation_id: str) -> list[Message]:
        with self._lock:
            return list(self.messages.get(conversation_id, []))

    def add_conversation(
        self, conversation: Conversation, initial_messages: list[Message] | None = None,
    ) -> str:
        with self._lock:
            others = [c for c in self.conversations if c.id != conversation.id]
            self.conversations = _by_recent([conversation, *others])
            self.messages[conversation.id] = list(initial_messages or [])
        return conversation.id

    def add_message(self, conversation_id: str, message: Message) -> None:
        with self._lock:
            self.messages.setdefault(conversation_id, []).append(message)
            conversation = self._find(conversation_id)
            if conversation is None:
                logger.warning(f"[Messaging] Message {message.id} for unknown conversation {conversation_id}")
                return
            conversation.last_message = message
            conversation.updated_at = message.created_at
            self.conversations = _by_recent(self.conversations)

    def _find(self, conversation_id: str) -> Conversation | None:
        return next((c for c in self.conversations if c.id == conversation_id), None)

    def create_viewing_conversation(self, request: ViewingRequest) -> str:
        conversation_id = generate_id("conv")
        now = self._clock()
        tenant_id = request.tenant.id or "guest"
        owner_id = request.owner_id or f"owner-{request.property_id}"
        tenant_name = request.tenant.name

        message = Message(
            id=generate_id("msg"),
            conversation_id=conversation_id,
            sender_id=tenant_id,
            recipient_id="group",
            content=compose_viewing_message(request),
            created_at=now,
        )

        conversation = Conversation(
            id=conversation_id,
            participants=[tenant_id, owner_id, SUPPORT_PARTICIPANT.id],
            type=ConversationType.GROUP,
            status=ConversationStatus.ACTIVE,
            created_at=now,
            updated_at=now,
            context={
                "property_id": request.property_id,
                "booking_id": f"{request.property_id}-viewing-{int(now.timestamp() * 1000)}",
            },
            last_message=message,
            unread_count={tenant_id: 0},
            participant_details=[
                Participant(
                    id=conversation_id,
                    name=f"{request.property_name} Viewing",
                    avatar=request.property_image,
                ),
                Participant(
                    id=owner_id,
                    name=request.owner_name,
                    avatar=AVATAR_URL.format(seed=quote(request.owner_name, safe="")),
                ),
                SUPPORT_PARTICIPANT,
                Participant(
                    id=tenant_id,
                    name="You" if tenant_name is None else tenant_name,
                    avatar=AVATAR_URL.format(seed=quote(tenant_name, safe="")) if tenant_name else None,
                ),
            ],
        )

        self.add_conversation(conversation, [message])
        logger.info(f"[Messaging] Viewing conversation {conversation_id} for {request.property_id}")
        return conversation_id


def _by_recent(conversations: list[Conversation]) -> list[Conversation]:
    return sorted(conversations, key=lambda c: c.updated_at, reverse=True)
