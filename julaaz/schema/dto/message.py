from dataclasses import dataclass, field
from datetime import date, datetime

from julaaz.schema.enums import (
    ConversationStatus, ConversationType, MessageStatus, MessageType, RentalCategory,
)


@dataclass
class Message:
    id: str
    conversation_id: str
    sender_id: str
    recipient_id: str
    content: str
    created_at: datetime
    type: MessageType = MessageType.TEXT
    status: MessageStatus = MessageStatus.SENT


@dataclass
class Participant:
    id: str
    name: str
    avatar: str | None = None


@dataclass
class Conversation:
    id: str
    participants: list[str]
    type: ConversationType
    status: ConversationStatus
    created_at: datetime
    updated_at: datetime
    context: dict = field(default_factory=dict)
    last_message: Message | None = None
    unread_count: dict[str, int] = field(default_factory=dict)
    participant_details: list[Participant] = field(default_factory=list)


@dataclass
class ViewingSlot:
    date: datetime
    label: str


@dataclass
class ViewingTenant:
    id: str
    name: str | None = None
    phone: str | None = None
    email: str | None = None


@dataclass
class ViewingRequest:
    property_id: str
    property_name: str
    owner_name: str
    tenant: ViewingTenant
    slots: list[ViewingSlot]
    move_in_date: date | None
    tenancy_duration: str
    minimum_budget: float
    rental_preference: RentalCategory
    property_image: str | None = None
    owner_phone: str | None = None
    owner_id: str | None = None
    shortlet_stay_length_nights: int | None = None
    note: str | None = None
