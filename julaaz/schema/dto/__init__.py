from .message import Conversation, Message, Participant, ViewingRequest, ViewingSlot, ViewingTenant
from .report import ReportContext, ReportEligibility
from .session import User, UserRole

__all__ = [
    "Conversation",
    "Message",
    "Participant",
    "ReportContext",
    "ReportEligibility",
    "User",
    "UserRole",
    "ViewingRequest",
    "ViewingSlot",
    "ViewingTenant",
]
