from .dto import (
    Conversation,
    Message,
    Participant,
    ReportContext,
    ReportEligibility,
    User,
    UserRole,
    ViewingRequest,
    ViewingSlot,
    ViewingTenant,
)
from .enums import (
    HOME_ROUTE,
    ROLE_DASHBOARDS,
    ConversationStatus,
    ConversationType,
    MessageStatus,
    MessageType,
    RentalCategory,
    ReportReason,
    ReportStatus,
    ReportType,
    RolePriority,
    RoleType,
    role_to_dashboard,
)

__all__ = [
    "Conversation",
    "ConversationStatus",
    "ConversationType",
    "HOME_ROUTE",
    "Message",
    "MessageStatus",
    "MessageType",
    "Participant",
    "ROLE_DASHBOARDS",
    "RentalCategory",
    "ReportContext",
    "ReportEligibility",
    "ReportReason",
    "ReportStatus",
    "ReportType",
    "RolePriority",
    "RoleType",
    "User",
    "UserRole",
    "ViewingRequest",
    "ViewingSlot",
    "ViewingTenant",
    "role_to_dashboard",
]
