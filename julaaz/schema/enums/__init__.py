from .messaging import (
    ConversationStatus,
    ConversationType,
    MessageStatus,
    MessageType,
    RentalCategory,
)
from .report import ReportReason, ReportStatus, ReportType
from .role import HOME_ROUTE, ROLE_DASHBOARDS, RolePriority, RoleType, role_to_dashboard

__all__ = [
    "ConversationStatus",
    "ConversationType",
    "HOME_ROUTE",
    "MessageStatus",
    "MessageType",
    "ROLE_DASHBOARDS",
    "RentalCategory",
    "ReportReason",
    "ReportStatus",
    "ReportType",
    "RolePriority",
    "RoleType",
    "role_to_dashboard",
]
