from .badge_service import BadgeService
from .messaging_service import MessagingStore
from .realtor_service import RealtorService
from .session_service import SessionService

__all__ = ["BadgeService", "MessagingStore", "RealtorService", "SessionService"]
