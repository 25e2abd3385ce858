from .auth_session import AuthSession
from .role_guard import GuardDecision, is_role_allowed, resolve_guard
from .role_session import RoleSession

__all__ = [
    "AuthSession",
    "GuardDecision",
    "RoleSession",
    "is_role_allowed",
    "resolve_guard",
]
