from .session import SessionRepository

__all__ = [
    "SessionRepository",
]
