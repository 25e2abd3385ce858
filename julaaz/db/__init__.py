from .connection import get_connection, close_pool
from .repositories import SessionRepository

__all__ = [
    "get_connection",
    "close_pool",
    "SessionRepository",
]
