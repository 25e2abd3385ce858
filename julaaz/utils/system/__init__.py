from .errors import APIError, ForbiddenError, NotFoundError, ValidationError, register_error_handlers
from .logging_config import setup_logging

__all__ = [
    "APIError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "register_error_handlers",
    "setup_logging",
]
