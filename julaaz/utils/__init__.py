from .parser import (
    env_flag,
    parse_metrics,
    parse_number,
    parse_report_type,
    parse_role,
    parse_thresholds,
)
from .system import (
    APIError, ForbiddenError, NotFoundError, ValidationError,
    register_error_handlers, setup_logging,
)

__all__ = [
    "APIError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "env_flag",
    "parse_metrics",
    "parse_number",
    "parse_report_type",
    "parse_role",
    "parse_thresholds",
    "register_error_handlers",
    "setup_logging",
]
