import math
import os

from julaaz.schema import ReportType, RoleType
from julaaz.utils.system.errors import ValidationError

TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_role(value: str | None) -> RoleType | None:
    if not value:
        return None
    try:
        return RoleType(value)
    except ValueError:
        raise ValidationError(
            f"Invalid role: {value}. Choose from: {', '.join(r.value for r in RoleType)}"
        )


def parse_report_type(value: str | None) -> ReportType:
    try:
        return ReportType(value)
    except ValueError:
        raise ValidationError(
            f"Invalid report_type: {value}. Choose from: {', '.join(t.value for t in ReportType)}"
        )


def parse_number(key: str, value) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"'{key}' must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"'{key}' must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"'{key}' must be a finite number")
    return number


def parse_metrics(raw, keys: list[str]) -> dict[str, float]:
    if not isinstance(raw, dict):
        raise ValidationError("metrics must be an object")
    missing = [k for k in keys if k not in raw]
    if missing:
        raise ValidationError(f"Missing metrics: {', '.join(missing)}")
    return {k: parse_number(k, raw[k]) for k in keys}


def parse_thresholds(raw, keys: list[str]) -> dict[str, tuple[float, ...]] | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValidationError("targets must be an object")
    unknown = [k for k in raw if k not in keys]
    if unknown:
        raise ValidationError(f"Unknown targets: {', '.join(unknown)}")
    parsed = {}
    for key in keys:
        values = raw.get(key)
        if values is None:
            raise ValidationError(f"Missing targets: {key}")
        if not isinstance(values, list):
            raise ValidationError(f"'{key}' targets must be a list")
        parsed[key] = tuple(parse_number(key, v) for v in values)
    return parsed


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES
