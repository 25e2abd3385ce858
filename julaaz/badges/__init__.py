from .badge_engine import calculate_badge
from .badge_scoring import (
    BadgeConfigError,
    EmptyTierCatalogError,
    MissingMetricError,
    MissingThresholdsError,
    MissingZeroFloorTierError,
    UnknownTargetError,
    UnsortedThresholdsError,
    count_points,
    next_threshold,
    pick_tier,
)
from .badge_types import BadgeMetric, BadgeProgress, BadgeResult, BadgeTier, RoleBadgeConfig
from .role_handyman import HANDYMAN_CONFIG, calculate_handyman_badge
from .role_homerunner import HOMERUNNER_CONFIG, calculate_homerunner_badge

BADGE_CONFIGS = {
    HANDYMAN_CONFIG.role: HANDYMAN_CONFIG,
    HOMERUNNER_CONFIG.role: HOMERUNNER_CONFIG,
}


def get_badge_config(role: str) -> RoleBadgeConfig | None:
    return BADGE_CONFIGS.get(role)


__all__ = [
    "BADGE_CONFIGS",
    "BadgeConfigError",
    "BadgeMetric",
    "BadgeProgress",
    "BadgeResult",
    "BadgeTier",
    "EmptyTierCatalogError",
    "MissingMetricError",
    "MissingThresholdsError",
    "MissingZeroFloorTierError",
    "RoleBadgeConfig",
    "UnknownTargetError",
    "UnsortedThresholdsError",
    "calculate_badge",
    "calculate_handyman_badge",
    "calculate_homerunner_badge",
    "count_points",
    "get_badge_config",
    "next_threshold",
    "pick_tier",
]
