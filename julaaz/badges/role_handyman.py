"""Handyman badge: services rendered, company revenue handled (NGN), average rating."""

from collections.abc import Mapping, Sequence

from julaaz.badges.badge_engine import calculate_badge
from julaaz.badges.badge_types import BadgeMetric, BadgeResult, BadgeTier, RoleBadgeConfig

HANDYMAN_METRICS = (
    BadgeMetric("servicesRendered", "Services"),
    BadgeMetric("companyRevenueNgn", "Revenue", unit="₦"),
    BadgeMetric("averageRating", "Average rating"),
)

HANDYMAN_THRESHOLDS = {
    "servicesRendered": (50, 150, 300),
    "companyRevenueNgn": (500_000, 2_000_000, 5_000_000),
    "averageRating": (4.5, 4.7, 4.85),
}

HANDYMAN_TIERS = (
    BadgeTier(
        id="bronze", label="Bronze", min_score=0,
        class_name="bg-primary/10 text-primary",
        description="Complete onboarding and start delivering consistent jobs.",
        requirements=("Complete verification", "Handle at least 10 jobs", "Maintain 4.3★+ rating"),
    ),
    BadgeTier(
        id="silver", label="Silver", min_score=3,
        class_name="bg-muted text-muted-foreground",
        description="Reliability unlocked. You are in steady rotation for standard jobs.",
        requirements=("50+ jobs completed", "₦500k+ revenue handled", "4.5★+ average rating"),
    ),
    BadgeTier(
        id="gold", label="Gold", min_score=6,
        class_name="bg-amber-600 text-amber-50",
        description="Trusted for emergency and concierge call-outs.",
        requirements=("150+ jobs completed", "₦2m+ revenue handled", "4.7★+ average rating"),
    ),
    BadgeTier(
        id="platinum", label="Platinum", min_score=8,
        class_name="bg-primary text-primary-foreground",
        description="Elite tier with priority routing and referrals.",
        requirements=("300+ jobs completed", "₦5m+ revenue handled", "4.85★+ average rating"),
    ),
)

HANDYMAN_CONFIG = RoleBadgeConfig(
    role="handyman",
    metrics=HANDYMAN_METRICS,
    thresholds=HANDYMAN_THRESHOLDS,
    tiers=HANDYMAN_TIERS,
)


def calculate_handyman_badge(
    metrics: Mapping[str, float],
    targets: Mapping[str, Sequence[float]] | None = None,
) -> BadgeResult:
    return calculate_badge(
        metrics, targets or HANDYMAN_THRESHOLDS, HANDYMAN_TIERS, HANDYMAN_METRICS,
    )
