"""Homerunner badge: viewings hosted, inspections, conversion rate (%), average rating."""

from collections.abc import Mapping, Sequence

from julaaz.badges.badge_engine import calculate_badge
from julaaz.badges.badge_types import BadgeMetric, BadgeResult, BadgeTier, RoleBadgeConfig

HOMERUNNER_METRICS = (
    BadgeMetric("viewingsHosted", "Viewings hosted"),
    BadgeMetric("inspectionsCompleted", "Inspections"),
    BadgeMetric("conversionRate", "Conversion rate", unit="%"),
    BadgeMetric("averageRating", "Average rating"),
)

HOMERUNNER_THRESHOLDS = {
    "viewingsHosted": (10, 40, 100),
    "inspectionsCompleted": (5, 20, 50),
    "conversionRate": (20, 35, 50),
    "averageRating": (4.5, 4.7, 4.85),
}

HOMERUNNER_TIERS = (
    BadgeTier(
        id="bronze", label="Bronze", min_score=0,
        class_name="bg-primary/10 text-primary",
        description="Completed onboarding and started hosting viewings.",
        requirements=("Finish verification", "Host first 5 viewings", "Keep response time fast"),
    ),
    BadgeTier(
        id="silver", label="Silver", min_score=4,
        class_name="bg-muted text-muted-foreground",
        description="Reliable host trusted for standard appointments.",
        requirements=("40+ viewings hosted", "20+ inspections completed", "4.5★+ rating", "20%+ conversion"),
    ),
    BadgeTier(
        id="gold", label="Gold", min_score=8,
        class_name="bg-amber-600 text-amber-50",
        description="High-performing host for premium properties.",
        requirements=("100+ viewings", "50+ inspections", "4.7★+ rating", "35%+ conversion"),
    ),
    BadgeTier(
        id="platinum", label="Platinum", min_score=10,
        class_name="bg-primary text-primary-foreground",
        description="Elite homerunner with concierge-level service.",
        requirements=("150+ viewings", "80+ inspections", "4.85★+ rating", "50%+ conversion"),
    ),
)

HOMERUNNER_CONFIG = RoleBadgeConfig(
    role="homerunner",
    metrics=HOMERUNNER_METRICS,
    thresholds=HOMERUNNER_THRESHOLDS,
    tiers=HOMERUNNER_TIERS,
)


def calculate_homerunner_badge(
    metrics: Mapping[str, float],
    targets: Mapping[str, Sequence[float]] | None = None,
) -> BadgeResult:
    return calculate_badge(
        metrics, targets or HOMERUNNER_THRESHOLDS, HOMERUNNER_TIERS, HOMERUNNER_METRICS,
    )
