"""Generic tiered badge calculation.

Every metric earns one point per threshold it meets or exceeds. The points are
summed into a score, and the score is classified against a tier catalog:

  1. current tier = highest tier whose min_score <= score
  2. next tier    = lowest tier whose min_score > current tier's min_score
  3. a metric is "met" once it clears its whole threshold list

Role badges (handyman, homerunner) are instantiations of this engine with
their own metric set, default thresholds and tier catalog.
"""

from collections.abc import Mapping, Sequence

from julaaz.badges.badge_scoring import (
    MissingMetricError, count_points, following_tier, next_threshold, pick_tier,
    validate_target_keys, validate_thresholds, validate_tiers,
)
from julaaz.badges.badge_types import BadgeMetric, BadgeProgress, BadgeResult, BadgeTier


def calculate_badge(
    metrics: Mapping[str, float],
    targets: Mapping[str, Sequence[float]],
    tiers: Sequence[BadgeTier],
    metric_specs: Sequence[BadgeMetric] | None = None,
) -> BadgeResult:
    validate_tiers(tiers)
    validate_thresholds(targets)

    if metric_specs:
        specs = list(metric_specs)
        validate_target_keys(targets, [s.key for s in specs])
    else:
        specs = [BadgeMetric(key=k, label=k) for k in targets]

    score = 0
    total_possible = 0
    progress = []
    for spec in specs:
        if spec.key not in metrics:
            raise MissingMetricError(spec.key)
        current = metrics[spec.key]
        thresholds = targets[spec.key]

        points = count_points(current, thresholds)
        score += points
        total_possible += len(thresholds)

        progress.append(BadgeProgress(
            key=spec.key,
            label=spec.label,
            current=current,
            target=next_threshold(current, thresholds),
            met=points == len(thresholds),
            unit=spec.unit,
        ))

    tier = pick_tier(tiers, score)

    return BadgeResult(
        tier=tier,
        label=tier.label,
        class_name=tier.class_name,
        score=score,
        total_possible=total_possible,
        next_tier=following_tier(tiers, tier),
        progress=tuple(progress),
    )
