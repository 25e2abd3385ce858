from collections.abc import Mapping, Sequence

from julaaz.badges.badge_types import BadgeTier


class BadgeConfigError(ValueError):
    pass


class EmptyTierCatalogError(BadgeConfigError):
    def __init__(self):
        super().__init__("Tier catalog is empty")


class MissingZeroFloorTierError(BadgeConfigError):
    def __init__(self):
        super().__init__("Tier catalog has no tier with min_score 0")


class UnsortedThresholdsError(BadgeConfigError):
    def __init__(self, key: str, thresholds: Sequence[float]):
        self.key = key
        super().__init__(f"Thresholds for '{key}' are not ascending: {list(thresholds)}")


class MissingMetricError(BadgeConfigError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No value supplied for metric '{key}'")


class MissingThresholdsError(BadgeConfigError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No thresholds supplied for metric '{key}'")


class UnknownTargetError(BadgeConfigError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Thresholds given for unknown metric '{key}'")


def count_points(current: float, thresholds: Sequence[float]) -> int:
    return sum(1 for threshold in thresholds if current >= threshold)


def next_threshold(current: float, thresholds: Sequence[float]) -> float | None:
    return next((t for t in thresholds if t > current), None)


def pick_tier(tiers: Sequence[BadgeTier], score: float) -> BadgeTier:
    for tier in sorted(tiers, key=lambda t: t.min_score, reverse=True):
        if score >= tier.min_score:
            return tier
    raise MissingZeroFloorTierError()


def following_tier(tiers: Sequence[BadgeTier], current: BadgeTier) -> BadgeTier | None:
    above = [t for t in tiers if t.min_score > current.min_score]
    if not above:
        return None
    return min(above, key=lambda t: t.min_score)


def validate_tiers(tiers: Sequence[BadgeTier]) -> None:
    if not tiers:
        raise EmptyTierCatalogError()
    if not any(t.min_score == 0 for t in tiers):
        raise MissingZeroFloorTierError()


def validate_thresholds(targets: Mapping[str, Sequence[float]]) -> None:
    for key, thresholds in targets.items():
        if any(a > b for a, b in zip(thresholds, thresholds[1:])):
            raise UnsortedThresholdsError(key, thresholds)


def validate_target_keys(targets: Mapping[str, Sequence[float]], keys: Sequence[str]) -> None:
    for key in keys:
        if key not in targets:
            raise MissingThresholdsError(key)
    for key in targets:
        if key not in keys:
            raise UnknownTargetError(key)
