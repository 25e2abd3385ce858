from dataclasses import dataclass, field


@dataclass(frozen=True)
class BadgeTier:
    id: str
    label: str
    min_score: int
    class_name: str
    description: str
    requirements: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "min_score": self.min_score,
            "class_name": self.class_name,
            "description": self.description,
            "requirements": list(self.requirements),
        }


@dataclass(frozen=True)
class BadgeMetric:
    key: str
    label: str
    unit: str | None = None


@dataclass(frozen=True)
class BadgeProgress:
    key: str
    label: str
    current: float
    target: float | None
    met: bool
    unit: str | None = None

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "current": self.current,
            "target": self.target,
            "met": self.met,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class BadgeResult:
    tier: BadgeTier
    label: str
    class_name: str
    score: int
    total_possible: int
    next_tier: BadgeTier | None
    progress: tuple[BadgeProgress, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.to_dict(),
            "label": self.label,
            "class_name": self.class_name,
            "score": self.score,
            "total_possible": self.total_possible,
            "next_tier": self.next_tier.to_dict() if self.next_tier else None,
            "progress": [p.to_dict() for p in self.progress],
        }


@dataclass(frozen=True)
class RoleBadgeConfig:
    role: str
    metrics: tuple[BadgeMetric, ...]
    thresholds: dict[str, tuple[float, ...]]
    tiers: tuple[BadgeTier, ...]

    def metric_keys(self) -> list[str]:
        return [m.key for m in self.metrics]
