import logging

from julaaz.badges import BADGE_CONFIGS, calculate_badge, get_badge_config
from julaaz.badges.badge_types import RoleBadgeConfig
from julaaz.utils.parser import parse_metrics, parse_thresholds
from julaaz.utils.system.errors import NotFoundError

logger = logging.getLogger(__name__)


class BadgeService:
    @staticmethod
    def roles() -> list[str]:
        return sorted(BADGE_CONFIGS)

    @staticmethod
    def compute(role: str, raw_metrics, raw_targets=None) -> dict:
        config = BadgeService._config(role)
        keys = config.metric_keys()

        metrics = parse_metrics(raw_metrics, keys)
        targets = parse_thresholds(raw_targets, keys) or config.thresholds

        result = calculate_badge(metrics, targets, config.tiers, config.metrics)
        logger.info(
            f"[Badge] {role}: score {result.score}/{result.total_possible} -> {result.tier.id}"
        )
        return {"role": role, **result.to_dict()}

    @staticmethod
    def catalog(role: str) -> dict:
        config = BadgeService._config(role)
        return {
            "role": role,
            "metrics": [
                {"key": m.key, "label": m.label, "unit": m.unit} for m in config.metrics
            ],
            "thresholds": {k: list(v) for k, v in config.thresholds.items()},
            "tiers": [t.to_dict() for t in sorted(config.tiers, key=lambda t: t.min_score)],
        }

    @staticmethod
    def _config(role: str) -> RoleBadgeConfig:
        config = get_badge_config(role)
        if config is None:
            raise NotFoundError(
                f"No badge for role '{role}'. Choose from: {BadgeService.roles()}"
            )
        return config
