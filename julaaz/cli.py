import argparse
import json
import logging
import os

from julaaz.badges import BADGE_CONFIGS, BadgeConfigError
from julaaz.db import close_pool
from julaaz.services.badge_service import BadgeService
from julaaz.utils.system.errors import APIError

logger = logging.getLogger(__name__)


def parse_metric(value: str) -> tuple[str, str]:
    key, sep, raw = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got: {value}")
    return key, raw


def parse_thresholds(value: str) -> tuple[str, list[str]]:
    key, sep, raw = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=v1,v2,v3, got: {value}")
    return key, [v for v in raw.split(",") if v]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Julaaz marketplace backend CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    badge_parser = subparsers.add_parser("badge", help="Compute a role badge from metrics")
    badge_parser.add_argument("role", choices=sorted(BADGE_CONFIGS))
    badge_parser.add_argument(
        "--metric", "-m", type=parse_metric, action="append", default=[],
        help="Metric value as key=value (repeatable)",
    )
    badge_parser.add_argument(
        "--target", "-t", type=parse_thresholds, action="append", default=[],
        help="Override thresholds as key=v1,v2,v3 (repeatable, all metrics required)",
    )

    tiers_parser = subparsers.add_parser("tiers", help="Show a role's tier catalog")
    tiers_parser.add_argument("role", choices=sorted(BADGE_CONFIGS))

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    serve_parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8080")))

    args = parser.parse_args(argv)

    try:
        if args.command == "badge":
            targets = dict(args.target) if args.target else None
            result = BadgeService.compute(args.role, dict(args.metric), targets)
            print(json.dumps(result, ensure_ascii=False, indent=2))

        elif args.command == "tiers":
            print(json.dumps(BadgeService.catalog(args.role), ensure_ascii=False, indent=2))

        elif args.command == "serve":
            from julaaz import create_app

            create_app().run(host=args.host, port=args.port)

    except (APIError, BadgeConfigError) as e:
        logger.error(f"Command failed: {e}")
        return 1
    finally:
        close_pool()

    return 0
