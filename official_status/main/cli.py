"""
Command-line Entry Point - Main Layer

Run one official status check and print the result as JSON. The exit code
is 0 when the provider is operational and 1 otherwise, so the command can
serve as a container healthcheck.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from official_status.domain.entities.health import HealthStatus
from official_status.main.config import get_settings
from official_status.main.container import init_container
from official_status.shared import get_logger, update_logging_from_settings

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="official-status",
        description="Check a third-party status page once.",
    )
    parser.add_argument("--endpoint", help="Status page JSON endpoint")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        help="Maximum time to wait for the status page, in milliseconds",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.endpoint:
        settings.status.endpoint = args.endpoint
    if args.timeout_ms is not None:
        if args.timeout_ms <= 0:
            logger.error("cli.invalid_timeout", timeout_ms=args.timeout_ms)
            return 2
        settings.status.timeout_ms = args.timeout_ms

    update_logging_from_settings(settings)
    container = init_container(settings)

    result = asyncio.run(container.check_official_status_use_case().execute())
    sys.stdout.write(result.model_dump_json(by_alias=True) + "\n")

    return 0 if result.status is HealthStatus.OPERATIONAL else 1
