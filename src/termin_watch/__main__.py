"""Command-line entry point: ``python -m termin_watch``.

Always exits 0 so the external scheduler never raises alerts; outcomes are
visible in the run log only.
"""

import argparse
import asyncio
import logging
import sys

from termin_watch.checker import run_check
from termin_watch.config import get_settings
from termin_watch.logging_config import configure_logging

logger = logging.getLogger("termin_watch")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termin-watch",
        description="Check the appointment page once and push a notification on free slots.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="log the notification instead of sending it (no credentials needed)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="override LOG_LEVEL (e.g. INFO, DEBUG)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one check and return the process exit code (always 0)."""
    args = parse_args(argv)
    try:
        settings = get_settings()
        configure_logging(args.log_level or settings.log_level, settings.log_format)
    except ValueError:
        # pydantic ValidationError is a ValueError; so is an unknown log level
        configure_logging()
        logger.exception("Invalid configuration, check skipped")
        return 0

    try:
        result = asyncio.run(run_check(settings, dry_run=args.dry_run))
        logger.info("Run finished: %s", result.outcome.value)
    except Exception:
        logger.exception("Check failed with an unexpected error")
    return 0


if __name__ == "__main__":
    sys.exit(main())
