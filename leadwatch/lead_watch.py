"""
Lead Watch
This script fetches the latest presidential tally, compares it with the
snapshot saved by the previous run, and sends a Telegram update when the
count of processed election returns has moved.
"""

import argparse
import logging
import sys
from typing import List, Optional

import requests

from leadwatch import config
from leadwatch.errors import LeadWatchError
from leadwatch.parsers.gma import GMAResultParser
from leadwatch.services.formatter import format_message, has_changed
from leadwatch.services.margin import build_snapshot
from leadwatch.services.store import SnapshotStore
from leadwatch.services.telegram_service import TelegramService

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configures root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses the command line; -c and -o keep the original flag names."""
    parser = argparse.ArgumentParser(
        description="Notify a Telegram chat when the election lead changes."
    )
    parser.add_argument(
        "-c",
        "--config",
        default=config.DEFAULT_CONFIG_PATH,
        help=f"config file (default: {config.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-o",
        "--old",
        default=config.DEFAULT_SNAPSHOT_PATH,
        help=f"persistence file (default: {config.DEFAULT_SNAPSHOT_PATH})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {config.DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the message instead of sending it",
    )
    parser.add_argument(
        "--bootstrap",
        action="store_true",
        help="If the persistence file is missing, create it and exit without notifying",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> bool:
    """Runs one pass of the pipeline. Returns True if a message was produced."""
    bot_config = config.load_config(args.config)

    with requests.Session() as session:
        result_parser = GMAResultParser(
            config.SOURCE_URL, config.REFERER, session=session, timeout=args.timeout
        )
        current = build_snapshot(result_parser.fetch(), config.TARGET_CANDIDATE)

        store = SnapshotStore(args.old)
        if args.bootstrap and not store.exists():
            store.save(current)
            logger.info("No previous snapshot; bootstrapped %s.", args.old)
            return False

        previous = store.load()
        # Dry runs never touch the snapshot file
        if not args.dry_run:
            store.save(current)

        logger.info("Processed: %s -> %s", previous["processed"], current["processed"])
        if not has_changed(previous, current):
            logger.info("No change in processed returns.")
            return False

        message = format_message(previous, current)
        if args.dry_run:
            logger.info("Dry run, not sending:\n%s", message)
            return True

        telegram = TelegramService(
            bot_config["bot_id"],
            api_url=config.TELEGRAM_API_URL,
            session=session,
            timeout=args.timeout,
        )
        telegram.send_message(bot_config["recipient"], message)
        return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        run(args)
    except LeadWatchError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
