#!/usr/bin/env python3

import argparse
import logging
import sys

from clipstack.app import ClipStackApp
from clipstack.config import Settings
from clipstack.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="ClipStack - Searchable clipboard history"
    )

    parser.add_argument(
        "-m", "--max-entries",
        type=int,
        default=None,
        help="Number of entries to keep (default: 50)"
    )

    parser.add_argument(
        "-i", "--poll-interval",
        type=float,
        default=None,
        help="Clipboard polling interval in seconds (default: 0.5)"
    )

    parser.add_argument(
        "--paused",
        action="store_true",
        help="Start with clipboard monitoring switched off"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    return parser.parse_args(argv)


def load_settings(args) -> Settings:
    overrides = {
        "max_entries": args.max_entries,
        "poll_interval": args.poll_interval,
    }
    if args.paused:
        overrides["start_monitoring"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return Settings.from_env().with_overrides(**overrides)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    try:
        settings = load_settings(args)
    except InvalidConfiguration as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)

    logging.getLogger().setLevel(settings.log_level)

    try:
        app = ClipStackApp(settings)
    except InvalidConfiguration as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)
    except NotImplementedError as e:
        logger.error(str(e))
        sys.exit(1)

    from clipstack.ui.window import HistoryWindow

    try:
        HistoryWindow(app).run()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
