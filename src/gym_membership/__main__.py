"""
Точка входа: обрабатывает файл команд и записывает отчет.

    python -m gym_membership [input] [output] [--config PATH] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .bootstrap import bootstrap_app
from .config import SettingsLoader
from .shared_kernel import ConfigurationError, ReportIOError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("gym_membership")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gym-membership",
        description=(
            "Gym membership registry: process a command file "
            "into a booking report"
        ),
    )
    parser.add_argument("input", nargs="?", help="Command file (default: input.txt)")
    parser.add_argument("output", nargs="?", help="Report file (default: output.txt)")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = SettingsLoader().load(
            config_path=args.config,
            overrides={
                "input_file": args.input,
                "output_file": args.output,
                "log_level": args.log_level,
            },
        )
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error("Configuration error: %s", e)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = bootstrap_app()
    try:
        app["membership_service"].process_file(
            settings.input_file, settings.output_file
        )
    except ReportIOError as e:
        logger.error("Error processing input file: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
