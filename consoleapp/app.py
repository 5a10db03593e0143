#!/usr/bin/env python3
"""
Railway reservation console - entrypoint wiring settings, logging and the menu.
"""
from tracking import t

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

if __name__ == "__main__" and __package__ is None:
    sys.path.append(str(Path(__file__).resolve().parents[1]))
    __package__ = "consoleapp"

from consoleapp.error_handler import ErrorHandler
from consoleapp.menu import ConsoleMenu
from infrastructure.constants import CONFIRMED_FILE_NAME, WAITING_FILE_NAME
from infrastructure.logging_config import setup_logging
from infrastructure.settings import AppSettings, load_settings
from reservations.exceptions import PersistenceError
from reservations.services import open_reservation_service


def _positive_int(value: str) -> int:
    t('consoleapp.app._positive_int')
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a whole number")
    if number <= 0:
        raise argparse.ArgumentTypeError("capacity must be positive")
    return number


def build_parser() -> argparse.ArgumentParser:
    t('consoleapp.app.build_parser')
    parser = argparse.ArgumentParser(description="Railway seat reservation console")
    parser.add_argument("--capacity", type=_positive_int, help="Number of seats on the train (overrides TRAIN_CAPACITY)")
    parser.add_argument("--data-dir", help="Directory holding confirmed.csv and waiting.csv (overrides DATA_DIRECTORY)")
    parser.add_argument(
        "--no-autosave",
        action="store_true",
        help="Only save on exit instead of after every booking or cancellation",
    )
    parser.add_argument("--no-pause", action="store_true", help="Skip the 'Press Enter' pause after each action")
    return parser


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Return settings with command-line options applied on top."""
    t('consoleapp.app.apply_overrides')

    updates = {}
    if args.capacity is not None:
        updates["train_capacity"] = args.capacity
    if args.data_dir:
        updates["data_directory"] = args.data_dir
        updates["confirmed_file"] = str(Path(args.data_dir) / CONFIRMED_FILE_NAME)
        updates["waiting_file"] = str(Path(args.data_dir) / WAITING_FILE_NAME)
    if args.no_autosave:
        updates["autosave"] = False
    return replace(settings, **updates) if updates else settings


def main(argv: Optional[List[str]] = None) -> int:
    """Run the console until the operator exits. Returns the process exit code."""
    t('consoleapp.app.main')

    args = build_parser().parse_args(argv)
    settings = apply_overrides(load_settings(), args)
    setup_logging(settings.log_directory, settings.production_mode)

    logger = logging.getLogger('Main')
    logger.info(
        "Starting reservation console: capacity=%s confirmed=%s waiting=%s autosave=%s",
        settings.train_capacity,
        settings.confirmed_file,
        settings.waiting_file,
        settings.autosave,
    )

    try:
        with open_reservation_service(settings) as service:
            ConsoleMenu(service, pause=not args.no_pause).run()
    except PersistenceError as exc:
        ErrorHandler.handle_fatal_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by operator")
        print("\nExiting...")
        return 130

    logger.info("Reservation console stopped cleanly")
    return 0


if __name__ == "__main__":
    sys.exit(main())
