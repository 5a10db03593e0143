"""
Logging Configuration for the railway reservation system
Provides console output plus rotating log files for debugging ledger activity
"""
from tracking import t

import logging
import logging.handlers
import os
from datetime import datetime

from . import constants

# Named loggers that receive the dedicated ledger log file
LEDGER_LOGGERS = ('ReservationLedger', 'BookingRepository', 'ReservationService')


def setup_logging(log_dir: str = constants.DEFAULT_LOG_DIRECTORY, production_mode: bool = False) -> None:
    """
    Set up logging with a console handler and rotating log files.

    Args:
        log_dir: Directory receiving the log files (created if missing)
        production_mode: When True only warnings and errors reach the console
                         and the main log, and the debug log is disabled
    """
    t('infrastructure.logging_config.setup_logging')
    os.makedirs(log_dir, exist_ok=True)

    main_log_file = os.path.join(log_dir, 'reservations.log')
    debug_log_file = os.path.join(log_dir, 'reservations_debug.log')
    error_log_file = os.path.join(log_dir, 'reservations_errors.log')
    ledger_log_file = os.path.join(log_dir, 'reservation_ledger.log')

    root_logger = logging.getLogger()
    if production_mode:
        root_logger.setLevel(logging.WARNING)
    else:
        root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers
    root_logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d in %(funcName)s()] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # The console is shared with the interactive menu, so keep it quiet
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    main_file_handler = logging.handlers.RotatingFileHandler(
        main_log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    main_file_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    main_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(main_file_handler)

    if not production_mode:
        debug_file_handler = logging.handlers.RotatingFileHandler(
            debug_log_file,
            maxBytes=50*1024*1024,  # 50MB
            backupCount=3,
            encoding='utf-8'
        )
        debug_file_handler.setLevel(logging.DEBUG)
        debug_file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(debug_file_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        error_log_file,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=5,
        encoding='utf-8'
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_file_handler)

    ledger_handler = logging.handlers.RotatingFileHandler(
        ledger_log_file,
        maxBytes=20*1024*1024,  # 20MB
        backupCount=5,
        encoding='utf-8'
    )
    ledger_handler.setLevel(logging.INFO if production_mode else logging.DEBUG)
    ledger_handler.setFormatter(detailed_formatter)

    for name in LEDGER_LOGGERS:
        component_logger = logging.getLogger(name)
        component_logger.handlers = []
        component_logger.addHandler(ledger_handler)
        component_logger.setLevel(logging.INFO if production_mode else logging.DEBUG)

    root_logger.info("="*80)
    root_logger.info(f"Reservation Logging Initialized - {datetime.now()}")
    root_logger.info(f"Production Mode: {'ON' if production_mode else 'OFF'}")
    root_logger.info(f"Main log: {main_log_file}")
    if not production_mode:
        root_logger.info(f"Debug log: {debug_log_file}")
    root_logger.info(f"Error log: {error_log_file}")
    root_logger.info(f"Ledger log: {ledger_log_file}")
    root_logger.info("="*80)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name

    Args:
        name: Logger name (usually the component class name)

    Returns:
        logging.Logger instance
    """
    t('infrastructure.logging_config.get_logger')
    return logging.getLogger(name)
