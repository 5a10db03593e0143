"""
Centralized error handling for the reservation console
Logs failures in full and shows the operator a short message
"""
from tracking import t

import logging
from typing import Callable, Optional

from consoleapp.messages import ReservationMessageFactory


class ErrorHandler:
    """
    Centralized error handling for the console front end

    Provides static methods for the error kinds that end a session
    """

    @staticmethod
    def handle_fatal_error(error: BaseException, output_func: Optional[Callable[[str], None]] = None) -> None:
        """
        Report an error that ends the session

        Logs error details with traceback and prints a user-facing message.

        Args:
            error: The exception that stopped the session
            output_func: Where operator-facing text is written
        """
        t('consoleapp.error_handler.ErrorHandler.handle_fatal_error')
        output_func = output_func or print
        logger = logging.getLogger('ErrorHandler')
        logger.error(
            f"Fatal error: {type(error).__name__}: {error}",
            exc_info=(type(error), error, error.__traceback__),
        )
        output_func(ReservationMessageFactory.FATAL_ERROR)
        output_func(f"Reason: {error}")
