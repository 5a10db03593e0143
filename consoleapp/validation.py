"""
Validation utility functions
Handles input validation for passenger details typed at the console
"""
from tracking import t

from typing import Any, Tuple

from reservations.models import Gender


class ValidationHelpers:
    """Collection of validation helper functions"""

    NAME_EMPTY = "Name cannot be empty. Booking cancelled."
    NOT_A_NUMBER = "Invalid input. Enter a number."
    NEGATIVE_AGE = "Invalid input. Age cannot be negative."
    INVALID_GENDER = f"Invalid input. Type {'/'.join(g.value for g in Gender)}."

    @staticmethod
    def validate_name(name: str) -> Tuple[bool, str]:
        """
        Validate a passenger name
        Returns: (is_valid, trimmed_name_or_error_message)
        """
        t('consoleapp.validation.ValidationHelpers.validate_name')
        cleaned = (name or "").strip()
        if not cleaned:
            return False, ValidationHelpers.NAME_EMPTY
        return True, cleaned

    @staticmethod
    def parse_int(raw: str) -> Tuple[bool, Any]:
        """
        Parse a whole number typed by the operator
        Returns: (is_valid, number_or_error_message)
        """
        t('consoleapp.validation.ValidationHelpers.parse_int')
        try:
            return True, int((raw or "").strip())
        except ValueError:
            return False, ValidationHelpers.NOT_A_NUMBER

    @staticmethod
    def validate_age(raw: str) -> Tuple[bool, Any]:
        """
        Validate a passenger age
        Returns: (is_valid, age_or_error_message)
        """
        t('consoleapp.validation.ValidationHelpers.validate_age')
        is_valid, value = ValidationHelpers.parse_int(raw)
        if not is_valid:
            return False, value
        if value < 0:
            return False, ValidationHelpers.NEGATIVE_AGE
        return True, value

    @staticmethod
    def validate_gender(raw: str) -> Tuple[bool, str]:
        """
        Validate a gender code, accepting lower case
        Returns: (is_valid, upper_case_code_or_error_message)
        """
        t('consoleapp.validation.ValidationHelpers.validate_gender')
        member = Gender.from_code(raw)
        if member is not None:
            return True, member.value
        return False, ValidationHelpers.INVALID_GENDER
