"""
Input validation for projection requests.

Checks profile, instrument and numeric inputs before the engine runs. The
engine treats these ranges as preconditions; a request that fails here must
not be projected.
"""

import logging
import math
import numbers
import re
from dataclasses import dataclass
from typing import List, Optional

from .instruments import parse_instrument

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check."""
    passed: bool
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        status = "✓ PASS" if self.passed else "✗ FAIL"
        return f"{status}: {self.message}"

    @property
    def issues(self) -> List[str]:
        if not self.details:
            return []
        return list(self.details.get("issues", []))


class InvalidInputError(ValueError):
    """Raised when a request violates the engine's input contract."""

    def __init__(self, results: List[ValidationResult]):
        self.results = [r for r in results if not r.passed]
        issues = [issue for r in self.results for issue in (r.issues or [r.message])]
        super().__init__("; ".join(issues) or "invalid input")


def only_digits(text) -> str:
    """Strip every non-digit character (thousand separators, currency signs)."""
    return re.sub(r"[^\d]", "", "" if text is None else str(text))


def parse_amount(text) -> int:
    """Parse free-form numeric input; blank input parses as 0."""
    digits = only_digits(text)
    return int(digits) if digits else 0


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and not math.isnan(value)


def _is_whole_number(value) -> bool:
    return _is_number(value) and float(value).is_integer()


class InputValidator:
    """
    Range checks for calculator inputs.

    - Name: 2 to 30 characters after trimming
    - Age (optional): 10 to 100
    - Principal: greater than 0
    - Duration: 1 to 600 whole months
    - National investor count: whole number greater than 0
    - GDP: greater than 0; productive share: 0 to 1
    """

    NAME_MIN_LENGTH = 2
    NAME_MAX_LENGTH = 30
    AGE_MIN = 10
    AGE_MAX = 100
    DURATION_MIN_MONTHS = 1
    DURATION_MAX_MONTHS = 600
    PRODUCTIVE_SHARE_MIN = 0.0
    PRODUCTIVE_SHARE_MAX = 1.0

    @staticmethod
    def validate_profile(name: Optional[str], age: Optional[int] = None) -> ValidationResult:
        """
        Validate investor profile fields.

        Age is optional; a missing or zero age is accepted.
        """
        issues = []

        trimmed = (name or "").strip()
        if not (InputValidator.NAME_MIN_LENGTH <= len(trimmed) <= InputValidator.NAME_MAX_LENGTH):
            issues.append(
                f"Name must be {InputValidator.NAME_MIN_LENGTH}-"
                f"{InputValidator.NAME_MAX_LENGTH} characters"
            )

        if age and not (InputValidator.AGE_MIN <= age <= InputValidator.AGE_MAX):
            issues.append(f"Age must be {InputValidator.AGE_MIN}-{InputValidator.AGE_MAX}")

        if issues:
            return ValidationResult(
                passed=False,
                message="Profile validation failed",
                details={'issues': issues},
            )
        return ValidationResult(passed=True, message="Profile passed validation")

    @staticmethod
    def validate_instrument(value) -> ValidationResult:
        """Validate that an instrument has been chosen and is known."""
        if not value:
            return ValidationResult(
                passed=False,
                message="Instrument validation failed",
                details={'issues': ["Choose an instrument first"]},
            )
        if parse_instrument(value) is None:
            return ValidationResult(
                passed=False,
                message="Instrument validation failed",
                details={'issues': [f"Unknown instrument: {value!r}"]},
            )
        return ValidationResult(passed=True, message="Instrument passed validation")

    @staticmethod
    def validate_scenario_numbers(principal, duration_months, investor_count) -> ValidationResult:
        """
        Validate principal, duration and national investor count.

        Checks:
        - principal > 0
        - duration a whole number of months within [1, 600]
        - investor count a whole number > 0
        """
        issues = []

        if not (_is_number(principal) and principal > 0):
            issues.append("Principal must be a number > 0")

        if not (_is_whole_number(duration_months)
                and InputValidator.DURATION_MIN_MONTHS <= duration_months <= InputValidator.DURATION_MAX_MONTHS):
            issues.append(
                f"Duration must be {InputValidator.DURATION_MIN_MONTHS}-"
                f"{InputValidator.DURATION_MAX_MONTHS} months"
            )

        if not (_is_whole_number(investor_count) and investor_count > 0):
            issues.append("Investor count must be a whole number > 0")

        if issues:
            logger.info(f"Rejected scenario inputs: {issues}")
            return ValidationResult(
                passed=False,
                message="Scenario input validation failed",
                details={'issues': issues},
            )
        return ValidationResult(passed=True, message="Scenario inputs passed validation")

    @staticmethod
    def validate_inflation_inputs(gdp_trillion, productive_share) -> ValidationResult:
        """
        Validate inflation simulation assumptions.

        The estimator itself accepts any productive share; values outside
        [0, 1] are rejected here so they never reach it.
        """
        issues = []

        if not (_is_number(gdp_trillion) and gdp_trillion > 0):
            issues.append("GDP must be a number > 0")

        if not (_is_number(productive_share)
                and InputValidator.PRODUCTIVE_SHARE_MIN <= productive_share <= InputValidator.PRODUCTIVE_SHARE_MAX):
            issues.append("Productive share must be between 0 and 1")

        if issues:
            return ValidationResult(
                passed=False,
                message="Inflation input validation failed",
                details={'issues': issues},
            )
        return ValidationResult(passed=True, message="Inflation inputs passed validation")
