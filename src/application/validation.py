"""
Field-level request validation.

Each DTO describes its constraints with a ``FieldRules`` chain; the chain
collects ``FieldViolation`` pairs in declaration order so callers can
decide what to do with them (services raise ``ValidationFailedException``).

Null handling follows the usual bean-validation convention: only the
``not_empty`` rule rejects a missing value, every other rule passes it.
"""

import re
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from src.domain.exceptions import FieldViolation, ValidationFailedException

MOBILE_NUMBER_LENGTH = 10
ACCOUNT_NUMBER_LENGTH = 10
LOAN_NUMBER_LENGTH = 12
CARD_NUMBER_LENGTH = 12

MOBILE_NUMBER_MESSAGE = "Mobile number must be 10 digits"


class FieldRules:
    """Fluent collector of field constraint violations."""

    def __init__(self, prefix: str = ""):
        self._prefix = prefix
        self._violations: List[FieldViolation] = []

    @property
    def violations(self) -> List[FieldViolation]:
        return list(self._violations)

    def _fail(self, field: str, message: str) -> None:
        name = f"{self._prefix}.{field}" if self._prefix else field
        self._violations.append(FieldViolation(field=name, message=message))

    def not_empty(self, field: str, value: Optional[str], message: str) -> "FieldRules":
        # Whitespace counts as content; only None and "" are empty.
        if value is None or str(value) == "":
            self._fail(field, message)
        return self

    def length(
        self,
        field: str,
        value: Optional[str],
        min_length: int,
        max_length: int,
        message: str,
    ) -> "FieldRules":
        if value is not None and not (min_length <= len(value) <= max_length):
            self._fail(field, message)
        return self

    def digits(
        self,
        field: str,
        value,
        count: int,
        message: str,
        required: bool = False,
    ) -> "FieldRules":
        """Require exactly ``count`` ASCII digits."""
        if value is None or value == "":
            if required:
                self._fail(field, message)
            return self
        if not re.fullmatch(rf"[0-9]{{{count}}}", str(value)):
            self._fail(field, message)
        return self

    def email(self, field: str, value: Optional[str], message: str) -> "FieldRules":
        if not value:
            return self
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            self._fail(field, message)
        return self

    def positive(self, field: str, value: Optional[int], message: str) -> "FieldRules":
        if value is None or value <= 0:
            self._fail(field, message)
        return self

    def positive_or_zero(
        self, field: str, value: Optional[int], message: str
    ) -> "FieldRules":
        if value is None or value < 0:
            self._fail(field, message)
        return self

    def extend(self, violations: List[FieldViolation]) -> "FieldRules":
        self._violations.extend(violations)
        return self


def validate_mobile_number(mobile_number: Optional[str]) -> List[FieldViolation]:
    """Validate a bare ``mobileNumber`` lookup key."""
    return (
        FieldRules()
        .digits(
            "mobileNumber",
            mobile_number,
            MOBILE_NUMBER_LENGTH,
            MOBILE_NUMBER_MESSAGE,
            required=True,
        )
        .violations
    )


def ensure_valid(violations: List[FieldViolation]) -> None:
    """Raise ``ValidationFailedException`` when any violation was collected."""
    if violations:
        raise ValidationFailedException(violations)
