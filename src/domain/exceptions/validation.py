"""Field validation failures."""

from dataclasses import dataclass
from typing import Dict, List

from .base import DomainException


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on a request field."""

    field: str
    message: str


class ValidationFailedException(DomainException):
    """Raised when one or more request fields fail their constraints."""

    def __init__(self, violations: List[FieldViolation]):
        super().__init__(
            message="; ".join(f"{v.field}: {v.message}" for v in violations),
            code="VALIDATION_FAILED",
        )
        self.violations = list(violations)

    def to_field_map(self) -> Dict[str, str]:
        # A field that fails several constraints keeps the last message.
        errors: Dict[str, str] = {}
        for violation in self.violations:
            errors[violation.field] = violation.message
        return errors
