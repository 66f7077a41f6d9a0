"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .resource import (
    AlreadyExistsException,
    CardAlreadyExistsException,
    CustomerAlreadyExistsException,
    LoanAlreadyExistsException,
    ResourceNotFoundException,
)
from .validation import FieldViolation, ValidationFailedException

__all__ = [
    "DomainException",
    "AlreadyExistsException",
    "CardAlreadyExistsException",
    "CustomerAlreadyExistsException",
    "LoanAlreadyExistsException",
    "ResourceNotFoundException",
    "FieldViolation",
    "ValidationFailedException",
]
