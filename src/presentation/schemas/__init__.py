"""Pydantic schemas for API request/response validation."""

from .card import CardsSchema
from .common import (
    CamelModel,
    ContactInfoSchema,
    ErrorResponseSchema,
    ResponseSchema,
    ValidationErrorSchema,
)
from .customer import AccountsSchema, CustomerSchema
from .loan import LoansSchema

__all__ = [
    "AccountsSchema",
    "CamelModel",
    "CardsSchema",
    "ContactInfoSchema",
    "CustomerSchema",
    "ErrorResponseSchema",
    "LoansSchema",
    "ResponseSchema",
    "ValidationErrorSchema",
]
