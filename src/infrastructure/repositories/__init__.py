"""Repository implementations."""

from .card_repository import PostgresCardRepository
from .customer_repository import PostgresAccountRepository, PostgresCustomerRepository
from .loan_repository import PostgresLoanRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCardRepository",
    "PostgresCustomerRepository",
    "PostgresLoanRepository",
]
