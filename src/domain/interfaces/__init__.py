"""
Domain Interfaces (Ports)
"""

from .repositories import (
    AccountRepository,
    CardRepository,
    CustomerRepository,
    LoanRepository,
)

__all__ = [
    "AccountRepository",
    "CardRepository",
    "CustomerRepository",
    "LoanRepository",
]
