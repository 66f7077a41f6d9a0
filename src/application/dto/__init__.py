"""Data Transfer Objects for application layer."""

from .card import CardsDTO
from .customer import AccountsDTO, CustomerDTO
from .loan import LoansDTO

__all__ = [
    "AccountsDTO",
    "CardsDTO",
    "CustomerDTO",
    "LoansDTO",
]
