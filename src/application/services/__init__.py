"""Application services (use cases)."""

from .accounts_service import DefaultAccountsService
from .cards_service import DefaultCardsService
from .interfaces import AccountsService, CardsService, LoansService
from .loans_service import DefaultLoansService

__all__ = [
    "AccountsService",
    "CardsService",
    "LoansService",
    "DefaultAccountsService",
    "DefaultCardsService",
    "DefaultLoansService",
]
