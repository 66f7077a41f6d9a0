"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import Base, CustomerModel, AccountModel, LoanModel, CardModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "CustomerModel",
    "AccountModel",
    "LoanModel",
    "CardModel",
]
