"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services import (
    AccountsService,
    CardsService,
    DefaultAccountsService,
    DefaultCardsService,
    DefaultLoansService,
    LoansService,
)
from src.domain.interfaces import (
    AccountRepository,
    CardRepository,
    CustomerRepository,
    LoanRepository,
)
from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import (
    PostgresAccountRepository,
    PostgresCardRepository,
    PostgresCustomerRepository,
    PostgresLoanRepository,
)


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CustomerRepository:
    """Get a CustomerRepository instance."""
    return PostgresCustomerRepository(session)


async def get_account_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> AccountRepository:
    """Get an AccountRepository instance."""
    return PostgresAccountRepository(session)


async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LoanRepository:
    """Get a LoanRepository instance."""
    return PostgresLoanRepository(session)


async def get_card_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CardRepository:
    """Get a CardRepository instance."""
    return PostgresCardRepository(session)


# Service dependencies
async def get_accounts_service(
    customer_repo: Annotated[CustomerRepository, Depends(get_customer_repository)],
    account_repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> AccountsService:
    """Get an AccountsService instance with its repositories."""
    return DefaultAccountsService(
        customer_repository=customer_repo,
        account_repository=account_repo,
    )


async def get_loans_service(
    loan_repo: Annotated[LoanRepository, Depends(get_loan_repository)],
) -> LoansService:
    """Get a LoansService instance."""
    return DefaultLoansService(loan_repository=loan_repo)


async def get_cards_service(
    card_repo: Annotated[CardRepository, Depends(get_card_repository)],
) -> CardsService:
    """Get a CardsService instance."""
    return DefaultCardsService(card_repository=card_repo)
