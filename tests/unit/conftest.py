"""
Fixtures for unit tests.

In-memory repositories let the services run without a database.
"""

import itertools
from copy import deepcopy
from typing import Dict, Optional

import pytest

from src.application.services import (
    DefaultAccountsService,
    DefaultCardsService,
    DefaultLoansService,
)
from src.domain.entities import Account, Card, Customer, Loan
from src.domain.interfaces import (
    AccountRepository,
    CardRepository,
    CustomerRepository,
    LoanRepository,
)


class InMemoryCustomerRepository(CustomerRepository):
    def __init__(self):
        self.rows: Dict[int, Customer] = {}
        self._ids = itertools.count(1)

    async def save(self, customer: Customer) -> Customer:
        customer.customer_id = next(self._ids)
        self.rows[customer.customer_id] = deepcopy(customer)
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        row = self.rows.get(customer_id)
        return deepcopy(row) if row else None

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        for row in self.rows.values():
            if row.mobile_number == mobile_number:
                return deepcopy(row)
        return None

    async def update(self, customer: Customer) -> Customer:
        self.rows[customer.customer_id] = deepcopy(customer)
        return customer

    async def delete(self, customer_id: int) -> None:
        self.rows.pop(customer_id, None)


class InMemoryAccountRepository(AccountRepository):
    def __init__(self):
        self.rows: Dict[int, Account] = {}

    async def save(self, account: Account) -> Account:
        self.rows[account.account_number] = deepcopy(account)
        return account

    async def get_by_customer_id(self, customer_id: int) -> Optional[Account]:
        for row in self.rows.values():
            if row.customer_id == customer_id:
                return deepcopy(row)
        return None

    async def get_by_account_number(self, account_number: int) -> Optional[Account]:
        row = self.rows.get(account_number)
        return deepcopy(row) if row else None

    async def update(self, account: Account) -> Account:
        self.rows[account.account_number] = deepcopy(account)
        return account

    async def delete_by_customer_id(self, customer_id: int) -> None:
        self.rows = {k: v for k, v in self.rows.items() if v.customer_id != customer_id}


class InMemoryLoanRepository(LoanRepository):
    def __init__(self):
        self.rows: Dict[int, Loan] = {}
        self._ids = itertools.count(1)

    async def save(self, loan: Loan) -> Loan:
        loan.loan_id = next(self._ids)
        self.rows[loan.loan_id] = deepcopy(loan)
        return loan

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        return self._find(lambda row: row.mobile_number == mobile_number)

    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        return self._find(lambda row: row.loan_number == loan_number)

    async def update(self, loan: Loan) -> Loan:
        self.rows[loan.loan_id] = deepcopy(loan)
        return loan

    async def delete(self, loan_id: int) -> None:
        self.rows.pop(loan_id, None)

    def _find(self, predicate) -> Optional[Loan]:
        for row in self.rows.values():
            if predicate(row):
                return deepcopy(row)
        return None


class InMemoryCardRepository(CardRepository):
    def __init__(self):
        self.rows: Dict[int, Card] = {}
        self._ids = itertools.count(1)

    async def save(self, card: Card) -> Card:
        card.card_id = next(self._ids)
        self.rows[card.card_id] = deepcopy(card)
        return card

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Card]:
        return self._find(lambda row: row.mobile_number == mobile_number)

    async def get_by_card_number(self, card_number: str) -> Optional[Card]:
        return self._find(lambda row: row.card_number == card_number)

    async def update(self, card: Card) -> Card:
        self.rows[card.card_id] = deepcopy(card)
        return card

    async def delete(self, card_id: int) -> None:
        self.rows.pop(card_id, None)

    def _find(self, predicate) -> Optional[Card]:
        for row in self.rows.values():
            if predicate(row):
                return deepcopy(row)
        return None


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def customer_repo() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def loan_repo() -> InMemoryLoanRepository:
    return InMemoryLoanRepository()


@pytest.fixture
def card_repo() -> InMemoryCardRepository:
    return InMemoryCardRepository()


@pytest.fixture
def accounts_service(customer_repo, account_repo) -> DefaultAccountsService:
    return DefaultAccountsService(
        customer_repository=customer_repo,
        account_repository=account_repo,
    )


@pytest.fixture
def loans_service(loan_repo) -> DefaultLoansService:
    return DefaultLoansService(loan_repository=loan_repo)


@pytest.fixture
def cards_service(card_repo) -> DefaultCardsService:
    return DefaultCardsService(card_repository=card_repo)
