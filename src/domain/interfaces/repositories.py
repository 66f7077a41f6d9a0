"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Account, Card, Customer, Loan


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations may use PostgreSQL, SQLite, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new customer.

        Args:
            customer: The customer to save

        Returns:
            The saved customer with ``customer_id`` populated
        """
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a customer by surrogate ID.

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        """
        Retrieve a customer by mobile number.

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """Write the mutable fields of an existing customer."""
        ...

    @abstractmethod
    async def delete(self, customer_id: int) -> None:
        """Remove a customer by ID."""
        ...


class AccountRepository(ABC):
    """Abstract repository for Account persistence."""

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> Optional[Account]:
        """
        Retrieve the account owned by a customer.

        Returns:
            The account if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_account_number(self, account_number: int) -> Optional[Account]:
        """
        Retrieve an account by its number.

        Returns:
            The account if found, None otherwise
        """
        ...

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Write the mutable fields of an existing account."""
        ...

    @abstractmethod
    async def delete_by_customer_id(self, customer_id: int) -> None:
        """Remove every account owned by a customer."""
        ...


class LoanRepository(ABC):
    """Abstract repository for Loan persistence."""

    @abstractmethod
    async def save(self, loan: Loan) -> Loan:
        ...

    @abstractmethod
    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        ...

    @abstractmethod
    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        ...

    @abstractmethod
    async def update(self, loan: Loan) -> Loan:
        ...

    @abstractmethod
    async def delete(self, loan_id: int) -> None:
        ...


class CardRepository(ABC):
    """Abstract repository for Card persistence."""

    @abstractmethod
    async def save(self, card: Card) -> Card:
        ...

    @abstractmethod
    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Card]:
        ...

    @abstractmethod
    async def get_by_card_number(self, card_number: str) -> Optional[Card]:
        ...

    @abstractmethod
    async def update(self, card: Card) -> Card:
        ...

    @abstractmethod
    async def delete(self, card_id: int) -> None:
        ...
