"""Service contracts exposed to the presentation layer."""

from abc import ABC, abstractmethod

from src.application.dto import CardsDTO, CustomerDTO, LoansDTO


class AccountsService(ABC):
    """Account directory: customers and their accounts, keyed by mobile number."""

    @abstractmethod
    async def create_account(self, customer: CustomerDTO) -> None:
        """
        Register a customer and open a new account for them.

        Raises:
            ValidationFailedException: If the payload fails validation
            CustomerAlreadyExistsException: If the mobile number is taken
        """
        ...

    @abstractmethod
    async def fetch_account(self, mobile_number: str) -> CustomerDTO:
        """
        Return account details for a given mobile number.

        Raises:
            ResourceNotFoundException: If no customer or account matches
        """
        ...

    @abstractmethod
    async def update_account(self, customer: CustomerDTO) -> bool:
        """
        Update account and customer details.

        Returns:
            True if the records were updated, False if no account
            details were supplied
        """
        ...

    @abstractmethod
    async def delete_account(self, mobile_number: str) -> bool:
        """
        Delete a customer and their account.

        Returns:
            True once both records are removed
        """
        ...


class LoansService(ABC):
    """Loan registry keyed by mobile number."""

    @abstractmethod
    async def create_loan(self, mobile_number: str) -> None:
        ...

    @abstractmethod
    async def fetch_loan(self, mobile_number: str) -> LoansDTO:
        ...

    @abstractmethod
    async def update_loan(self, loan: LoansDTO) -> bool:
        ...

    @abstractmethod
    async def delete_loan(self, mobile_number: str) -> bool:
        ...


class CardsService(ABC):
    """Card registry keyed by mobile number."""

    @abstractmethod
    async def create_card(self, mobile_number: str) -> None:
        ...

    @abstractmethod
    async def fetch_card(self, mobile_number: str) -> CardsDTO:
        ...

    @abstractmethod
    async def update_card(self, card: CardsDTO) -> bool:
        ...

    @abstractmethod
    async def delete_card(self, mobile_number: str) -> bool:
        ...
