"""Accounts service - customer and account directory use cases."""

import random

import structlog

from src.application.dto import CustomerDTO
from src.application.services.interfaces import AccountsService
from src.application.validation import ensure_valid, validate_mobile_number
from src.core import constants
from src.core.metrics import record_product_opened, track_operation
from src.domain.entities import Account, Customer
from src.domain.exceptions import (
    CustomerAlreadyExistsException,
    ResourceNotFoundException,
)
from src.domain.interfaces import AccountRepository, CustomerRepository

logger = structlog.get_logger(__name__)


class DefaultAccountsService(AccountsService):
    """
    Application service for the account directory.

    Each operation is a single read-modify-write against the
    customer and account repositories; transaction boundaries
    belong to the session that backs them.
    """

    ACCOUNT_NUMBER_BASE = 1_000_000_000
    ACCOUNT_NUMBER_SPAN = 900_000_000

    def __init__(
        self,
        customer_repository: CustomerRepository,
        account_repository: AccountRepository,
        auditor: str = constants.ACCOUNTS_AUDITOR,
    ):
        self._customer_repo = customer_repository
        self._account_repo = account_repository
        self._auditor = auditor

    async def create_account(self, customer: CustomerDTO) -> None:
        with track_operation("accounts", "create"):
            ensure_valid(customer.validate())

            log = logger.bind(mobile_number=customer.mobile_number)

            existing = await self._customer_repo.get_by_mobile_number(customer.mobile_number)
            if existing is not None:
                log.warning("customer_already_exists")
                raise CustomerAlreadyExistsException(customer.mobile_number)

            new_customer = Customer(
                name=customer.name,
                email=customer.email,
                mobile_number=customer.mobile_number,
            )
            new_customer.audit.mark_created(self._auditor)
            saved = await self._customer_repo.save(new_customer)

            account = self._new_account(saved.customer_id)
            await self._account_repo.save(account)

            record_product_opened("account")
            log.info(
                "account_created",
                customer_id=saved.customer_id,
                account_number=account.account_number,
            )

    async def fetch_account(self, mobile_number: str) -> CustomerDTO:
        """
        Return customer and account details for a mobile number.

        Raises:
            ValidationFailedException: If the mobile number is malformed
            ResourceNotFoundException: If the customer or account is missing
        """
        with track_operation("accounts", "fetch"):
            ensure_valid(validate_mobile_number(mobile_number))

            customer = await self._get_customer(mobile_number)
            account = await self._account_repo.get_by_customer_id(customer.customer_id)
            if account is None:
                logger.warning("account_not_found", customer_id=customer.customer_id)
                raise ResourceNotFoundException(
                    "Account", "customerId", str(customer.customer_id)
                )

            return CustomerDTO.from_entities(customer, account)

    async def update_account(self, customer: CustomerDTO) -> bool:
        with track_operation("accounts", "update"):
            ensure_valid(customer.validate())

            if customer.accounts is None:
                logger.info("account_update_skipped", reason="no_account_details")
                return False

            account_number = customer.accounts.account_number
            account = await self._account_repo.get_by_account_number(account_number)
            if account is None:
                logger.warning("account_not_found", account_number=account_number)
                raise ResourceNotFoundException(
                    "Account", "AccountNumber", str(account_number)
                )

            existing = await self._customer_repo.get_by_id(account.customer_id)
            if existing is None:
                logger.warning("customer_not_found", customer_id=account.customer_id)
                raise ResourceNotFoundException(
                    "Customer", "CustomerID", str(account.customer_id)
                )

            if customer.mobile_number != existing.mobile_number:
                owner = await self._customer_repo.get_by_mobile_number(customer.mobile_number)
                if owner is not None:
                    logger.warning(
                        "customer_already_exists",
                        mobile_number=customer.mobile_number,
                    )
                    raise CustomerAlreadyExistsException(customer.mobile_number)

            account.account_type = customer.accounts.account_type
            account.branch_address = customer.accounts.branch_address
            account.audit.mark_updated(self._auditor)
            await self._account_repo.update(account)

            existing.name = customer.name
            existing.email = customer.email
            existing.mobile_number = customer.mobile_number
            existing.audit.mark_updated(self._auditor)
            await self._customer_repo.update(existing)

            logger.info(
                "account_updated",
                customer_id=existing.customer_id,
                account_number=account_number,
            )
            return True

    async def delete_account(self, mobile_number: str) -> bool:
        with track_operation("accounts", "delete"):
            ensure_valid(validate_mobile_number(mobile_number))

            customer = await self._get_customer(mobile_number)
            await self._account_repo.delete_by_customer_id(customer.customer_id)
            await self._customer_repo.delete(customer.customer_id)

            logger.info("account_deleted", customer_id=customer.customer_id)
            return True

    async def _get_customer(self, mobile_number: str) -> Customer:
        customer = await self._customer_repo.get_by_mobile_number(mobile_number)
        if customer is None:
            logger.warning("customer_not_found", mobile_number=mobile_number)
            raise ResourceNotFoundException("Customer", "mobileNumber", mobile_number)
        return customer

    def _new_account(self, customer_id: int) -> Account:
        account = Account(
            customer_id=customer_id,
            account_number=self.ACCOUNT_NUMBER_BASE
            + random.randrange(self.ACCOUNT_NUMBER_SPAN),
            account_type=constants.SAVINGS,
            branch_address=constants.BRANCH_ADDRESS,
        )
        account.audit.mark_created(self._auditor)
        return account
