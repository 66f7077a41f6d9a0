"""Loans service - loan registry use cases."""

import random

import structlog

from src.application.dto import LoansDTO
from src.application.services.interfaces import LoansService
from src.application.validation import ensure_valid, validate_mobile_number
from src.core import constants
from src.core.metrics import record_product_opened, track_operation
from src.domain.entities import Loan
from src.domain.exceptions import LoanAlreadyExistsException, ResourceNotFoundException
from src.domain.interfaces import LoanRepository

logger = structlog.get_logger(__name__)


class DefaultLoansService(LoansService):
    """Application service for loans keyed by mobile number."""

    LOAN_NUMBER_BASE = 100_000_000_000
    LOAN_NUMBER_SPAN = 900_000_000

    def __init__(
        self,
        loan_repository: LoanRepository,
        auditor: str = constants.LOANS_AUDITOR,
    ):
        self._loan_repo = loan_repository
        self._auditor = auditor

    async def create_loan(self, mobile_number: str) -> None:
        """
        Open a home loan with the default limit.

        Raises:
            LoanAlreadyExistsException: If a loan exists for the number
        """
        with track_operation("loans", "create"):
            ensure_valid(validate_mobile_number(mobile_number))

            if await self._loan_repo.get_by_mobile_number(mobile_number) is not None:
                logger.warning("loan_already_exists", mobile_number=mobile_number)
                raise LoanAlreadyExistsException(mobile_number)

            loan = Loan(
                mobile_number=mobile_number,
                loan_number=str(
                    self.LOAN_NUMBER_BASE + random.randrange(self.LOAN_NUMBER_SPAN)
                ),
                loan_type=constants.HOME_LOAN,
                total_loan=constants.NEW_LOAN_LIMIT,
                amount_paid=0,
                outstanding_amount=constants.NEW_LOAN_LIMIT,
            )
            loan.audit.mark_created(self._auditor)
            await self._loan_repo.save(loan)

            record_product_opened("loan")
            logger.info(
                "loan_created",
                mobile_number=mobile_number,
                loan_number=loan.loan_number,
            )

    async def fetch_loan(self, mobile_number: str) -> LoansDTO:
        with track_operation("loans", "fetch"):
            ensure_valid(validate_mobile_number(mobile_number))
            return LoansDTO.from_entity(await self._get_loan(mobile_number))

    async def update_loan(self, loan: LoansDTO) -> bool:
        with track_operation("loans", "update"):
            ensure_valid(loan.validate())

            existing = await self._loan_repo.get_by_loan_number(loan.loan_number)
            if existing is None:
                logger.warning("loan_not_found", loan_number=loan.loan_number)
                raise ResourceNotFoundException("Loan", "LoanNumber", loan.loan_number)

            if loan.mobile_number != existing.mobile_number:
                if await self._loan_repo.get_by_mobile_number(loan.mobile_number) is not None:
                    logger.warning("loan_already_exists", mobile_number=loan.mobile_number)
                    raise LoanAlreadyExistsException(loan.mobile_number)

            existing.mobile_number = loan.mobile_number
            existing.loan_type = loan.loan_type
            existing.total_loan = loan.total_loan
            existing.amount_paid = loan.amount_paid
            existing.outstanding_amount = loan.outstanding_amount
            existing.audit.mark_updated(self._auditor)
            await self._loan_repo.update(existing)

            logger.info("loan_updated", loan_number=loan.loan_number)
            return True

    async def delete_loan(self, mobile_number: str) -> bool:
        with track_operation("loans", "delete"):
            ensure_valid(validate_mobile_number(mobile_number))

            loan = await self._get_loan(mobile_number)
            await self._loan_repo.delete(loan.loan_id)

            logger.info("loan_deleted", loan_number=loan.loan_number)
            return True

    async def _get_loan(self, mobile_number: str) -> Loan:
        loan = await self._loan_repo.get_by_mobile_number(mobile_number)
        if loan is None:
            logger.warning("loan_not_found", mobile_number=mobile_number)
            raise ResourceNotFoundException("Loan", "mobileNumber", mobile_number)
        return loan
