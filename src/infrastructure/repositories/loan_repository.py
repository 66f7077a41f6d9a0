"""PostgreSQL repository implementation for loans."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Loan
from src.domain.interfaces import LoanRepository
from src.infrastructure.database.models import LoanModel
from .mapping import audit_from_model


class PostgresLoanRepository(LoanRepository):
    """SQL-backed loan repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, loan: Loan) -> Loan:
        model = LoanModel(
            mobile_number=loan.mobile_number,
            loan_number=loan.loan_number,
            loan_type=loan.loan_type,
            total_loan=loan.total_loan,
            amount_paid=loan.amount_paid,
            outstanding_amount=loan.outstanding_amount,
            created_at=loan.audit.created_at,
            created_by=loan.audit.created_by,
        )

        self._session.add(model)
        await self._session.flush()

        loan.loan_id = model.loan_id
        return loan

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        return await self._first(LoanModel.mobile_number == mobile_number)

    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        return await self._first(LoanModel.loan_number == loan_number)

    async def update(self, loan: Loan) -> Loan:
        model = await self._session.get(LoanModel, loan.loan_id)
        model.mobile_number = loan.mobile_number
        model.loan_type = loan.loan_type
        model.total_loan = loan.total_loan
        model.amount_paid = loan.amount_paid
        model.outstanding_amount = loan.outstanding_amount
        model.updated_at = loan.audit.updated_at
        model.updated_by = loan.audit.updated_by

        await self._session.flush()
        return loan

    async def delete(self, loan_id: int) -> None:
        await self._session.execute(delete(LoanModel).where(LoanModel.loan_id == loan_id))
        await self._session.flush()

    async def _first(self, criterion) -> Optional[Loan]:
        result = await self._session.execute(select(LoanModel).where(criterion))
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    def _to_entity(self, model: LoanModel) -> Loan:
        return Loan(
            loan_id=model.loan_id,
            mobile_number=model.mobile_number,
            loan_number=model.loan_number,
            loan_type=model.loan_type,
            total_loan=model.total_loan,
            amount_paid=model.amount_paid,
            outstanding_amount=model.outstanding_amount,
            audit=audit_from_model(model),
        )
