"""Loan Pydantic schemas."""

from pydantic import Field

from src.application.dto import LoansDTO
from .common import CamelModel


class LoansSchema(CamelModel):
    """Loan details."""

    mobile_number: str | None = Field(None, examples=["4365327698"])
    loan_number: str | None = Field(None, examples=["548732457654"])
    loan_type: str | None = Field(None, examples=["Home Loan"])
    total_loan: int = Field(0, description="Total loan amount", examples=[100000])
    amount_paid: int = Field(0, description="Total loan amount paid", examples=[1000])
    outstanding_amount: int = Field(
        0,
        description="Total outstanding amount against a loan",
        examples=[99000],
    )

    def to_dto(self) -> LoansDTO:
        return LoansDTO(**self.model_dump())

    @classmethod
    def from_dto(cls, dto: LoansDTO) -> "LoansSchema":
        return cls(
            mobile_number=dto.mobile_number,
            loan_number=dto.loan_number,
            loan_type=dto.loan_type,
            total_loan=dto.total_loan,
            amount_paid=dto.amount_paid,
            outstanding_amount=dto.outstanding_amount,
        )
