"""Data transfer objects for loan operations."""

from dataclasses import dataclass
from typing import List, Optional

from src.application.validation import LOAN_NUMBER_LENGTH, MOBILE_NUMBER_LENGTH, FieldRules
from src.domain.entities import Loan
from src.domain.exceptions import FieldViolation


@dataclass(frozen=True)
class LoansDTO:
    """Loan payload used for update and fetch."""

    mobile_number: Optional[str] = None
    loan_number: Optional[str] = None
    loan_type: Optional[str] = None
    total_loan: int = 0
    amount_paid: int = 0
    outstanding_amount: int = 0

    def validate(self) -> List[FieldViolation]:
        return (
            FieldRules()
            .not_empty("mobileNumber", self.mobile_number, "Mobile Number can not be a null or empty")
            .digits(
                "mobileNumber",
                self.mobile_number,
                MOBILE_NUMBER_LENGTH,
                "Mobile Number must be 10 digits",
            )
            .not_empty("loanNumber", self.loan_number, "Loan Number can not be a null or empty")
            .digits(
                "loanNumber",
                self.loan_number,
                LOAN_NUMBER_LENGTH,
                "LoanNumber must be 12 digits",
            )
            .not_empty("loanType", self.loan_type, "LoanType can not be a null or empty")
            .positive(
                "totalLoan",
                self.total_loan,
                "Total loan amount should be greater than zero",
            )
            .positive_or_zero(
                "amountPaid",
                self.amount_paid,
                "Total loan amount paid should be equal or greater than zero",
            )
            .positive_or_zero(
                "outstandingAmount",
                self.outstanding_amount,
                "Total outstanding amount should be equal or greater than zero",
            )
            .violations
        )

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoansDTO":
        return cls(
            mobile_number=loan.mobile_number,
            loan_number=loan.loan_number,
            loan_type=loan.loan_type,
            total_loan=loan.total_loan,
            amount_paid=loan.amount_paid,
            outstanding_amount=loan.outstanding_amount,
        )
