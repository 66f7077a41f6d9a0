"""Loan domain entity."""

from dataclasses import dataclass, field
from typing import Optional

from .audit import AuditInfo


@dataclass
class Loan:
    """A loan registered against a mobile number."""

    mobile_number: str
    loan_number: str
    loan_type: str
    total_loan: int
    amount_paid: int
    outstanding_amount: int
    loan_id: Optional[int] = None
    audit: AuditInfo = field(default_factory=AuditInfo)
