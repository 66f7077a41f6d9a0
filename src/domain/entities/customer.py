"""Customer and account domain entities."""

from dataclasses import dataclass, field
from typing import Optional

from .audit import AuditInfo


@dataclass
class Customer:
    """
    A bank customer, uniquely identified by mobile number.

    ``customer_id`` is assigned by the repository on first save.
    """

    name: str
    email: str
    mobile_number: str
    customer_id: Optional[int] = None
    audit: AuditInfo = field(default_factory=AuditInfo)


@dataclass
class Account:
    """A bank account owned by exactly one customer."""

    customer_id: int
    account_number: int
    account_type: str
    branch_address: str
    audit: AuditInfo = field(default_factory=AuditInfo)
