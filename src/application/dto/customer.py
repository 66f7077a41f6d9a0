"""Data transfer objects for account directory operations."""

from dataclasses import dataclass
from typing import List, Optional

from src.application.validation import (
    ACCOUNT_NUMBER_LENGTH,
    MOBILE_NUMBER_LENGTH,
    MOBILE_NUMBER_MESSAGE,
    FieldRules,
)
from src.domain.entities import Account, Customer
from src.domain.exceptions import FieldViolation


@dataclass(frozen=True)
class AccountsDTO:
    """Account details nested inside a customer payload."""

    account_number: Optional[int] = None
    account_type: Optional[str] = None
    branch_address: Optional[str] = None

    def validate(self) -> List[FieldViolation]:
        return (
            FieldRules(prefix="accountsDto")
            .not_empty(
                "accountNumber",
                None if self.account_number is None else str(self.account_number),
                "AccountNumber can not be a null or empty",
            )
            .digits(
                "accountNumber",
                self.account_number,
                ACCOUNT_NUMBER_LENGTH,
                "AccountNumber must be 10 digits",
            )
            .not_empty("accountType", self.account_type, "AccountType can not be a null or empty")
            .not_empty(
                "branchAddress",
                self.branch_address,
                "BranchAddress can not be a null or empty",
            )
            .violations
        )

    @classmethod
    def from_entity(cls, account: Account) -> "AccountsDTO":
        return cls(
            account_number=account.account_number,
            account_type=account.account_type,
            branch_address=account.branch_address,
        )


@dataclass(frozen=True)
class CustomerDTO:
    """Customer payload used for create, update and fetch."""

    name: Optional[str] = None
    email: Optional[str] = None
    mobile_number: Optional[str] = None
    accounts: Optional[AccountsDTO] = None

    def validate(self) -> List[FieldViolation]:
        rules = (
            FieldRules()
            .not_empty("name", self.name, "Name can not be a null or empty")
            .length(
                "name",
                self.name,
                5,
                30,
                "The length of the customer name should be between 5 and 30",
            )
            .not_empty("email", self.email, "Email address can not be a null or empty")
            .email("email", self.email, "Email address should be a valid value")
            .digits(
                "mobileNumber",
                self.mobile_number,
                MOBILE_NUMBER_LENGTH,
                MOBILE_NUMBER_MESSAGE,
                required=True,
            )
        )
        if self.accounts is not None:
            rules.extend(self.accounts.validate())
        return rules.violations

    @classmethod
    def from_entities(
        cls, customer: Customer, account: Optional[Account] = None
    ) -> "CustomerDTO":
        return cls(
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            accounts=AccountsDTO.from_entity(account) if account else None,
        )
