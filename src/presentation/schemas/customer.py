"""Customer and account Pydantic schemas."""

from pydantic import Field

from src.application.dto import AccountsDTO, CustomerDTO
from .common import CamelModel


class AccountsSchema(CamelModel):
    """Account details nested in the customer payload."""

    account_number: int | None = Field(
        None,
        description="Account number",
        examples=[3454433243],
    )
    account_type: str | None = Field(
        None,
        description="Account type",
        examples=["Savings"],
    )
    branch_address: str | None = Field(
        None,
        description="Branch address",
        examples=["123 Main Street, New York"],
    )


class CustomerSchema(CamelModel):
    """Customer and account details."""

    name: str | None = Field(None, description="Name of the customer", examples=["Eazy Bytes"])
    email: str | None = Field(
        None,
        description="Email address of the customer",
        examples=["tutor@eazybank.com"],
    )
    mobile_number: str | None = Field(
        None,
        description="Mobile number of the customer",
        examples=["9345432123"],
    )
    accounts_dto: AccountsSchema | None = Field(
        None,
        description="Account details of the customer",
    )

    def to_dto(self) -> CustomerDTO:
        accounts = None
        if self.accounts_dto is not None:
            accounts = AccountsDTO(
                account_number=self.accounts_dto.account_number,
                account_type=self.accounts_dto.account_type,
                branch_address=self.accounts_dto.branch_address,
            )
        return CustomerDTO(
            name=self.name,
            email=self.email,
            mobile_number=self.mobile_number,
            accounts=accounts,
        )

    @classmethod
    def from_dto(cls, dto: CustomerDTO) -> "CustomerSchema":
        accounts = None
        if dto.accounts is not None:
            accounts = AccountsSchema(
                account_number=dto.accounts.account_number,
                account_type=dto.accounts.account_type,
                branch_address=dto.accounts.branch_address,
            )
        return cls(
            name=dto.name,
            email=dto.email,
            mobile_number=dto.mobile_number,
            accounts_dto=accounts,
        )
