"""PostgreSQL repository implementations for customers and accounts."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Account, Customer
from src.domain.interfaces import AccountRepository, CustomerRepository
from src.infrastructure.database.models import AccountModel, CustomerModel
from .mapping import audit_from_model


class PostgresCustomerRepository(CustomerRepository):
    """
    SQL-backed customer repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        model = CustomerModel(
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            created_at=customer.audit.created_at,
            created_by=customer.audit.created_by,
        )

        self._session.add(model)
        await self._session.flush()

        customer.customer_id = model.customer_id
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        model = await self._session.get(CustomerModel, customer_id)
        return self._to_entity(model) if model else None

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        stmt = select(CustomerModel).where(CustomerModel.mobile_number == mobile_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def update(self, customer: Customer) -> Customer:
        model = await self._session.get(CustomerModel, customer.customer_id)
        model.name = customer.name
        model.email = customer.email
        model.mobile_number = customer.mobile_number
        model.updated_at = customer.audit.updated_at
        model.updated_by = customer.audit.updated_by

        await self._session.flush()
        return customer

    async def delete(self, customer_id: int) -> None:
        await self._session.execute(
            delete(CustomerModel).where(CustomerModel.customer_id == customer_id)
        )
        await self._session.flush()

    def _to_entity(self, model: CustomerModel) -> Customer:
        return Customer(
            customer_id=model.customer_id,
            name=model.name,
            email=model.email,
            mobile_number=model.mobile_number,
            audit=audit_from_model(model),
        )


class PostgresAccountRepository(AccountRepository):
    """SQL-backed account repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, account: Account) -> Account:
        model = AccountModel(
            account_number=account.account_number,
            customer_id=account.customer_id,
            account_type=account.account_type,
            branch_address=account.branch_address,
            created_at=account.audit.created_at,
            created_by=account.audit.created_by,
        )

        self._session.add(model)
        await self._session.flush()

        return account

    async def get_by_customer_id(self, customer_id: int) -> Optional[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.customer_id == customer_id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def get_by_account_number(self, account_number: int) -> Optional[Account]:
        model = await self._session.get(AccountModel, account_number)
        return self._to_entity(model) if model else None

    async def update(self, account: Account) -> Account:
        model = await self._session.get(AccountModel, account.account_number)
        model.account_type = account.account_type
        model.branch_address = account.branch_address
        model.updated_at = account.audit.updated_at
        model.updated_by = account.audit.updated_by

        await self._session.flush()
        return account

    async def delete_by_customer_id(self, customer_id: int) -> None:
        await self._session.execute(
            delete(AccountModel).where(AccountModel.customer_id == customer_id)
        )
        await self._session.flush()

    def _to_entity(self, model: AccountModel) -> Account:
        return Account(
            customer_id=model.customer_id,
            account_number=model.account_number,
            account_type=model.account_type,
            branch_address=model.branch_address,
            audit=audit_from_model(model),
        )
