"""PostgreSQL implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.domain.entities import Account, Customer
from src.domain.exceptions import ResourceNotFoundException
from src.domain.interfaces import CustomerRepository
from src.infrastructure.database.models import AccountModel, CustomerModel
from .base import apply_audit, audit_from_model, flush_or_conflict


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of the Customer repository.

    A customer and its account are written and removed together.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """Insert or replace a customer and its account."""
        if customer.id is None:
            model = CustomerModel()
            self._session.add(model)
        else:
            model = await self._load(CustomerModel.customer_id == customer.id)
            if model is None:
                raise ResourceNotFoundException(
                    "Customer", "mobileNumber", customer.mobile_number
                )

        model.name = customer.name
        model.email = customer.email
        model.mobile_number = customer.mobile_number
        apply_audit(model, customer.audit)

        if customer.account is not None:
            if model.account is None:
                model.account = AccountModel(
                    account_number=customer.account.account_number,
                )
            model.account.account_type = customer.account.account_type
            model.account.branch_address = customer.account.branch_address
            apply_audit(model.account, customer.audit)

        await flush_or_conflict(self._session, "Customer", customer.mobile_number)

        customer.id = model.customer_id
        return customer

    async def get_by_key(self, mobile_number: str) -> Optional[Customer]:
        """Retrieve a customer with its account by mobile number."""
        model = await self._load(CustomerModel.mobile_number == mobile_number)

        if model is None:
            return None

        return self._to_entity(model)

    async def exists_by_key(self, mobile_number: str) -> bool:
        stmt = select(exists().where(CustomerModel.mobile_number == mobile_number))
        return bool(await self._session.scalar(stmt))

    async def account_number_exists(self, account_number: int) -> bool:
        stmt = select(exists().where(AccountModel.account_number == account_number))
        return bool(await self._session.scalar(stmt))

    async def delete_by_key(self, mobile_number: str) -> bool:
        """Delete a customer; the account goes with it."""
        model = await self._load(CustomerModel.mobile_number == mobile_number)

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _load(self, criterion) -> Optional[CustomerModel]:
        stmt = (
            select(CustomerModel)
            .options(selectinload(CustomerModel.account))
            .where(criterion)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        account = None
        if model.account is not None:
            account = Account(
                account_number=model.account.account_number,
                account_type=model.account.account_type,
                branch_address=model.account.branch_address,
            )

        return Customer(
            id=model.customer_id,
            name=model.name,
            email=model.email,
            mobile_number=model.mobile_number,
            account=account,
            audit=audit_from_model(model),
        )
