"""Account service - customer and bank account lifecycle."""

import random

import structlog

from src.application.dto import CustomerRequest, CustomerResponse
from src.domain.entities import Account, Customer
from src.domain.interfaces import CustomerRepository
from .base import ResourceService

logger = structlog.get_logger(__name__)

ACCOUNT_NUMBER_ATTEMPTS = 5


def generate_account_number() -> int:
    """Random 10-digit account number."""
    return 1_000_000_000 + random.randint(0, 899_999_999)


class AccountNumberUnavailable(RuntimeError):
    """No free account number was found within the allowed attempts."""


class AccountService(ResourceService[Customer, CustomerResponse]):
    """
    Application service for customer accounts.

    A customer always gets a bank account on creation; the account
    number is generated here, checked against the numbers already
    issued, and never changes afterwards.
    """

    resource = "Customer"

    _repo: CustomerRepository

    async def _new_entity(self, request: CustomerRequest) -> Customer:
        customer = request.to_entity()

        account = customer.account or Account()
        account.account_number = await self._allocate_account_number()
        customer.account = account

        return customer

    async def _apply_update(self, customer: Customer, request: CustomerRequest) -> None:
        customer.name = request.name
        customer.email = request.email

        if request.account is None:
            return

        if customer.account is None:
            customer.account = Account(
                account_number=await self._allocate_account_number(),
            )

        # Omitted account details keep their current values.
        if request.account.account_type is not None:
            customer.account.account_type = request.account.account_type
        if request.account.branch_address is not None:
            customer.account.branch_address = request.account.branch_address

    async def _allocate_account_number(self) -> int:
        for attempt in range(1, ACCOUNT_NUMBER_ATTEMPTS + 1):
            number = generate_account_number()
            if not await self._repo.account_number_exists(number):
                return number
            logger.warning("account_number_taken", attempt=attempt)

        raise AccountNumberUnavailable(
            f"No free account number after {ACCOUNT_NUMBER_ATTEMPTS} attempts"
        )

    def _to_response(self, customer: Customer) -> CustomerResponse:
        return CustomerResponse.from_entity(customer)
