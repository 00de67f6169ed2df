"""Data transfer objects for customer account operations."""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from src.application.validation import (
    Email,
    FieldRules,
    Length,
    MobileNumber,
    NotBlank,
    Required,
    validate,
)
from src.domain.entities import Account, Customer
from src.domain.entities.customer import DEFAULT_ACCOUNT_TYPE, DEFAULT_BRANCH_ADDRESS
from src.domain.exceptions import FieldViolation
from .common import AuditDTO


@dataclass(frozen=True)
class AccountDetailsDTO:
    """Writable account details supplied by the client."""

    account_type: Optional[str] = None
    branch_address: Optional[str] = None


@dataclass(frozen=True)
class CustomerRequest:
    """Input data for creating or updating a customer account."""

    name: Optional[str]
    mobile_number: Optional[str]
    email: Optional[str] = None
    account: Optional[AccountDetailsDTO] = None

    RULES: ClassVar[FieldRules] = {
        "name": [Required(), Length(1, 100)],
        "email": [Email()],
        "mobile_number": [Required(), MobileNumber],
        "account.account_type": [NotBlank(), Length(1, 100)],
        "account.branch_address": [NotBlank(), Length(1, 200)],
    }

    def validate(self) -> List[FieldViolation]:
        return validate(self, self.RULES)

    def to_entity(self) -> Customer:
        """Build a customer without identity, audit or account number."""
        account = None
        if self.account is not None:
            account = Account(
                account_type=self.account.account_type or DEFAULT_ACCOUNT_TYPE,
                branch_address=self.account.branch_address or DEFAULT_BRANCH_ADDRESS,
            )

        return Customer(
            name=self.name,
            email=self.email,
            mobile_number=self.mobile_number,
            account=account,
        )


@dataclass(frozen=True)
class AccountResponse:
    """Account section of a customer response."""

    account_number: Optional[int]
    account_type: str
    branch_address: str


@dataclass(frozen=True)
class CustomerResponse:
    """Response data for a customer with its account."""

    name: str
    email: Optional[str]
    mobile_number: str
    account: Optional[AccountResponse]
    audit: AuditDTO

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        account = None
        if customer.account is not None:
            account = AccountResponse(
                account_number=customer.account.account_number,
                account_type=customer.account.account_type,
                branch_address=customer.account.branch_address,
            )

        return cls(
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            account=account,
            audit=AuditDTO.from_entity(customer.audit),
        )
