"""Customer and bank account domain entities."""

from dataclasses import dataclass, field

from .audit import AuditInfo

DEFAULT_ACCOUNT_TYPE = "Savings"
DEFAULT_BRANCH_ADDRESS = "123 Main Street, New York"


@dataclass
class Account:
    """The bank account owned by a customer."""

    account_number: int | None = None
    account_type: str = DEFAULT_ACCOUNT_TYPE
    branch_address: str = DEFAULT_BRANCH_ADDRESS


@dataclass
class Customer:
    """A bank customer, identified by mobile number."""

    name: str
    mobile_number: str
    email: str | None = None
    account: Account | None = None
    id: int | None = None
    audit: AuditInfo = field(default_factory=AuditInfo)
