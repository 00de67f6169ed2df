"""Loan domain entity."""

from dataclasses import dataclass, field

from .audit import AuditInfo

DEFAULT_LOAN_TYPE = "Home Loan"
DEFAULT_TOTAL_LOAN = 100_000


@dataclass
class Loan:
    """A loan held by the customer with the given mobile number."""

    mobile_number: str
    loan_number: str | None = None
    loan_type: str = DEFAULT_LOAN_TYPE
    total_loan: int = DEFAULT_TOTAL_LOAN
    amount_paid: int = 0
    id: int | None = None
    audit: AuditInfo = field(default_factory=AuditInfo)

    @property
    def outstanding_amount(self) -> int:
        return self.total_loan - self.amount_paid
