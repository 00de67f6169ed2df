"""Data transfer objects for loan operations."""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from src.application.validation import (
    FieldRules,
    MAX_AMOUNT,
    MobileNumber,
    Range,
    Required,
    validate,
)
from src.domain.entities import Loan
from src.domain.entities.loan import DEFAULT_LOAN_TYPE, DEFAULT_TOTAL_LOAN
from src.domain.exceptions import FieldViolation
from .common import AuditDTO


@dataclass(frozen=True)
class LoanCreateRequest:
    """Input data for opening a loan; omitted terms take the defaults."""

    mobile_number: Optional[str]
    loan_type: Optional[str] = DEFAULT_LOAN_TYPE
    total_loan: Optional[int] = DEFAULT_TOTAL_LOAN

    RULES: ClassVar[FieldRules] = {
        "mobile_number": [Required(), MobileNumber],
        "loan_type": [Required()],
        "total_loan": [Required(), Range(0, MAX_AMOUNT, exclusive_minimum=True)],
    }

    def validate(self) -> List[FieldViolation]:
        return validate(self, self.RULES)

    def to_entity(self) -> Loan:
        """Build a loan without identity, audit or loan number."""
        return Loan(
            mobile_number=self.mobile_number,
            loan_type=self.loan_type,
            total_loan=self.total_loan,
        )


@dataclass(frozen=True)
class LoanUpdateRequest:
    """Input data replacing the writable terms of an existing loan."""

    mobile_number: Optional[str]
    loan_type: Optional[str]
    total_loan: Optional[int]
    amount_paid: Optional[int]

    RULES: ClassVar[FieldRules] = {
        "mobile_number": [Required(), MobileNumber],
        "loan_type": [Required()],
        "total_loan": [Required(), Range(0, MAX_AMOUNT, exclusive_minimum=True)],
        "amount_paid": [Required(), Range(0, MAX_AMOUNT)],
    }

    def validate(self) -> List[FieldViolation]:
        violations = validate(self, self.RULES)

        if (
            not any(v.field in ("totalLoan", "amountPaid") for v in violations)
            and self.amount_paid > self.total_loan
        ):
            violations.append(
                FieldViolation("amountPaid", "must not exceed totalLoan")
            )

        return violations

    def to_entity(self) -> Loan:
        return Loan(
            mobile_number=self.mobile_number,
            loan_type=self.loan_type,
            total_loan=self.total_loan,
            amount_paid=self.amount_paid,
        )


@dataclass(frozen=True)
class LoanResponse:
    """Response data for a loan."""

    mobile_number: str
    loan_number: Optional[str]
    loan_type: str
    total_loan: int
    amount_paid: int
    outstanding_amount: int
    audit: AuditDTO

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanResponse":
        return cls(
            mobile_number=loan.mobile_number,
            loan_number=loan.loan_number,
            loan_type=loan.loan_type,
            total_loan=loan.total_loan,
            amount_paid=loan.amount_paid,
            outstanding_amount=loan.outstanding_amount,
            audit=AuditDTO.from_entity(loan.audit),
        )
