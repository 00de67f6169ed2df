"""Loan Pydantic schemas."""

from pydantic import Field

from src.application.dto import LoanResponse
from src.domain.entities.loan import DEFAULT_LOAN_TYPE, DEFAULT_TOTAL_LOAN
from .base import AuditFieldsSchema, CamelModel, audit_fields


class LoanCreateSchema(CamelModel):
    """Schema for POST /api/create request body."""

    mobile_number: str | None = Field(
        None,
        description="Customer mobile number, exactly 10 digits",
        examples=["9876543210"],
    )
    loan_type: str | None = Field(DEFAULT_LOAN_TYPE, examples=[DEFAULT_LOAN_TYPE])
    total_loan: int | None = Field(DEFAULT_TOTAL_LOAN, examples=[DEFAULT_TOTAL_LOAN])


class LoanUpdateSchema(CamelModel):
    """Schema for PUT /api/update request body."""

    mobile_number: str | None = Field(None, examples=["9876543210"])
    loan_type: str | None = Field(None, examples=[DEFAULT_LOAN_TYPE])
    total_loan: int | None = Field(None, examples=[DEFAULT_TOTAL_LOAN])
    amount_paid: int | None = Field(None, examples=[1000])


class LoanResponseSchema(AuditFieldsSchema):
    """Schema for a loan."""

    mobile_number: str
    loan_number: str | None = None
    loan_type: str
    total_loan: int
    amount_paid: int
    outstanding_amount: int

    @classmethod
    def from_dto(cls, dto: LoanResponse) -> "LoanResponseSchema":
        return cls(
            mobile_number=dto.mobile_number,
            loan_number=dto.loan_number,
            loan_type=dto.loan_type,
            total_loan=dto.total_loan,
            amount_paid=dto.amount_paid,
            outstanding_amount=dto.outstanding_amount,
            **audit_fields(dto.audit),
        )
