"""Customer account Pydantic schemas."""

from pydantic import Field

from src.application.dto import CustomerResponse
from .base import AuditFieldsSchema, CamelModel, audit_fields


class AccountDetailsSchema(CamelModel):
    """Writable account details in a customer request."""

    account_type: str | None = Field(
        None,
        description="Account type",
        examples=["Savings"],
    )
    branch_address: str | None = Field(
        None,
        description="Branch holding the account",
        examples=["123 Main Street, New York"],
    )


class CustomerRequestSchema(CamelModel):
    """Schema for POST /api/create and PUT /api/update request bodies."""

    name: str | None = Field(
        None,
        description="Customer name, up to 100 characters",
        examples=["Madan Reddy"],
    )
    email: str | None = Field(
        None,
        description="Customer email address",
        examples=["customer@example.com"],
    )
    mobile_number: str | None = Field(
        None,
        description="Customer mobile number, exactly 10 digits",
        examples=["9876543210"],
    )
    account: AccountDetailsSchema | None = Field(
        None,
        description="Account details; defaults apply on create when omitted",
    )


class AccountSchema(CamelModel):
    """Account section of a customer response."""

    account_number: int | None = Field(None, examples=[1234567890])
    account_type: str = Field(..., examples=["Savings"])
    branch_address: str = Field(..., examples=["123 Main Street, New York"])


class CustomerResponseSchema(AuditFieldsSchema):
    """Schema for a customer with its account."""

    name: str
    email: str | None = None
    mobile_number: str
    account: AccountSchema | None = None

    @classmethod
    def from_dto(cls, dto: CustomerResponse) -> "CustomerResponseSchema":
        account = None
        if dto.account is not None:
            account = AccountSchema(
                account_number=dto.account.account_number,
                account_type=dto.account.account_type,
                branch_address=dto.account.branch_address,
            )

        return cls(
            name=dto.name,
            email=dto.email,
            mobile_number=dto.mobile_number,
            account=account,
            **audit_fields(dto.audit),
        )
