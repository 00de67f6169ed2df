"""Card Pydantic schemas."""

from pydantic import Field

from src.application.dto import CardResponse
from src.domain.entities.card import DEFAULT_CARD_TYPE, DEFAULT_TOTAL_LIMIT
from .base import AuditFieldsSchema, CamelModel, audit_fields


class CardCreateSchema(CamelModel):
    """Schema for POST /api/create request body."""

    mobile_number: str | None = Field(
        None,
        description="Customer mobile number, exactly 10 digits",
        examples=["9876543210"],
    )
    card_type: str | None = Field(DEFAULT_CARD_TYPE, examples=[DEFAULT_CARD_TYPE])
    total_limit: int | None = Field(DEFAULT_TOTAL_LIMIT, examples=[DEFAULT_TOTAL_LIMIT])


class CardUpdateSchema(CamelModel):
    """Schema for PUT /api/update request body."""

    mobile_number: str | None = Field(None, examples=["9876543210"])
    card_type: str | None = Field(None, examples=[DEFAULT_CARD_TYPE])
    total_limit: int | None = Field(None, examples=[DEFAULT_TOTAL_LIMIT])
    amount_used: int | None = Field(None, examples=[1000])


class CardResponseSchema(AuditFieldsSchema):
    """Schema for a card."""

    mobile_number: str
    card_number: str | None = None
    card_type: str
    total_limit: int
    amount_used: int
    available_amount: int

    @classmethod
    def from_dto(cls, dto: CardResponse) -> "CardResponseSchema":
        return cls(
            mobile_number=dto.mobile_number,
            card_number=dto.card_number,
            card_type=dto.card_type,
            total_limit=dto.total_limit,
            amount_used=dto.amount_used,
            available_amount=dto.available_amount,
            **audit_fields(dto.audit),
        )
