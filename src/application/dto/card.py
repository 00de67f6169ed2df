"""Data transfer objects for card operations."""

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
from src.domain.entities import Card
from src.domain.entities.card import DEFAULT_CARD_TYPE, DEFAULT_TOTAL_LIMIT
from src.domain.exceptions import FieldViolation
from .common import AuditDTO


@dataclass(frozen=True)
class CardCreateRequest:
    """Input data for issuing a card; omitted terms take the defaults."""

    mobile_number: Optional[str]
    card_type: Optional[str] = DEFAULT_CARD_TYPE
    total_limit: Optional[int] = DEFAULT_TOTAL_LIMIT

    RULES: ClassVar[FieldRules] = {
        "mobile_number": [Required(), MobileNumber],
        "card_type": [Required()],
        "total_limit": [Required(), Range(0, MAX_AMOUNT, exclusive_minimum=True)],
    }

    def validate(self) -> List[FieldViolation]:
        return validate(self, self.RULES)

    def to_entity(self) -> Card:
        """Build a card without identity, audit or card number."""
        return Card(
            mobile_number=self.mobile_number,
            card_type=self.card_type,
            total_limit=self.total_limit,
        )


@dataclass(frozen=True)
class CardUpdateRequest:
    """Input data replacing the writable terms of an existing card."""

    mobile_number: Optional[str]
    card_type: Optional[str]
    total_limit: Optional[int]
    amount_used: Optional[int]

    RULES: ClassVar[FieldRules] = {
        "mobile_number": [Required(), MobileNumber],
        "card_type": [Required()],
        "total_limit": [Required(), Range(0, MAX_AMOUNT, exclusive_minimum=True)],
        "amount_used": [Required(), Range(0, MAX_AMOUNT)],
    }

    def validate(self) -> List[FieldViolation]:
        violations = validate(self, self.RULES)

        if (
            not any(v.field in ("totalLimit", "amountUsed") for v in violations)
            and self.amount_used > self.total_limit
        ):
            violations.append(
                FieldViolation("amountUsed", "must not exceed totalLimit")
            )

        return violations

    def to_entity(self) -> Card:
        return Card(
            mobile_number=self.mobile_number,
            card_type=self.card_type,
            total_limit=self.total_limit,
            amount_used=self.amount_used,
        )


@dataclass(frozen=True)
class CardResponse:
    """Response data for a card."""

    mobile_number: str
    card_number: Optional[str]
    card_type: str
    total_limit: int
    amount_used: int
    available_amount: int
    audit: AuditDTO

    @classmethod
    def from_entity(cls, card: Card) -> "CardResponse":
        return cls(
            mobile_number=card.mobile_number,
            card_number=card.card_number,
            card_type=card.card_type,
            total_limit=card.total_limit,
            amount_used=card.amount_used,
            available_amount=card.available_amount,
            audit=AuditDTO.from_entity(card.audit),
        )
