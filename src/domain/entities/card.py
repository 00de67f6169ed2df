"""Card domain entity."""

from dataclasses import dataclass, field

from .audit import AuditInfo

DEFAULT_CARD_TYPE = "Credit Card"
DEFAULT_TOTAL_LIMIT = 100_000


@dataclass
class Card:
    """A card issued to the customer with the given mobile number."""

    mobile_number: str
    card_number: str | None = None
    card_type: str = DEFAULT_CARD_TYPE
    total_limit: int = DEFAULT_TOTAL_LIMIT
    amount_used: int = 0
    id: int | None = None
    audit: AuditInfo = field(default_factory=AuditInfo)

    @property
    def available_amount(self) -> int:
        return self.total_limit - self.amount_used
