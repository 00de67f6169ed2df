"""Card service - card lifecycle."""

import random

from src.application.dto import CardCreateRequest, CardResponse, CardUpdateRequest
from src.domain.entities import Card
from .base import ResourceService


def generate_card_number() -> str:
    """Random 12-digit card number."""
    return str(100_000_000_000 + random.randint(0, 899_999_999))


class CardService(ResourceService[Card, CardResponse]):
    """Application service for cards."""

    resource = "Card"

    async def _new_entity(self, request: CardCreateRequest) -> Card:
        card = request.to_entity()
        card.card_number = generate_card_number()
        card.amount_used = 0
        return card

    async def _apply_update(self, card: Card, request: CardUpdateRequest) -> None:
        card.card_type = request.card_type
        card.total_limit = request.total_limit
        card.amount_used = request.amount_used

    def _to_response(self, card: Card) -> CardResponse:
        return CardResponse.from_entity(card)
