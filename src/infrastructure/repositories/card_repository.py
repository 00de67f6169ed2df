"""PostgreSQL implementation of CardRepository."""

from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Card
from src.domain.exceptions import ResourceNotFoundException
from src.domain.interfaces import CardRepository
from src.infrastructure.database.models import CardModel
from .base import apply_audit, audit_from_model, flush_or_conflict


class SqlAlchemyCardRepository(CardRepository):
    """SQLAlchemy-backed card repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, card: Card) -> Card:
        if card.id is None:
            model = CardModel()
            self._session.add(model)
        else:
            model = await self._session.get(CardModel, card.id)
            if model is None:
                raise ResourceNotFoundException("Card", "mobileNumber", card.mobile_number)

        model.mobile_number = card.mobile_number
        model.card_number = card.card_number
        model.card_type = card.card_type
        model.total_limit = card.total_limit
        model.amount_used = card.amount_used
        model.available_amount = card.available_amount
        apply_audit(model, card.audit)

        await flush_or_conflict(self._session, "Card", card.mobile_number)

        card.id = model.card_id
        return card

    async def get_by_key(self, mobile_number: str) -> Optional[Card]:
        stmt = select(CardModel).where(CardModel.mobile_number == mobile_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def exists_by_key(self, mobile_number: str) -> bool:
        stmt = select(exists().where(CardModel.mobile_number == mobile_number))
        return bool(await self._session.scalar(stmt))

    async def delete_by_key(self, mobile_number: str) -> bool:
        stmt = delete(CardModel).where(CardModel.mobile_number == mobile_number)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    def _to_entity(self, model: CardModel) -> Card:
        return Card(
            id=model.card_id,
            mobile_number=model.mobile_number,
            card_number=model.card_number,
            card_type=model.card_type,
            total_limit=model.total_limit,
            amount_used=model.amount_used,
            audit=audit_from_model(model),
        )
