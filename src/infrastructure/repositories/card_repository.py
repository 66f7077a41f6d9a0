"""PostgreSQL repository implementation for cards."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Card
from src.domain.interfaces import CardRepository
from src.infrastructure.database.models import CardModel
from .mapping import audit_from_model


class PostgresCardRepository(CardRepository):
    """SQL-backed card repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, card: Card) -> Card:
        model = CardModel(
            mobile_number=card.mobile_number,
            card_number=card.card_number,
            card_type=card.card_type,
            total_limit=card.total_limit,
            amount_used=card.amount_used,
            available_amount=card.available_amount,
            created_at=card.audit.created_at,
            created_by=card.audit.created_by,
        )

        self._session.add(model)
        await self._session.flush()

        card.card_id = model.card_id
        return card

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Card]:
        return await self._first(CardModel.mobile_number == mobile_number)

    async def get_by_card_number(self, card_number: str) -> Optional[Card]:
        return await self._first(CardModel.card_number == card_number)

    async def update(self, card: Card) -> Card:
        model = await self._session.get(CardModel, card.card_id)
        model.mobile_number = card.mobile_number
        model.card_type = card.card_type
        model.total_limit = card.total_limit
        model.amount_used = card.amount_used
        model.available_amount = card.available_amount
        model.updated_at = card.audit.updated_at
        model.updated_by = card.audit.updated_by

        await self._session.flush()
        return card

    async def delete(self, card_id: int) -> None:
        await self._session.execute(delete(CardModel).where(CardModel.card_id == card_id))
        await self._session.flush()

    async def _first(self, criterion) -> Optional[Card]:
        result = await self._session.execute(select(CardModel).where(criterion))
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    def _to_entity(self, model: CardModel) -> Card:
        return Card(
            card_id=model.card_id,
            mobile_number=model.mobile_number,
            card_number=model.card_number,
            card_type=model.card_type,
            total_limit=model.total_limit,
            amount_used=model.amount_used,
            available_amount=model.available_amount,
            audit=audit_from_model(model),
        )
