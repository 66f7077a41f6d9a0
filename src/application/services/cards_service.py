"""Cards service - card registry use cases."""

import random

import structlog

from src.application.dto import CardsDTO
from src.application.services.interfaces import CardsService
from src.application.validation import ensure_valid, validate_mobile_number
from src.core import constants
from src.core.metrics import record_product_opened, track_operation
from src.domain.entities import Card
from src.domain.exceptions import CardAlreadyExistsException, ResourceNotFoundException
from src.domain.interfaces import CardRepository

logger = structlog.get_logger(__name__)


class DefaultCardsService(CardsService):
    """Application service for cards keyed by mobile number."""

    CARD_NUMBER_BASE = 100_000_000_000
    CARD_NUMBER_SPAN = 900_000_000

    def __init__(
        self,
        card_repository: CardRepository,
        auditor: str = constants.CARDS_AUDITOR,
    ):
        self._card_repo = card_repository
        self._auditor = auditor

    async def create_card(self, mobile_number: str) -> None:
        """
        Issue a credit card with the default limit.

        Raises:
            CardAlreadyExistsException: If a card exists for the number
        """
        with track_operation("cards", "create"):
            ensure_valid(validate_mobile_number(mobile_number))

            if await self._card_repo.get_by_mobile_number(mobile_number) is not None:
                logger.warning("card_already_exists", mobile_number=mobile_number)
                raise CardAlreadyExistsException(mobile_number)

            card = Card(
                mobile_number=mobile_number,
                card_number=str(
                    self.CARD_NUMBER_BASE + random.randrange(self.CARD_NUMBER_SPAN)
                ),
                card_type=constants.CREDIT_CARD,
                total_limit=constants.NEW_CARD_LIMIT,
                amount_used=0,
                available_amount=constants.NEW_CARD_LIMIT,
            )
            card.audit.mark_created(self._auditor)
            await self._card_repo.save(card)

            record_product_opened("card")
            logger.info(
                "card_created",
                mobile_number=mobile_number,
                card_number=card.card_number,
            )

    async def fetch_card(self, mobile_number: str) -> CardsDTO:
        with track_operation("cards", "fetch"):
            ensure_valid(validate_mobile_number(mobile_number))
            return CardsDTO.from_entity(await self._get_card(mobile_number))

    async def update_card(self, card: CardsDTO) -> bool:
        with track_operation("cards", "update"):
            ensure_valid(card.validate())

            existing = await self._card_repo.get_by_card_number(card.card_number)
            if existing is None:
                logger.warning("card_not_found", card_number=card.card_number)
                raise ResourceNotFoundException("Card", "CardNumber", card.card_number)

            if card.mobile_number != existing.mobile_number:
                if await self._card_repo.get_by_mobile_number(card.mobile_number) is not None:
                    logger.warning("card_already_exists", mobile_number=card.mobile_number)
                    raise CardAlreadyExistsException(card.mobile_number)

            existing.mobile_number = card.mobile_number
            existing.card_type = card.card_type
            existing.total_limit = card.total_limit
            existing.amount_used = card.amount_used
            existing.available_amount = card.available_amount
            existing.audit.mark_updated(self._auditor)
            await self._card_repo.update(existing)

            logger.info("card_updated", card_number=card.card_number)
            return True

    async def delete_card(self, mobile_number: str) -> bool:
        with track_operation("cards", "delete"):
            ensure_valid(validate_mobile_number(mobile_number))

            card = await self._get_card(mobile_number)
            await self._card_repo.delete(card.card_id)

            logger.info("card_deleted", card_number=card.card_number)
            return True

    async def _get_card(self, mobile_number: str) -> Card:
        card = await self._card_repo.get_by_mobile_number(mobile_number)
        if card is None:
            logger.warning("card_not_found", mobile_number=mobile_number)
            raise ResourceNotFoundException("Card", "mobileNumber", mobile_number)
        return card
