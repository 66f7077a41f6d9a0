"""Data transfer objects for card operations."""

from dataclasses import dataclass
from typing import List, Optional

from src.application.validation import CARD_NUMBER_LENGTH, MOBILE_NUMBER_LENGTH, FieldRules
from src.domain.entities import Card
from src.domain.exceptions import FieldViolation


@dataclass(frozen=True)
class CardsDTO:
    """Card payload used for update and fetch."""

    mobile_number: Optional[str] = None
    card_number: Optional[str] = None
    card_type: Optional[str] = None
    total_limit: int = 0
    amount_used: int = 0
    available_amount: int = 0

    def validate(self) -> List[FieldViolation]:
        return (
            FieldRules()
            .not_empty("mobileNumber", self.mobile_number, "Mobile Number can not be a null or empty")
            .digits(
                "mobileNumber",
                self.mobile_number,
                MOBILE_NUMBER_LENGTH,
                "Mobile Number must be 10 digits",
            )
            .not_empty("cardNumber", self.card_number, "Card Number can not be a null or empty")
            .digits(
                "cardNumber",
                self.card_number,
                CARD_NUMBER_LENGTH,
                "CardNumber must be 12 digits",
            )
            .not_empty("cardType", self.card_type, "CardType can not be a null or empty")
            .positive(
                "totalLimit",
                self.total_limit,
                "Total card limit should be greater than zero",
            )
            .positive_or_zero(
                "amountUsed",
                self.amount_used,
                "Total amount used should be equal or greater than zero",
            )
            .positive_or_zero(
                "availableAmount",
                self.available_amount,
                "Total available amount should be equal or greater than zero",
            )
            .violations
        )

    @classmethod
    def from_entity(cls, card: Card) -> "CardsDTO":
        return cls(
            mobile_number=card.mobile_number,
            card_number=card.card_number,
            card_type=card.card_type,
            total_limit=card.total_limit,
            amount_used=card.amount_used,
            available_amount=card.available_amount,
        )
