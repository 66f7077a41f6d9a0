"""Card Pydantic schemas."""

from pydantic import Field

from src.application.dto import CardsDTO
from .common import CamelModel


class CardsSchema(CamelModel):
    """Card details."""

    mobile_number: str | None = Field(None, examples=["4354437687"])
    card_number: str | None = Field(None, examples=["100646930341"])
    card_type: str | None = Field(None, examples=["Credit Card"])
    total_limit: int = Field(0, description="Total amount limit available against a card", examples=[100000])
    amount_used: int = Field(0, description="Total amount used by a customer", examples=[1000])
    available_amount: int = Field(0, description="Total available amount against a card", examples=[90000])

    def to_dto(self) -> CardsDTO:
        return CardsDTO(**self.model_dump())

    @classmethod
    def from_dto(cls, dto: CardsDTO) -> "CardsSchema":
        return cls(
            mobile_number=dto.mobile_number,
            card_number=dto.card_number,
            card_type=dto.card_type,
            total_limit=dto.total_limit,
            amount_used=dto.amount_used,
            available_amount=dto.available_amount,
        )
