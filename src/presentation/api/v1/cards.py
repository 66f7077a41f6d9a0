"""Cards API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.services import CardsService
from src.core import constants
from src.core.config import Settings, get_settings
from src.core.dependencies import get_cards_service
from src.presentation.schemas import (
    ContactInfoSchema,
    ErrorResponseSchema,
    CardsSchema,
    ResponseSchema,
    ValidationErrorSchema,
)
from .common import MobileNumberQuery, status_response

cards_router = APIRouter(
    prefix="/cards",
    responses={
        400: {"model": ValidationErrorSchema, "description": "Invalid request"},
        500: {"model": ErrorResponseSchema, "description": "Internal server error"},
    },
)


@cards_router.post(
    "/create",
    response_model=ResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create Card",
    description="Create a new card inside EazyBank",
    responses={
        201: {"description": "Card created successfully"},
    },
)
async def create_card(
    mobile_number: MobileNumberQuery,
    cards_service: Annotated[CardsService, Depends(get_cards_service)],
) -> ResponseSchema:
    await cards_service.create_card(mobile_number)

    return ResponseSchema(
        status_code=constants.STATUS_201,
        status_msg="Card created successfully",
    )


@cards_router.get(
    "/fetch",
    response_model=CardsSchema,
    summary="Fetch Card Details",
    description="Fetch card details based on a mobile number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
    },
)
async def fetch_card(
    mobile_number: MobileNumberQuery,
    cards_service: Annotated[CardsService, Depends(get_cards_service)],
) -> CardsSchema:
    card = await cards_service.fetch_card(mobile_number)
    return CardsSchema.from_dto(card)


@cards_router.put(
    "/update",
    response_model=ResponseSchema,
    summary="Update Card Details",
    description="Update card details based on a card number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
        417: {"model": ResponseSchema, "description": "Update failed"},
    },
)
async def update_card(
    card: CardsSchema,
    cards_service: Annotated[CardsService, Depends(get_cards_service)],
) -> ResponseSchema | JSONResponse:
    updated = await cards_service.update_card(card.to_dto())
    return status_response(updated, constants.MESSAGE_417_UPDATE)


@cards_router.delete(
    "/delete",
    response_model=ResponseSchema,
    summary="Delete Card Details",
    description="Delete card details based on a mobile number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
        417: {"model": ResponseSchema, "description": "Delete failed"},
    },
)
async def delete_card(
    mobile_number: MobileNumberQuery,
    cards_service: Annotated[CardsService, Depends(get_cards_service)],
) -> ResponseSchema | JSONResponse:
    deleted = await cards_service.delete_card(mobile_number)
    return status_response(deleted, constants.MESSAGE_417_DELETE)


@cards_router.get(
    "/contact-info",
    response_model=ContactInfoSchema,
    summary="Get Contact Info",
    description="Contact info details that can be reached out in case of any issues",
)
async def get_contact_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ContactInfoSchema:
    return ContactInfoSchema.model_validate(settings.cards.model_dump())


@cards_router.get(
    "/build-info",
    response_model=str,
    summary="Get Build Information",
    description="Build version deployed for the cards service",
)
async def get_build_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    return settings.build_version
