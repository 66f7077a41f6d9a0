"""Loans API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.services import LoansService
from src.core import constants
from src.core.config import Settings, get_settings
from src.core.dependencies import get_loans_service
from src.presentation.schemas import (
    ContactInfoSchema,
    ErrorResponseSchema,
    LoansSchema,
    ResponseSchema,
    ValidationErrorSchema,
)
from .common import MobileNumberQuery, status_response

loans_router = APIRouter(
    prefix="/loans",
    responses={
        400: {"model": ValidationErrorSchema, "description": "Invalid request"},
        500: {"model": ErrorResponseSchema, "description": "Internal server error"},
    },
)


@loans_router.post(
    "/create",
    response_model=ResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create Loan",
    description="Create a new loan inside EazyBank",
    responses={
        201: {"description": "Loan created successfully"},
    },
)
async def create_loan(
    mobile_number: MobileNumberQuery,
    loans_service: Annotated[LoansService, Depends(get_loans_service)],
) -> ResponseSchema:
    await loans_service.create_loan(mobile_number)

    return ResponseSchema(
        status_code=constants.STATUS_201,
        status_msg="Loan created successfully",
    )


@loans_router.get(
    "/fetch",
    response_model=LoansSchema,
    summary="Fetch Loan Details",
    description="Fetch loan details based on a mobile number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
    },
)
async def fetch_loan(
    mobile_number: MobileNumberQuery,
    loans_service: Annotated[LoansService, Depends(get_loans_service)],
) -> LoansSchema:
    loan = await loans_service.fetch_loan(mobile_number)
    return LoansSchema.from_dto(loan)


@loans_router.put(
    "/update",
    response_model=ResponseSchema,
    summary="Update Loan Details",
    description="Update loan details based on a loan number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
        417: {"model": ResponseSchema, "description": "Update failed"},
    },
)
async def update_loan(
    loan: LoansSchema,
    loans_service: Annotated[LoansService, Depends(get_loans_service)],
) -> ResponseSchema | JSONResponse:
    updated = await loans_service.update_loan(loan.to_dto())
    return status_response(updated, constants.MESSAGE_417_UPDATE)


@loans_router.delete(
    "/delete",
    response_model=ResponseSchema,
    summary="Delete Loan Details",
    description="Delete loan details based on a mobile number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
        417: {"model": ResponseSchema, "description": "Delete failed"},
    },
)
async def delete_loan(
    mobile_number: MobileNumberQuery,
    loans_service: Annotated[LoansService, Depends(get_loans_service)],
) -> ResponseSchema | JSONResponse:
    deleted = await loans_service.delete_loan(mobile_number)
    return status_response(deleted, constants.MESSAGE_417_DELETE)


@loans_router.get(
    "/contact-info",
    response_model=ContactInfoSchema,
    summary="Get Contact Info",
    description="Contact info details that can be reached out in case of any issues",
)
async def get_contact_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ContactInfoSchema:
    return ContactInfoSchema.model_validate(settings.loans.model_dump())


@loans_router.get(
    "/build-info",
    response_model=str,
    summary="Get Build Information",
    description="Build version deployed for the loans service",
)
async def get_build_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    return settings.build_version
