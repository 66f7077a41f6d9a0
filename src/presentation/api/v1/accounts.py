"""Accounts API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.services import AccountsService
from src.core import constants
from src.core.config import Settings, get_settings
from src.core.dependencies import get_accounts_service
from src.presentation.schemas import (
    ContactInfoSchema,
    CustomerSchema,
    ErrorResponseSchema,
    ResponseSchema,
    ValidationErrorSchema,
)
from .common import MobileNumberQuery, status_response

accounts_router = APIRouter(
    prefix="/accounts",
    responses={
        400: {"model": ValidationErrorSchema, "description": "Invalid request"},
        500: {"model": ErrorResponseSchema, "description": "Internal server error"},
    },
)


@accounts_router.post(
    "/create",
    response_model=ResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create Account",
    description="Create a new customer and account inside EazyBank",
    responses={
        201: {"description": "Account created successfully"},
    },
)
async def create_account(
    customer: CustomerSchema,
    accounts_service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> ResponseSchema:
    await accounts_service.create_account(customer.to_dto())

    return ResponseSchema(
        status_code=constants.STATUS_201,
        status_msg="Account created successfully",
    )


@accounts_router.get(
    "/fetch",
    response_model=CustomerSchema,
    summary="Fetch Account Details",
    description="Fetch customer and account details based on a mobile number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer or account not found"},
    },
)
async def fetch_account(
    mobile_number: MobileNumberQuery,
    accounts_service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> CustomerSchema:
    customer = await accounts_service.fetch_account(mobile_number)
    return CustomerSchema.from_dto(customer)


@accounts_router.put(
    "/update",
    response_model=ResponseSchema,
    summary="Update Account Details",
    description="Update customer and account details based on an account number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
        417: {"model": ResponseSchema, "description": "Update failed"},
    },
)
async def update_account(
    customer: CustomerSchema,
    accounts_service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> ResponseSchema | JSONResponse:
    updated = await accounts_service.update_account(customer.to_dto())
    return status_response(updated, constants.MESSAGE_417_UPDATE)


@accounts_router.delete(
    "/delete",
    response_model=ResponseSchema,
    summary="Delete Account Details",
    description="Delete customer and account details based on a mobile number",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
        417: {"model": ResponseSchema, "description": "Delete failed"},
    },
)
async def delete_account(
    mobile_number: MobileNumberQuery,
    accounts_service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> ResponseSchema | JSONResponse:
    deleted = await accounts_service.delete_account(mobile_number)
    return status_response(deleted, constants.MESSAGE_417_DELETE)


@accounts_router.get(
    "/contact-info",
    response_model=ContactInfoSchema,
    summary="Get Contact Info",
    description="Contact info details that can be reached out in case of any issues",
)
async def get_contact_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ContactInfoSchema:
    return ContactInfoSchema.model_validate(settings.accounts.model_dump())


@accounts_router.get(
    "/build-info",
    response_model=str,
    summary="Get Build Information",
    description="Build version deployed for the accounts service",
)
async def get_build_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    return settings.build_version
