"""Shared Pydantic schemas: base model, status and error payloads."""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class ResponseSchema(CamelModel):
    """Status payload returned by create, update and delete endpoints."""

    status_code: str = Field(..., description="Status code", examples=["201"])
    status_msg: str = Field(
        ...,
        description="Status message",
        examples=["Account created successfully"],
    )


class ErrorResponseSchema(CamelModel):
    """Error payload for domain and unexpected failures."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "apiPath": "uri=/api/accounts/fetch",
                    "errorCode": "NOT_FOUND",
                    "errorMessage": (
                        "Customer not found with the given input data "
                        "mobileNumber : '9999999999'"
                    ),
                    "errorTime": "2026-01-01T10:00:00Z",
                }
            ]
        },
    )

    api_path: str = Field(..., description="API path invoked by the client")
    error_code: str = Field(..., description="HTTP status name", examples=["NOT_FOUND"])
    error_message: str = Field(..., description="Error message")
    error_time: datetime = Field(..., description="Time the error happened")


class ContactInfoSchema(CamelModel):
    """Support contact details for a service."""

    message: str
    contact_details: Dict[str, str]
    on_call_support: List[str]


class ValidationErrorSchema(RootModel[Dict[str, str]]):
    """Field name to violation message, returned with status 400."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "mobileNumber": "Mobile number must be 10 digits",
                    "email": "Email address should be a valid value",
                }
            ]
        }
    )
