"""Helpers shared by the service routers."""

from typing import Annotated

from fastapi import Query, status
from fastapi.responses import JSONResponse

from src.core import constants
from src.presentation.schemas import ResponseSchema

MobileNumberQuery = Annotated[
    str,
    Query(
        alias="mobileNumber",
        description="Mobile number of the customer (10 digits)",
        examples=["9345432123"],
    ),
]


def status_response(succeeded: bool, failure_message: str) -> ResponseSchema | JSONResponse:
    """200 status payload on success, 417 with ``failure_message`` otherwise."""
    if succeeded:
        return ResponseSchema(
            status_code=constants.STATUS_200,
            status_msg=constants.MESSAGE_200,
        )

    return JSONResponse(
        status_code=status.HTTP_417_EXPECTATION_FAILED,
        content=ResponseSchema(
            status_code=constants.STATUS_417,
            status_msg=failure_message,
        ).model_dump(by_alias=True),
    )
