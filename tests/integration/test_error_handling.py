"""
Integration tests for error normalization across the HTTP layer.

Covers the validation map, domain error payloads, the 500 fallback
and the request ID header.
"""

from datetime import datetime

import pytest
from httpx import AsyncClient

from src.main import app
from src.application.dto import CustomerDTO
from src.application.services import AccountsService
from src.core.dependencies import get_accounts_service


class ExplodingAccountsService(AccountsService):
    """Accounts service whose every operation fails unexpectedly."""

    async def create_account(self, customer: CustomerDTO) -> None:
        raise RuntimeError("database connection lost")

    async def fetch_account(self, mobile_number: str) -> CustomerDTO:
        raise RuntimeError("database connection lost")

    async def update_account(self, customer: CustomerDTO) -> bool:
        raise RuntimeError("database connection lost")

    async def delete_account(self, mobile_number: str) -> bool:
        raise RuntimeError("database connection lost")


@pytest.fixture
def exploding_service(client: AsyncClient):
    app.dependency_overrides[get_accounts_service] = lambda: ExplodingAccountsService()
    yield
    app.dependency_overrides.pop(get_accounts_service, None)


class TestValidationMap:
    """Validation failures produce a flat field -> message map."""

    @pytest.mark.asyncio
    async def test_all_invalid_fields_reported(self, client: AsyncClient):
        response = await client.post(
            "/api/accounts/create",
            json={"name": "", "mobileNumber": "12345", "email": "bad"},
        )

        assert response.status_code == 400
        data = response.json()
        assert set(data) == {"name", "email", "mobileNumber"}
        # name fails both rules; the later one wins
        assert data["name"] == "The length of the customer name should be between 5 and 30"
        assert data["email"] == "Email address should be a valid value"
        assert data["mobileNumber"] == "Mobile number must be 10 digits"

    @pytest.mark.asyncio
    async def test_numeric_mobile_number_still_reports_other_fields(self, client: AsyncClient):
        response = await client.post(
            "/api/accounts/create",
            json={"name": "", "email": "bad", "mobileNumber": 12345},
        )

        assert response.status_code == 400
        assert response.json() == {
            "name": "The length of the customer name should be between 5 and 30",
            "email": "Email address should be a valid value",
            "mobileNumber": "Mobile number must be 10 digits",
        }

    @pytest.mark.asyncio
    async def test_numeric_mobile_number_binds_as_text(self, client: AsyncClient):
        response = await client.post(
            "/api/accounts/create",
            json={"name": "Madan Reddy", "email": "madan@eazybank.com", "mobileNumber": 4354437687},
        )

        assert response.status_code == 201
        fetched = await client.get("/api/accounts/fetch", params={"mobileNumber": "4354437687"})
        assert fetched.json()["mobileNumber"] == "4354437687"

    @pytest.mark.asyncio
    async def test_malformed_json_keyed_by_body(self, client: AsyncClient):
        response = await client.post(
            "/api/accounts/create",
            content=b'{"name": "abc",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert list(response.json()) == ["body"]

    @pytest.mark.asyncio
    async def test_validation_failure_has_no_error_envelope(self, client: AsyncClient):
        response = await client.get("/api/loans/fetch", params={"mobileNumber": "abc"})

        assert response.status_code == 400
        assert "errorCode" not in response.json()

    @pytest.mark.asyncio
    async def test_binding_error_reported_by_field(self, client: AsyncClient):
        response = await client.put(
            "/api/cards/update",
            json={"mobileNumber": "9876543210", "totalLimit": {"nested": True}},
        )

        assert response.status_code == 400
        assert list(response.json()) == ["totalLimit"]


class TestErrorPayload:
    """Domain errors produce the error envelope."""

    @pytest.mark.asyncio
    async def test_not_found_envelope(self, client: AsyncClient, mobile_number: str):
        response = await client.get("/api/cards/fetch", params={"mobileNumber": mobile_number})

        assert response.status_code == 404
        data = response.json()
        assert set(data) == {"apiPath", "errorCode", "errorMessage", "errorTime"}
        assert data["apiPath"] == "uri=/api/cards/fetch"
        assert datetime.fromisoformat(data["errorTime"].replace("Z", "+00:00"))


class TestUnexpectedErrors:
    """Anything unmapped becomes a 500 envelope."""

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_500(
        self, client: AsyncClient, exploding_service, mobile_number: str
    ):
        response = await client.get(
            "/api/accounts/fetch", params={"mobileNumber": mobile_number}
        )

        assert response.status_code == 500
        data = response.json()
        assert data["errorCode"] == "INTERNAL_SERVER_ERROR"
        assert data["errorMessage"] == "database connection lost"
        assert data["apiPath"] == "uri=/api/accounts/fetch"

    @pytest.mark.asyncio
    async def test_500_still_carries_request_id(
        self, client: AsyncClient, exploding_service, mobile_number: str
    ):
        response = await client.delete(
            "/api/accounts/delete",
            params={"mobileNumber": mobile_number},
            headers={"X-Request-ID": "req-500"},
        )

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-500"


class TestRequestId:
    """X-Request-ID is echoed or generated."""

    @pytest.mark.asyncio
    async def test_echoes_incoming_request_id(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers.get("X-Request-ID")
