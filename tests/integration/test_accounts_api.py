"""
Integration tests for the accounts API.

Tests the full request/response cycle against an in-memory database.
"""

import pytest
from httpx import AsyncClient

from src.core import constants


class TestCreateAccount:
    """Tests for POST /api/accounts/create."""

    @pytest.mark.asyncio
    async def test_create_returns_201(self, client: AsyncClient, customer_request: dict):
        response = await client.post("/api/accounts/create", json=customer_request)

        assert response.status_code == 201
        assert response.json() == {
            "statusCode": "201",
            "statusMsg": "Account created successfully",
        }

    @pytest.mark.asyncio
    async def test_create_opens_default_savings_account(
        self, client: AsyncClient, customer_request: dict
    ):
        await client.post("/api/accounts/create", json=customer_request)

        response = await client.get(
            "/api/accounts/fetch",
            params={"mobileNumber": customer_request["mobileNumber"]},
        )
        data = response.json()

        assert data["name"] == customer_request["name"]
        assert data["email"] == customer_request["email"]
        assert data["accountsDto"]["accountType"] == constants.SAVINGS
        assert data["accountsDto"]["branchAddress"] == constants.BRANCH_ADDRESS
        assert 1_000_000_000 <= data["accountsDto"]["accountNumber"] < 1_900_000_000

    @pytest.mark.asyncio
    async def test_duplicate_mobile_number_returns_400(
        self, client: AsyncClient, created_customer: dict, customer_request: dict
    ):
        response = await client.post("/api/accounts/create", json=customer_request)

        assert response.status_code == 400
        data = response.json()
        assert data["apiPath"] == "uri=/api/accounts/create"
        assert data["errorCode"] == "BAD_REQUEST"
        assert data["errorMessage"] == (
            "Customer already registered with given mobileNumber 4354437687"
        )
        assert "errorTime" in data

    @pytest.mark.asyncio
    async def test_duplicate_create_leaves_record_unchanged(
        self, client: AsyncClient, created_customer: dict, customer_request: dict
    ):
        duplicate = {**customer_request, "name": "Someone Else", "email": "else@eazybank.com"}

        response = await client.post("/api/accounts/create", json=duplicate)
        assert response.status_code == 400

        fetched = await client.get(
            "/api/accounts/fetch",
            params={"mobileNumber": customer_request["mobileNumber"]},
        )
        assert fetched.json() == created_customer

    @pytest.mark.asyncio
    async def test_invalid_fields_return_field_map(self, client: AsyncClient):
        response = await client.post(
            "/api/accounts/create",
            json={"name": "Ann", "email": "not-an-email", "mobileNumber": "12345"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "name": "The length of the customer name should be between 5 and 30",
            "email": "Email address should be a valid value",
            "mobileNumber": "Mobile number must be 10 digits",
        }

    @pytest.mark.asyncio
    async def test_missing_mobile_number_is_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/accounts/create",
            json={"name": "Madan Reddy", "email": "madan@eazybank.com"},
        )

        assert response.status_code == 400
        assert response.json() == {"mobileNumber": "Mobile number must be 10 digits"}

    @pytest.mark.asyncio
    async def test_wrong_body_type_is_rejected(self, client: AsyncClient):
        response = await client.post("/api/accounts/create", json=["not", "an", "object"])

        assert response.status_code == 400
        assert isinstance(response.json(), dict)


class TestFetchAccount:
    """Tests for GET /api/accounts/fetch."""

    @pytest.mark.asyncio
    async def test_fetch_existing(self, client: AsyncClient, created_customer: dict):
        assert created_customer["mobileNumber"] == "4354437687"
        assert created_customer["accountsDto"] is not None

    @pytest.mark.asyncio
    async def test_fetch_unknown_returns_404(self, client: AsyncClient, mobile_number: str):
        response = await client.get(
            "/api/accounts/fetch", params={"mobileNumber": mobile_number}
        )

        assert response.status_code == 404
        data = response.json()
        assert data["errorCode"] == "NOT_FOUND"
        assert data["apiPath"] == "uri=/api/accounts/fetch"
        assert data["errorMessage"] == (
            "Customer not found with the given input data "
            "mobileNumber : '9876543210'"
        )

    @pytest.mark.asyncio
    async def test_fetch_malformed_mobile_number(self, client: AsyncClient):
        response = await client.get("/api/accounts/fetch", params={"mobileNumber": "12ab"})

        assert response.status_code == 400
        assert response.json() == {"mobileNumber": "Mobile number must be 10 digits"}

    @pytest.mark.asyncio
    async def test_fetch_without_mobile_number(self, client: AsyncClient):
        response = await client.get("/api/accounts/fetch")

        assert response.status_code == 400
        assert "mobileNumber" in response.json()


class TestUpdateAccount:
    """Tests for PUT /api/accounts/update."""

    @pytest.mark.asyncio
    async def test_update_changes_customer_and_account(
        self, client: AsyncClient, created_customer: dict
    ):
        body = {
            **created_customer,
            "name": "Madan Kumar Reddy",
            "accountsDto": {
                **created_customer["accountsDto"],
                "accountType": "Current",
                "branchAddress": "1 Park Avenue, New York",
            },
        }

        response = await client.put("/api/accounts/update", json=body)

        assert response.status_code == 200
        assert response.json() == {
            "statusCode": "200",
            "statusMsg": "Request processed successfully",
        }

        fetched = (
            await client.get(
                "/api/accounts/fetch",
                params={"mobileNumber": created_customer["mobileNumber"]},
            )
        ).json()
        assert fetched["name"] == "Madan Kumar Reddy"
        assert fetched["accountsDto"]["accountType"] == "Current"
        assert fetched["accountsDto"]["branchAddress"] == "1 Park Avenue, New York"

    @pytest.mark.asyncio
    async def test_update_without_account_details_returns_417(
        self, client: AsyncClient, created_customer: dict
    ):
        body = {**created_customer, "accountsDto": None}

        response = await client.put("/api/accounts/update", json=body)

        assert response.status_code == 417
        assert response.json() == {
            "statusCode": "417",
            "statusMsg": constants.MESSAGE_417_UPDATE,
        }

    @pytest.mark.asyncio
    async def test_update_to_taken_mobile_number_returns_400(
        self, client: AsyncClient, created_customer: dict, mobile_number: str
    ):
        other = {"name": "Other Customer", "email": "other@eazybank.com", "mobileNumber": mobile_number}
        assert (await client.post("/api/accounts/create", json=other)).status_code == 201

        body = {**created_customer, "mobileNumber": mobile_number}
        response = await client.put("/api/accounts/update", json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["errorCode"] == "BAD_REQUEST"
        assert data["errorMessage"] == (
            f"Customer already registered with given mobileNumber {mobile_number}"
        )

        fetched = await client.get(
            "/api/accounts/fetch",
            params={"mobileNumber": created_customer["mobileNumber"]},
        )
        assert fetched.json() == created_customer

    @pytest.mark.asyncio
    async def test_update_unknown_account_returns_404(
        self, client: AsyncClient, customer_request: dict
    ):
        body = {
            **customer_request,
            "accountsDto": {
                "accountNumber": 1234567890,
                "accountType": "Savings",
                "branchAddress": "123 Main Street, New York",
            },
        }

        response = await client.put("/api/accounts/update", json=body)

        assert response.status_code == 404
        assert response.json()["errorMessage"] == (
            "Account not found with the given input data "
            "AccountNumber : '1234567890'"
        )

    @pytest.mark.asyncio
    async def test_update_validates_nested_account(
        self, client: AsyncClient, customer_request: dict
    ):
        body = {
            **customer_request,
            "accountsDto": {"accountNumber": 123, "accountType": "", "branchAddress": "x"},
        }

        response = await client.put("/api/accounts/update", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "accountsDto.accountNumber": "AccountNumber must be 10 digits",
            "accountsDto.accountType": "AccountType can not be a null or empty",
        }


class TestDeleteAccount:
    """Tests for DELETE /api/accounts/delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_customer(
        self, client: AsyncClient, created_customer: dict
    ):
        mobile = created_customer["mobileNumber"]

        response = await client.delete("/api/accounts/delete", params={"mobileNumber": mobile})

        assert response.status_code == 200
        assert response.json()["statusMsg"] == constants.MESSAGE_200

        fetched = await client.get("/api/accounts/fetch", params={"mobileNumber": mobile})
        assert fetched.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_allows_recreate(
        self, client: AsyncClient, created_customer: dict, customer_request: dict
    ):
        await client.delete(
            "/api/accounts/delete",
            params={"mobileNumber": created_customer["mobileNumber"]},
        )

        response = await client.post("/api/accounts/create", json=customer_request)

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_404(self, client: AsyncClient, mobile_number: str):
        response = await client.delete(
            "/api/accounts/delete", params={"mobileNumber": mobile_number}
        )

        assert response.status_code == 404
        assert response.json()["errorCode"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_twice_second_is_404(
        self, client: AsyncClient, created_customer: dict
    ):
        params = {"mobileNumber": created_customer["mobileNumber"]}

        first = await client.delete("/api/accounts/delete", params=params)
        second = await client.delete("/api/accounts/delete", params=params)

        assert first.status_code == 200
        assert second.status_code == 404
        assert second.json()["errorCode"] == "NOT_FOUND"
