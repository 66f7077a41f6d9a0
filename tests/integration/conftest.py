"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database shared by the repositories of one test
- Test client for the FastAPI app with repository overrides
- Request bodies for customers, loans and cards
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.config import ContactInfo, Settings, get_settings
from src.core.dependencies import (
    get_account_repository,
    get_card_repository,
    get_customer_repository,
    get_loan_repository,
)
from src.infrastructure.database import Base
from src.infrastructure.repositories import (
    PostgresAccountRepository,
    PostgresCardRepository,
    PostgresCustomerRepository,
    PostgresLoanRepository,
)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with known contact info, independent of the environment."""
    return Settings(
        _env_file=None,
        build_version="3.0",
        loans=ContactInfo(
            message="Welcome to the loans test APIs",
            contact_details={"name": "Loans Tester", "email": "loans@test.com"},
            on_call_support=["(555) 000-0001", "(555) 000-0002"],
        ),
        cards=ContactInfo(
            message="Welcome to the cards test APIs",
            contact_details={"name": "Cards Tester", "email": "cards@test.com"},
            on_call_support=["(555) 000-0003"],
        ),
    )


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    test_session: AsyncSession,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with overridden dependencies.

    This client:
    - Uses an in-memory SQLite database for every repository
    - Serves contact info from ``test_settings``
    """
    async def override_get_customer_repository():
        return PostgresCustomerRepository(test_session)

    async def override_get_account_repository():
        return PostgresAccountRepository(test_session)

    async def override_get_loan_repository():
        return PostgresLoanRepository(test_session)

    async def override_get_card_repository():
        return PostgresCardRepository(test_session)

    app.dependency_overrides[get_customer_repository] = override_get_customer_repository
    app.dependency_overrides[get_account_repository] = override_get_account_repository
    app.dependency_overrides[get_loan_repository] = override_get_loan_repository
    app.dependency_overrides[get_card_repository] = override_get_card_repository
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_request() -> dict:
    """Valid create-account body."""
    return {
        "name": "Madan Reddy",
        "email": "madan@eazybank.com",
        "mobileNumber": "4354437687",
    }


@pytest_asyncio.fixture
async def created_customer(client: AsyncClient, customer_request: dict) -> dict:
    """Create a customer and return its fetched representation."""
    response = await client.post("/api/accounts/create", json=customer_request)
    assert response.status_code == 201

    fetched = await client.get(
        "/api/accounts/fetch",
        params={"mobileNumber": customer_request["mobileNumber"]},
    )
    assert fetched.status_code == 200
    return fetched.json()


@pytest.fixture
def mobile_number() -> str:
    return "9876543210"
