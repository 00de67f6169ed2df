"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- A deterministic audit clock
- Test clients for the accounts, loans and cards apps
- Request bodies for the common scenarios
"""

from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import create_app
from src.core.dependencies import (
    get_card_repository,
    get_clock,
    get_customer_repository,
    get_loan_repository,
)
from src.infrastructure.database import Base
from src.infrastructure.repositories import (
    SqlAlchemyCardRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyLoanRepository,
)

MOBILE_NUMBER = "9876543210"


# =============================================================================
# Clock
# =============================================================================

class SteppingClock:
    """Clock that moves forward one second every time it is read."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp from a response body."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


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


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


# =============================================================================
# App Client Fixtures
# =============================================================================

@asynccontextmanager
async def _client_for(service: str, overrides: dict) -> AsyncIterator[AsyncClient]:
    app = create_app(service)
    app.dependency_overrides.update(overrides)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def accounts_client(
    test_session: AsyncSession,
    clock: SteppingClock,
) -> AsyncGenerator[AsyncClient, None]:
    """Accounts app backed by the in-memory database."""
    async def override_get_customer_repository():
        return SqlAlchemyCustomerRepository(test_session)

    async with _client_for("accounts", {
        get_customer_repository: override_get_customer_repository,
        get_clock: lambda: clock,
    }) as ac:
        yield ac


@pytest_asyncio.fixture
async def loans_client(
    test_session: AsyncSession,
    clock: SteppingClock,
) -> AsyncGenerator[AsyncClient, None]:
    """Loans app backed by the in-memory database."""
    async def override_get_loan_repository():
        return SqlAlchemyLoanRepository(test_session)

    async with _client_for("loans", {
        get_loan_repository: override_get_loan_repository,
        get_clock: lambda: clock,
    }) as ac:
        yield ac


@pytest_asyncio.fixture
async def cards_client(
    test_session: AsyncSession,
    clock: SteppingClock,
) -> AsyncGenerator[AsyncClient, None]:
    """Cards app backed by the in-memory database."""
    async def override_get_card_repository():
        return SqlAlchemyCardRepository(test_session)

    async with _client_for("cards", {
        get_card_repository: override_get_card_repository,
        get_clock: lambda: clock,
    }) as ac:
        yield ac


@pytest.fixture
def service_clients(accounts_client, loans_client, cards_client) -> dict:
    """All three clients keyed by service name."""
    return {
        "accounts": accounts_client,
        "loans": loans_client,
        "cards": cards_client,
    }


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_request() -> dict:
    """Request body for a new customer."""
    return {
        "name": "A",
        "mobileNumber": MOBILE_NUMBER,
    }


@pytest.fixture
def full_customer_request() -> dict:
    """Request body for a new customer with every optional field."""
    return {
        "name": "Madan Reddy",
        "email": "madan@example.com",
        "mobileNumber": "4354437687",
        "account": {
            "accountType": "Current",
            "branchAddress": "221B Baker Street, London",
        },
    }


@pytest.fixture
def loan_request() -> dict:
    """Request body for a new loan with default terms."""
    return {"mobileNumber": MOBILE_NUMBER}


@pytest.fixture
def card_request() -> dict:
    """Request body for a new card with default terms."""
    return {"mobileNumber": MOBILE_NUMBER}
