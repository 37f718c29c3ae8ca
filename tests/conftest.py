"""Shared test fixtures."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.ec_surveillance.api.dependencies import get_checker
from src.ec_surveillance.application.service import ExcessiveCancellationsChecker
from src.main import app

SAMPLE_TRADES = Path(__file__).resolve().parents[1] / "data" / "trades.csv"


@pytest.fixture
def sample_checker() -> ExcessiveCancellationsChecker:
    """Checker over data/trades.csv: Ape Accountants and Cauldron Cooking are flagged."""
    return ExcessiveCancellationsChecker.from_csv(SAMPLE_TRADES)


@pytest.fixture
async def client(sample_checker: ExcessiveCancellationsChecker) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the sample checker injected in place of the startup load."""
    app.dependency_overrides[get_checker] = lambda: sample_checker
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_checker, None)


@pytest.fixture
async def bare_client() -> AsyncIterator[AsyncClient]:
    """Client without any checker; lifespan does not run under ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
