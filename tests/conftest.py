"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.cb_account.infrastructure.mock_store import MockCoinStore
from src.main import create_app


@pytest.fixture
def store() -> MockCoinStore:
    """Reference dataset without the simulated latency."""
    return MockCoinStore(latency_seconds=0)


@pytest.fixture
def app(store: MockCoinStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
