"""Test fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import timedelta

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from packleads.config import Config
from packleads.main import create_app


@pytest.fixture
def config() -> Config:
    return Config(
        base_url="https://example.com/",
        contact_rate_limit=3,
        contact_rate_window=timedelta(hours=1),
    )


@pytest_asyncio.fixture
async def app(config: Config) -> AsyncIterator[FastAPI]:
    """Return a configured test application."""
    app = create_app(config)
    async with LifespanManager(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Return an ``httpx.AsyncClient`` configured to talk to the test app."""
    transport = ASGITransport(app=app)
    base_url = "https://example.com/"
    async with AsyncClient(transport=transport, base_url=base_url) as client:
        yield client
