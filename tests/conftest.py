"""Shared pytest fixtures for booking API tests."""

from __future__ import annotations

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from booking_api.envs.booking_env import Settings
from booking_api.infrastructure.http.http_client import AsyncHttpClient, no_cookie_jar

from tests.fixtures import FakeBookingApi

pytest_plugins = ["booking_api.testing.pytest_plugin"]

FAKE_BASE_URL = "https://booking.test/api"


@pytest.fixture
def fake_api() -> FakeBookingApi:
    """A fresh in-memory booking API per test."""
    return FakeBookingApi(username="admin", password="password", prefix="/api")


@pytest.fixture
def fake_settings() -> Settings:
    """Settings pointing at the in-memory booking API."""
    return Settings(base_url=FAKE_BASE_URL, username="admin", password="password")


@pytest_asyncio.fixture
async def fake_transport(
    fake_api: FakeBookingApi,
) -> AsyncGenerator[AsyncHttpClient, None]:
    """Transport whose requests are answered by ``fake_api``."""
    async with httpx.AsyncClient(
        transport=fake_api.transport(), cookies=no_cookie_jar()
    ) as http_client:
        yield AsyncHttpClient(http_client=http_client)
