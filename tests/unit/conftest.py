"""Point the booking API plugin fixtures at the in-memory API."""

from __future__ import annotations

import pytest

from booking_api.envs.booking_env import Settings
from booking_api.infrastructure.http.http_client import AsyncHttpClient


@pytest.fixture
def booking_settings(fake_settings: Settings) -> Settings:
    return fake_settings


@pytest.fixture
def api_request_context(fake_transport: AsyncHttpClient) -> AsyncHttpClient:
    return fake_transport
