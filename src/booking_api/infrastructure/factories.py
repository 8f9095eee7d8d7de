"""Build API clients bound to a shared transport.

Mirrors how tests obtain clients: an anonymous rooms client, an auth client,
and a rooms client that carries a session cookie obtained by logging in.
"""

from __future__ import annotations

from typing import Optional

from booking_api.application.dtos import AuthDTO
from booking_api.envs.booking_env import Settings
from booking_api.infrastructure.auth_client import AUTH_BASE_PATH, AuthApiClient
from booking_api.infrastructure.http.http_client import AsyncHttpClient
from booking_api.infrastructure.http.request_executor import (
    RequestConfig,
    RequestExecutor,
)
from booking_api.infrastructure.rooms_client import ROOMS_BASE_PATH, RoomsApiClient

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"


def default_headers(
    api_version: str = "1.0",
    *,
    cookies: Optional[str] = None,
    token: Optional[str] = None,
) -> dict[str, str]:
    """Headers every request carries, plus Cookie/Authorization when given."""
    headers = {
        "X-api-version": api_version,
        "content-type": JSON_CONTENT_TYPE,
    }
    if cookies:
        headers["Cookie"] = cookies
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def create_rooms_api_client(
    transport: AsyncHttpClient,
    settings: Settings,
    cookies: Optional[str] = None,
    token: Optional[str] = None,
) -> RoomsApiClient:
    config = RequestConfig(
        base_url=settings.base_url,
        headers=default_headers(settings.api_version, cookies=cookies, token=token),
    )
    return RoomsApiClient(RequestExecutor(config, transport, ROOMS_BASE_PATH))


def create_auth_api_client(
    transport: AsyncHttpClient,
    settings: Settings,
    cookies: Optional[str] = None,
    token: Optional[str] = None,
) -> AuthApiClient:
    config = RequestConfig(
        base_url=settings.base_url,
        headers=default_headers(settings.api_version, cookies=cookies, token=token),
    )
    return AuthApiClient(RequestExecutor(config, transport, AUTH_BASE_PATH))


async def login_user_and_get_token(
    transport: AsyncHttpClient, settings: Settings, user: AuthDTO
) -> str:
    auth_client = create_auth_api_client(transport, settings)
    token = await auth_client.login_and_return_token(user)
    return token.removeprefix("token=")


async def create_authenticated_rooms_api_client(
    transport: AsyncHttpClient, settings: Settings
) -> RoomsApiClient:
    """
    Log in with the configured credentials and return a rooms client that
    sends the session cookie on every request.

    The token is fetched once; it is not renewed if it expires.
    """
    user = AuthDTO(username=settings.username, password=settings.password)
    token = await login_user_and_get_token(transport, settings, user)
    return create_rooms_api_client(transport, settings, cookies=f"token={token}")
