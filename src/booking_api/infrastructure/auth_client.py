"""AuthApiClient wraps the /auth/ endpoints of the booking API."""

from __future__ import annotations

import logging
import re
from typing import Any

from booking_api.application.dtos import AuthDTO, TokenDTO
from booking_api.infrastructure.http.errors import (
    InvalidTokenError,
    MissingSetCookieError,
    TokenNotFoundError,
)
from booking_api.infrastructure.http.http_client import (
    ApiResponse,
    HttpMethod,
    RequestOptions,
)
from booking_api.infrastructure.http.request_executor import RequestExecutor
from booking_api.infrastructure.http.statuses import ApiStatus
from booking_api.testing.assertions import assert_status_code

logger = logging.getLogger(__name__)

AUTH_BASE_PATH = "/auth/"
TOKEN_COOKIE_PATTERN = re.compile(r"token=([^;]+)")


def extract_token(response: ApiResponse[Any]) -> str:
    """Pull the session token out of a login response's Set-Cookie header.

    Raises:
        MissingSetCookieError: If the response has no Set-Cookie header.
        TokenNotFoundError: If the header does not contain ``token=<value>``.
    """
    set_cookie = response.headers.get("set-cookie")
    if isinstance(set_cookie, list):
        set_cookie = set_cookie[0] if set_cookie else None
    if not set_cookie:
        logger.warning("Login answered %s without a Set-Cookie header", response.status)
        raise MissingSetCookieError(
            f"Login response (status {response.status}) has no Set-Cookie header"
        )

    match = TOKEN_COOKIE_PATTERN.search(set_cookie)
    if match is None:
        raise TokenNotFoundError(
            f"Set-Cookie header does not carry a token: {set_cookie!r}"
        )
    return match.group(1)


class AuthApiClient:
    """Client for login, token validation and logout."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    @property
    def base_path(self) -> str:
        return self._executor.base_path

    async def login_raw(self, auth: AuthDTO) -> ApiResponse[Any]:
        return await self._executor.request(
            f"{self.base_path}login",
            RequestOptions(method=HttpMethod.POST, body=auth),
        )

    async def login(self, auth: AuthDTO) -> ApiResponse[Any]:
        """
        Log in and return the whole response.

        The token travels in the Set-Cookie header, so callers need the
        envelope rather than the body.
        """
        response = await self.login_raw(auth)
        assert_status_code(response, ApiStatus.SUCCESSFUL_200)
        return response

    async def login_and_return_token(self, auth: AuthDTO) -> str:
        """Log in and return the bare token value from the session cookie."""
        response = await self.login(auth)
        token = extract_token(response)
        logger.info("Logged in as %s", auth.username)
        return token

    async def validate_token_raw(self, token: str) -> ApiResponse[Any]:
        return await self._executor.request(
            f"{self.base_path}validate",
            RequestOptions(method=HttpMethod.POST, body=TokenDTO(token=token)),
        )

    async def validate_token(self, token: str) -> str:
        """
        Ask the server whether ``token`` is still valid.

        Returns:
            The token echoed back by the server

        Raises:
            InvalidTokenError: If the payload has no ``token`` field
        """
        response = await self.validate_token_raw(token)
        data = response.data
        if not isinstance(data, dict) or "token" not in data:
            raise InvalidTokenError(
                f"Token validation returned no token (status {response.status}): "
                f"{data!r}"
            )
        return data["token"]

    async def clear_token(self, token: str) -> ApiResponse[Any]:
        """Log out, invalidating ``token``. No status check is made."""
        return await self._executor.request(
            f"{self.base_path}logout",
            RequestOptions(method=HttpMethod.POST, body=TokenDTO(token=token)),
        )
