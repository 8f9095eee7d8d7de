from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Optional

from booking_api.infrastructure.http.errors import HttpStatusError, MissingDataError
from booking_api.infrastructure.http.http_client import (
    ApiResponse,
    AsyncHttpClient,
    RequestOptions,
)

logger = logging.getLogger(__name__)


def accept_any_status(status: int) -> bool:
    return True


def require_payload(response: ApiResponse[Any]) -> Any:
    """Return the parsed body, raising ``MissingDataError`` if there is none."""
    if response.data is None:
        raise MissingDataError(
            f"Expected a JSON body with status {response.status}, got none"
        )
    return response.data


@dataclass(frozen=True)
class RequestConfig:
    """Configuration shared by every request a client sends."""

    base_url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    validate_status: Callable[[int], bool] = accept_any_status

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("RequestConfig requires a non-empty base_url.")
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "headers", dict(self.headers))


def merge_headers(
    defaults: Mapping[str, str], overrides: Mapping[str, str]
) -> dict[str, str]:
    """Merge header mappings, ``overrides`` winning on case-insensitive clashes."""
    merged = {key: value for key, value in defaults.items()}
    for key, value in overrides.items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


class RequestExecutor:
    """Builds requests for one API resource and hands them to the transport.

    Resource clients hold an executor instead of subclassing it. The executor
    keeps no session state: cookies are only sent when present in headers.
    """

    def __init__(
        self,
        config: RequestConfig,
        transport: AsyncHttpClient,
        base_path: str,
    ) -> None:
        self.config = config
        self.base_path = base_path
        self._transport = transport

    def url_for(self, endpoint: str) -> str:
        return f"{self.config.base_url.rstrip('/')}{endpoint}"

    async def request(
        self, endpoint: str, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        """Send ``options`` to ``endpoint`` resolved against the base URL.

        Args:
            endpoint: Path starting with the resource prefix, e.g. ``/room/1``
            options: Method, headers, body and query parameters

        Returns:
            The normalized response envelope.

        Raises:
            HttpStatusError: If the configured status policy rejects the status.
        """
        options = options or RequestOptions()
        options = replace(
            options, headers=merge_headers(self.config.headers, options.headers)
        )
        response = await self._transport.request(self.url_for(endpoint), options)

        if not self.config.validate_status(response.status):
            logger.debug(
                "Status %s rejected by policy for %s", response.status, endpoint
            )
            raise HttpStatusError(response)
        return response
