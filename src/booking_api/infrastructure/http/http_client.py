from __future__ import annotations

import json
import logging
from http.cookiejar import CookieJar, DefaultCookiePolicy
from dataclasses import dataclass, field
from enum import Enum
from types import TracebackType
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryValue = Union[str, int, float, bool, None]
HeaderValue = Union[str, list[str]]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class RequestOptions:
    """Per-request settings layered on top of a client's configuration."""

    method: HttpMethod = HttpMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    params: Mapping[str, QueryValue] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Normalized view of an HTTP response.

    ``data`` is the parsed JSON body, or ``None`` when the body is empty or is
    not valid JSON. Header names are lower-case; a header sent more than once
    (typically ``set-cookie``) is kept as a list.
    """

    status: int
    status_text: str
    data: Optional[T]
    headers: Mapping[str, HeaderValue]


def serialize_body(body: Any) -> str:
    """Serialize a request body to a JSON string."""
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True)
    return json.dumps(body)


def build_query_params(params: Mapping[str, QueryValue]) -> dict[str, str]:
    """Drop ``None`` values and stringify the rest."""
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


def normalize_headers(headers: httpx.Headers) -> dict[str, HeaderValue]:
    normalized: dict[str, HeaderValue] = {}
    for key, value in headers.multi_items():
        key = key.lower()
        existing = normalized.get(key)
        if existing is None:
            normalized[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            normalized[key] = [existing, value]
    return normalized


def no_cookie_jar() -> CookieJar:
    """A cookie jar that refuses to store anything."""
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


def parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.debug(
            "Response body (status %s) is not JSON, treating as empty",
            response.status_code,
        )
        return None


class AsyncHttpClient:
    """Thin asynchronous HTTP client wrapper around httpx.AsyncClient.

    - Performs exactly one request per call, no retries.
    - Serializes bodies to JSON and skips ``None`` query parameters.
    - Returns an ``ApiResponse`` whatever the status code.
    - Keeps no cookies between requests; send them as headers.

    A caller-supplied ``http_client`` is used as is and left open on
    ``aclose()``. Build it with ``cookies=no_cookie_jar()`` to get the same
    cookie behaviour as an owned client.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if http_client is not None:
            self._client = http_client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(timeout=timeout, cookies=no_cookie_jar())
            self._owns_client = True

    async def request(
        self, url: str, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        options = options or RequestOptions()
        content = serialize_body(options.body) if options.body is not None else None
        method = HttpMethod(options.method).value

        logger.debug("%s %s", method, url)
        resp = await self._client.request(
            method,
            url,
            headers=dict(options.headers),
            params=build_query_params(options.params),
            content=content,
        )
        logger.debug("%s %s -> %s", method, url, resp.status_code)

        return ApiResponse(
            status=resp.status_code,
            status_text=resp.reason_phrase,
            data=parse_body(resp),
            headers=normalize_headers(resp.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
