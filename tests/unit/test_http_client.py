"""Unit tests for the AsyncHttpClient transport."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from booking_api.application.dtos import Room
from booking_api.infrastructure.http.http_client import (
    AsyncHttpClient,
    HttpMethod,
    RequestOptions,
    build_query_params,
    normalize_headers,
    serialize_body,
)

URL = "https://booking.test/api/room/"


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> AsyncHttpClient:
    return AsyncHttpClient(
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


def test_build_query_params_skips_none_and_stringifies() -> None:
    params = build_query_params(
        {"roomName": "Suite", "type": None, "accessible": False, "page": 2}
    )
    assert params == {"roomName": "Suite", "accessible": "false", "page": "2"}


def test_serialize_body_uses_wire_names_and_drops_none() -> None:
    room = Room(room_name="Suite 101", type="Double", accessible=True, room_price=100)
    assert json.loads(serialize_body(room)) == {
        "roomName": "Suite 101",
        "type": "Double",
        "accessible": True,
        "roomPrice": 100,
    }


def test_serialize_body_plain_mapping() -> None:
    assert serialize_body({"token": "abc"}) == '{"token": "abc"}'


def test_normalize_headers_keeps_repeated_headers_as_list() -> None:
    headers = httpx.Headers(
        [
            ("Set-Cookie", "token=one; Path=/"),
            ("Set-Cookie", "theme=dark"),
            ("Content-Type", "application/json"),
        ]
    )
    assert normalize_headers(headers) == {
        "set-cookie": ["token=one; Path=/", "theme=dark"],
        "content-type": "application/json",
    }


@pytest.mark.asyncio
async def test_request_sends_method_headers_params_and_json_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"ok": True})

    async with make_client(handler) as client:
        response = await client.request(
            URL,
            RequestOptions(
                method=HttpMethod.POST,
                headers={"X-api-version": "1.0"},
                body={"roomName": "Suite"},
                params={"accessible": True, "type": None},
            ),
        )

    request = seen[0]
    assert request.method == "POST"
    assert request.headers["x-api-version"] == "1.0"
    assert dict(request.url.params) == {"accessible": "true"}
    assert json.loads(request.content) == {"roomName": "Suite"}
    assert response.status == 201
    assert response.status_text == "Created"
    assert response.data == {"ok": True}


@pytest.mark.asyncio
async def test_request_without_body_sends_no_content() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    async with make_client(handler) as client:
        await client.request(URL)

    assert seen[0].method == "GET"
    assert seen[0].content == b""


@pytest.mark.asyncio
async def test_empty_body_parses_to_none() -> None:
    async with make_client(lambda request: httpx.Response(202)) as client:
        response = await client.request(URL, RequestOptions(method=HttpMethod.DELETE))

    assert response.status == 202
    assert response.data is None


@pytest.mark.asyncio
async def test_malformed_json_parses_to_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, text="{not json", headers={"content-type": "application/json"}
        )

    async with make_client(handler) as client:
        response = await client.request(URL)

    assert response.status == 200
    assert response.data is None
    assert response.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    async with make_client(handler) as client:
        response = await client.request(URL)

    assert response.status == 500
    assert response.status_text == "Internal Server Error"
    assert response.data == {"error": "boom"}


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(httpx.ConnectError):
            await client.request(URL)

    # No retries
    assert calls == 1


@pytest.mark.asyncio
async def test_aclose_leaves_shared_client_open() -> None:
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200))
    )
    client = AsyncHttpClient(http_client=http_client)

    await client.aclose()

    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_aclose_closes_owned_client() -> None:
    client = AsyncHttpClient(timeout=5.0)

    await client.aclose()

    # A closed httpx client refuses to send before touching the network
    with pytest.raises(RuntimeError, match="closed"):
        await client.request(URL)


@pytest.mark.asyncio
async def test_shared_client_cookie_jar_is_left_alone() -> None:
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200))
    ) as http_client:
        jar = http_client.cookies.jar

        AsyncHttpClient(http_client=http_client)

        assert http_client.cookies.jar is jar
