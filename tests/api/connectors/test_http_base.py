"""Testes do HttpClient base (httpx.MockTransport)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError


@pytest.mark.asyncio
async def test_request_merges_default_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = HttpClient(
        HttpClientConfig(default_headers={"X-Client": "admin", "Accept": "text/plain"}),
        transport=httpx.MockTransport(handler),
    )

    response = await client.request(
        "GET", "https://api.test/v1/ping", headers={"Accept": "application/json"}
    )

    assert response.status_code == 200
    assert seen[0].headers["X-Client"] == "admin"
    assert seen[0].headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_put_sends_raw_bytes() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    client = HttpClient(transport=httpx.MockTransport(handler))
    await client.put("https://bucket.test/obj", b"\x89PNG", {"Content-Type": "image/png"})

    assert seen[0].method == "PUT"
    assert seen[0].content == b"\x89PNG"
    assert seen[0].headers["Content-Type"] == "image/png"


@pytest.mark.asyncio
async def test_transport_error_propagates() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = HttpClient(transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.ConnectError):
        await client.request("GET", "https://api.test/v1/ping")


def test_http_error_carries_status() -> None:
    error = HttpError("upload_failed", status_code=403)
    assert str(error) == "upload_failed"
    assert error.status_code == 403


def test_config_defaults() -> None:
    config = HttpClient().config
    assert config.timeout_seconds == 30.0
    assert config.verify_ssl is True
    assert config.default_headers == {}
