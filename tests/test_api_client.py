"""
Tests for the Pocket Price HTTP client, using httpx.MockTransport.
"""

from __future__ import annotations

import httpx
import pytest

from pricecatalog.application.exceptions import (
    DecodeError,
    ErrorKind,
    HttpStatusError,
    TransportError,
    UnconfiguredError,
)
from pricecatalog.domain.entities.catalog_config import CatalogConfig
from pricecatalog.infrastructure.config.config_sources import StaticConfigSource
from pricecatalog.infrastructure.pocketprice.api_client import PocketPriceClient


def _client(handler, base_url: str = "https://api.example.test/", api_key: str = "secret") -> PocketPriceClient:
    source = StaticConfigSource(CatalogConfig(base_url=base_url, api_key=api_key))
    return PocketPriceClient(config_source=source, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_request_sends_auth_headers_and_params():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"items": [], "totalPages": 1})

    data = _client(handler).request("/api/collections/services/records", {"page": 2, "perPage": 500})

    assert data == {"items": [], "totalPages": 1}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "api.example.test"
    assert request.url.path == "/api/collections/services/records"
    assert request.url.params["page"] == "2"
    assert request.url.params["perPage"] == "500"
    assert request.headers["X-API-Key"] == "secret"
    assert request.headers["Accept"] == "application/json"


def test_missing_api_key_fails_without_network_call():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    client = _client(handler, api_key="")

    with pytest.raises(UnconfiguredError) as exc_info:
        client.request("/api/health")

    assert exc_info.value.kind is ErrorKind.UNCONFIGURED
    assert calls == []
    assert client.is_configured() is False


def test_missing_base_url_is_unconfigured():
    client = _client(lambda request: httpx.Response(200, json={}), base_url="")

    with pytest.raises(UnconfiguredError):
        client.request("/api/health")


def test_non_2xx_status_maps_to_http_status_error():
    client = _client(lambda request: httpx.Response(404, text="not found"))

    with pytest.raises(HttpStatusError) as exc_info:
        client.request("/api/collections/services/records")

    assert exc_info.value.status_code == 404
    assert exc_info.value.body == "not found"
    assert exc_info.value.kind is ErrorKind.HTTP_STATUS


def test_invalid_json_maps_to_decode_error():
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(DecodeError):
        client.request("/api/health")


def test_transport_failure_maps_to_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(TransportError) as exc_info:
        _client(handler).request("/api/health")

    assert "timed out" in exc_info.value.detail


def test_get_record_and_health_check_endpoints():
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"ok": True})

    client = _client(handler)
    client.get_record("services", "abc123")
    client.health_check()

    assert paths == ["/api/collections/services/records/abc123", "/api/health"]


def test_corrupt_gzip_body_maps_to_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"definitely not gzip")

    with pytest.raises(TransportError):
        _client(handler).request("/api/collections/services/records")


def test_redirect_loop_maps_to_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.TooManyRedirects("redirect loop", request=request)

    with pytest.raises(TransportError) as exc_info:
        _client(handler).request("/api/health")

    assert exc_info.value.kind is ErrorKind.TRANSPORT


def test_malformed_base_url_maps_to_transport_error():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(TransportError):
        _client(handler, base_url="https://exa mple\x00.test").request("/api/health")

    assert calls == []


def test_json_body_with_unicode_is_decoded():
    client = _client(lambda request: httpx.Response(200, json={"title": "Эвакуатор"}))

    assert client.request("/api/health") == {"title": "Эвакуатор"}


def test_record_id_is_escaped_in_path():
    raw_paths: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        raw_paths.append(request.url.raw_path)
        return httpx.Response(200, json={"id": "x"})

    _client(handler).get_record("services", "x/../../health")

    assert raw_paths == [b"/api/collections/services/records/x%2F..%2F..%2Fhealth"]
