"""Tests for mpago.client - sync and async API clients."""

import json
import logging
from unittest.mock import MagicMock

import httpx
import pytest
import requests

from mpago.client import AsyncMercadoPagoClient, MercadoPagoClient
from mpago.config import ClientConfig
from mpago.errors import ApiError, TransportError
from mpago.request import ApiRequest
from mpago.schemas.common import SearchOptions
from mpago.schemas.oauth import OAuthResponseBody

TOKEN = "APP_USR-test-token"

UNAUTHORIZED_BODY = {"message": "invalid access token", "error": "unauthorized", "status": 401}


# =============================================================================
# Helpers
# =============================================================================


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses) or [httpx.Response(200, json={})]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        return httpx.Response(response.status_code, content=response.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_client(handler, **config) -> MercadoPagoClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return MercadoPagoClient(ClientConfig(access_token=TOKEN, http_client=http_client, **config))


def make_async_client(handler, **config) -> AsyncMercadoPagoClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncMercadoPagoClient(
        ClientConfig(access_token=TOKEN, http_client=http_client, **config)
    )


def raise_connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


# =============================================================================
# Sync Client Tests
# =============================================================================


class TestMercadoPagoClientInit:
    """Tests for client construction."""

    def test_accepts_access_token_string(self):
        client = MercadoPagoClient(TOKEN)
        assert client.config.access_token == TOKEN
        assert client.base_url == "https://api.mercadopago.com"

    def test_accepts_dict(self):
        client = MercadoPagoClient({"access_token": TOKEN, "base_url": "http://localhost:8080/"})
        assert client.base_url == "http://localhost:8080"

    def test_reads_environment_when_none(self, monkeypatch):
        monkeypatch.setenv("MERCADO_PAGO_ACCESS", "env-token")
        monkeypatch.delenv("MERCADO_PAGO_BASE_URL", raising=False)
        client = MercadoPagoClient()
        assert client.config.access_token == "env-token"

    def test_creates_http_client_lazily(self):
        """Test that no session exists until the first request."""
        client = MercadoPagoClient(TOKEN)
        assert client._http_client is None
        assert isinstance(client._get_client(), httpx.Client)
        client.close()
        assert client._http_client is None


class TestMercadoPagoClientRequest:
    """Tests for MercadoPagoClient.request."""

    def test_sends_bearer_token_to_base_url(self):
        handler = RecordingHandler()
        with make_client(handler) as client:
            client.request("GET", "/v1/payments/1")

        assert handler.last.method == "GET"
        assert str(handler.last.url) == "https://api.mercadopago.com/v1/payments/1"
        assert handler.last.headers["Authorization"] == f"Bearer {TOKEN}"
        assert "X-Platform-ID" not in handler.last.headers

    def test_custom_base_url(self):
        handler = RecordingHandler()
        with make_client(handler, base_url="http://localhost:9000/mp/") as client:
            client.request("GET", "/v1/payments/1")

        assert str(handler.last.url) == "http://localhost:9000/mp/v1/payments/1"

    def test_platform_id_header(self):
        handler = RecordingHandler()
        with make_client(handler, platform_id="my-platform") as client:
            client.request("GET", "/v1/payments/1")

        assert handler.last.headers["X-Platform-ID"] == "my-platform"

    def test_per_request_headers_override(self):
        handler = RecordingHandler()
        with make_client(handler, platform_id="default") as client:
            client.request("POST", "/x", headers={"X-Platform-ID": "override"})

        assert handler.last.headers["X-Platform-ID"] == "override"

    def test_sends_json_and_params(self):
        handler = RecordingHandler()
        with make_client(handler) as client:
            client.request("POST", "/v1/payments", params={"a": "1"}, json={"b": 2})

        assert handler.last.url.params["a"] == "1"
        assert json.loads(handler.last.content) == {"b": 2}

    def test_unauthenticated_request(self):
        """Test that the bearer token is left out when not wanted."""
        handler = RecordingHandler()
        with make_client(handler) as client:
            client.request("POST", "/oauth/token", authenticated=False)

        assert "Authorization" not in handler.last.headers

    def test_empty_token_rejected_for_authenticated_request(self):
        handler = RecordingHandler()
        client = MercadoPagoClient(
            ClientConfig(
                access_token="",
                http_client=httpx.Client(transport=httpx.MockTransport(handler)),
            )
        )

        with pytest.raises(ValueError, match="access_token"):
            client.request("GET", "/v1/payments/1")
        assert handler.requests == []

    def test_transport_failure_raises_transport_error(self):
        with make_client(raise_connect_error) as client:
            with pytest.raises(TransportError) as exc_info:
                client.request("GET", "/v1/payments/1")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_error_status_is_returned_not_raised(self):
        """Test that request() leaves status handling to the resolver."""
        handler = RecordingHandler(httpx.Response(404, json=UNAUTHORIZED_BODY))
        with make_client(handler) as client:
            response = client.request("GET", "/v1/payments/1")

        assert response.status_code == 404

    def test_logs_requests_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mpago.client"):
            with make_client(RecordingHandler()) as client:
                client.request("GET", "/v1/payments/1")

        assert "GET /v1/payments/1" in caplog.text
        assert TOKEN not in caplog.text


class TestMercadoPagoClientExecute:
    """Tests for send/execute with ApiRequest."""

    def test_execute_resolves_response(self):
        body = {
            "access_token": "new-token",
            "token_type": "bearer",
            "expires_in": 15552000,
            "scope": "offline_access read write",
            "user_id": 42,
            "refresh_token": "TG-123",
            "public_key": "APP_USR-pk",
            "live_mode": False,
        }
        handler = RecordingHandler(httpx.Response(200, json=body))

        with make_client(handler) as client:
            result = client.execute(
                ApiRequest("POST", "/oauth/token", json={}, authenticated=False),
                OAuthResponseBody,
            )

        assert result.access_token == "new-token"
        assert result.user_id == 42

    def test_execute_raises_api_error(self):
        handler = RecordingHandler(httpx.Response(401, json=UNAUTHORIZED_BODY))

        with make_client(handler) as client:
            with pytest.raises(ApiError) as exc_info:
                client.execute(ApiRequest("GET", "/v1/payments/1"), OAuthResponseBody)

        assert exc_info.value.status == 401


class TestCheckCredentials:
    """Tests for check_credentials."""

    def test_valid_credentials(self):
        handler = RecordingHandler(httpx.Response(200, json=[]))
        with make_client(handler) as client:
            assert client.check_credentials() is None

        assert handler.last.url.path == "/v1/payment_methods"

    def test_invalid_credentials(self):
        handler = RecordingHandler(httpx.Response(401, json=UNAUTHORIZED_BODY))
        with make_client(handler) as client:
            with pytest.raises(ApiError) as exc_info:
                client.check_credentials()

        assert exc_info.value.message == "invalid access token"


class TestClientLifecycle:
    """Tests for session ownership."""

    def test_borrowed_session_is_not_closed(self):
        http_client = MagicMock(spec=httpx.Client)
        client = MercadoPagoClient(ClientConfig(access_token=TOKEN, http_client=http_client))

        client.close()

        http_client.close.assert_not_called()

    def test_owned_session_is_closed(self):
        client = MercadoPagoClient(TOKEN)
        http_client = client._get_client()

        with client:
            pass

        assert http_client.is_closed


class TestRequestsSession:
    """Tests for sending through a requests.Session."""

    def test_request_uses_session(self):
        response = requests.Response()
        response.status_code = 200
        response._content = b"[]"

        session = MagicMock(spec=requests.Session)
        session.request.return_value = response

        client = MercadoPagoClient(ClientConfig(access_token=TOKEN, http_client=session))
        client.check_credentials()

        session.request.assert_called_once()
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://api.mercadopago.com/v1/payment_methods")
        assert kwargs["headers"]["Authorization"] == f"Bearer {TOKEN}"

    def test_requests_exception_raises_transport_error(self):
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = requests.ConnectionError("down")

        client = MercadoPagoClient(ClientConfig(access_token=TOKEN, http_client=session))

        with pytest.raises(TransportError) as exc_info:
            client.request("GET", "/v1/payments/1")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


class TestClientStream:
    """Tests for MercadoPagoClient.stream."""

    def test_stream_sends_offset_and_limit(self):
        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["offset"])
            limit = int(request.url.params["limit"])
            results = [{} for _ in range(offset, min(offset + limit, 3))]
            return httpx.Response(
                200,
                json={"paging": {"total": 3, "limit": limit, "offset": offset}, "results": results},
            )

        recorder = RecordingHandler()

        def recording(request):
            recorder.requests.append(request)
            return handler(request)

        with make_client(recording) as client:
            items = list(client.stream("/v1/things/search", SearchOptions(limit=2), dict))

        assert items == [{}, {}, {}]
        assert [r.url.params["offset"] for r in recorder.requests] == ["0", "2"]
        assert all(r.url.path == "/v1/things/search" for r in recorder.requests)

    def test_stream_yields_transport_errors(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectError("down", request=request)
            return httpx.Response(
                200, json={"paging": {"total": 0, "limit": 30, "offset": 0}, "results": []}
            )

        with make_client(handler) as client:
            elements = list(client.stream("/v1/things/search", SearchOptions(), dict))

        assert len(elements) == 1
        assert isinstance(elements[0], TransportError)
        assert len(calls) == 2


# =============================================================================
# Async Client Tests
# =============================================================================


class TestAsyncMercadoPagoClient:
    """Tests for AsyncMercadoPagoClient."""

    @pytest.mark.asyncio
    async def test_request_headers(self):
        handler = RecordingHandler()
        async with make_async_client(handler, platform_id="p") as client:
            await client.request("GET", "/v1/payments/1")

        assert handler.last.headers["Authorization"] == f"Bearer {TOKEN}"
        assert handler.last.headers["X-Platform-ID"] == "p"

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        async with make_async_client(raise_connect_error) as client:
            with pytest.raises(TransportError):
                await client.request("GET", "/v1/payments/1")

    @pytest.mark.asyncio
    async def test_check_credentials(self):
        handler = RecordingHandler(httpx.Response(401, json=UNAUTHORIZED_BODY))
        async with make_async_client(handler) as client:
            with pytest.raises(ApiError):
                await client.check_credentials()

    @pytest.mark.asyncio
    async def test_check_credentials_ok(self):
        handler = RecordingHandler(httpx.Response(200, json=[]))
        async with make_async_client(handler) as client:
            assert await client.check_credentials() is None

    @pytest.mark.asyncio
    async def test_stream(self):
        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["offset"])
            results = [{"n": i} for i in range(offset, min(offset + 30, 45))]
            return httpx.Response(
                200,
                json={"paging": {"total": 45, "limit": 30, "offset": offset}, "results": results},
            )

        async with make_async_client(handler) as client:
            items = [i async for i in client.stream("/v1/things/search", SearchOptions(), dict)]

        assert [i["n"] for i in items] == list(range(45))

    @pytest.mark.asyncio
    async def test_owned_session_is_closed(self):
        client = AsyncMercadoPagoClient(TOKEN)
        http_client = client._get_client()
        await client.aclose()
        assert http_client.is_closed
