"""Tests for mpago.http.resolver - response resolution."""

import json
from unittest.mock import AsyncMock, MagicMock, PropertyMock

import httpx
import pytest
import requests

from mpago.errors import ApiError, DeserializationError, TransportError
from mpago.http.resolver import aresolve_json, decode_body, is_success, resolve_json
from mpago.schemas.common import ApiErrorBody
from mpago.schemas.oauth import OAuthResponseBody
from mpago.schemas.payments import PaymentResponse, PaymentStatus

ERROR_BODY = {
    "message": "invalid access token",
    "error": "unauthorized",
    "status": 401,
    "cause": [
        {
            "code": 2000,
            "description": "access token is invalid",
            "data": "18-10-2026T12:00:00UTC;4b6d1c7e-6c5e-4c1a-a3a9-1ae3c0c5a9f4",
        }
    ],
}


# =============================================================================
# Helpers
# =============================================================================


def make_payment_dict(**overrides) -> dict:
    """Helper to create a payment body as returned by the API."""
    body = {
        "id": 123,
        "date_created": "2026-10-18T10:00:00.000-04:00",
        "operation_type": "regular_payment",
        "payment_method_id": "pix",
        "payment_type_id": "bank_transfer",
        "status": "approved",
        "live_mode": False,
        "transaction_amount": 25.5,
        "installments": 1,
    }
    body.update(overrides)
    return body


def make_httpx_response(status_code: int, body) -> httpx.Response:
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return httpx.Response(status_code, content=content)


def make_requests_response(status_code: int, body) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return response


class TestIsSuccess:
    """Tests for is_success."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success(self, status):
        assert is_success(status) is True

    @pytest.mark.parametrize("status", [199, 300, 302, 400, 404, 500])
    def test_failure(self, status):
        assert is_success(status) is False


class TestResolveJson:
    """Tests for resolve_json."""

    def test_created_decodes_success_type(self):
        """Test that a 201 body decodes as the expected type."""
        response = make_httpx_response(201, make_payment_dict())
        payment = resolve_json(response, PaymentResponse)
        assert payment.id == 123
        assert payment.status is PaymentStatus.APPROVED

    def test_error_status_raises_api_error(self):
        """Test that a 4xx with an error body raises ApiError."""
        response = make_httpx_response(401, ERROR_BODY)

        with pytest.raises(ApiError) as exc_info:
            resolve_json(response, PaymentResponse)

        error = exc_info.value
        assert error.status == 401
        assert error.message == "invalid access token"
        assert error.error == "unauthorized"
        assert str(error) == "MercadoPago Error (401): invalid access token"

    def test_error_cause_reads_data_key(self):
        """Test that a cause's date is read from the "data" key."""
        response = make_httpx_response(400, ERROR_BODY)

        with pytest.raises(ApiError) as exc_info:
            resolve_json(response, PaymentResponse)

        [cause] = exc_info.value.causes
        assert cause.code == 2000
        assert cause.date.startswith("18-10-2026T12:00:00UTC;")

    def test_unparseable_error_body_raises_deserialization_error(self):
        """Test that a 500 with an HTML body is not turned into an ApiError."""
        response = make_httpx_response(500, b"<html>Internal Server Error</html>")

        with pytest.raises(DeserializationError) as exc_info:
            resolve_json(response, PaymentResponse)

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value, TransportError)

    def test_unparseable_success_body_raises_deserialization_error(self):
        """Test a 2xx body that does not match the expected type."""
        response = make_httpx_response(200, {"access_token": "x"})

        with pytest.raises(DeserializationError) as exc_info:
            resolve_json(response, OAuthResponseBody)

        assert exc_info.value.status_code == 200

    def test_redirect_status_is_not_success(self):
        """Test that a 3xx is resolved as an error body."""
        response = make_httpx_response(302, {"message": "moved", "status": 302})

        with pytest.raises(ApiError) as exc_info:
            resolve_json(response, PaymentResponse)

        assert exc_info.value.status == 302

    def test_requests_response(self):
        """Test that requests.Response resolves the same way."""
        response = make_requests_response(200, make_payment_dict(id=7))
        assert resolve_json(response, PaymentResponse).id == 7

        with pytest.raises(ApiError):
            resolve_json(make_requests_response(404, ERROR_BODY), PaymentResponse)

    def test_read_failure_raises_transport_error(self):
        """Test that an error while reading the body is a TransportError."""
        response = MagicMock()
        response.status_code = 200
        type(response).content = PropertyMock(side_effect=httpx.ReadError("connection reset"))

        with pytest.raises(TransportError) as exc_info:
            resolve_json(response, PaymentResponse)

        assert isinstance(exc_info.value.__cause__, httpx.ReadError)

    def test_generic_types(self):
        """Test resolving into a non-model type."""
        response = make_httpx_response(200, [1, 2, 3])
        assert resolve_json(response, list[int]) == [1, 2, 3]


class TestAresolveJson:
    """Tests for aresolve_json."""

    @pytest.mark.asyncio
    async def test_success(self):
        response = make_httpx_response(200, make_payment_dict(status="pending"))
        payment = await aresolve_json(response, PaymentResponse)
        assert payment.status is PaymentStatus.PENDING

    @pytest.mark.asyncio
    async def test_error(self):
        response = make_httpx_response(400, ERROR_BODY)
        with pytest.raises(ApiError):
            await aresolve_json(response, PaymentResponse)

    @pytest.mark.asyncio
    async def test_read_failure_raises_transport_error(self):
        """Test that a failing aread() is a TransportError."""
        response = MagicMock(spec=httpx.Response)
        response.status_code = 200
        response.aread = AsyncMock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError):
            await aresolve_json(response, PaymentResponse)


class TestDecodeBody:
    """Tests for decode_body."""

    def test_decodes_error_body(self):
        body = decode_body(json.dumps(ERROR_BODY).encode(), ApiErrorBody, 401)
        assert body.status == 401
        assert body.cause[0].description == "access token is invalid"

    def test_status_out_of_range(self):
        """Test that an error status outside 0..65535 fails to decode."""
        with pytest.raises(DeserializationError):
            decode_body(b'{"message": "x", "status": 70000}', ApiErrorBody)
