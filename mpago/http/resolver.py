"""Turn completed HTTP responses into decoded values or errors.

Every request in the library goes through here:

- 2xx: the body is decoded as the expected type.
- anything else: the body is decoded as Mercado Pago's error body and
  raised as ``ApiError``.
- a body that does not decode (in either case) raises
  ``DeserializationError``; an API error is never invented from it.

No retries happen here.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol, TypeVar

import httpx
import requests
from pydantic import TypeAdapter, ValidationError

from ..errors import ApiError, DeserializationError, TransportError
from ..schemas.common import ApiErrorBody

T = TypeVar("T")

# Failures raised by the HTTP libraries while sending or reading.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    httpx.StreamError,
    requests.RequestException,
)


class ResponseLike(Protocol):
    """What the resolver needs from httpx.Response or requests.Response."""

    @property
    def status_code(self) -> int: ...

    @property
    def content(self) -> bytes: ...


@lru_cache(maxsize=128)
def _type_adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", None) or repr(model)


def is_success(status_code: int) -> bool:
    """True for 2xx status codes."""
    return 200 <= status_code <= 299


def decode_body(content: bytes, model: type[T] | Any, status_code: int | None = None) -> T:
    """Decode a JSON body as ``model``.

    Raises:
        DeserializationError: If the body is not valid JSON for ``model``.
    """
    try:
        return _type_adapter(model).validate_json(content)
    except ValidationError as e:
        raise DeserializationError(
            f"Failed to decode response ({status_code}) as {_type_name(model)}: "
            f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}",
            status_code=status_code,
        ) from e


def resolve_content(status_code: int, content: bytes, model: type[T] | Any) -> T:
    """Resolve an already-read response body.

    Args:
        status_code: HTTP status of the response.
        content: Raw response body.
        model: Expected type of a successful body.

    Returns:
        The decoded success value.

    Raises:
        ApiError: Non-2xx status with a well-formed error body.
        DeserializationError: Body does not decode as expected.
    """
    if is_success(status_code):
        return decode_body(content, model, status_code)

    error_body = decode_body(content, ApiErrorBody, status_code)
    raise ApiError(error_body)


def read_content(response: ResponseLike) -> bytes:
    """Read the full body of a sync response.

    Raises:
        TransportError: If reading the body fails.
    """
    try:
        return response.content
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Failed to read response body: {e}") from e


def resolve_json(response: ResponseLike, model: type[T] | Any) -> T:
    """Resolve an httpx or requests response into ``model``.

    Example:
        ```python
        response = client.request("GET", f"/v1/payments/{payment_id}")
        payment = resolve_json(response, PaymentResponse)
        ```
    """
    return resolve_content(response.status_code, read_content(response), model)


async def aresolve_json(response: httpx.Response, model: type[T] | Any) -> T:
    """Async counterpart of ``resolve_json`` for httpx.AsyncClient responses.

    Streamed responses are read here before decoding.
    """
    try:
        content = await response.aread()
    except TRANSPORT_ERRORS as e:
        raise TransportError(f"Failed to read response body: {e}") from e
    return resolve_content(response.status_code, content, model)
