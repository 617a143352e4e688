"""Error types raised (or yielded) by mpago requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemas.common import ApiErrorBody, ApiErrorCause


class MercadoPagoRequestError(Exception):
    """Base class for every failed Mercado Pago request."""

    pass


class TransportError(MercadoPagoRequestError):
    """Request could not be completed or its body could not be read.

    The underlying httpx/requests exception is kept as ``__cause__``.
    """

    pass


class DeserializationError(TransportError):
    """Response body did not decode into the expected type."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(MercadoPagoRequestError):
    """Well-formed error body returned by Mercado Pago."""

    def __init__(self, body: ApiErrorBody) -> None:
        super().__init__(f"MercadoPago Error ({body.status}): {body.message}")
        self.body = body

    @property
    def status(self) -> int:
        return self.body.status

    @property
    def message(self) -> str:
        return self.body.message

    @property
    def error(self) -> str | None:
        return self.body.error

    @property
    def causes(self) -> list[ApiErrorCause]:
        return list(self.body.cause or [])


class PaginationRetriesExceeded(MercadoPagoRequestError):
    """A search page kept failing past the caller's retry bound."""

    def __init__(self, offset: int, attempts: int, last_error: MercadoPagoRequestError) -> None:
        super().__init__(
            f"Page at offset {offset} failed {attempts} times in a row: {last_error}"
        )
        self.offset = offset
        self.attempts = attempts
        self.last_error = last_error


class SignatureHeaderError(ValueError):
    """A webhook ``x-signature`` header could not be parsed."""

    pass


__all__ = [
    "MercadoPagoRequestError",
    "TransportError",
    "DeserializationError",
    "ApiError",
    "PaginationRetriesExceeded",
    "SignatureHeaderError",
]
