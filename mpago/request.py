"""Request descriptions and the builder base classes.

A builder only describes a call (method, path, query, body). Sending it
through ``MercadoPagoClient`` or ``AsyncMercadoPagoClient`` performs the
round trip and resolves the response into the builder's response type.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from .schemas.common import SearchOptions

if TYPE_CHECKING:
    from .client import AsyncMercadoPagoClient, MercadoPagoClient
    from .pagination import StreamItem

T = TypeVar("T")
OptionsT = TypeVar("OptionsT", bound=SearchOptions)


@dataclass
class ApiRequest:
    """A single call to the Mercado Pago API."""

    method: str
    path: str
    params: dict[str, Any] | None = None
    json: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    # OAuth token exchange is the only unauthenticated call.
    authenticated: bool = True


class RequestBuilder(Generic[T]):
    """Base for builders that send one request and decode one response."""

    response_type: ClassVar[Any]

    def build_request(self) -> ApiRequest:
        raise NotImplementedError

    def send(self, client: MercadoPagoClient) -> T:
        """Send the request and decode the response.

        Raises:
            ApiError: Mercado Pago answered with an error body.
            TransportError: The request failed or the body did not decode.
        """
        return client.execute(self.build_request(), self.response_type)

    async def asend(self, client: AsyncMercadoPagoClient) -> T:
        """Async counterpart of ``send``."""
        return await client.execute(self.build_request(), self.response_type)


class SearchBuilder(Generic[OptionsT, T]):
    """Base for builders of paged search endpoints."""

    path: ClassVar[str]
    item_type: ClassVar[Any]

    def __init__(self, options: OptionsT) -> None:
        self.options = options

    def fetch_all_streamed(
        self,
        client: MercadoPagoClient,
        *,
        max_retries: int | None = None,
    ) -> Iterator[StreamItem[T]]:
        """Stream every result across all pages.

        Failed page requests are yielded as ``MercadoPagoRequestError``
        elements and retried; see ``mpago.pagination``.
        """
        return client.stream(self.path, self.options, self.item_type, max_retries=max_retries)

    def afetch_all_streamed(
        self,
        client: AsyncMercadoPagoClient,
        *,
        max_retries: int | None = None,
    ) -> AsyncIterator[StreamItem[T]]:
        """Async counterpart of ``fetch_all_streamed``."""
        return client.stream(self.path, self.options, self.item_type, max_retries=max_retries)
