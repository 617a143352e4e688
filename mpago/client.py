"""Mercado Pago API clients (sync and async)."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from typing_extensions import Self

from .config import ClientConfig
from .errors import ApiError, TransportError
from .http.constants import PLATFORM_ID_HEADER
from .http.resolver import (
    TRANSPORT_ERRORS,
    aresolve_json,
    decode_body,
    read_content,
    resolve_json,
)
from .pagination import astream_search, stream_search
from .request import ApiRequest
from .schemas.common import ApiErrorBody, SearchOptions

if TYPE_CHECKING:
    from .pagination import StreamItem

logger = logging.getLogger(__name__)

T = TypeVar("T")
OptionsT = TypeVar("OptionsT", bound=SearchOptions)

CREDENTIALS_CHECK_PATH = "/v1/payment_methods"

ConfigInput = ClientConfig | Mapping[str, Any] | str | None


def _build_headers(
    config: ClientConfig,
    headers: Mapping[str, str] | None,
    authenticated: bool,
) -> dict[str, str]:
    merged: dict[str, str] = {}
    if authenticated:
        if not config.access_token:
            raise ValueError("access_token is required for authenticated requests")
        merged["Authorization"] = f"Bearer {config.access_token}"
    if config.platform_id:
        merged[PLATFORM_ID_HEADER] = config.platform_id
    merged.update(headers or {})
    return merged


# ============================================================================
# Sync Client
# ============================================================================


class MercadoPagoClient:
    """Sync client for the Mercado Pago API.

    Sends bearer-authenticated requests to ``config.base_url`` with an
    ``httpx.Client`` (created on first use) or a session passed in the
    config, including a ``requests.Session``.

    Example:
        ```python
        with MercadoPagoClient("APP_USR-...") as client:
            client.check_credentials()
            payment = PaymentGetBuilder(1234567890).send(client)
        ```
    """

    def __init__(self, config: ConfigInput = None) -> None:
        """Create a client.

        Args:
            config: ClientConfig, dict of its fields, access token string,
                or None to read ``MERCADO_PAGO_*`` environment variables.
        """
        self._config = ClientConfig.coerce(config)
        self._http_client = self._config.http_client
        self._owns_client = self._http_client is None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def _get_client(self) -> Any:
        """Get or create the HTTP session."""
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self._config.timeout, follow_redirects=True)
        return self._http_client

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # =========================================================================
    # Requests
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a request and return the raw response.

        Args:
            method: HTTP method.
            path: API path, e.g. ``/v1/payments``.
            params: Query parameters.
            json: JSON body.
            headers: Extra headers.
            authenticated: Send the bearer token.

        Returns:
            The httpx.Response (or requests.Response) as received.

        Raises:
            TransportError: If the request could not be sent.
        """
        url = f"{self._config.base_url}{path}"
        merged_headers = _build_headers(self._config, headers, authenticated)

        logger.debug(f"{method} {path}")
        try:
            return self._get_client().request(
                method,
                url,
                params=params,
                json=json,
                headers=merged_headers,
                timeout=self._config.timeout,
            )
        except TRANSPORT_ERRORS as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

    def send(self, api_request: ApiRequest) -> Any:
        """Send a built request and return the raw response."""
        return self.request(
            api_request.method,
            api_request.path,
            params=api_request.params,
            json=api_request.json,
            headers=api_request.headers,
            authenticated=api_request.authenticated,
        )

    def execute(self, api_request: ApiRequest, response_type: type[T] | Any) -> T:
        """Send a built request and resolve its response into ``response_type``."""
        return resolve_json(self.send(api_request), response_type)

    def stream(
        self,
        path: str,
        options: OptionsT,
        item_type: type[T] | Any,
        *,
        max_retries: int | None = None,
    ) -> Iterator[StreamItem[T]]:
        """Stream every result of the search endpoint at ``path``."""

        def fetch_page(page_options: OptionsT) -> Any:
            return self.request("GET", path, params=page_options.to_query())

        return stream_search(options, fetch_page, item_type, max_retries=max_retries)

    def check_credentials(self) -> None:
        """Check that the access token is accepted.

        Raises:
            ApiError: The token was rejected.
            TransportError: The request failed or the error body did not decode.
        """
        response = self.request("GET", CREDENTIALS_CHECK_PATH)
        if response.status_code == 200:
            return
        raise ApiError(decode_body(read_content(response), ApiErrorBody, response.status_code))


# ============================================================================
# Async Client
# ============================================================================


class AsyncMercadoPagoClient:
    """Async client for the Mercado Pago API, backed by ``httpx.AsyncClient``.

    Example:
        ```python
        async with AsyncMercadoPagoClient("APP_USR-...") as client:
            search = PaymentSearchBuilder(PaymentSearchOptions(limit=50))
            async for item in search.afetch_all_streamed(client):
                ...
        ```
    """

    def __init__(self, config: ConfigInput = None) -> None:
        self._config = ClientConfig.coerce(config)
        self._http_client: httpx.AsyncClient | None = self._config.http_client
        self._owns_client = self._http_client is None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._config.timeout, follow_redirects=True
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send a request and return the raw response.

        Raises:
            TransportError: If the request could not be sent.
        """
        url = f"{self._config.base_url}{path}"
        merged_headers = _build_headers(self._config, headers, authenticated)

        logger.debug(f"{method} {path}")
        try:
            return await self._get_client().request(
                method,
                url,
                params=params,
                json=json,
                headers=merged_headers,
                timeout=self._config.timeout,
            )
        except TRANSPORT_ERRORS as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

    async def send(self, api_request: ApiRequest) -> httpx.Response:
        return await self.request(
            api_request.method,
            api_request.path,
            params=api_request.params,
            json=api_request.json,
            headers=api_request.headers,
            authenticated=api_request.authenticated,
        )

    async def execute(self, api_request: ApiRequest, response_type: type[T] | Any) -> T:
        return await aresolve_json(await self.send(api_request), response_type)

    def stream(
        self,
        path: str,
        options: OptionsT,
        item_type: type[T] | Any,
        *,
        max_retries: int | None = None,
    ) -> AsyncIterator[StreamItem[T]]:
        """Stream every result of the search endpoint at ``path``."""

        async def fetch_page(page_options: OptionsT) -> httpx.Response:
            return await self.request("GET", path, params=page_options.to_query())

        return astream_search(options, fetch_page, item_type, max_retries=max_retries)

    async def check_credentials(self) -> None:
        """Check that the access token is accepted.

        Raises:
            ApiError: The token was rejected.
        """
        response = await self.request("GET", CREDENTIALS_CHECK_PATH)
        if response.status_code == 200:
            return
        content = await response.aread()
        raise ApiError(decode_body(content, ApiErrorBody, response.status_code))
