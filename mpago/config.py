"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .http.constants import (
    ACCESS_TOKEN_ENV,
    API_BASE_URL,
    BASE_URL_ENV,
    DEFAULT_TIMEOUT_SECONDS,
    PLATFORM_ID_ENV,
)


@dataclass
class ClientConfig:
    """Configuration for Mercado Pago clients.

    Attributes:
        access_token: Bearer token of the seller or integration.
        base_url: API root every path is appended to.
        timeout: Per-request timeout in seconds.
        http_client: Optional session to send requests with. The sync client
            takes an ``httpx.Client`` or ``requests.Session``; the async
            client takes an ``httpx.AsyncClient``. When omitted the client
            creates (and closes) its own httpx client.
        platform_id: Sent as ``X-Platform-ID`` when set.
    """

    access_token: str
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    http_client: Any = None
    platform_id: str | None = None

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``MERCADO_PAGO_*`` environment variables.

        Raises:
            ValueError: If ``MERCADO_PAGO_ACCESS`` is not set.
        """
        env = os.environ if environ is None else environ

        access_token = env.get(ACCESS_TOKEN_ENV)
        if not access_token:
            raise ValueError(f"{ACCESS_TOKEN_ENV} is not set")

        return cls(
            access_token=access_token,
            base_url=env.get(BASE_URL_ENV) or API_BASE_URL,
            platform_id=env.get(PLATFORM_ID_ENV) or None,
        )

    @classmethod
    def coerce(cls, config: ClientConfig | Mapping[str, Any] | str | None) -> ClientConfig:
        """Accept a ClientConfig, a dict of its fields, an access token, or
        ``None`` (read from the environment)."""
        if isinstance(config, ClientConfig):
            return config
        if config is None:
            return cls.from_env()
        if isinstance(config, str):
            return cls(access_token=config)

        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown client config keys: {sorted(unknown)}")
        return cls(**config)
