"""OAuth token exchange schemas.

Reference: https://www.mercadopago.com.br/developers/pt/reference/oauth/_oauth_token/post
"""

from __future__ import annotations

from typing import Literal

from .base import BaseMercadoPagoModel


class AuthorizationCodeRequest(BaseMercadoPagoModel):
    """Exchange an authorization code for an access token."""

    grant_type: Literal["authorization_code"] = "authorization_code"
    client_id: str
    client_secret: str
    code: str
    redirect_uri: str


class RefreshTokenRequest(BaseMercadoPagoModel):
    """Refresh an access token issued to an integration."""

    grant_type: Literal["refresh_token"] = "refresh_token"
    client_id: str
    client_secret: str
    refresh_token: str


class OAuthResponseBody(BaseMercadoPagoModel):
    """Credentials returned by ``POST /oauth/token``.

    ``refresh_token`` is single use; ``expires_in`` defaults to 180 days.
    """

    access_token: str
    token_type: str
    expires_in: int
    scope: str
    user_id: int
    refresh_token: str
    public_key: str
    live_mode: bool
