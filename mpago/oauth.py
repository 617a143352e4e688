"""OAuth token exchange.

Reference: https://www.mercadopago.com.br/developers/pt/reference/oauth/_oauth_token/post
"""

from __future__ import annotations

from .request import ApiRequest, RequestBuilder
from .schemas.oauth import AuthorizationCodeRequest, OAuthResponseBody, RefreshTokenRequest

OAUTH_TOKEN_PATH = "/oauth/token"


class OAuth(RequestBuilder[OAuthResponseBody]):
    """Create or refresh an access token (``POST /oauth/token``).

    The exchange authenticates with the application's client credentials in
    the body, so the request is sent without a bearer token. Any client works,
    including one configured with an empty access token.

    Example:
        ```python
        with MercadoPagoClient(ClientConfig(access_token="")) as client:
            credentials = OAuth.create_access(
                "8971239781",
                "RcHGkCg2VTL6cxrxzBSDQydT",
                "TG-817289123-241983636",
                "https://someniceurl.com/mercadopago/",
            ).send(client)
        ```
    """

    response_type = OAuthResponseBody

    def __init__(self, body: AuthorizationCodeRequest | RefreshTokenRequest) -> None:
        self.body = body

    @classmethod
    def create_access(
        cls,
        client_id: str,
        client_secret: str,
        code: str,
        redirect_uri: str,
    ) -> OAuth:
        """Exchange the authorization code granted on login for an access token.

        Args:
            client_id: ID of the application.
            client_secret: Secret of the application.
            code: Code returned to ``redirect_uri`` by the authorization server.
            redirect_uri: Redirect URL registered for the application.
        """
        return cls(
            AuthorizationCodeRequest(
                client_id=client_id,
                client_secret=client_secret,
                code=code,
                redirect_uri=redirect_uri,
            )
        )

    @classmethod
    def refresh_access(cls, client_id: str, client_secret: str, refresh_token: str) -> OAuth:
        """Trade a refresh token for a new access token. Refresh tokens are single use."""
        return cls(
            RefreshTokenRequest(
                client_id=client_id,
                client_secret=client_secret,
                refresh_token=refresh_token,
            )
        )

    def build_request(self) -> ApiRequest:
        return ApiRequest(
            "POST",
            OAUTH_TOKEN_PATH,
            json=self.body.to_body(),
            authenticated=False,
        )
