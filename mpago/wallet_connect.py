"""Wallet Connect agreements."""

from __future__ import annotations

from typing_extensions import Self

from .http.constants import PLATFORM_ID_HEADER
from .request import ApiRequest, RequestBuilder
from .schemas.wallet_connect import Agreement, AgreementData, AgreementRequest, ExternalUser

AGREEMENTS_PATH = "/v2/wallet_connect/agreements"


class AgreementBuilder(RequestBuilder[Agreement]):
    """Create a Wallet Connect agreement (``POST /v2/wallet_connect/agreements``).

    Send the user to ``agreement.uri``; once they authorize or deny the
    connection they are redirected to ``return_url``.

    Example:
        ```python
        agreement = (
            AgreementBuilder("https://example.com/wallet/return")
            .client_id("8971239781")
            .external_user(ExternalUser(id="user-42", description="Jane"))
            .send(client)
        )
        ```
    """

    response_type = Agreement

    def __init__(self, return_url: str) -> None:
        self._return_url = return_url
        self._platform_id: str | None = None
        self._client_id: str | None = None
        self._agreement_data: AgreementData | None = None
        self._external_flow_id: str | None = None
        self._external_user: ExternalUser | None = None

    def return_url(self, return_url: str) -> Self:
        self._return_url = return_url
        return self

    def platform_id(self, platform_id: str | None) -> Self:
        """``X-Platform-ID`` for this request, overriding the client's."""
        self._platform_id = platform_id
        return self

    def client_id(self, client_id: str | None) -> Self:
        """Application ID, sent as the ``client.id`` query parameter."""
        self._client_id = client_id
        return self

    def agreement_data(self, agreement_data: AgreementData | None) -> Self:
        self._agreement_data = agreement_data
        return self

    def external_flow_id(self, external_flow_id: str | None) -> Self:
        """Lookup ID of your own; not the agreement ID."""
        self._external_flow_id = external_flow_id
        return self

    def external_user(self, external_user: ExternalUser | None) -> Self:
        self._external_user = external_user
        return self

    def build_request(self) -> ApiRequest:
        body = AgreementRequest(
            return_url=self._return_url,
            agreement_data=self._agreement_data,
            external_flow_id=self._external_flow_id,
            external_user=self._external_user,
        )
        params = {"client.id": self._client_id} if self._client_id is not None else None
        headers = {PLATFORM_ID_HEADER: self._platform_id} if self._platform_id else {}
        return ApiRequest(
            "POST",
            AGREEMENTS_PATH,
            params=params,
            json=body.to_body(),
            headers=headers,
        )
