"""Webhook notification envelope."""

from __future__ import annotations

from pydantic import ConfigDict

from .base import U64, BaseMercadoPagoModel, OpenEnum


class WebhookType(OpenEnum):
    PAYMENT = "payment"
    SUBSCRIPTION_PREAPPROVAL = "subscription_preapproval"
    SUBSCRIPTION_PREAPPROVAL_PLAN = "subscription_preapproval_plan"
    SUBSCRIPTION_AUTHORIZED_PAYMENT = "subscription_authorized_payment"
    POINT_INTEGRATION_WH = "point_integration_wh"
    TOPIC_CLAIMS_INTEGRATION_WH = "topic_claims_integration_wh"


class WebhookData(BaseMercadoPagoModel):
    """Reference to the resource the notification is about."""

    model_config = ConfigDict(frozen=True)

    id: U64 | None = None


class WebhookEnvelope(BaseMercadoPagoModel):
    """Body of an inbound webhook notification.

    Numeric ids may arrive as JSON numbers or numeric strings.
    """

    model_config = ConfigDict(frozen=True)

    id: U64
    live_mode: bool
    type: WebhookType
    date_created: str
    user_id: U64
    api_version: str
    action: str
    data: WebhookData | None = None

    def valid_origin(
        self,
        key: bytes,
        signature_header: str,
        request_id: str | None = None,
    ) -> bool:
        """Check that this notification was signed by Mercado Pago.

        See ``mpago.webhooks.verify_signature``.
        """
        from ..webhooks import verify_signature

        return verify_signature(self, key, signature_header, request_id)
