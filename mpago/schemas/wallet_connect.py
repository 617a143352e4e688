"""Wallet Connect agreement schemas."""

from __future__ import annotations

from pydantic import Field

from .base import Amount, BaseMercadoPagoModel


class AgreementData(BaseMercadoPagoModel):
    """What the user is asked to approve and the amount to validate."""

    validation_amount: Amount
    description: str


class ExternalUser(BaseMercadoPagoModel):
    """How the seller identifies the user on their side."""

    id: str
    description: str


class AgreementRequest(BaseMercadoPagoModel):
    return_url: str
    agreement_data: AgreementData | None = None
    external_flow_id: str | None = None
    external_user: ExternalUser | None = None


class Agreement(BaseMercadoPagoModel):
    id: str = Field(alias="agreement_id")
    uri: str = Field(alias="agreement_uri")
