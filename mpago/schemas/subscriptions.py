"""Subscription (preapproval) schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import Amount, BaseMercadoPagoModel
from .common import CurrencyId, SearchOptions, SearchResponse


class SubscriptionStatus(str, Enum):
    PENDING = "pending"
    AUTHORIZED = "authorized"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class SubscriptionSemaphore(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class FrequencyType(str, Enum):
    DAYS = "days"
    MONTHS = "months"


class FreeTrial(BaseMercadoPagoModel):
    frequency: int = Field(ge=1)
    frequency_type: FrequencyType


class AutoRecurring(BaseMercadoPagoModel):
    """Billing cycle: charge ``transaction_amount`` every ``frequency`` units."""

    frequency: int = Field(ge=1)
    frequency_type: FrequencyType = FrequencyType.DAYS
    transaction_amount: Amount
    currency_id: CurrencyId = CurrencyId.BRL
    start_date: str | None = None
    end_date: str | None = None
    free_trial: FreeTrial | None = None


class UpdateAutoRecurring(BaseMercadoPagoModel):
    transaction_amount: Amount | None = None
    currency_id: CurrencyId | None = None


class SubscriptionCreateOptions(BaseMercadoPagoModel):
    """Request body of ``POST /preapproval``."""

    back_url: str
    payer_email: str
    status: SubscriptionStatus = SubscriptionStatus.PENDING
    auto_recurring: AutoRecurring | None = None
    card_token_id: str | None = None
    external_reference: str | None = None
    preapproval_plan_id: str | None = None
    reason: str | None = None


class UpdateSubscriptionRequest(BaseMercadoPagoModel):
    auto_recurring: UpdateAutoRecurring | None = None
    back_url: str | None = None
    card_token_id: str | None = None
    external_reference: str | None = None
    reason: str | None = None
    status: SubscriptionStatus | None = None


class SubscriptionSearchParams(SearchOptions):
    """Query of ``GET /preapproval/search``."""

    q: str | None = None
    payer_id: int | None = None
    payer_email: str | None = None
    preapproval_plan_id: str | None = None
    transaction_amount: Amount | None = None
    semaphore: SubscriptionSemaphore | None = None
    sort: str | None = None


class SubscriptionSummarized(BaseMercadoPagoModel):
    quotas: int | None = None
    charged_quantity: int | None = None
    pending_charge_quantity: int | None = None
    charged_amount: Amount | None = None
    pending_charge_amount: Amount | None = None
    semaphore: SubscriptionSemaphore | None = None
    last_charged_date: str | None = None
    last_charged_amount: Amount | None = None


class Subscription(BaseMercadoPagoModel):
    id: str
    application_id: int | None = None
    collector_id: int | None = None
    preapproval_plan_id: str | None = None
    reason: str | None = None
    external_reference: str | None = None
    back_url: str | None = None
    init_point: str | None = None
    auto_recurring: AutoRecurring | None = None
    payer_id: int | None = None
    card_id: int | None = None
    payment_method_id: str | None = None
    next_payment_date: str | None = None
    date_created: str | None = None
    last_modified: str | None = None
    status: SubscriptionStatus
    summarized: SubscriptionSummarized | None = None
    first_invoice_offset: int | None = None


SubscriptionSearchResponse = SearchResponse[Subscription]
