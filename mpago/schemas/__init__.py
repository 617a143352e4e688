"""Pydantic schemas for Mercado Pago request and response bodies."""

from .base import U64, Amount, BaseMercadoPagoModel, OpenEnum
from .common import (
    ApiErrorBody,
    ApiErrorCause,
    CurrencyId,
    Paging,
    SearchOptions,
    SearchResponse,
)
from .oauth import AuthorizationCodeRequest, OAuthResponseBody, RefreshTokenRequest
from .payer import (
    AdditionalInfoPayer,
    EntityType,
    IdentificationType,
    Payer,
    PayerAddress,
    PayerIdentification,
    PayerType,
    PhoneNumber,
)
from .payments import (
    AdditionalInfo,
    FeeDetails,
    FeeDetailsType,
    OperationType,
    PartialPaymentResult,
    PaymentCreateOptions,
    PaymentMethodId,
    PaymentResponse,
    PaymentSearchCriteria,
    PaymentSearchOptions,
    PaymentSearchRange,
    PaymentSearchResponse,
    PaymentSearchSort,
    PaymentStatus,
    PaymentStatusDetail,
    PaymentTypeId,
    PaymentUpdateOptions,
    ProductItem,
    Shipments,
)
from .subscriptions import (
    AutoRecurring,
    FreeTrial,
    FrequencyType,
    Subscription,
    SubscriptionCreateOptions,
    SubscriptionSearchParams,
    SubscriptionSearchResponse,
    SubscriptionSemaphore,
    SubscriptionStatus,
    UpdateSubscriptionRequest,
)
from .wallet_connect import Agreement, AgreementData, AgreementRequest, ExternalUser
from .webhooks import WebhookData, WebhookEnvelope, WebhookType

__all__ = [
    # Base
    "Amount",
    "U64",
    "BaseMercadoPagoModel",
    "OpenEnum",
    # Common
    "ApiErrorBody",
    "ApiErrorCause",
    "CurrencyId",
    "Paging",
    "SearchOptions",
    "SearchResponse",
    # OAuth
    "AuthorizationCodeRequest",
    "RefreshTokenRequest",
    "OAuthResponseBody",
    # Payer
    "AdditionalInfoPayer",
    "EntityType",
    "IdentificationType",
    "Payer",
    "PayerAddress",
    "PayerIdentification",
    "PayerType",
    "PhoneNumber",
    # Payments
    "AdditionalInfo",
    "FeeDetails",
    "FeeDetailsType",
    "OperationType",
    "PartialPaymentResult",
    "PaymentCreateOptions",
    "PaymentMethodId",
    "PaymentResponse",
    "PaymentSearchCriteria",
    "PaymentSearchOptions",
    "PaymentSearchRange",
    "PaymentSearchResponse",
    "PaymentSearchSort",
    "PaymentStatus",
    "PaymentStatusDetail",
    "PaymentTypeId",
    "PaymentUpdateOptions",
    "ProductItem",
    "Shipments",
    # Subscriptions
    "AutoRecurring",
    "FreeTrial",
    "FrequencyType",
    "Subscription",
    "SubscriptionCreateOptions",
    "SubscriptionSearchParams",
    "SubscriptionSearchResponse",
    "SubscriptionSemaphore",
    "SubscriptionStatus",
    "UpdateSubscriptionRequest",
    # Wallet Connect
    "Agreement",
    "AgreementData",
    "AgreementRequest",
    "ExternalUser",
    # Webhooks
    "WebhookData",
    "WebhookEnvelope",
    "WebhookType",
]
