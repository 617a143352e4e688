"""mpago - Python client for the Mercado Pago API.

Builders describe a call; a client sends it and decodes the response into
pydantic models. Paged searches come back as lazy streams, and webhook
notifications can be checked against their HMAC signature.

Quick Start:
    ```python
    from mpago import (
        MercadoPagoClient,
        PaymentCreateBuilder,
        PaymentSearchBuilder,
        verify_webhook_request,
    )
    from mpago.schemas import Payer, PaymentMethodId

    with MercadoPagoClient("APP_USR-...") as client:
        payment = PaymentCreateBuilder.create(
            "Some product",
            Payer(email="test_user@testmail.com"),
            PaymentMethodId.PIX,
            "25.0",
        ).send(client)

        for item in PaymentSearchBuilder().fetch_all_streamed(client, max_retries=3):
            ...

    # Webhooks
    ok = verify_webhook_request(request_body, request_headers, secret_key)
    ```
"""

# Clients and configuration
from .client import AsyncMercadoPagoClient, MercadoPagoClient
from .config import ClientConfig

# Errors
from .errors import (
    ApiError,
    DeserializationError,
    MercadoPagoRequestError,
    PaginationRetriesExceeded,
    SignatureHeaderError,
    TransportError,
)

# Builders
from .oauth import OAuth
from .payments import (
    PaymentCreateBuilder,
    PaymentGetBuilder,
    PaymentSearchBuilder,
    PaymentUpdateBuilder,
)
from .request import ApiRequest, RequestBuilder, SearchBuilder
from .subscriptions import SubscriptionCreateBuilder, SubscriptionSearchBuilder
from .wallet_connect import AgreementBuilder

# Pagination and response handling
from .http.resolver import aresolve_json, resolve_json
from .pagination import DEFAULT_PAGE_LIMIT, astream_search, stream_search

# Webhooks
from .schemas.webhooks import WebhookEnvelope
from .webhooks import (
    build_signed_payload,
    compute_signature,
    parse_signature_header,
    verify_signature,
    verify_webhook_request,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Clients
    "MercadoPagoClient",
    "AsyncMercadoPagoClient",
    "ClientConfig",
    # Errors
    "MercadoPagoRequestError",
    "TransportError",
    "DeserializationError",
    "ApiError",
    "PaginationRetriesExceeded",
    "SignatureHeaderError",
    # Builders
    "ApiRequest",
    "RequestBuilder",
    "SearchBuilder",
    "PaymentCreateBuilder",
    "PaymentGetBuilder",
    "PaymentUpdateBuilder",
    "PaymentSearchBuilder",
    "SubscriptionCreateBuilder",
    "SubscriptionSearchBuilder",
    "OAuth",
    "AgreementBuilder",
    # Responses and pagination
    "resolve_json",
    "aresolve_json",
    "stream_search",
    "astream_search",
    "DEFAULT_PAGE_LIMIT",
    # Webhooks
    "WebhookEnvelope",
    "parse_signature_header",
    "build_signed_payload",
    "compute_signature",
    "verify_signature",
    "verify_webhook_request",
]
