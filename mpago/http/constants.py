"""HTTP constants for the Mercado Pago API."""

# Default API endpoint; clients take their base URL from ClientConfig.
API_BASE_URL = "https://api.mercadopago.com"

DEFAULT_TIMEOUT_SECONDS = 30.0

# Webhook headers
SIGNATURE_HEADER = "x-signature"
REQUEST_ID_HEADER = "x-request-id"

# Optional integrator identification header
PLATFORM_ID_HEADER = "X-Platform-ID"

# Environment variables read by ClientConfig.from_env
ACCESS_TOKEN_ENV = "MERCADO_PAGO_ACCESS"
BASE_URL_ENV = "MERCADO_PAGO_BASE_URL"
PLATFORM_ID_ENV = "MERCADO_PAGO_PLATFORM_ID"
