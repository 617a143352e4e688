"""Webhook signature verification.

Mercado Pago signs each notification with HMAC-SHA256 using the secret
configured for the application. The ``x-signature`` header carries the
timestamp and the hex digest::

    x-signature: ts=1717037131000,v1=aace2694...

The signed string is built from the notification id, the optional
``x-request-id`` header and the timestamp, in this exact order::

    id:{id};request-id:{request_id};ts:{ts};

The ``request-id`` segment is left out entirely when there is no request id.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from .errors import SignatureHeaderError
from .http.constants import REQUEST_ID_HEADER, SIGNATURE_HEADER
from .schemas.webhooks import WebhookEnvelope

# Timestamps are unsigned 64-bit integers.
MAX_TIMESTAMP = 2**64 - 1


@dataclass(frozen=True)
class SignatureHeader:
    """Parsed ``x-signature`` header."""

    timestamp: int = 0
    digest: str = ""


def parse_signature_header(value: str) -> SignatureHeader:
    """Parse ``ts=<int>,v1=<hex>`` into a SignatureHeader.

    Unknown keys are ignored. A missing ``ts`` parses as ``0`` and a
    missing ``v1`` as ``""``.

    Raises:
        SignatureHeaderError: If ``ts`` is not a non-negative integer.
    """
    timestamp = 0
    digest = ""

    for pair in value.split(","):
        key, *parts = pair.split("=")
        raw = parts[0] if parts else ""
        if key == "ts":
            # One leading "+" is accepted, like an unsigned integer parse.
            digits = raw[1:] if raw.startswith("+") else raw
            if not (digits.isascii() and digits.isdigit()) or int(digits) > MAX_TIMESTAMP:
                raise SignatureHeaderError(f"Invalid signature timestamp: {raw!r}")
            timestamp = int(digits)
        elif key == "v1":
            digest = raw

    return SignatureHeader(timestamp=timestamp, digest=digest)


def build_signed_payload(
    notification_id: int,
    timestamp: int,
    request_id: str | None = None,
) -> str:
    """Build the string Mercado Pago signs for a notification."""
    request_segment = f"request-id:{request_id};" if request_id is not None else ""
    return f"id:{notification_id};{request_segment}ts:{timestamp};"


def compute_signature(
    secret_key: bytes,
    notification_id: int,
    timestamp: int,
    request_id: str | None = None,
) -> str:
    """Compute the lowercase hex HMAC-SHA256 digest for a notification."""
    payload = build_signed_payload(notification_id, timestamp, request_id)
    return hmac.new(secret_key, payload.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_signature(
    envelope: WebhookEnvelope,
    secret_key: bytes,
    signature_header: str,
    request_id: str | None = None,
) -> bool:
    """Check that a webhook notification was signed by Mercado Pago.

    Never raises: a malformed header is reported as ``False``, the same as
    a digest mismatch.

    Args:
        envelope: Decoded notification body.
        secret_key: Webhook secret of the application.
        signature_header: Value of the ``x-signature`` header.
        request_id: Value of the ``x-request-id`` header, if sent.

    Returns:
        True if the digest in the header matches the expected one.

    Example:
        ```python
        envelope = WebhookEnvelope.model_validate_json(body)
        if not verify_signature(envelope, secret, headers["x-signature"],
                                headers.get("x-request-id")):
            return Response(status_code=401)
        ```
    """
    try:
        header = parse_signature_header(signature_header)
    except SignatureHeaderError:
        return False

    expected = compute_signature(secret_key, envelope.id, header.timestamp, request_id)
    return hmac.compare_digest(expected.encode("ascii"), header.digest.encode("utf-8"))


def verify_webhook_request(
    body: bytes | str,
    headers: Mapping[str, str],
    secret_key: bytes,
) -> bool:
    """Verify a raw webhook request: body plus HTTP headers.

    Header lookup is case-insensitive. A body that is not a valid
    notification, or a missing ``x-signature`` header, fails verification.
    """
    normalized = {k.lower(): v for k, v in headers.items()}

    signature_header = normalized.get(SIGNATURE_HEADER)
    if signature_header is None:
        return False

    try:
        envelope = WebhookEnvelope.model_validate_json(body)
    except ValidationError:
        return False

    return verify_signature(
        envelope,
        secret_key,
        signature_header,
        normalized.get(REQUEST_ID_HEADER),
    )
