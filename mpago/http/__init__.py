"""HTTP plumbing: constants and response resolution."""

from .constants import API_BASE_URL, DEFAULT_TIMEOUT_SECONDS, PLATFORM_ID_HEADER
from .resolver import TRANSPORT_ERRORS, aresolve_json, decode_body, resolve_json

__all__ = [
    "API_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "PLATFORM_ID_HEADER",
    "TRANSPORT_ERRORS",
    "aresolve_json",
    "decode_body",
    "resolve_json",
]
