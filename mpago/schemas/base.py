"""Base types shared by all Mercado Pago schemas."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Mercado Pago reads and writes monetary amounts as JSON numbers.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Ids and counters the API defines as unsigned 64-bit integers.
U64 = Annotated[int, Field(ge=0, le=2**64 - 1)]

UNKNOWN_MEMBER_NAME = "UNKNOWN"


class BaseMercadoPagoModel(BaseModel):
    """Base model for API request and response bodies.

    Field names already match the API's snake_case keys. Fields the
    library does not model are ignored on input.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )

    def to_body(self) -> dict[str, Any]:
        """Dump as a JSON-ready request body, leaving out unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OpenEnum(str, Enum):
    """String enum that keeps values it does not know about.

    Mercado Pago adds status codes, payment methods and currencies over
    time. Instead of failing to decode, an unrecognized string becomes a
    pseudo-member named ``UNKNOWN`` whose ``value`` is the raw string.

    Example:
        ```python
        status = PaymentStatus("pending_new_thing")
        status.is_unknown  # True
        status.value  # "pending_new_thing"
        ```
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNKNOWN_MEMBER_NAME
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        """True when the value is not one of the declared members."""
        return self._name_ == UNKNOWN_MEMBER_NAME
