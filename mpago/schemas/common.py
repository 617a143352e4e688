"""Schemas shared across endpoints: paging, error bodies and currencies."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field

from .base import BaseMercadoPagoModel, OpenEnum

T = TypeVar("T")


# ============================================================================
# Paged Search
# ============================================================================


class SearchOptions(BaseMercadoPagoModel):
    """Base of every search query: the page window plus endpoint filters."""

    limit: int | None = Field(default=None, ge=1)
    offset: int | None = Field(default=None, ge=0)

    def to_query(self) -> dict[str, Any]:
        """Query parameters for the search request, without unset filters."""
        return self.to_body()


class Paging(BaseMercadoPagoModel):
    """Paging block returned by every search endpoint."""

    total: int = Field(ge=0)
    limit: int = Field(ge=0)
    offset: int = Field(ge=0)


class SearchResponse(BaseMercadoPagoModel, Generic[T]):
    """One page of a search: paging metadata plus the page's results."""

    paging: Paging
    results: list[T] = Field(default_factory=list)


# ============================================================================
# Error Body
# ============================================================================


class ApiErrorCause(BaseMercadoPagoModel):
    """Single cause listed in an error body."""

    code: int = Field(ge=0, le=2**32 - 1)
    description: str
    # The API sends this under "data" and sometimes appends a UUID after a ';'.
    date: str = Field(alias="data")


class ApiErrorBody(BaseMercadoPagoModel):
    """Body sent by Mercado Pago with any non-2xx status."""

    message: str
    error: str | None = None
    status: int = Field(ge=0, le=65535)
    cause: list[ApiErrorCause] | None = None


# ============================================================================
# Currencies
# ============================================================================

# Codes the API accepts that are also ISO 4217 currencies.
ISO_CURRENCIES = frozenset({"ARS", "BRL", "CLP", "MXN", "COP", "PEN", "UYU", "VES", "USD"})

# Active ISO 4217 alphabetic codes, used to validate unknown currency values.
ISO_4217_CODES = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB
    BOV BRL BSD BTN BWP BYN BZD CAD CDF CHE CHF CHW CLF CLP CNY COP COU CRC CUC
    CUP CVE CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF
    GTQ GYD HKD HNL HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF
    KPW KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU
    MUR MVR MWK MXN MXV MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR
    PLN PYG QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SHP SLE SLL SOS SRD SSP
    STN SVC SYP SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD USN UYI UYU
    UYW UZS VED VES VND VUV WST XAF XAG XAU XBA XBB XBC XBD XCD XDR XOF XPD XPF
    XPT XSU XTS XUA XXX YER ZAR ZMW ZWL
    """.split()
)


class CurrencyId(OpenEnum):
    """Currency identifiers used by Mercado Pago."""

    ARS = "ARS"
    BRL = "BRL"
    CLP = "CLP"
    MXN = "MXN"
    COP = "COP"
    PEN = "PEN"
    UYU = "UYU"
    VES = "VES"
    MCN = "MCN"
    BTC = "BTC"
    USD = "USD"
    USDP = "USDP"
    DCE = "DCE"
    ETH = "ETH"
    FDI = "FDI"
    CDB = "CDB"

    @classmethod
    def from_iso(cls, code: str) -> CurrencyId:
        """Map an ISO 4217 code to a CurrencyId.

        Codes outside the supported set are kept as unknown members.
        """
        return cls(code.upper())

    def to_iso(self) -> str:
        """Return the ISO 4217 code for this currency.

        Raises:
            ValueError: If the currency only exists inside Mercado Pago
                (e.g. ``MCN``) or an unknown value is not an ISO 4217 code.
        """
        if self.value in ISO_CURRENCIES:
            return self.value
        if self.is_unknown and self.value in ISO_4217_CODES:
            return self.value
        raise ValueError(f"Unsupported currency: {self.value}")
