"""Payer schemas."""

from __future__ import annotations

from enum import Enum

from .base import BaseMercadoPagoModel, OpenEnum


class EntityType(str, Enum):
    INDIVIDUAL = "individual"
    ASSOCIATION = "association"


class PayerType(str, Enum):
    CUSTOMER = "customer"
    REGISTERED = "registered"
    GUEST = "guest"


class IdentificationType(OpenEnum):
    """Document types accepted across Latin American markets."""

    CPF = "CPF"
    CNPJ = "CNPJ"
    CUIT = "CUIT"
    CUIL = "CUIL"
    DNI = "DNI"
    CURP = "CURP"
    RFC = "RFC"
    CC = "CC"
    RUT = "RUT"
    CI = "CI"


class PayerIdentification(BaseMercadoPagoModel):
    type: IdentificationType
    number: str


class PhoneNumber(BaseMercadoPagoModel):
    area_code: str
    number: str


class PayerAddress(BaseMercadoPagoModel):
    zip_code: str
    street_name: str
    street_number: int


class Payer(BaseMercadoPagoModel):
    """The person or company making the payment. Only ``email`` is required."""

    email: str
    entity_type: EntityType | None = None
    type: PayerType | None = None
    id: str | None = None
    identification: PayerIdentification | None = None
    first_name: str | None = None
    last_name: str | None = None


class AdditionalInfoPayer(BaseMercadoPagoModel):
    first_name: str | None = None
    last_name: str | None = None
    phone: PhoneNumber | None = None
    address: PayerAddress | None = None
    registration_date: str | None = None
