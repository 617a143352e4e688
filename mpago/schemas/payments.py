"""Payment schemas: create/update/search options and payment results.

Reference: https://www.mercadopago.com.br/developers/pt/reference/payments/_payments/post
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from .base import Amount, BaseMercadoPagoModel, OpenEnum
from .common import CurrencyId, SearchOptions, SearchResponse
from .payer import AdditionalInfoPayer, IdentificationType, Payer

if TYPE_CHECKING:
    from ..client import AsyncMercadoPagoClient, MercadoPagoClient

# ============================================================================
# Enumerations
# ============================================================================


class PaymentStatus(OpenEnum):
    PENDING = "pending"
    APPROVED = "approved"
    AUTHORIZED = "authorized"
    IN_PROCESS = "in_process"
    IN_MEDIATION = "in_mediation"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    CHARGED_BACK = "charged_back"


class PaymentStatusDetail(OpenEnum):
    """Detail of the outcome of the collection."""

    ACCREDITED = "accredited"
    PENDING_CONTINGENCY = "pending_contingency"
    PENDING_WAITING_TRANSFER = "pending_waiting_transfer"
    PENDING_REVIEW_MANUAL = "pending_review_manual"
    CC_REJECTED_BAD_FILLED_DATE = "cc_rejected_bad_filled_date"
    CC_REJECTED_BAD_FILLED_OTHER = "cc_rejected_bad_filled_other"
    CC_REJECTED_BAD_FILLED_SECURITY_CODE = "cc_rejected_bad_filled_security_code"
    CC_REJECTED_BLACKLIST = "cc_rejected_blacklist"
    CC_REJECTED_CALL_FOR_AUTHORIZE = "cc_rejected_call_for_authorize"
    CC_REJECTED_CARD_DISABLED = "cc_rejected_card_disabled"
    CC_REJECTED_DUPLICATED_PAYMENT = "cc_rejected_duplicated_payment"
    CC_REJECTED_HIGH_RISK = "cc_rejected_high_risk"
    CC_REJECTED_INSUFFICIENT_AMOUNT = "cc_rejected_insufficient_amount"
    CC_REJECTED_INVALID_INSTALLMENTS = "cc_rejected_invalid_installments"
    CC_REJECTED_MAX_ATTEMPTS = "cc_rejected_max_attempts"
    CC_REJECTED_OTHER_REASON = "cc_rejected_other_reason"


class PaymentTypeId(OpenEnum):
    ACCOUNT_MONEY = "account_money"
    TICKET = "ticket"
    BANK_TRANSFER = "bank_transfer"
    ATM = "atm"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PREPAID_CARD = "prepaid_card"
    DIGITAL_CURRENCY = "digital_currency"
    DIGITAL_WALLET = "digital_wallet"
    VOUCHER_CARD = "voucher_card"
    CRYPTO_TRANSFER = "crypto_transfer"


class OperationType(OpenEnum):
    INVESTMENT = "investment"
    REGULAR_PAYMENT = "regular_payment"
    MONEY_TRANSFER = "money_transfer"
    RECURRING_PAYMENT = "recurring_payment"
    ACCOUNT_FUND = "account_fund"
    PAYMENT_ADDITION = "payment_addition"
    CELLPHONE_RECHARGE = "cellphone_recharge"
    POS_PAYMENT = "pos_payment"
    MONEY_EXCHANGE = "money_exchange"


class PaymentMethodId(OpenEnum):
    PIX = "pix"
    ELO = "elo"
    VISA = "visa"
    MASTER_CARD = "master"
    HIPERCARD = "hipercard"
    AMERICAN_EXPRESS = "amex"
    CABAL = "cabal"
    MELIPLACES = "meliplaces"
    BOLETO = "bolbradesco"
    DEB_VISA = "debvisa"
    DEB_ELO = "debelo"
    DEB_MASTER = "debmaster"
    DEB_CABAL = "debcabal"
    MAESTRO = "maestro"
    ACCOUNT_MONEY = "account_money"
    LOTERICA = "pec"


class PaymentProcessingMode(str, Enum):
    AGGREGATOR = "aggregator"
    GATEWAY = "gateway"


class FeePayer(str, Enum):
    COLLECTOR = "collector"
    PAYER = "payer"


class FeeDetailsType(OpenEnum):
    MERCADOPAGO_FEE = "mercadopago_fee"
    COUPON_FEE = "coupon_fee"
    FINANCING_FEE = "financing_fee"
    SHIPPING_FEE = "shipping_fee"
    APPLICATION_FEE = "application_fee"
    DISCOUNT_FEE = "discount_fee"


class PaymentSearchSort(str, Enum):
    DATE_APPROVED = "date_approved"
    DATE_CREATED = "date_created"
    DATE_LAST_UPDATED = "date_last_updated"
    ID = "id"
    MONEY_RELEASE_DATE = "money_release_date"


class PaymentSearchCriteria(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class PaymentSearchRange(str, Enum):
    DATE_APPROVED = "date_approved"
    DATE_CREATED = "date_created"
    DATE_LAST_UPDATED = "date_last_updated"
    MONEY_RELEASE_DATE = "money_release_date"


# ============================================================================
# Request Bodies
# ============================================================================


class ProductItem(BaseMercadoPagoModel):
    """Item listed in ``additional_info.items``.

    ``quantity`` travels as a string and ``unit_price`` as a decimal string.
    """

    id: str | None = None
    title: str | None = None
    description: str | None = None
    picture_url: str | None = None
    category_id: str | None = None
    quantity: str | None = None
    unit_price: Decimal | None = None


class ReceiverAddress(BaseMercadoPagoModel):
    zip_code: str
    state_name: str
    city_name: str
    street_name: str
    street_number: int
    floor: str
    apartment: str


class Shipments(BaseMercadoPagoModel):
    receiver_address: ReceiverAddress
    width: int
    height: int


class AdditionalInfo(BaseMercadoPagoModel):
    """Extra data forwarded to risk scoring and tax services."""

    ip_address: str | None = None
    items: list[ProductItem] = Field(default_factory=list)
    payer: AdditionalInfoPayer | None = None
    shipments: Shipments | None = None


class PaymentCreateOptions(BaseMercadoPagoModel):
    """Request body of ``POST /v1/payments``."""

    payer: Payer
    payment_method_id: PaymentMethodId
    transaction_amount: Amount
    installments: int = 1
    description: str | None = ""
    additional_info: AdditionalInfo = Field(default_factory=AdditionalInfo)
    application_fee: Amount | None = None
    binary_mode: bool | None = None
    callback_url: str | None = None
    campaign_id: int | None = None
    capture: bool | None = None
    coupon_amount: Amount | None = None
    coupon_code: str | None = None
    date_of_expiration: str | None = None
    differential_pricing_id: int | None = None
    external_reference: str | None = None
    issuer_id: str | None = None
    notification_url: str | None = None
    statement_descriptor: str | None = None
    token: str | None = None


class PaymentUpdateOptions(BaseMercadoPagoModel):
    """Request body of ``PUT /v1/payments/{id}``."""

    capture: bool | None = None
    date_of_expiration: str | None = None
    status: PaymentStatus | None = None
    transaction_amount: Amount | None = None


class PaymentSearchOptions(SearchOptions):
    """Query of ``GET /v1/payments/search``.

    ``begin_date``/``end_date`` accept ISO 8601 dates or relative
    expressions such as ``NOW-30DAYS`` and require ``range``.
    """

    sort: PaymentSearchSort | None = None
    criteria: PaymentSearchCriteria | None = None
    external_reference: str | None = None
    range: PaymentSearchRange | None = None
    begin_date: str | None = None
    end_date: str | None = None


# ============================================================================
# Responses
# ============================================================================


class CardholderIdentification(BaseMercadoPagoModel):
    number: str | None = None
    type: IdentificationType | None = None


class Cardholder(BaseMercadoPagoModel):
    name: str | None = None
    identification: CardholderIdentification | None = None


class PaymentCard(BaseMercadoPagoModel):
    id: str | None = None
    first_six_digits: str | None = None
    last_four_digits: str | None = None
    expiration_month: int | None = None
    expiration_year: int | None = None
    date_created: str | None = None
    date_last_update: str | None = None
    cardholder: Cardholder | None = None


class FeeDetails(BaseMercadoPagoModel):
    type: FeeDetailsType
    amount: Amount
    fee_payer: FeePayer


class PaymentTransactionDetails(BaseMercadoPagoModel):
    payment_method_reference_id: str | None = None
    net_received_amount: Amount = Decimal(0)
    total_paid_amount: Amount = Decimal(0)
    overpaid_amount: Amount = Decimal(0)
    external_resource_url: str | None = None
    installment_amount: Amount = Decimal(0)
    financial_institution: str | None = None
    payable_deferral_period: str | None = None
    acquirer_reference: str | None = None


class TransactionData(BaseMercadoPagoModel):
    """Pix/boleto data: QR code and ticket URL."""

    qr_code_base64: str | None = None
    qr_code: str | None = None
    ticket_url: str | None = None


class ApplicationData(BaseMercadoPagoModel):
    name: str | None = None
    version: str | None = None


class PaymentPointOfInteraction(BaseMercadoPagoModel):
    type: str | None = None
    sub_type: str | None = None
    application_data: ApplicationData | None = None
    transaction_data: TransactionData | None = None


class PartialPaymentResult(BaseMercadoPagoModel):
    """Payment as listed by the search endpoint."""

    id: int
    date_created: str
    date_approved: str | None = None
    date_last_update: str | None = None
    date_of_expiration: str | None = None
    operation_type: OperationType
    payment_method_id: PaymentMethodId
    payment_type_id: PaymentTypeId
    status: PaymentStatus
    status_detail: PaymentStatusDetail | None = None
    currency_id: CurrencyId | None = None
    description: str | None = None
    live_mode: bool
    authorization_code: str | None = None
    payer: Payer | None = None
    external_reference: str | None = None
    transaction_amount: Amount
    installments: int
    processing_mode: PaymentProcessingMode | None = None

    def fetch_full_payment(self, client: MercadoPagoClient) -> PaymentResponse:
        """Fetch every field of this payment (``GET /v1/payments/{id}``)."""
        from ..payments import PaymentGetBuilder

        return PaymentGetBuilder(self.id).send(client)

    async def afetch_full_payment(self, client: AsyncMercadoPagoClient) -> PaymentResponse:
        from ..payments import PaymentGetBuilder

        return await PaymentGetBuilder(self.id).asend(client)

    def cancel_payment(self, client: MercadoPagoClient) -> PaymentResponse:
        """Cancel this payment.

        Only ``pending`` and ``in_process`` payments can be cancelled; the API
        answers anything else with an error.

        Raises:
            ApiError: Mercado Pago refused the cancellation.
        """
        from ..payments import PaymentUpdateBuilder

        return PaymentUpdateBuilder.cancel(self.id).send(client)

    async def acancel_payment(self, client: AsyncMercadoPagoClient) -> PaymentResponse:
        from ..payments import PaymentUpdateBuilder

        return await PaymentUpdateBuilder.cancel(self.id).asend(client)


class PaymentResponse(PartialPaymentResult):
    """Full payment returned by create, get and update."""

    money_release_date: str | None = None
    issuer_id: str | None = None
    money_release_schema: str | None = None
    taxes_amount: Amount = Decimal(0)
    counter_currency: str | None = None
    shipping_amount: Amount = Decimal(0)
    pos_id: str | None = None
    store_id: str | None = None
    collector_id: int | None = None
    additional_info: AdditionalInfo | None = None
    transaction_amount_refunded: Amount | None = None
    coupon_amount: Amount | None = None
    differential_pricing_id: str | None = None
    deduction_schema: str | None = None
    transaction_details: PaymentTransactionDetails | None = None
    fee_details: list[FeeDetails] = Field(default_factory=list)
    captured: bool = False
    binary_mode: bool = False
    call_for_authorize_id: str | None = None
    statement_descriptor: str | None = None
    card: PaymentCard | None = None
    notification_url: str | None = None
    merchant_account_id: str | None = None
    acquirer: str | None = None
    merchant_number: str | None = None
    point_of_interaction: PaymentPointOfInteraction | None = None


PaymentSearchResponse = SearchResponse[PartialPaymentResult]


__all__ = [
    "PaymentStatus",
    "PaymentStatusDetail",
    "PaymentTypeId",
    "OperationType",
    "PaymentMethodId",
    "PaymentProcessingMode",
    "FeePayer",
    "FeeDetailsType",
    "PaymentSearchSort",
    "PaymentSearchCriteria",
    "PaymentSearchRange",
    "ProductItem",
    "ReceiverAddress",
    "Shipments",
    "AdditionalInfo",
    "PaymentCreateOptions",
    "PaymentUpdateOptions",
    "PaymentSearchOptions",
    "PaymentCard",
    "Cardholder",
    "CardholderIdentification",
    "FeeDetails",
    "PaymentTransactionDetails",
    "TransactionData",
    "ApplicationData",
    "PaymentPointOfInteraction",
    "PartialPaymentResult",
    "PaymentResponse",
    "PaymentSearchResponse",
]
