"""Payment request builders.

Reference: https://www.mercadopago.com.br/developers/pt/reference/payments/_payments/post
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

from typing_extensions import Self

from .request import ApiRequest, RequestBuilder, SearchBuilder
from .schemas.payer import Payer
from .schemas.payments import (
    PartialPaymentResult,
    PaymentCreateOptions,
    PaymentMethodId,
    PaymentResponse,
    PaymentSearchOptions,
    PaymentStatus,
    PaymentUpdateOptions,
    ProductItem,
)

if TYPE_CHECKING:
    from .client import AsyncMercadoPagoClient, MercadoPagoClient

PAYMENTS_PATH = "/v1/payments"
PAYMENTS_SEARCH_PATH = "/v1/payments/search"


class PaymentCreateBuilder(RequestBuilder[PaymentResponse]):
    """Create a payment (``POST /v1/payments``).

    Example:
        ```python
        payment = (
            PaymentCreateBuilder.create(
                "Some product",
                Payer(email="test_user@testmail.com"),
                PaymentMethodId.PIX,
                Decimal("25.0"),
            )
            .add_items([ProductItem(id="1", title="Some product", quantity="1",
                                    unit_price=Decimal("25.0"))])
            .send(client)
        )
        ```
    """

    response_type = PaymentResponse

    def __init__(self, options: PaymentCreateOptions) -> None:
        self.options = options

    @classmethod
    def create(
        cls,
        description: str,
        payer: Payer,
        payment_method_id: PaymentMethodId,
        transaction_amount: Decimal | float | str,
    ) -> PaymentCreateBuilder:
        """Builder with the minimum a payment needs."""
        return cls(
            PaymentCreateOptions(
                description=description,
                payer=payer,
                payment_method_id=payment_method_id,
                transaction_amount=Decimal(str(transaction_amount)),
            )
        )

    def set_items(self, items: Iterable[ProductItem]) -> Self:
        """Replace ``additional_info.items``.

        Returns:
            Self for chaining.
        """
        self.options.additional_info.items = list(items)
        return self

    def add_items(self, items: Iterable[ProductItem]) -> Self:
        """Append to ``additional_info.items``.

        Returns:
            Self for chaining.
        """
        self.options.additional_info.items.extend(items)
        return self

    def build_request(self) -> ApiRequest:
        return ApiRequest("POST", PAYMENTS_PATH, json=self.options.to_body())


class PaymentGetBuilder(RequestBuilder[PaymentResponse]):
    """Fetch one payment (``GET /v1/payments/{id}``)."""

    response_type = PaymentResponse

    def __init__(self, payment_id: int) -> None:
        self.payment_id = payment_id

    def build_request(self) -> ApiRequest:
        return ApiRequest("GET", f"{PAYMENTS_PATH}/{self.payment_id}")


class PaymentUpdateBuilder(RequestBuilder[PaymentResponse]):
    """Update a payment (``PUT /v1/payments/{id}``)."""

    response_type = PaymentResponse

    def __init__(self, payment_id: int, options: PaymentUpdateOptions | None = None) -> None:
        self.payment_id = payment_id
        self.options = options or PaymentUpdateOptions()

    @classmethod
    def cancel(cls, payment_id: int) -> PaymentUpdateBuilder:
        """Builder that sets the payment status to ``cancelled``."""
        return cls(payment_id, PaymentUpdateOptions(status=PaymentStatus.CANCELLED))

    def cancel_payment(self, client: MercadoPagoClient) -> PaymentResponse:
        """Cancel the payment, ignoring any other update options."""
        return self.cancel(self.payment_id).send(client)

    async def acancel_payment(self, client: AsyncMercadoPagoClient) -> PaymentResponse:
        return await self.cancel(self.payment_id).asend(client)

    def build_request(self) -> ApiRequest:
        return ApiRequest("PUT", f"{PAYMENTS_PATH}/{self.payment_id}", json=self.options.to_body())


class PaymentSearchBuilder(SearchBuilder[PaymentSearchOptions, PartialPaymentResult]):
    """Search payments across all pages (``GET /v1/payments/search``).

    Example:
        ```python
        search = PaymentSearchBuilder(
            PaymentSearchOptions(limit=10, sort=PaymentSearchSort.DATE_LAST_UPDATED)
        )
        for item in search.fetch_all_streamed(client):
            ...
        ```
    """

    path = PAYMENTS_SEARCH_PATH
    item_type = PartialPaymentResult

    def __init__(self, options: PaymentSearchOptions | None = None) -> None:
        super().__init__(options or PaymentSearchOptions())
