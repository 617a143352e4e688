"""Subscription (preapproval) request builders.

Reference: https://www.mercadopago.com.br/developers/pt/reference/subscriptions/_preapproval/post
"""

from __future__ import annotations

from .request import ApiRequest, RequestBuilder, SearchBuilder
from .schemas.subscriptions import (
    AutoRecurring,
    Subscription,
    SubscriptionCreateOptions,
    SubscriptionSearchParams,
    SubscriptionStatus,
)

SUBSCRIPTIONS_PATH = "/preapproval"
SUBSCRIPTIONS_SEARCH_PATH = "/preapproval/search"


class SubscriptionCreateBuilder(RequestBuilder[Subscription]):
    """Create a subscription (``POST /preapproval``).

    Without a plan the subscription starts ``pending`` and the payer finishes
    checkout at ``init_point``. With a plan and a card token it is
    ``authorized`` right away.

    Example:
        ```python
        subscription = SubscriptionCreateBuilder.create_without_plan(
            AutoRecurring(
                frequency=1,
                frequency_type=FrequencyType.MONTHS,
                transaction_amount=Decimal("10"),
            ),
            payer_email="test_user@testmail.com",
            reason="Testing",
            back_url="https://example.com/back",
        ).send(client)
        ```
    """

    response_type = Subscription

    def __init__(self, options: SubscriptionCreateOptions) -> None:
        self.options = options

    @classmethod
    def create_without_plan(
        cls,
        recurring_info: AutoRecurring,
        payer_email: str,
        reason: str,
        back_url: str,
    ) -> SubscriptionCreateBuilder:
        return cls(
            SubscriptionCreateOptions(
                auto_recurring=recurring_info,
                back_url=back_url,
                payer_email=payer_email,
                reason=reason,
                status=SubscriptionStatus.PENDING,
            )
        )

    @classmethod
    def create_with_plan(
        cls,
        preapproval_plan_id: str,
        payer_email: str,
        card_token_id: str,
        back_url: str,
    ) -> SubscriptionCreateBuilder:
        return cls(
            SubscriptionCreateOptions(
                back_url=back_url,
                payer_email=payer_email,
                card_token_id=card_token_id,
                preapproval_plan_id=preapproval_plan_id,
                status=SubscriptionStatus.AUTHORIZED,
            )
        )

    def build_request(self) -> ApiRequest:
        return ApiRequest("POST", SUBSCRIPTIONS_PATH, json=self.options.to_body())


class SubscriptionSearchBuilder(SearchBuilder[SubscriptionSearchParams, Subscription]):
    """Search subscriptions across all pages (``GET /preapproval/search``)."""

    path = SUBSCRIPTIONS_SEARCH_PATH
    item_type = Subscription

    def __init__(self, params: SubscriptionSearchParams | None = None) -> None:
        super().__init__(params or SubscriptionSearchParams())
