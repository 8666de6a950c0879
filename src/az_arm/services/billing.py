"""Microsoft.Billing operations."""

from __future__ import annotations

from az_arm._operation import Operation, Response
from az_arm._pagination import Pager
from az_arm.models import OperationInfo, Page
from az_arm.models.billing import BillingSubscription, PaymentMethodResource
from az_arm.services import OperationGroup

API_VERSION = "2021-10-01"

_ACCOUNT_PATH = "providers/Microsoft.Billing/billingAccounts/{billingAccountName}"

BILLING_SUBSCRIPTIONS_LIST_BY_BILLING_ACCOUNT = Operation(
    "GET",
    f"{_ACCOUNT_PATH}/billingSubscriptions",
    API_VERSION,
    responses={200: Page[BillingSubscription]},
)
BILLING_SUBSCRIPTIONS_GET = Operation(
    "GET",
    f"{_ACCOUNT_PATH}/billingSubscriptions/{{subscriptionId}}",
    API_VERSION,
    responses={200: BillingSubscription},
)
PAYMENT_METHODS_LIST_BY_USER = Operation(
    "GET",
    "providers/Microsoft.Billing/paymentMethods",
    API_VERSION,
    responses={200: Page[PaymentMethodResource]},
)
OPERATIONS_LIST = Operation(
    "GET",
    "providers/Microsoft.Billing/operations",
    API_VERSION,
    responses={200: Page[OperationInfo]},
)


class BillingSubscriptionsOperations(OperationGroup):
    def list_by_billing_account(self, billing_account_name: str) -> Pager[BillingSubscription]:
        return self._client.pager(
            BILLING_SUBSCRIPTIONS_LIST_BY_BILLING_ACCOUNT,
            billingAccountName=billing_account_name,
        )

    def get(self, billing_account_name: str, subscription_id: str) -> Response[BillingSubscription]:
        return self._client.call(
            BILLING_SUBSCRIPTIONS_GET,
            billingAccountName=billing_account_name,
            subscriptionId=subscription_id,
        )


class PaymentMethodsOperations(OperationGroup):
    def list_by_user(self) -> Pager[PaymentMethodResource]:
        """Lists the payment methods owned by the caller."""
        return self._client.pager(PAYMENT_METHODS_LIST_BY_USER)


class OperationsOperations(OperationGroup):
    def list(self) -> Pager[OperationInfo]:
        return self._client.pager(OPERATIONS_LIST)


class BillingClient(OperationGroup):
    """Entry point for the Microsoft.Billing operation groups."""

    @property
    def billing_subscriptions(self) -> BillingSubscriptionsOperations:
        return BillingSubscriptionsOperations(self._client)

    @property
    def payment_methods(self) -> PaymentMethodsOperations:
        return PaymentMethodsOperations(self._client)

    @property
    def operations(self) -> OperationsOperations:
        return OperationsOperations(self._client)
