"""Microsoft.Consumption operations."""

from __future__ import annotations

from az_arm._operation import Operation, Response
from az_arm._pagination import Pager
from az_arm.models import OperationInfo, Page
from az_arm.models.consumption import (
    Balance,
    Budget,
    ChargesListResult,
    Marketplace,
    PriceSheetResult,
    ReservationRecommendation,
    TagsResult,
    UsageDetail,
)
from az_arm.services import OperationGroup

API_VERSION = "2021-10-01"

USAGE_DETAILS_LIST = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/usageDetails",
    API_VERSION,
    responses={200: Page[UsageDetail], 204: None},
    query={
        "expand": "$expand",
        "filter": "$filter",
        "skiptoken": "$skiptoken",
        "top": "$top",
        "metric": "metric",
    },
)
MARKETPLACES_LIST = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/marketplaces",
    API_VERSION,
    responses={200: Page[Marketplace], 204: None},
    query={"filter": "$filter", "top": "$top", "skiptoken": "$skiptoken"},
)

_BUDGET_PATH = "{scope}/providers/Microsoft.Consumption/budgets/{budgetName}"
BUDGETS_LIST = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/budgets",
    API_VERSION,
    responses={200: Page[Budget]},
)
BUDGETS_GET = Operation("GET", _BUDGET_PATH, API_VERSION, responses={200: Budget})
BUDGETS_CREATE_OR_UPDATE = Operation(
    "PUT", _BUDGET_PATH, API_VERSION, responses={200: Budget, 201: Budget}, body=Budget
)
BUDGETS_DELETE = Operation("DELETE", _BUDGET_PATH, API_VERSION, responses={200: None})

TAGS_GET = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/tags",
    API_VERSION,
    responses={200: TagsResult, 204: None},
)
CHARGES_LIST = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/charges",
    API_VERSION,
    responses={200: ChargesListResult},
    query={
        "start_date": "startDate",
        "end_date": "endDate",
        "filter": "$filter",
        "apply": "$apply",
    },
)
BALANCES_GET_BY_BILLING_ACCOUNT = Operation(
    "GET",
    "providers/Microsoft.Billing/billingAccounts/{billingAccountId}"
    "/providers/Microsoft.Consumption/balances",
    API_VERSION,
    responses={200: Balance},
)
PRICE_SHEET_GET = Operation(
    "GET",
    "subscriptions/{subscriptionId}/providers/Microsoft.Consumption/pricesheets/default",
    API_VERSION,
    responses={200: PriceSheetResult},
    query={"expand": "$expand", "skiptoken": "$skiptoken", "top": "$top"},
)
RESERVATION_RECOMMENDATIONS_LIST = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/reservationRecommendations",
    API_VERSION,
    responses={200: Page[ReservationRecommendation], 204: None},
    query={"filter": "$filter"},
)
OPERATIONS_LIST = Operation(
    "GET",
    "providers/Microsoft.Consumption/operations",
    API_VERSION,
    responses={200: Page[OperationInfo]},
)


class UsageDetailsOperations(OperationGroup):
    def list(
        self,
        scope: str,
        expand: str | None = None,
        filter: str | None = None,
        skiptoken: str | None = None,
        top: int | None = None,
        metric: str | None = None,
    ) -> Pager[UsageDetail]:
        """Lists the usage details for *scope* (May 1, 2014 or later).

        *scope* is any consumption scope, e.g. ``/subscriptions/{id}`` or
        ``/providers/Microsoft.Billing/billingAccounts/{id}``.
        """
        return self._client.pager(
            USAGE_DETAILS_LIST,
            scope=scope,
            expand=expand,
            filter=filter,
            skiptoken=skiptoken,
            top=top,
            metric=metric,
        )


class MarketplacesOperations(OperationGroup):
    def list(
        self,
        scope: str,
        filter: str | None = None,
        top: int | None = None,
        skiptoken: str | None = None,
    ) -> Pager[Marketplace]:
        return self._client.pager(
            MARKETPLACES_LIST, scope=scope, filter=filter, top=top, skiptoken=skiptoken
        )


class BudgetsOperations(OperationGroup):
    def list(self, scope: str) -> Pager[Budget]:
        return self._client.pager(BUDGETS_LIST, scope=scope)

    def get(self, scope: str, budget_name: str) -> Response[Budget]:
        return self._client.call(BUDGETS_GET, scope=scope, budgetName=budget_name)

    def create_or_update(
        self, scope: str, budget_name: str, parameters: Budget
    ) -> Response[Budget]:
        """Create or update a budget.

        Pass the ``eTag`` from a previous ``get`` for optimistic concurrency.
        """
        return self._client.call(
            BUDGETS_CREATE_OR_UPDATE, parameters, scope=scope, budgetName=budget_name
        )

    def delete(self, scope: str, budget_name: str) -> Response[None]:
        return self._client.call(BUDGETS_DELETE, scope=scope, budgetName=budget_name)


class TagsOperations(OperationGroup):
    def get(self, scope: str) -> Response[TagsResult]:
        """Get all available tag keys for *scope*; ``NoContent204`` when there are none."""
        return self._client.call(TAGS_GET, scope=scope)


class ChargesOperations(OperationGroup):
    def list(
        self,
        scope: str,
        start_date: str | None = None,
        end_date: str | None = None,
        filter: str | None = None,
        apply: str | None = None,
    ) -> Response[ChargesListResult]:
        return self._client.call(
            CHARGES_LIST,
            scope=scope,
            start_date=start_date,
            end_date=end_date,
            filter=filter,
            apply=apply,
        )


class BalancesOperations(OperationGroup):
    def get_by_billing_account(self, billing_account_id: str) -> Response[Balance]:
        return self._client.call(
            BALANCES_GET_BY_BILLING_ACCOUNT, billingAccountId=billing_account_id
        )


class PriceSheetOperations(OperationGroup):
    def get(
        self,
        subscription_id: str,
        expand: str | None = None,
        skiptoken: str | None = None,
        top: int | None = None,
    ) -> Response[PriceSheetResult]:
        return self._client.call(
            PRICE_SHEET_GET,
            subscriptionId=subscription_id,
            expand=expand,
            skiptoken=skiptoken,
            top=top,
        )


class ReservationRecommendationsOperations(OperationGroup):
    def list(
        self, resource_scope: str, filter: str | None = None
    ) -> Pager[ReservationRecommendation]:
        return self._client.pager(
            RESERVATION_RECOMMENDATIONS_LIST, scope=resource_scope, filter=filter
        )


class OperationsOperations(OperationGroup):
    def list(self) -> Pager[OperationInfo]:
        return self._client.pager(OPERATIONS_LIST)


class ConsumptionClient(OperationGroup):
    """Entry point for the Microsoft.Consumption operation groups."""

    @property
    def usage_details(self) -> UsageDetailsOperations:
        return UsageDetailsOperations(self._client)

    @property
    def marketplaces(self) -> MarketplacesOperations:
        return MarketplacesOperations(self._client)

    @property
    def budgets(self) -> BudgetsOperations:
        return BudgetsOperations(self._client)

    @property
    def tags(self) -> TagsOperations:
        return TagsOperations(self._client)

    @property
    def charges(self) -> ChargesOperations:
        return ChargesOperations(self._client)

    @property
    def balances(self) -> BalancesOperations:
        return BalancesOperations(self._client)

    @property
    def price_sheet(self) -> PriceSheetOperations:
        return PriceSheetOperations(self._client)

    @property
    def reservation_recommendations(self) -> ReservationRecommendationsOperations:
        return ReservationRecommendationsOperations(self._client)

    @property
    def operations(self) -> OperationsOperations:
        return OperationsOperations(self._client)
