"""Microsoft.Consumption resource shapes (api-version 2021-10-01)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from az_arm.enums import OpenEnum
from az_arm.models._base import ArmModel, ProxyResource, Resource

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BudgetCategory(OpenEnum):
    Cost = "Cost"


class TimeGrain(OpenEnum):
    Monthly = "Monthly"
    Quarterly = "Quarterly"
    Annually = "Annually"
    BillingMonth = "BillingMonth"
    BillingQuarter = "BillingQuarter"
    BillingAnnual = "BillingAnnual"


class BudgetOperator(OpenEnum):
    In = "In"


class NotificationOperator(OpenEnum):
    EqualTo = "EqualTo"
    GreaterThan = "GreaterThan"
    GreaterThanOrEqualTo = "GreaterThanOrEqualTo"


class ThresholdType(OpenEnum):
    Actual = "Actual"
    Forecasted = "Forecasted"


class UsageDetailsKind(OpenEnum):
    legacy = "legacy"
    modern = "modern"


class ChargeSummaryKind(OpenEnum):
    legacy = "legacy"
    modern = "modern"


class ReservationRecommendationKind(OpenEnum):
    legacy = "legacy"
    modern = "modern"


class BillingFrequency(OpenEnum):
    Month = "Month"
    Quarter = "Quarter"
    Year = "Year"


# ---------------------------------------------------------------------------
# Budgets
# ---------------------------------------------------------------------------


class Amount(ArmModel):
    currency: str | None = None
    value: float | None = None


class BudgetComparisonExpression(ArmModel):
    name: str
    operator: BudgetOperator
    values: list[str]


class BudgetFilterProperties(ArmModel):
    dimensions: BudgetComparisonExpression | None = None
    tags: BudgetComparisonExpression | None = None


class BudgetFilter(ArmModel):
    and_: list[BudgetFilterProperties] | None = Field(default=None, alias="and")
    dimensions: BudgetComparisonExpression | None = None
    tags: BudgetComparisonExpression | None = None


class BudgetTimePeriod(ArmModel):
    startDate: datetime
    endDate: datetime | None = None


class CurrentSpend(ArmModel):
    amount: float | None = None
    unit: str | None = None


class ForecastSpend(ArmModel):
    amount: float | None = None
    unit: str | None = None


class Notification(ArmModel):
    enabled: bool
    operator: NotificationOperator
    threshold: float
    contactEmails: list[str]
    contactRoles: list[str] | None = None
    contactGroups: list[str] | None = None
    thresholdType: ThresholdType | None = None
    locale: str | None = None


class BudgetProperties(ArmModel):
    category: BudgetCategory
    amount: float
    timeGrain: TimeGrain
    timePeriod: BudgetTimePeriod
    filter: BudgetFilter | None = None
    currentSpend: CurrentSpend | None = None
    notifications: dict[str, Notification] | None = None
    forecastSpend: ForecastSpend | None = None


class Budget(ProxyResource):
    properties: BudgetProperties | None = None


# ---------------------------------------------------------------------------
# Usage details, marketplaces, charges
# ---------------------------------------------------------------------------


class UsageDetail(Resource):
    """A legacy or modern usage record.

    The two kinds share the envelope but not the property set, so
    ``properties`` is kept as a plain mapping.
    """

    kind: UsageDetailsKind
    etag: str | None = None
    tags: dict[str, str] | None = None
    properties: dict[str, Any] | None = None


class MarketplaceProperties(ArmModel):
    billingPeriodId: str | None = None
    usageStart: datetime | None = None
    usageEnd: datetime | None = None
    resourceRate: float | None = None
    offerName: str | None = None
    resourceGroup: str | None = None
    orderNumber: str | None = None
    instanceName: str | None = None
    instanceId: str | None = None
    currency: str | None = None
    consumedQuantity: float | None = None
    unitOfMeasure: str | None = None
    pretaxCost: float | None = None
    isEstimated: bool | None = None
    meterId: str | None = None
    subscriptionGuid: str | None = None
    subscriptionName: str | None = None
    accountName: str | None = None
    departmentName: str | None = None
    costCenter: str | None = None
    additionalInfo: str | None = None
    publisherName: str | None = None
    planName: str | None = None
    isRecurringCharge: bool | None = None


class Marketplace(Resource):
    etag: str | None = None
    tags: dict[str, str] | None = None
    properties: MarketplaceProperties | None = None


class ChargeSummary(Resource):
    kind: ChargeSummaryKind
    eTag: str | None = None
    properties: dict[str, Any] | None = None


class ChargesListResult(ArmModel):
    value: list[ChargeSummary] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Tags, balances, price sheet, reservation recommendations
# ---------------------------------------------------------------------------


class Tag(ArmModel):
    key: str | None = None
    value: list[str] | None = None


class TagProperties(ArmModel):
    tags: list[Tag] = Field(default_factory=list)
    nextLink: str | None = None
    previousLink: str | None = None


class TagsResult(ProxyResource):
    properties: TagProperties | None = None


class BalancePropertiesAdjustmentDetailsItem(ArmModel):
    name: str | None = None
    value: float | None = None


class BalanceProperties(ArmModel):
    currency: str | None = None
    beginningBalance: float | None = None
    endingBalance: float | None = None
    newPurchases: float | None = None
    adjustments: float | None = None
    utilized: float | None = None
    serviceOverage: float | None = None
    chargesBilledSeparately: float | None = None
    totalOverage: float | None = None
    totalUsage: float | None = None
    azureMarketplaceServiceCharges: float | None = None
    billingFrequency: BillingFrequency | None = None
    priceHidden: bool | None = None
    adjustmentDetails: list[BalancePropertiesAdjustmentDetailsItem] | None = None


class Balance(Resource):
    etag: str | None = None
    tags: dict[str, str] | None = None
    properties: BalanceProperties | None = None


class MeterDetails(ArmModel):
    meterName: str | None = None
    meterCategory: str | None = None
    meterSubCategory: str | None = None
    unit: str | None = None
    meterLocation: str | None = None
    totalIncludedQuantity: float | None = None
    pretaxStandardRate: float | None = None
    serviceName: str | None = None
    serviceTier: str | None = None


class PriceSheetProperties(ArmModel):
    billingPeriodId: str | None = None
    meterId: str | None = None
    meterDetails: MeterDetails | None = None
    unitOfMeasure: str | None = None
    includedQuantity: float | None = None
    partNumber: str | None = None
    unitPrice: float | None = None
    currencyCode: str | None = None
    offerId: str | None = None


class PriceSheetModel(ArmModel):
    pricesheets: list[PriceSheetProperties] = Field(default_factory=list)
    nextLink: str | None = None


class PriceSheetResult(Resource):
    etag: str | None = None
    tags: dict[str, str] | None = None
    properties: PriceSheetModel | None = None


class ReservationRecommendation(Resource):
    kind: ReservationRecommendationKind
    etag: str | None = None
    tags: dict[str, str] | None = None
    location: str | None = None
    sku: str | None = None
    properties: dict[str, Any] | None = None
