"""Microsoft.Billing resource shapes (api-version 2021-10-01)."""

from __future__ import annotations

from datetime import datetime

from az_arm.enums import OpenEnum
from az_arm.models._base import ArmModel, Resource


class AutoRenew(OpenEnum):
    Off = "Off"
    On = "On"


class BillingSubscriptionStatus(OpenEnum):
    Unknown = "Unknown"
    Active = "Active"
    Disabled = "Disabled"
    Deleted = "Deleted"
    Warned = "Warned"
    Expiring = "Expiring"
    Expired = "Expired"
    AutoRenew = "AutoRenew"
    Cancelled = "Cancelled"
    Suspended = "Suspended"
    Failed = "Failed"


class PaymentMethodFamily(OpenEnum):
    Credits = "Credits"
    CheckWire = "CheckWire"
    CreditCard = "CreditCard"
    None_ = "None"


class PaymentMethodStatus(OpenEnum):
    active = "active"
    inactive = "inactive"


class Amount(ArmModel):
    currency: str | None = None
    value: float | None = None


class Reseller(ArmModel):
    resellerId: str | None = None
    description: str | None = None


class BillingSubscriptionProperties(ArmModel):
    autoRenew: AutoRenew | None = None
    beneficiaryTenantId: str | None = None
    billingFrequency: str | None = None
    billingProfileId: str | None = None
    billingProfileDisplayName: str | None = None
    billingProfileName: str | None = None
    consumptionCostCenter: str | None = None
    customerId: str | None = None
    customerDisplayName: str | None = None
    displayName: str | None = None
    enrollmentAccountId: str | None = None
    enrollmentAccountDisplayName: str | None = None
    invoiceSectionId: str | None = None
    invoiceSectionDisplayName: str | None = None
    invoiceSectionName: str | None = None
    lastMonthCharges: Amount | None = None
    monthToDateCharges: Amount | None = None
    productCategory: str | None = None
    productType: str | None = None
    productTypeId: str | None = None
    purchaseDate: datetime | None = None
    quantity: int | None = None
    reseller: Reseller | None = None
    skuId: str | None = None
    skuDescription: str | None = None
    status: BillingSubscriptionStatus | None = None
    subscriptionId: str | None = None
    termDuration: str | None = None
    termStartDate: datetime | None = None
    termEndDate: datetime | None = None


class BillingSubscription(Resource):
    properties: BillingSubscriptionProperties | None = None


class PaymentMethodLogo(ArmModel):
    mimeType: str | None = None
    url: str | None = None


class PaymentMethodProperties(ArmModel):
    family: PaymentMethodFamily | None = None
    type: str | None = None
    accountHolderName: str | None = None
    expiration: str | None = None
    lastFourDigits: str | None = None
    displayName: str | None = None
    logos: list[PaymentMethodLogo] | None = None
    status: PaymentMethodStatus | None = None


class PaymentMethodResource(Resource):
    properties: PaymentMethodProperties | None = None
