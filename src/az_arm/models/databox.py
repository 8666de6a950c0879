"""Microsoft.DataBox resource shapes (api-version 2021-03-01)."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from az_arm.enums import OpenEnum
from az_arm.models._base import ArmModel, ErrorDetail, TrackedResource


class SkuName(OpenEnum):
    DataBox = "DataBox"
    DataBoxDisk = "DataBoxDisk"
    DataBoxHeavy = "DataBoxHeavy"


class StageName(OpenEnum):
    DeviceOrdered = "DeviceOrdered"
    DevicePrepared = "DevicePrepared"
    Dispatched = "Dispatched"
    Delivered = "Delivered"
    PickedUp = "PickedUp"
    AtAzureDC = "AtAzureDC"
    DataCopy = "DataCopy"
    Completed = "Completed"
    CompletedWithErrors = "CompletedWithErrors"
    Cancelled = "Cancelled"
    Failed_IssueReportedAtCustomer = "Failed_IssueReportedAtCustomer"
    Failed_IssueDetectedAtAzureDC = "Failed_IssueDetectedAtAzureDC"
    Aborted = "Aborted"
    CompletedWithWarnings = "CompletedWithWarnings"
    ReadyToDispatchFromAzureDC = "ReadyToDispatchFromAzureDC"
    ReadyToReceiveAtAzureDC = "ReadyToReceiveAtAzureDC"


class TransferType(StrEnum):
    """Closed set: a job either imports into or exports out of Azure."""

    ImportToAzure = "ImportToAzure"
    ExportFromAzure = "ExportFromAzure"


class SkuDisabledReason(OpenEnum):
    None_ = "None"
    Country = "Country"
    Region = "Region"
    Feature = "Feature"
    OfferType = "OfferType"
    NoSubscriptionInfo = "NoSubscriptionInfo"


class Sku(ArmModel):
    name: SkuName
    displayName: str | None = None
    family: str | None = None


class JobProperties(ArmModel):
    transferType: TransferType
    isCancellable: bool | None = None
    isDeletable: bool | None = None
    isShippingAddressEditable: bool | None = None
    isPrepareToShipEnabled: bool | None = None
    status: StageName | None = None
    startTime: datetime | None = None
    error: ErrorDetail | None = None
    details: dict[str, Any] | None = None
    cancellationReason: str | None = None
    deliveryType: str | None = None
    isCancellableWithoutFee: bool | None = None


class JobResource(TrackedResource):
    sku: Sku
    properties: JobProperties
    identity: dict[str, Any] | None = None


class CancellationReason(ArmModel):
    reason: str


class AvailableSkuRequest(ArmModel):
    transferType: TransferType
    country: str
    location: str
    skuNames: list[SkuName] | None = None


class SkuInformation(ArmModel):
    sku: Sku | None = None
    enabled: bool | None = None
    properties: dict[str, Any] | None = None
    disabledReason: SkuDisabledReason | None = None
    disabledReasonMessage: str | None = None
