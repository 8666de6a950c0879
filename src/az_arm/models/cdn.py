"""Microsoft.Cdn resource shapes (api-version 2019-12-31)."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from az_arm.enums import OpenEnum
from az_arm.models._base import ArmModel, TrackedResource


class SkuName(OpenEnum):
    Standard_Verizon = "Standard_Verizon"
    Premium_Verizon = "Premium_Verizon"
    Custom_Verizon = "Custom_Verizon"
    Standard_Akamai = "Standard_Akamai"
    Standard_ChinaCdn = "Standard_ChinaCdn"
    Standard_Microsoft = "Standard_Microsoft"
    Premium_ChinaCdn = "Premium_ChinaCdn"


class ProfileResourceState(OpenEnum):
    Creating = "Creating"
    Active = "Active"
    Deleting = "Deleting"
    Disabled = "Disabled"


class EndpointResourceState(OpenEnum):
    Creating = "Creating"
    Deleting = "Deleting"
    Running = "Running"
    Starting = "Starting"
    Stopped = "Stopped"
    Stopping = "Stopping"


class OptimizationType(OpenEnum):
    GeneralWebDelivery = "GeneralWebDelivery"
    GeneralMediaStreaming = "GeneralMediaStreaming"
    VideoOnDemandMediaStreaming = "VideoOnDemandMediaStreaming"
    LargeFileDownload = "LargeFileDownload"
    DynamicSiteAcceleration = "DynamicSiteAcceleration"


class QueryStringCachingBehavior(StrEnum):
    """Closed set: the service rejects any other value."""

    IgnoreQueryString = "IgnoreQueryString"
    BypassCaching = "BypassCaching"
    UseQueryString = "UseQueryString"
    NotSet = "NotSet"


class Sku(ArmModel):
    name: SkuName | None = None


class ProfileProperties(ArmModel):
    resourceState: ProfileResourceState | None = None
    provisioningState: str | None = None


class Profile(TrackedResource):
    sku: Sku
    properties: ProfileProperties | None = None


class ProfileUpdateParameters(ArmModel):
    tags: dict[str, str] | None = None


class DeepCreatedOriginProperties(ArmModel):
    hostName: str
    httpPort: int | None = None
    httpsPort: int | None = None


class DeepCreatedOrigin(ArmModel):
    name: str
    properties: DeepCreatedOriginProperties | None = None


class EndpointProperties(ArmModel):
    hostName: str | None = None
    originHostHeader: str | None = None
    originPath: str | None = None
    contentTypesToCompress: list[str] | None = None
    isCompressionEnabled: bool | None = None
    isHttpAllowed: bool | None = None
    isHttpsAllowed: bool | None = None
    queryStringCachingBehavior: QueryStringCachingBehavior | None = None
    optimizationType: OptimizationType | None = None
    probePath: str | None = None
    origins: list[DeepCreatedOrigin] = Field(default_factory=list)
    resourceState: EndpointResourceState | None = None
    provisioningState: str | None = None


class Endpoint(TrackedResource):
    properties: EndpointProperties | None = None


class ResourceUsage(ArmModel):
    resourceType: str | None = None
    unit: str | None = None
    currentValue: int | None = None
    limit: int | None = None


class CheckNameAvailabilityInput(ArmModel):
    name: str
    type: str = "Microsoft.Cdn/Profiles/Endpoints"


class CheckNameAvailabilityOutput(ArmModel):
    nameAvailable: bool | None = None
    reason: str | None = None
    message: str | None = None
