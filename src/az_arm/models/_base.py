"""Shared resource shapes and the generic list page."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, Field

T = TypeVar("T")


class ArmModel(BaseModel):
    """Base for ARM resource shapes.

    Field names mirror the wire (camelCase); properties the service adds later
    are kept rather than dropped.
    """

    model_config = {"extra": "allow", "populate_by_name": True}


class Resource(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None


class TrackedResource(Resource):
    location: str | None = None
    tags: dict[str, str] | None = None


class ProxyResource(Resource):
    eTag: str | None = None


class ErrorDetail(ArmModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(ArmModel):
    error: ErrorDetail | None = None


class OperationDisplay(ArmModel):
    provider: str | None = None
    resource: str | None = None
    operation: str | None = None
    description: str | None = None


class OperationInfo(ArmModel):
    """One entry of a resource provider's ``operations`` listing."""

    name: str | None = None
    isDataAction: bool | None = None
    display: OperationDisplay | None = None
    origin: str | None = None


class Page(BaseModel, Generic[T]):
    """One page of a list operation.

    The continuation link is read from ``nextLink`` or the OData variants some
    services use instead.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    value: list[T] = Field(default_factory=list)
    nextLink: str | None = Field(
        default=None,
        validation_alias=AliasChoices("nextLink", "@odata.nextLink", "@nextLink"),
    )

    @property
    def continuation(self) -> str | None:
        """The token for the next page, or ``None`` when this is the last page."""
        return self.nextLink or None