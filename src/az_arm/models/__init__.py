"""Typed ARM resource shapes."""

from az_arm.models._base import (
    ArmModel,
    ErrorDetail,
    ErrorResponse,
    OperationDisplay,
    OperationInfo,
    Page,
    ProxyResource,
    Resource,
    TrackedResource,
)

__all__ = [
    "ArmModel",
    "ErrorDetail",
    "ErrorResponse",
    "OperationDisplay",
    "OperationInfo",
    "Page",
    "ProxyResource",
    "Resource",
    "TrackedResource",
]
