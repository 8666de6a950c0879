"""Per-service operation groups.

Each service module declares its operations as :class:`~az_arm._operation.Operation`
constants and exposes them through small group classes bound to an
:class:`~az_arm.client.ArmClient`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from az_arm.client import ArmClient


class OperationGroup:
    """Base for a set of operations sharing one client."""

    def __init__(self, client: ArmClient) -> None:
        self._client = client
