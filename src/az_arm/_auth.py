"""Authentication helpers for Azure ARM API calls."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from azure.core.credentials import TokenCredential
from azure.identity import DefaultAzureCredential

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://management.azure.com"


def default_scopes(endpoint: str) -> list[str]:
    """Return the ``.default`` scope list for *endpoint*."""
    return [f"{endpoint.rstrip('/')}/.default"]


def default_credential() -> TokenCredential:
    """Return a new *DefaultAzureCredential*."""
    return DefaultAzureCredential()


def bearer_headers(
    credential: TokenCredential,
    scopes: Sequence[str],
    tenant_id: str | None = None,
) -> dict[str, str]:
    """Return authorization headers with a freshly acquired token.

    Token acquisition errors propagate unchanged.
    """
    kwargs: dict[str, str] = {}
    if tenant_id:
        kwargs["tenant_id"] = tenant_id
    token = credential.get_token(*scopes, **kwargs)
    return {"Authorization": f"Bearer {token.token}"}
