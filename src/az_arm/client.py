"""ARM client: endpoint, credential and transport shared by every operation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import requests
from azure.core.credentials import TokenCredential

from az_arm._auth import DEFAULT_ENDPOINT, bearer_headers, default_credential, default_scopes
from az_arm._operation import Operation, Response, execute
from az_arm._pagination import Pager

if TYPE_CHECKING:
    from az_arm.services.billing import BillingClient
    from az_arm.services.cdn import CdnClient
    from az_arm.services.consumption import ConsumptionClient
    from az_arm.services.databox import DataBoxClient
    from az_arm.settings import ArmSettings

logger = logging.getLogger(__name__)


class ArmClient:
    """Holds the read-only configuration every request needs.

    The credential and the ``requests.Session`` are shared by all operations
    and are expected to be safe for concurrent use; the client itself keeps no
    per-call state, so independent pagers may run on separate threads.
    """

    def __init__(
        self,
        credential: TokenCredential | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        scopes: Sequence[str] | None = None,
        tenant_id: str | None = None,
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._credential = credential if credential is not None else default_credential()
        if isinstance(scopes, str):
            scopes = [scopes]
        self._scopes = tuple(scopes) if scopes else tuple(default_scopes(self._endpoint))
        self._tenant_id = tenant_id or None
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(
        cls,
        settings: ArmSettings | None = None,
        credential: TokenCredential | None = None,
        session: requests.Session | None = None,
    ) -> ArmClient:
        """Build a client from :class:`~az_arm.settings.ArmSettings`.

        Without *settings* they are read from the environment.
        """
        if settings is None:
            from az_arm.settings import ArmSettings

            settings = ArmSettings()
        return cls(
            credential=credential,
            endpoint=settings.arm_endpoint,
            scopes=settings.arm_scopes,
            tenant_id=settings.arm_tenant_id,
            timeout=settings.arm_timeout,
            session=session,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    @property
    def tenant_id(self) -> str | None:
        return self._tenant_id

    @property
    def timeout(self) -> int:
        return self._timeout

    def send(self, method: str, url: str, body: bytes | None = None) -> requests.Response:
        """Send one authenticated request and return the raw transport response.

        A token is requested for every call; credential and transport errors
        propagate unchanged.
        """
        headers = bearer_headers(self._credential, self._scopes, self._tenant_id)
        if body is not None:
            headers["Content-Type"] = "application/json"
        logger.debug("%s %s", method, url)
        resp = self._session.request(method, url, headers=headers, data=body, timeout=self._timeout)
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    def call(self, operation: Operation, body: Any = None, **kwargs: Any) -> Response[Any]:
        """Run a single-call *operation* and return its classified outcome."""
        return execute(self, operation.bind(body, **kwargs))

    def pager(self, operation: Operation, body: Any = None, **kwargs: Any) -> Pager[Any]:
        """Return a lazy :class:`Pager` for a list *operation*; nothing is sent yet."""
        return Pager(self, operation.bind(body, **kwargs))

    # -- Service operation groups -------------------------------------------

    @property
    def billing(self) -> BillingClient:
        from az_arm.services.billing import BillingClient

        return BillingClient(self)

    @property
    def cdn(self) -> CdnClient:
        from az_arm.services.cdn import CdnClient

        return CdnClient(self)

    @property
    def consumption(self) -> ConsumptionClient:
        from az_arm.services.consumption import ConsumptionClient

        return ConsumptionClient(self)

    @property
    def databox(self) -> DataBoxClient:
        from az_arm.services.databox import DataBoxClient

        return DataBoxClient(self)
