"""Tests for ArmClient transport and configuration."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest
import requests
from azure.core.exceptions import ClientAuthenticationError
from conftest import make_response

from az_arm import ArmClient
from az_arm.services.billing import BillingClient
from az_arm.services.cdn import CdnClient
from az_arm.services.consumption import ConsumptionClient
from az_arm.services.databox import DataBoxClient
from az_arm.settings import ArmSettings

SKU = {"name": "Standard_Microsoft"}


class TestSend:
    """send() authenticates every request and forwards it unchanged."""

    def test_bearer_header(self, client, session):
        session.request.return_value = make_response(200, {})
        client.send("GET", "https://management.azure.com/x")
        headers = session.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer fake-token"
        assert "Content-Type" not in headers

    def test_body_sets_content_type(self, client, session):
        session.request.return_value = make_response(200, {})
        client.send("PUT", "https://management.azure.com/x", b'{"a":1}')
        kwargs = session.request.call_args.kwargs
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["data"] == b'{"a":1}'

    def test_timeout_passed(self, credential, session):
        session.request.return_value = make_response(200, {})
        ArmClient(credential=credential, session=session, timeout=7).send("GET", "https://h/x")
        assert session.request.call_args.kwargs["timeout"] == 7

    def test_default_scope(self, client, credential, session):
        session.request.return_value = make_response(200, {})
        client.send("GET", "https://management.azure.com/x")
        credential.get_token.assert_called_once_with("https://management.azure.com/.default")

    def test_tenant_passed_to_credential(self, credential, session):
        session.request.return_value = make_response(200, {})
        arm = ArmClient(credential=credential, session=session, tenant_id="tid-1")
        arm.send("GET", "https://management.azure.com/x")
        credential.get_token.assert_called_once_with(
            "https://management.azure.com/.default", tenant_id="tid-1"
        )

    def test_credential_error_propagates(self, client, credential, session):
        credential.get_token.side_effect = ClientAuthenticationError("no login")
        with pytest.raises(ClientAuthenticationError):
            client.send("GET", "https://management.azure.com/x")
        session.request.assert_not_called()

    def test_transport_error_propagates(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(requests.ConnectionError):
            client.send("GET", "https://management.azure.com/x")


class TestConfiguration:
    """Endpoint, scopes and credential defaults."""

    def test_endpoint_trailing_slash_stripped(self, credential, session):
        arm = ArmClient(credential=credential, session=session, endpoint="https://arm.local/")
        assert arm.endpoint == "https://arm.local"
        assert arm.scopes == ("https://arm.local/.default",)

    def test_explicit_scopes(self, credential, session):
        arm = ArmClient(credential=credential, session=session, scopes=["api://x/.default"])
        assert arm.scopes == ("api://x/.default",)

    def test_single_scope_string(self, credential, session):
        arm = ArmClient(credential=credential, session=session, scopes="https://x/.default")
        assert arm.scopes == ("https://x/.default",)

    def test_default_credential_used_when_none_given(self, session):
        with patch("az_arm.client.default_credential") as factory:
            factory.return_value = MagicMock()
            arm = ArmClient(session=session)
        factory.assert_called_once_with()
        assert arm._credential is factory.return_value

    def test_from_settings(self, credential, session):
        settings = ArmSettings(
            arm_endpoint="https://management.usgovcloudapi.net/",
            arm_tenant_id="tid-2",
            arm_timeout=12,
            _env_file=None,
        )
        arm = ArmClient.from_settings(settings, credential=credential, session=session)
        assert arm.endpoint == "https://management.usgovcloudapi.net"
        assert arm.scopes == ("https://management.usgovcloudapi.net/.default",)
        assert arm.tenant_id == "tid-2"
        assert arm.timeout == 12

    def test_empty_tenant_is_none(self, credential, session):
        settings = ArmSettings(_env_file=None)
        arm = ArmClient.from_settings(settings, credential=credential, session=session)
        assert arm.tenant_id is None


class TestServiceAccessors:
    def test_service_clients(self, client):
        assert isinstance(client.billing, BillingClient)
        assert isinstance(client.cdn, CdnClient)
        assert isinstance(client.consumption, ConsumptionClient)
        assert isinstance(client.databox, DataBoxClient)

    def test_pager_is_lazy(self, client, session):
        client.consumption.budgets.list("/subscriptions/s")
        session.request.assert_not_called()
        client.databox.jobs.list("s")
        session.request.assert_not_called()


class TestConcurrency:
    """Independent pagers share one client across threads."""

    def test_pagers_on_threads(self, client, session):
        def respond(method, url, **kwargs):
            if "next" in url:
                name = url.split("/")[3] + "-2"
                return make_response(200, {"value": [{"name": name, "sku": SKU}]})
            sub = url.split("/")[4]
            return make_response(
                200,
                {"value": [{"name": f"{sub}-1", "sku": SKU}], "nextLink": f"/{sub}/next"},
            )

        session.request.side_effect = respond
        subs = [f"sub{i}" for i in range(8)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(
                pool.map(
                    lambda sub: [p.name for p in client.cdn.profiles.list(sub).iter_items()],
                    subs,
                )
            )
        assert results == [[f"{sub}-1", f"{sub}-2"] for sub in subs]
