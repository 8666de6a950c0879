"""Shared test fixtures for az-arm tests."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
from requests.structures import CaseInsensitiveDict

from az_arm import ArmClient

ENDPOINT = "https://management.azure.com"


def make_response(status_code: int, body: object = None, headers: dict | None = None) -> MagicMock:
    """Build a fake ``requests.Response`` with a JSON body (or none)."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = CaseInsensitiveDict(headers or {})
    if body is None:
        resp.content = b""
        resp.json.side_effect = ValueError("no body")
    else:
        resp.content = body if isinstance(body, bytes) else json.dumps(body).encode()
        if isinstance(body, bytes):
            resp.json.side_effect = ValueError("not json")
        else:
            resp.json.return_value = body
    return resp


def sent_urls(session: MagicMock) -> list[str]:
    """URLs passed to ``session.request`` in call order."""
    return [c.args[1] for c in session.request.call_args_list]


@pytest.fixture()
def credential():
    """A token credential that hands out a fake token."""
    cred = MagicMock()
    token = MagicMock()
    token.token = "fake-token"
    cred.get_token.return_value = token
    return cred


@pytest.fixture()
def session():
    """A transport session with no canned responses; tests set ``request``."""
    return MagicMock()


@pytest.fixture()
def client(credential, session):
    return ArmClient(credential=credential, session=session)
