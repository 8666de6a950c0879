"""Tests for the lazy nextLink pager."""

from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
from conftest import ENDPOINT, make_response, sent_urls

from az_arm._operation import Operation
from az_arm._pagination import PagerState
from az_arm.errors import HttpResponseError
from az_arm.models import Page, Resource

LIST_OP = Operation(
    "GET",
    "{scope}/providers/Microsoft.Consumption/usageDetails",
    "2021-10-01",
    responses={200: Page[Resource], 204: None},
    query={"filter": "$filter", "top": "$top", "expand": "$expand"},
)

SCOPE = "/subscriptions/sub-1"


def _item(name: str) -> dict:
    return {"id": f"/x/{name}", "name": name}


def _query(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


class TestScenarios:
    """End-to-end page sequences against canned responses."""

    def test_empty_list_yields_one_empty_page(self, client, session):
        session.request.return_value = make_response(200, {"value": [], "nextLink": None})

        pages = list(client.pager(LIST_OP, scope=SCOPE))

        assert len(pages) == 1
        assert pages[0].value == []
        assert session.request.call_count == 1

    def test_two_page_list(self, client, session):
        token = (
            f"{ENDPOINT}/subscriptions/sub-1/providers/Microsoft.Consumption/usageDetails"
            "?$skiptoken=X"
        )
        session.request.side_effect = [
            make_response(200, {"value": [_item("a"), _item("b")], "nextLink": token}),
            make_response(200, {"value": [_item("c")], "nextLink": None}),
        ]

        pages = list(client.pager(LIST_OP, scope=SCOPE))

        assert len(pages) == 2
        assert [r.name for p in pages for r in p.value] == ["a", "b", "c"]
        second = sent_urls(session)[1]
        assert second.startswith(token)
        assert second == f"{token}&api-version=2021-10-01"

    def test_204_on_first_call_yields_nothing(self, client, session):
        session.request.return_value = make_response(204)

        pager = client.pager(LIST_OP, scope=SCOPE)

        assert list(pager) == []
        assert pager.state is PagerState.terminal
        assert session.request.call_count == 1

    def test_204_ends_lists_that_do_not_declare_it(self, client, session):
        op = Operation(
            "GET",
            "subscriptions/{subscriptionId}/things",
            "2021-10-01",
            responses={200: Page[Resource]},
        )
        session.request.side_effect = [
            make_response(200, {"value": [_item("a")], "nextLink": "/p?n=2"}),
            make_response(204),
        ]

        pager = client.pager(op, subscriptionId="sub-1")

        assert [p.value[0].name for p in pager] == ["a"]
        assert pager.state is PagerState.terminal
        assert pager.continuation_token is None
        assert session.request.call_count == 2

    def test_204_after_a_page_terminates(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [_item("a")], "nextLink": "/next?page=2"}),
            make_response(204),
        ]

        pages = list(client.pager(LIST_OP, scope=SCOPE))

        assert len(pages) == 1
        assert session.request.call_count == 2

    def test_mid_sequence_failure(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [_item("a"), _item("b")], "nextLink": "/next?page=2"}),
            make_response(500, {"error": {"code": "InternalError", "message": "boom"}}),
        ]
        pager = client.pager(LIST_OP, scope=SCOPE)

        first = next(pager)
        assert [r.name for r in first.value] == ["a", "b"]

        with pytest.raises(HttpResponseError) as exc_info:
            next(pager)
        assert exc_info.value.status_code == 500
        assert exc_info.value.error_code == "InternalError"
        assert pager.state is PagerState.failed

        # Failed is absorbing: no further requests.
        assert list(pager) == []
        assert session.request.call_count == 2

    def test_page_count_matches_requests(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [_item(str(i))], "nextLink": f"/p?n={i + 1}"})
            for i in range(4)
        ] + [make_response(200, {"value": [_item("last")]})]

        pages = list(client.pager(LIST_OP, scope=SCOPE))

        assert len(pages) == 5
        assert session.request.call_count == 5


class TestLaziness:
    """Requests are issued only when the caller asks for a page."""

    def test_creating_pager_sends_nothing(self, client, session, credential):
        client.pager(LIST_OP, scope=SCOPE, filter="x")

        session.request.assert_not_called()
        credential.get_token.assert_not_called()

    def test_one_request_per_page(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [_item("a")], "nextLink": "/p?n=2"}),
            make_response(200, {"value": [_item("b")]}),
        ]
        pager = client.pager(LIST_OP, scope=SCOPE)

        next(pager)
        assert session.request.call_count == 1
        assert pager.state is PagerState.has_page
        assert pager.continuation_token == "/p?n=2"

        next(pager)
        assert session.request.call_count == 2
        assert pager.state is PagerState.terminal
        assert pager.continuation_token is None

    def test_iter_items_flattens_in_server_order(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [_item("z"), _item("a")], "nextLink": "/p?n=2"}),
            make_response(200, {"value": [_item("m")]}),
        ]

        names = [r.name for r in client.pager(LIST_OP, scope=SCOPE).iter_items()]

        assert names == ["z", "a", "m"]

    def test_empty_next_link_terminates(self, client, session):
        session.request.return_value = make_response(200, {"value": [_item("a")], "nextLink": ""})

        pages = list(client.pager(LIST_OP, scope=SCOPE))

        assert len(pages) == 1
        assert session.request.call_count == 1


class TestContinuationRequests:
    """Continuation requests follow the token, not the original options."""

    def test_first_request_carries_each_option_once(self, client, session):
        session.request.return_value = make_response(200, {"value": []})

        list(client.pager(LIST_OP, scope=SCOPE, filter="properties/x eq 'y'", top=10))

        query = _query(sent_urls(session)[0])
        assert query.count(("$filter", "properties/x eq 'y'")) == 1
        assert query.count(("$top", "10")) == 1
        assert query.count(("api-version", "2021-10-01")) == 1
        assert all(key != "$expand" for key, _ in query)

    def test_continuation_does_not_reappend_options(self, client, session):
        session.request.side_effect = [
            make_response(
                200, {"value": [], "nextLink": "/subscriptions/sub-1/things?$skiptoken=abc"}
            ),
            make_response(200, {"value": []}),
        ]

        list(client.pager(LIST_OP, scope=SCOPE, filter="f", top=5))

        second = sent_urls(session)[1]
        assert second == (
            f"{ENDPOINT}/subscriptions/sub-1/things?$skiptoken=abc&api-version=2021-10-01"
        )

    def test_api_version_not_duplicated(self, client, session):
        token = f"{ENDPOINT}/things?api-version=2020-01-01&$skiptoken=abc"
        session.request.side_effect = [
            make_response(200, {"value": [], "nextLink": token}),
            make_response(200, {"value": []}),
        ]

        list(client.pager(LIST_OP, scope=SCOPE))

        second = sent_urls(session)[1]
        assert second == token
        assert [k for k, _ in _query(second)].count("api-version") == 1

    def test_token_is_not_reencoded(self, client, session):
        token = "/things?$skiptoken=a%2Bb%3D%3D&other=x%20y"
        session.request.side_effect = [
            make_response(200, {"value": [], "nextLink": token}),
            make_response(200, {"value": []}),
        ]

        list(client.pager(LIST_OP, scope=SCOPE))

        assert sent_urls(session)[1] == f"{ENDPOINT}{token}&api-version=2021-10-01"

    def test_api_version_sent_when_token_has_fragment(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [], "nextLink": "/p?n=2#frag"}),
            make_response(200, {"value": []}),
        ]

        list(client.pager(LIST_OP, scope=SCOPE))

        second = sent_urls(session)[1]
        assert _query(second) == [("n", "2"), ("api-version", "2021-10-01")]
        assert urlsplit(second).fragment == "frag"

    def test_odata_next_link_is_followed(self, client, session):
        session.request.side_effect = [
            make_response(200, {"value": [_item("a")], "@odata.nextLink": "/p?n=2"}),
            make_response(200, {"value": [_item("b")]}),
        ]

        items = list(client.pager(LIST_OP, scope=SCOPE).iter_items())

        assert len(items) == 2
        assert sent_urls(session)[1] == f"{ENDPOINT}/p?n=2&api-version=2021-10-01"

    def test_every_request_gets_a_fresh_token(self, client, session, credential):
        session.request.side_effect = [
            make_response(200, {"value": [], "nextLink": "/p?n=2"}),
            make_response(200, {"value": []}),
        ]

        list(client.pager(LIST_OP, scope=SCOPE))

        assert credential.get_token.call_count == 2
        for c in session.request.call_args_list:
            assert c.kwargs["headers"]["Authorization"] == "Bearer fake-token"

    def test_continuation_reuses_method_without_body(self, client, session):
        post_op = Operation(
            "POST",
            "things/list",
            "2021-03-01",
            responses={200: Page[Resource]},
        )
        session.request.side_effect = [
            make_response(200, {"value": [], "nextLink": "/things/list?page=2"}),
            make_response(200, {"value": []}),
        ]

        list(client.pager(post_op, {"filter": "all"}))

        first, second = session.request.call_args_list
        assert first.args[0] == "POST"
        assert first.kwargs["data"] == b'{"filter":"all"}'
        assert second.args[0] == "POST"
        assert second.kwargs["data"] is None


class TestResume:
    """A pager can resume from a token handed out earlier."""

    def test_resume_starts_from_token(self, client, session):
        session.request.return_value = make_response(200, {"value": [_item("c")]})
        pager = client.pager(LIST_OP, scope=SCOPE, filter="f")

        resumed = pager.resume("/saved?$skiptoken=42")
        pages = list(resumed)

        assert len(pages) == 1
        assert sent_urls(session) == [f"{ENDPOINT}/saved?$skiptoken=42&api-version=2021-10-01"]
        assert pager.state is PagerState.start


class TestFailurePropagation:
    """Errors from collaborators surface unchanged and end the pager."""

    def test_credential_failure_propagates(self, client, session, credential):
        credential.get_token.side_effect = RuntimeError("no token")
        pager = client.pager(LIST_OP, scope=SCOPE)

        with pytest.raises(RuntimeError, match="no token"):
            next(pager)
        session.request.assert_not_called()
        assert pager.state is PagerState.failed

    def test_transport_failure_propagates(self, client, session):
        session.request.side_effect = requests.ConnectionError("down")
        pager = client.pager(LIST_OP, scope=SCOPE)

        with pytest.raises(requests.ConnectionError):
            next(pager)
        assert list(pager) == []
        assert session.request.call_count == 1
