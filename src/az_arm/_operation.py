"""Declarative ARM operations and the single-call executor.

An :class:`Operation` describes one REST operation: verb, path template,
api-version, recognised query options and the documented status codes.
Binding it to arguments produces an immutable :class:`RequestDescriptor`;
nothing touches the network until the descriptor is executed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cache
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import parse_qsl, quote, urlencode, urljoin, urlsplit, urlunsplit

from pydantic import BaseModel, TypeAdapter, ValidationError

from az_arm.errors import DeserializationError, HttpResponseError

if TYPE_CHECKING:
    from az_arm.client import ArmClient

logger = logging.getLogger(__name__)

API_VERSION_PARAM = "api-version"

T = TypeVar("T")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@cache
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def outcome_name(status_code: int) -> str:
    """Return the outcome name for *status_code*, e.g. ``Ok200`` or ``NoContent204``."""
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Status"
    return "".join(word.capitalize() for word in re.split(r"[\s-]+", phrase)) + str(status_code)


@dataclass(frozen=True)
class Response(Generic[T]):
    """Classified outcome of a single request."""

    status_code: int
    value: T | None = None
    headers: Mapping[str, str] = field(default_factory=dict, repr=False)

    @property
    def name(self) -> str:
        return outcome_name(self.status_code)


@dataclass(frozen=True)
class Operation:
    """One ARM REST operation.

    *path* is relative to the endpoint and may contain ``{placeholders}``;
    ``{scope}`` keeps its ``/`` separators, every other value is
    percent-encoded as a single segment.  *query* maps keyword names to wire
    names (``{"filter": "$filter"}``).  *responses* maps each documented status
    code to the type its body deserializes into, or ``None`` for no body.
    """

    method: str
    path: str
    api_version: str
    responses: Mapping[int, Any]
    query: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def bind(self, body: Any = None, **kwargs: Any) -> RequestDescriptor:
        """Return the request descriptor for these arguments.

        Options left at ``None`` are omitted from the query string.  Unknown
        keyword names and missing path parameters raise :class:`TypeError`.
        """
        path_names = _PLACEHOLDER.findall(self.path)
        unknown = set(kwargs) - set(path_names) - set(self.query)
        if unknown:
            raise TypeError(
                f"{self.method} {self.path} got unexpected argument(s): "
                f"{', '.join(sorted(unknown))}"
            )
        missing = [name for name in path_names if kwargs.get(name) is None]
        if missing:
            raise TypeError(
                f"{self.method} {self.path} missing path parameter(s): {', '.join(missing)}"
            )
        if self.body is not None and body is None:
            raise TypeError(f"{self.method} {self.path} requires a request body")

        path = _PLACEHOLDER.sub(
            lambda m: _encode_segment(m.group(1), kwargs[m.group(1)]), self.path
        )
        query = tuple(
            (wire, _format_query_value(kwargs[name]))
            for name, wire in self.query.items()
            if kwargs.get(name) is not None
        )
        return RequestDescriptor(operation=self, path=path, query=query, body=body)


def _encode_segment(name: str, value: Any) -> str:
    if name == "scope":
        return quote(str(value).strip("/"), safe="/")
    return quote(str(value), safe="")


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class RequestDescriptor:
    """An operation bound to its path and query arguments."""

    operation: Operation
    path: str
    query: tuple[tuple[str, str], ...] = ()
    body: Any = None

    def first_url(self, endpoint: str) -> str:
        """URL of the initial request: endpoint, path, api-version, then the set options."""
        params = [(API_VERSION_PARAM, self.operation.api_version), *self.query]
        return f"{endpoint.rstrip('/')}/{self.path}?{urlencode(params)}"

    def continuation_url(self, endpoint: str, token: str) -> str:
        """URL of a follow-up request.

        *token* is resolved against the endpoint's origin and otherwise left
        untouched; api-version is appended only when the token lacks it.
        """
        parts = urlsplit(endpoint)
        url = urljoin(urlunsplit((parts.scheme, parts.netloc, "/", "", "")), token)
        split = urlsplit(url)
        if any(
            key == API_VERSION_PARAM
            for key, _ in parse_qsl(split.query, keep_blank_values=True)
        ):
            return url
        version = urlencode([(API_VERSION_PARAM, self.operation.api_version)])
        # the fragment is never sent, so api-version must land in the query
        if split.query and not split.query.endswith("&"):
            query = f"{split.query}&{version}"
        else:
            query = f"{split.query}{version}"
        return urlunsplit(split._replace(query=query))

    def serialize_body(self) -> bytes | None:
        if self.body is None:
            return None
        if isinstance(self.body, BaseModel):
            return self.body.model_dump_json(by_alias=True, exclude_none=True).encode()
        return _adapter(type(self.body)).dump_json(self.body, by_alias=True, exclude_none=True)


def classify(operation: Operation, resp: Any, paged: bool = False) -> Response[Any]:
    """Map a transport response onto the operation's documented outcomes.

    With *paged*, a 204 is accepted for every list operation as the empty
    terminal outcome, whether or not the operation documents it.
    """
    status = resp.status_code
    if paged and status == HTTPStatus.NO_CONTENT:
        return Response(status_code=status, value=None, headers=resp.headers)
    if status not in operation.responses:
        raise HttpResponseError.from_response(resp)
    model = operation.responses[status]
    value = None
    if model is not None:
        try:
            value = _adapter(model).validate_json(resp.content)
        except ValidationError as exc:
            raise DeserializationError(
                f"{operation.method} {operation.path}: unexpected {status} body: {exc}",
                status_code=status,
            ) from exc
    return Response(status_code=status, value=value, headers=resp.headers)


def execute(
    client: ArmClient,
    request: RequestDescriptor,
    continuation: str | None = None,
    paged: bool = False,
) -> Response[Any]:
    """Send *request* once and classify the reply.

    With *continuation* the follow-up URL is used and no body is sent.
    *paged* is passed on to :func:`classify`.
    """
    if continuation is None:
        url = request.first_url(client.endpoint)
        body = request.serialize_body()
    else:
        url = request.continuation_url(client.endpoint, continuation)
        body = None
    resp = client.send(request.operation.method, url, body)
    return classify(request.operation, resp, paged=paged)
