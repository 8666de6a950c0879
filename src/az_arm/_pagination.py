"""Lazy paging over ``nextLink`` continuations."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import StrEnum
from typing import TYPE_CHECKING, Generic, TypeVar

from az_arm._operation import RequestDescriptor, execute
from az_arm.models import Page

if TYPE_CHECKING:
    from az_arm.client import ArmClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PagerState(StrEnum):
    start = "start"
    has_page = "has_page"
    terminal = "terminal"
    failed = "failed"


class Pager(Generic[T]):
    """Forward-only iterator of :class:`~az_arm.models.Page` objects.

    Each ``next()`` performs exactly one request.  The first request carries
    the descriptor's options; later requests follow the continuation token the
    previous page returned.  Iteration ends when a page has no continuation or
    the service answers 204.  An error ends the pager: it is raised once and
    every later ``next()`` stops without sending anything.
    """

    def __init__(
        self,
        client: ArmClient,
        request: RequestDescriptor,
        continuation_token: str | None = None,
    ) -> None:
        self._client = client
        self._request = request
        self._token = continuation_token
        self._state = PagerState.has_page if continuation_token else PagerState.start

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def continuation_token(self) -> str | None:
        """Token the next fetch will use, ``None`` before the first page and at the end."""
        return self._token

    def __iter__(self) -> Pager[T]:
        return self

    def __next__(self) -> Page[T]:
        if self._state in (PagerState.terminal, PagerState.failed):
            raise StopIteration
        continuation = self._token if self._state is PagerState.has_page else None
        try:
            response = execute(self._client, self._request, continuation, paged=True)
        except Exception:
            self._state = PagerState.failed
            self._token = None
            raise

        page: Page[T] | None = response.value
        if page is None:
            # 204 No Content: an empty terminal page
            logger.debug("%s: %s, no more pages", self._request.path, response.name)
            self._state = PagerState.terminal
            self._token = None
            raise StopIteration

        self._token = page.continuation
        if self._token is None:
            logger.debug("%s: last page reached", self._request.path)
            self._state = PagerState.terminal
        else:
            self._state = PagerState.has_page
        return page

    def iter_items(self) -> Iterator[T]:
        """Yield every item of every remaining page, in server order."""
        for page in self:
            yield from page.value

    def resume(self, continuation_token: str) -> Pager[T]:
        """Return a new pager for the same request starting at *continuation_token*."""
        return Pager(self._client, self._request, continuation_token)
