"""Stream every result of an offset/limit search endpoint.

The search endpoints return one page at a time::

    {"paging": {"total": 45, "limit": 30, "offset": 0}, "results": [...]}

``stream_search`` (sync) and ``astream_search`` (async) hide the paging:
they request a page, yield its results one by one, move the offset by
``limit`` and stop once the offset reaches ``paging.total``.

Failures do not end the stream. A transport failure or an error response
is yielded as a ``MercadoPagoRequestError`` element and the same page is
requested again, so the consumer sees every failure and decides whether
to keep iterating. Results and errors therefore share one stream::

    for item in stream_search(options, fetch_page, PartialPaymentResult):
        if isinstance(item, MercadoPagoRequestError):
            log.warning("page failed: %s", item)
            continue
        handle(item)

Streams are lazy and single pass. Nothing is requested until the first
item is pulled, and no new page is requested after the consumer stops
pulling; a request already in flight is not cancelled.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar, Union

import httpx

from .errors import MercadoPagoRequestError, PaginationRetriesExceeded, TransportError
from .http.resolver import TRANSPORT_ERRORS, ResponseLike, aresolve_json, resolve_json
from .schemas.common import SearchOptions, SearchResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 30

T = TypeVar("T")
OptionsT = TypeVar("OptionsT", bound=SearchOptions)

# Stream element: a decoded result or the failure of one page request.
StreamItem = Union[T, MercadoPagoRequestError]

# Performs one HTTP round trip for the given page window.
PageFetcher = Callable[[OptionsT], ResponseLike]
AsyncPageFetcher = Callable[[OptionsT], Awaitable[httpx.Response]]


# ============================================================================
# Page Cursor
# ============================================================================


@dataclass
class _PageCursor:
    offset: int
    limit: int

    @classmethod
    def start(cls, options: SearchOptions) -> _PageCursor:
        return cls(offset=options.offset or 0, limit=options.limit or DEFAULT_PAGE_LIMIT)

    def apply(self, options: OptionsT) -> OptionsT:
        """Copy of the options with this cursor's offset and limit."""
        return options.model_copy(update={"offset": self.offset, "limit": self.limit})

    def advance(self, total: int) -> bool:
        """Move to the next page. Returns True when the search is exhausted."""
        self.offset += self.limit
        return self.offset >= total


class _RetryBudget:
    """Counts consecutive failures at one offset."""

    def __init__(self, max_retries: int | None) -> None:
        if max_retries is not None and max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._max_retries = max_retries
        self.failures = 0

    def reset(self) -> None:
        self.failures = 0

    def record(self, cursor: _PageCursor, error: MercadoPagoRequestError) -> None:
        self.failures += 1
        logger.warning(
            f"Search page at offset {cursor.offset} failed "
            f"(attempt {self.failures}), retrying: {error}"
        )

    def check(self, cursor: _PageCursor, error: MercadoPagoRequestError) -> None:
        """Raise once the caller's bound on consecutive failures is passed."""
        if self._max_retries is not None and self.failures > self._max_retries:
            raise PaginationRetriesExceeded(cursor.offset, self.failures, error)


def _as_request_error(exc: Exception) -> MercadoPagoRequestError:
    if isinstance(exc, MercadoPagoRequestError):
        return exc
    error = TransportError(f"Search request failed: {exc}")
    error.__cause__ = exc
    return error


# ============================================================================
# Streams
# ============================================================================


def stream_search(
    options: OptionsT,
    fetch_page: PageFetcher[OptionsT],
    item_type: type[T] | Any,
    *,
    max_retries: int | None = None,
) -> Iterator[StreamItem[T]]:
    """Lazily yield every result of a paged search.

    Args:
        options: Search filters. ``limit`` defaults to 30, ``offset`` to 0.
        fetch_page: Sends the search request for the options it is given
            (with the current offset and limit) and returns the response.
        item_type: Type each result is decoded into.
        max_retries: Consecutive failures tolerated at one offset. ``None``
            retries forever.

    Yields:
        Results in server order, interleaved with one
        ``MercadoPagoRequestError`` per failed page request.

    Raises:
        PaginationRetriesExceeded: Once ``max_retries`` is passed, after
            the last failure has been yielded.
    """
    cursor = _PageCursor.start(options)
    budget = _RetryBudget(max_retries)
    page_type = SearchResponse[item_type]

    while True:
        try:
            response = fetch_page(cursor.apply(options))
            page = resolve_json(response, page_type)
        except (MercadoPagoRequestError, *TRANSPORT_ERRORS) as exc:
            error = _as_request_error(exc)
            budget.record(cursor, error)
            yield error
            budget.check(cursor, error)
            continue

        budget.reset()
        yield from page.results

        if cursor.advance(page.paging.total):
            return


async def astream_search(
    options: OptionsT,
    fetch_page: AsyncPageFetcher[OptionsT],
    item_type: type[T] | Any,
    *,
    max_retries: int | None = None,
) -> AsyncIterator[StreamItem[T]]:
    """Async counterpart of ``stream_search``.

    ``fetch_page`` is awaited for each page; stop with ``break`` or
    ``aclose()`` to end the search early.
    """
    cursor = _PageCursor.start(options)
    budget = _RetryBudget(max_retries)
    page_type = SearchResponse[item_type]

    while True:
        try:
            response = await fetch_page(cursor.apply(options))
            page = await aresolve_json(response, page_type)
        except (MercadoPagoRequestError, *TRANSPORT_ERRORS) as exc:
            error = _as_request_error(exc)
            budget.record(cursor, error)
            yield error
            budget.check(cursor, error)
            continue

        budget.reset()
        for item in page.results:
            yield item

        if cursor.advance(page.paging.total):
            return
