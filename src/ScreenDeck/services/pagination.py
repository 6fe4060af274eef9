"""Page-indexed view over one remote screen collection.

A controller owns the current page number, the items of that page and the
collection's page count. Changing the page is the only thing that triggers a
fetch. Fetch completions are applied only when they belong to the page that is
current at completion time, so a slow response for a page the user already
left can never overwrite a newer one.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Sequence

from ScreenDeck.core.models import ScreenPage, ScreenRecord, normalize_total_pages
from ScreenDeck.utils.log import log

PageFetcher = Callable[[int], ScreenPage]
Job = Callable[[], None]
Dispatcher = Callable[[Job], None]


class FetchError(RuntimeError):
    """A page of screens could not be fetched."""


def run_immediately(job: Job) -> None:
    """Dispatcher that runs the fetch job inline."""
    job()


@dataclass(frozen=True, slots=True)
class PageState:
    """Snapshot of a controller's visible state."""

    current_page: int
    total_pages: int
    items: tuple[ScreenRecord, ...]


class PaginatedCollectionController:
    """Controller for one paginated screen collection.

    Instances never share state; create one per displayed collection.
    """

    def __init__(
        self,
        name: str,
        fetch: PageFetcher,
        *,
        enabled: bool = True,
        dispatch: Dispatcher = run_immediately,
    ) -> None:
        """Initialize the controller on page 1 with no items.

        Args:
            name: Collection name used in log messages.
            fetch: Loads one page; may raise `FetchError`.
            enabled: False keeps the controller inert (no fetches, no items).
            dispatch: Schedules fetch jobs; the default runs them inline.
        """
        self.name = name
        self.enabled = enabled
        self._fetch = fetch
        self._dispatch = dispatch
        self._current_page = 1
        self._total_pages = 1
        self._items: tuple[ScreenRecord, ...] = ()
        self._closed = False
        self.last_error: Exception | None = None

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def items(self) -> tuple[ScreenRecord, ...]:
        return self._items

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def page_state(self) -> PageState:
        return PageState(self._current_page, self._total_pages, self._items)

    def start(self) -> None:
        """Load the current page once, as on first display."""
        self._request(self._current_page)

    def set_page(self, page: int) -> None:
        """Select `page` and fetch it.

        Raises:
            ValueError: If page is not an integer >= 1.
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError(f"page must be an integer >= 1, got {page!r}")
        self._current_page = page
        self._request(page)

    def on_page_loaded(self, page: int, items: Sequence[ScreenRecord], total_pages: int) -> bool:
        """Apply a completed fetch if it is still relevant.

        Returns:
            True if items and total pages were replaced, False if the
            response was stale or the controller is closed.
        """
        if self._closed:
            log.debug("Discarding page %d for %s: controller closed", page, self.name)
            return False
        if page != self._current_page:
            log.debug(
                "Discarding stale page %d for %s (current page %d)",
                page,
                self.name,
                self._current_page,
            )
            return False
        self._items = tuple(items)
        self._total_pages = normalize_total_pages(total_pages)
        self.last_error = None
        log.debug("Loaded %s page %d/%d items=%d", self.name, page, self._total_pages, len(self._items))
        return True

    def on_page_failed(self, page: int, error: Exception) -> None:
        """Record a failed fetch; the last good page stays visible."""
        if self._closed or page != self._current_page:
            return
        self.last_error = error
        log.warning("Failed to load %s page %d: %s", self.name, page, error)

    def dismiss_error(self) -> None:
        self.last_error = None

    def close(self) -> None:
        """Stop applying fetch completions, as when the view goes away."""
        self._closed = True

    def _request(self, page: int) -> None:
        if not self.enabled:
            log.debug("Skipping fetch for %s page %d: disabled", self.name, page)
            return
        if self._closed:
            return
        self._dispatch(lambda: self._run_fetch(page))

    def _run_fetch(self, page: int) -> None:
        try:
            result = self._fetch(page)
        except FetchError as error:
            self.on_page_failed(page, error)
            return
        self.on_page_loaded(page, result.items, result.total_pages)
