"""Screens dashboard composition.

Wires a saved-screens controller and a public-screens controller to the view
and turns user actions into navigation intents for the query editor.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ScreenDeck.core.formatter import DiagnosticsSink
from ScreenDeck.core.models import CollectionKind, NavigationIntent, ScreenRecord
from ScreenDeck.renderers.mapper import ACTION_EXECUTE, ACTION_VIEW_RESULTS, map_records_to_views
from ScreenDeck.renderers.view_models import DashboardView, RegionView
from ScreenDeck.services.pagination import PaginatedCollectionController
from ScreenDeck.utils.log import log

NavigationSink = Callable[[NavigationIntent], None]


class ScreensDashboard:
    """Saved screens, sample grid and public table over two controllers.

    The sample grid and the public table show the same public page; only the
    table carries the public page control.
    """

    def __init__(
        self,
        *,
        saved: PaginatedCollectionController,
        public: PaginatedCollectionController,
        navigate: NavigationSink,
        authenticated: bool,
        diagnostics: DiagnosticsSink | None = None,
    ) -> None:
        if saved is public:
            raise ValueError("saved and public collections need separate controllers")
        self.saved = saved
        self.public = public
        self.authenticated = authenticated
        self._navigate = navigate
        self._diagnostics = diagnostics
        if not authenticated:
            self.saved.enabled = False

    def mount(self) -> None:
        """Load the first page of each collection."""
        if self.authenticated:
            self.saved.start()
        self.public.start()

    def unmount(self) -> None:
        """Stop pending fetches from changing state."""
        self.saved.close()
        self.public.close()

    def set_saved_page(self, page: int) -> None:
        self.saved.set_page(page)

    def set_public_page(self, page: int) -> None:
        self.public.set_page(page)

    def on_view_results(self, record: ScreenRecord) -> NavigationIntent:
        """Open the editor for `record` and load its results."""
        return self._emit(NavigationIntent(query=record.formatted_query, screen_id=record.id, load_results=True))

    def on_execute_query(self, record: ScreenRecord) -> NavigationIntent:
        """Open the editor for `record` without loading results."""
        return self._emit(NavigationIntent(query=record.formatted_query, screen_id=record.id, load_results=False))

    def create_screen(self) -> NavigationIntent:
        """Open an empty editor."""
        return self._emit(NavigationIntent(query=None, screen_id=None, load_results=False))

    def find_record(self, screen_id: Any) -> tuple[ScreenRecord, CollectionKind] | None:
        """Find a screen on the currently loaded pages.

        Ids are compared as strings so CLI input matches numeric ids.
        """
        wanted = str(screen_id)
        for kind, controller in ((CollectionKind.SAVED, self.saved), (CollectionKind.PUBLIC, self.public)):
            for record in controller.items:
                if str(record.id) == wanted:
                    return record, kind
        return None

    def view(self) -> DashboardView:
        """Build the view of all three regions from current controller state."""
        saved_items = self.saved.items if self.authenticated else ()
        public_items = self.public.items
        return DashboardView(
            saved=RegionView(
                key="saved",
                heading="Saved Screens",
                subtitle="Manage and create new screening rules",
                screens=self._views(saved_items, CollectionKind.SAVED, ACTION_EXECUTE),
                current_page=self.saved.current_page,
                total_pages=self.saved.total_pages,
                visible=self.authenticated and len(saved_items) > 0,
                error=_error_text(self.saved),
            ),
            samples=RegionView(
                key="samples",
                heading="Sample Investment Strategies",
                subtitle="Explore the sample strategies we have created for you",
                screens=self._views(public_items, CollectionKind.SAMPLE, ACTION_EXECUTE),
                current_page=self.public.current_page,
                total_pages=self.public.total_pages,
                paginated=False,
                empty_title="No Sample Strategies Available",
                empty_message="Sample investment strategies will appear here once they are created.",
            ),
            public=RegionView(
                key="public",
                heading="Popular Investment Strategies",
                subtitle="Explore the interesting strategies others have created",
                screens=self._views(public_items, CollectionKind.PUBLIC, ACTION_VIEW_RESULTS),
                current_page=self.public.current_page,
                total_pages=self.public.total_pages,
                empty_title="No Public Strategies Available",
                empty_message="Public investment strategies will appear here once users create and share them.",
                error=_error_text(self.public),
            ),
        )

    def _views(self, records, kind: CollectionKind, action: str):
        return tuple(map_records_to_views(records, kind, action, diagnostics=self._diagnostics))

    def _emit(self, intent: NavigationIntent) -> NavigationIntent:
        log.debug("Navigate: screen_id=%s load_results=%s", intent.screen_id, intent.load_results)
        self._navigate(intent)
        return intent


def _error_text(controller: PaginatedCollectionController) -> str | None:
    if controller.last_error is None:
        return None
    return f"Could not load page {controller.current_page}: {controller.last_error}"
