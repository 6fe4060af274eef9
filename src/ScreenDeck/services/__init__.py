"""Service layer for ScreenDeck.

Provides the pagination controller, the dashboard composition and a factory
wiring them to the configured backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ScreenDeck.services.dashboard import NavigationSink, ScreensDashboard
from ScreenDeck.services.pagination import (
    Dispatcher,
    FetchError,
    PageState,
    PaginatedCollectionController,
    run_immediately,
)

if TYPE_CHECKING:
    from ScreenDeck.config import AppConfig
    from ScreenDeck.sources.api import ScreensApiClient


def create_api_client(config: AppConfig) -> ScreensApiClient:
    """Create the screens API client from configuration."""
    from ScreenDeck.sources.api import ScreensApiClient

    return ScreensApiClient(
        config.api.base_url,
        saved_path=config.api.saved_path,
        public_path=config.api.public_path,
        page_size=config.api.page_size or None,
        timeout=config.api.timeout,
    )


def create_dashboard(
    client: ScreensApiClient,
    *,
    user_id: str | None,
    navigate: NavigationSink,
    dispatch: Dispatcher = run_immediately,
) -> ScreensDashboard:
    """Build a dashboard with one controller per collection.

    Args:
        client: Screens API client.
        user_id: Signed-in user; None or a blank id means nobody is signed in.
        navigate: Receives navigation intents.
        dispatch: Schedules fetch jobs for both controllers.

    Returns:
        A dashboard that has not been mounted yet.
    """
    authenticated = bool(user_id and user_id.strip())

    def fetch_saved(page: int):
        return client.fetch_saved_screens(user_id, page)

    saved = PaginatedCollectionController(
        "saved screens",
        fetch_saved,
        enabled=authenticated,
        dispatch=dispatch,
    )
    public = PaginatedCollectionController(
        "public screens",
        client.fetch_public_screens,
        dispatch=dispatch,
    )
    return ScreensDashboard(saved=saved, public=public, navigate=navigate, authenticated=authenticated)


__all__ = [
    "FetchError",
    "PageState",
    "PaginatedCollectionController",
    "ScreensDashboard",
    "create_api_client",
    "create_dashboard",
    "run_immediately",
]
