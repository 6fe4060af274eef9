"""Output renderers for the screens dashboard."""

from __future__ import annotations

from ScreenDeck.renderers.console import render_text
from ScreenDeck.renderers.json import render_json
from ScreenDeck.renderers.mapper import display_query, map_records_to_views
from ScreenDeck.renderers.view_models import DashboardView, RegionView, ScreenView

__all__ = [
    "DashboardView",
    "RegionView",
    "ScreenView",
    "display_query",
    "map_records_to_views",
    "render_json",
    "render_text",
]
