"""JSON rendering of the screens dashboard."""

from __future__ import annotations

from typing import Any

from ScreenDeck.renderers.view_models import DashboardView, RegionView


def render_region(region: RegionView) -> dict[str, Any]:
    out: dict[str, Any] = {
        "visible": region.visible,
        "heading": region.heading,
        "screens": [
            {
                "id": screen.screen_id,
                "title": screen.title,
                "query": screen.query,
                "action": screen.action,
            }
            for screen in region.screens
        ],
    }
    if region.paginated:
        out["pagination"] = {"page": region.current_page, "total_pages": region.total_pages}
    if region.error:
        out["error"] = region.error
    return out


def render_json(view: DashboardView) -> dict[str, Any]:
    """Render the dashboard into a JSON-serializable mapping."""
    return {region.key: render_region(region) for region in view.regions}
