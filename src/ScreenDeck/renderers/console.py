"""Console text rendering of the screens dashboard."""

from __future__ import annotations

from ScreenDeck.renderers.view_models import DashboardView, RegionView


def render_region(region: RegionView) -> list[str]:
    """Render one region into text lines; hidden regions render nothing."""
    if not region.visible:
        return []
    lines = [f"== {region.heading} ==", f"   {region.subtitle}"]
    if region.error:
        lines.append(f"   ! {region.error}")
    if not region.screens:
        if region.empty_title:
            lines.append(f"   {region.empty_title}")
        if region.empty_message:
            lines.append(f"   {region.empty_message}")
    for screen in region.screens:
        lines.append(f"   [{screen.screen_id}] {screen.title}")
        lines.append(f"       Query: {screen.query}")
    if region.paginated:
        lines.append(f"   Page {region.current_page}/{region.total_pages}")
    return lines


def render_text(view: DashboardView) -> str:
    """Render the whole dashboard into a text block."""
    blocks = ["\n".join(lines) for lines in map(render_region, view.regions) if lines]
    return "\n\n".join(blocks).rstrip() + "\n"
