"""Command implementations for the ScreenDeck CLI.

Each command works on an already built dashboard and writes through the
injected `echo` callable so it can be exercised without a terminal.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ScreenDeck.core.formatter import format_query
from ScreenDeck.renderers import render_json, render_text
from ScreenDeck.services.dashboard import ScreensDashboard
from ScreenDeck.utils.log import log

Echo = Callable[[str], Any]


def _load_pages(dashboard: ScreensDashboard, saved_page: int, public_page: int) -> None:
    dashboard.mount()
    if saved_page != 1 and dashboard.authenticated:
        dashboard.set_saved_page(saved_page)
    if public_page != 1:
        dashboard.set_public_page(public_page)


@dataclass(slots=True)
class DashboardCommand:
    """Load the requested pages and print the dashboard."""

    dashboard: ScreensDashboard
    echo: Echo
    saved_page: int = 1
    public_page: int = 1
    output_format: str = "console"

    def execute(self) -> None:
        _load_pages(self.dashboard, self.saved_page, self.public_page)
        view = self.dashboard.view()
        self.dashboard.unmount()
        if self.output_format == "json":
            self.echo(json.dumps(render_json(view), ensure_ascii=False, indent=2, default=str))
        else:
            self.echo(render_text(view).rstrip("\n"))


@dataclass(slots=True)
class OpenCommand:
    """Emit the navigation intent for one screen on the loaded pages."""

    dashboard: ScreensDashboard
    screen_id: str
    load_results: bool
    saved_page: int = 1
    public_page: int = 1

    def execute(self) -> bool:
        """Return False when the screen is not on the loaded pages."""
        _load_pages(self.dashboard, self.saved_page, self.public_page)
        found = self.dashboard.find_record(self.screen_id)
        self.dashboard.unmount()
        if found is None:
            log.warning("Screen %s not found on the loaded pages", self.screen_id)
            return False
        record, kind = found
        log.info("Opening %s screen %s", kind.value, record.id)
        if self.load_results:
            self.dashboard.on_view_results(record)
        else:
            self.dashboard.on_execute_query(record)
        return True


def format_command(raw: str, echo: Echo) -> None:
    """Print the display string for a raw query document."""
    echo(format_query(raw))


__all__ = ["DashboardCommand", "OpenCommand", "format_command"]
