"""View models for dashboard rendering.

Display-oriented structures built from `ScreenRecord`s and controller state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True, slots=True)
class ScreenView:
    """One card or table row.

    Attributes:
        screen_id: Backend identifier.
        title: Name or positional fallback label.
        query: Display query, ``"N/A"`` when unavailable.
        action: ``"execute"`` (open editor) or ``"view_results"``.
    """

    screen_id: Any
    title: str
    query: str
    action: str


@dataclass(frozen=True, slots=True)
class RegionView:
    """One dashboard region (saved cards, sample grid or public table)."""

    key: str
    heading: str
    subtitle: str
    screens: Sequence[ScreenView]
    current_page: int
    total_pages: int
    visible: bool = True
    paginated: bool = True
    empty_title: str | None = None
    empty_message: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class DashboardView:
    saved: RegionView
    samples: RegionView
    public: RegionView

    @property
    def regions(self) -> tuple[RegionView, ...]:
        return (self.saved, self.samples, self.public)
