"""Backend access for screen collections."""

from __future__ import annotations

from ScreenDeck.sources.api import ScreensApiClient
from ScreenDeck.sources.parser import parse_screen_page, parse_screen_records

__all__ = ["ScreensApiClient", "parse_screen_page", "parse_screen_records"]
