"""Screens backend payload parser."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ScreenDeck.core.models import ScreenPage, ScreenRecord
from ScreenDeck.utils.log import log

_ITEM_KEYS = ("strategies", "items", "results")


def parse_screen_page(payload: Any) -> ScreenPage:
    """Parse one page response into a `ScreenPage`.

    Accepted shape::

        {"strategies": [...], "pagination": {"total_pages": 3, ...}}

    `items`/`results` are accepted in place of `strategies`, and a top-level
    `total_pages` is used when no `pagination` object is present.

    Raises:
        ValueError: If the payload is not an object.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("screens response must be an object")

    raw_items: Any = []
    for key in _ITEM_KEYS:
        if key in payload:
            raw_items = payload[key]
            break
    if not isinstance(raw_items, list):
        raw_items = []

    pagination = payload.get("pagination")
    if isinstance(pagination, Mapping):
        total_pages = pagination.get("total_pages")
    else:
        total_pages = payload.get("total_pages")

    return ScreenPage(items=parse_screen_records(raw_items), total_pages=total_pages)


def parse_screen_records(items: Sequence[Any]) -> list[ScreenRecord]:
    """Parse backend screen items, skipping entries without an id."""
    records: list[ScreenRecord] = []
    for idx, item in enumerate(items):
        if not isinstance(item, Mapping):
            log.warning("Skipping screen item %d: not an object", idx)
            continue
        screen_id = item.get("strategy_id", item.get("id"))
        if screen_id is None:
            log.warning("Skipping screen item %d: missing strategy_id", idx)
            continue
        records.append(
            ScreenRecord(
                id=screen_id,
                name=_optional_str(item.get("name")),
                raw_query=_optional_str(item.get("query")),
                formatted_query=_optional_str(item.get("formatted_query")),
            )
        )
    return records


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None
