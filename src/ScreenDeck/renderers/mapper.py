"""Mapper from screen records and controller state to view models."""

from __future__ import annotations

from typing import Sequence

from ScreenDeck.core.formatter import DiagnosticsSink, format_query
from ScreenDeck.core.models import NOT_AVAILABLE, CollectionKind, ScreenRecord, screen_title
from ScreenDeck.renderers.view_models import ScreenView

ACTION_EXECUTE = "execute"
ACTION_VIEW_RESULTS = "view_results"


def display_query(record: ScreenRecord, *, diagnostics: DiagnosticsSink | None = None) -> str:
    """Return the query text shown for a record.

    Prefers the backend's precomputed rendering, then renders the raw query,
    and falls back to ``"N/A"`` when neither is present.
    """
    if record.formatted_query:
        return record.formatted_query
    if record.raw_query:
        return format_query(record.raw_query, diagnostics=diagnostics)
    return NOT_AVAILABLE


def map_record_to_view(
    record: ScreenRecord,
    index: int,
    kind: CollectionKind,
    action: str,
    *,
    diagnostics: DiagnosticsSink | None = None,
) -> ScreenView:
    return ScreenView(
        screen_id=record.id,
        title=screen_title(record, index, kind),
        query=display_query(record, diagnostics=diagnostics),
        action=action,
    )


def map_records_to_views(
    records: Sequence[ScreenRecord],
    kind: CollectionKind,
    action: str,
    *,
    diagnostics: DiagnosticsSink | None = None,
) -> list[ScreenView]:
    """Batch map one page of records; positions are 0-based within the page."""
    return [
        map_record_to_view(record, idx, kind, action, diagnostics=diagnostics)
        for idx, record in enumerate(records)
    ]
