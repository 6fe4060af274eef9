from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

NOT_AVAILABLE = "N/A"


class CollectionKind(str, Enum):
    """Which list a screen is shown in; decides its fallback title."""

    SAVED = "saved"
    SAMPLE = "sample"
    PUBLIC = "public"

    @property
    def fallback_prefix(self) -> str:
        return _FALLBACK_PREFIX[self]


_FALLBACK_PREFIX = {
    CollectionKind.SAVED: "Screen",
    CollectionKind.SAMPLE: "Strategy",
    CollectionKind.PUBLIC: "Public Screen",
}


@dataclass(frozen=True, slots=True)
class ScreenRecord:
    """A saved or public screen as returned by the backend.

    Attributes:
        id: Backend identifier, stable across pages.
        name: Display name if the owner set one.
        raw_query: Serialized query document, possibly absent or invalid.
        formatted_query: Display string precomputed by the backend.
    """

    id: Any
    name: str | None = None
    raw_query: str | None = None
    formatted_query: str | None = None


@dataclass(frozen=True, slots=True)
class ScreenPage:
    """One page of screens plus the collection's page count."""

    items: Sequence[ScreenRecord]
    total_pages: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "total_pages", normalize_total_pages(self.total_pages))


@dataclass(frozen=True, slots=True)
class NavigationIntent:
    """Request to open the query editor.

    `query` and `screen_id` are None when creating a new screen.
    """

    query: str | None
    screen_id: Any
    load_results: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "screenId": self.screen_id,
            "loadResults": self.load_results,
        }


def screen_title(record: ScreenRecord, index: int, kind: CollectionKind) -> str:
    """Return the record's name, or a positional label for its list.

    Args:
        record: Screen record.
        index: 0-based position of the record within the current page.
        kind: Collection the record is displayed in.
    """
    if record.name:
        return record.name
    return f"{kind.fallback_prefix} {index + 1}"


def normalize_total_pages(value: Any) -> int:
    """Coerce a backend page count to an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, int):
        return 1
    return max(value, 1)
