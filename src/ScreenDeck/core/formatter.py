"""Human-readable rendering of stored screen queries.

The rendering is display-only: it is lossy and cannot be parsed back.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any, Final

from ScreenDeck.core.query import ParseFailure, StructuredQuery, parse_query
from ScreenDeck.utils.log import log

INVALID_QUERY: Final[str] = "Invalid query"

SIGN_SYMBOLS: Final[dict[str, str]] = {
    "gt": ">",
    "gte": ">=",
    "lt": "<",
    "lte": "<=",
    "eq": "=",
}

_TRAILING_AND_RE = re.compile(r" AND$")
# Floats from here up print in exponent form on the dashboard.
_EXPONENT_THRESHOLD: Final[float] = 1e21

DiagnosticsSink = Callable[[str, Any], None]


def log_diagnostic(message: str, raw: Any) -> None:
    """Default diagnostics sink: report a query that could not be rendered."""
    log.error("Error parsing query: %s raw=%r", message, raw)


def format_query(raw: Any, *, diagnostics: DiagnosticsSink | None = None) -> str:
    """Render a raw query document as one display line.

    Unknown operator tokens are rendered verbatim. A document that cannot be
    parsed is reported once to `diagnostics` and rendered as
    ``"Invalid query"``; this function never raises.

    Args:
        raw: JSON text of the query document.
        diagnostics: Sink receiving ``(message, raw)`` on parse failure.
            Defaults to logging at ERROR.

    Returns:
        The display string.
    """
    result = parse_query(raw)
    if isinstance(result, ParseFailure):
        sink = diagnostics or log_diagnostic
        try:
            sink(result.error.message, result.error.raw)
        except Exception as error:  # noqa: BLE001 - sink is fire-and-forget
            log.warning("Diagnostics sink failed: %s", error)
        return INVALID_QUERY
    return render_structured_query(result.query)


def render_structured_query(query: StructuredQuery) -> str:
    """Render an already parsed query.

    Each filter becomes ``"{name} {symbol} {threshold} {connective}"``; the
    pieces are joined by a single space and one trailing ``" AND"`` is removed.
    """
    clauses = [
        " ".join(
            (
                f.predicate.param_name,
                SIGN_SYMBOLS.get(f.predicate.sign, f.predicate.sign),
                display_value(f.predicate.threshold),
                display_value(f.connective),
            )
        )
        for f in query.filters
    ]
    return _TRAILING_AND_RE.sub("", " ".join(clauses), count=1)


def display_value(value: Any) -> str:
    """Render a decoded JSON scalar the way it prints on the dashboard."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
