"""Structured screen query model.

A screen query is stored as a JSON document of the shape::

    {"filters": [{"Data": {"param": {"name": "price"}, "sign": "gt", "threshold": 100},
                  "Operator": "AND"}, ...]}

`parse_query` turns that document into a `StructuredQuery`. It never raises:
every failure comes back as a `ParseFailure` carrying the raw input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence, Union


class ComparisonOperator(str, Enum):
    """Closed set of comparison operators understood by the screener."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    EQ = "eq"


class LogicalConnective(str, Enum):
    """Connectives allowed between consecutive predicates."""

    AND = "AND"


@dataclass(frozen=True, slots=True)
class AtomicPredicate:
    """One attribute comparison.

    Attributes:
        param_name: Attribute being compared.
        sign: Raw operator token as stored (kept verbatim, even when unknown).
        threshold: Value compared against.
    """

    param_name: str
    sign: str
    threshold: Any

    @property
    def operator(self) -> ComparisonOperator | None:
        """Return the known operator for `sign`, or None when unrecognized."""
        try:
            return ComparisonOperator(self.sign)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class QueryFilter:
    """A predicate paired with the connective that follows it."""

    predicate: AtomicPredicate
    connective: str | None

    @property
    def logical_connective(self) -> LogicalConnective | None:
        if self.connective is None:
            return None
        try:
            return LogicalConnective(self.connective)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class StructuredQuery:
    """Ordered sequence of filters making up one screen."""

    filters: Sequence[QueryFilter]

    @property
    def is_valid(self) -> bool:
        """A query needs at least one predicate to be runnable."""
        return len(self.filters) > 0


class ParseErrorKind(str, Enum):
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Why a raw query document could not be parsed.

    Attributes:
        kind: Error category.
        message: Human-readable reason.
        raw: The original input, kept for diagnostics.
    """

    kind: ParseErrorKind
    message: str
    raw: Any


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    query: StructuredQuery


@dataclass(frozen=True, slots=True)
class ParseFailure:
    error: ParseError


ParseResult = Union[ParseSuccess, ParseFailure]


class _MalformedQuery(ValueError):
    """Internal signal used while walking the document."""


def parse_query(raw: Any) -> ParseResult:
    """Parse a serialized query document.

    Args:
        raw: JSON text of the query document.

    Returns:
        `ParseSuccess` with the structured query, or `ParseFailure` with a
        `ParseErrorKind.MALFORMED` error when the text is not JSON, `filters`
        is missing or not a list, or any element lacks a required field.
    """
    if not isinstance(raw, (str, bytes, bytearray)):
        return _failure(f"query must be a string, got {type(raw).__name__}", raw)
    try:
        document = json.loads(raw)
    except ValueError as error:
        return _failure(f"not a JSON document: {error}", raw)
    except RecursionError:
        return _failure("query document is nested too deeply", raw)

    try:
        filters = _parse_document(document)
    except _MalformedQuery as error:
        return _failure(str(error), raw)
    return ParseSuccess(StructuredQuery(filters=filters))


def _parse_document(document: Any) -> tuple[QueryFilter, ...]:
    if not isinstance(document, Mapping):
        raise _MalformedQuery("query document must be an object")
    if "filters" not in document:
        raise _MalformedQuery("missing 'filters'")
    items = document["filters"]
    if not isinstance(items, list):
        raise _MalformedQuery("'filters' must be a list")
    return tuple(_parse_filter(item, idx) for idx, item in enumerate(items))


def _parse_filter(item: Any, idx: int) -> QueryFilter:
    where = f"filters[{idx}]"
    if not isinstance(item, Mapping):
        raise _MalformedQuery(f"{where} must be an object")
    data = _require_mapping(item, "Data", where)
    param = _require_mapping(data, "param", f"{where}.Data")
    name = _require(param, "name", f"{where}.Data.param")
    if not isinstance(name, str) or not name.strip():
        raise _MalformedQuery(f"{where}.Data.param.name must be a non-empty string")
    sign = _require(data, "sign", f"{where}.Data")
    if not isinstance(sign, str):
        raise _MalformedQuery(f"{where}.Data.sign must be a string")
    threshold = _require(data, "threshold", f"{where}.Data")
    connective = _require(item, "Operator", where)
    if connective is not None and not isinstance(connective, str):
        raise _MalformedQuery(f"{where}.Operator must be a string")
    return QueryFilter(
        predicate=AtomicPredicate(param_name=name, sign=sign, threshold=threshold),
        connective=connective,
    )


def _require(section: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in section:
        raise _MalformedQuery(f"{where} missing '{key}'")
    return section[key]


def _require_mapping(section: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any]:
    value = _require(section, key, where)
    if not isinstance(value, Mapping):
        raise _MalformedQuery(f"{where}.{key} must be an object")
    return value


def _failure(message: str, raw: Any) -> ParseFailure:
    return ParseFailure(ParseError(kind=ParseErrorKind.MALFORMED, message=message, raw=raw))
