"""Tests for parsing stored screen query documents."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ScreenDeck.core.query import (
    ComparisonOperator,
    LogicalConnective,
    ParseErrorKind,
    ParseFailure,
    ParseSuccess,
    parse_query,
)


def _doc(*filters: dict) -> str:
    return json.dumps({"filters": list(filters)})


def _filter(name: str, sign: str, threshold, operator="AND") -> dict:
    return {"Data": {"param": {"name": name}, "sign": sign, "threshold": threshold}, "Operator": operator}


class TestParseQuery(unittest.TestCase):
    def test_parses_predicates_in_order(self) -> None:
        result = parse_query(_doc(_filter("price", "gt", 100), _filter("volume", "lte", 5000, "")))

        self.assertIsInstance(result, ParseSuccess)
        filters = result.query.filters
        self.assertEqual(len(filters), 2)
        self.assertEqual(filters[0].predicate.param_name, "price")
        self.assertEqual(filters[0].predicate.operator, ComparisonOperator.GT)
        self.assertEqual(filters[0].predicate.threshold, 100)
        self.assertEqual(filters[0].logical_connective, LogicalConnective.AND)
        self.assertEqual(filters[1].connective, "")
        self.assertIsNone(filters[1].logical_connective)
        self.assertTrue(result.query.is_valid)

    def test_unknown_sign_is_kept_verbatim(self) -> None:
        result = parse_query(_doc(_filter("x", "weird", 1)))

        self.assertIsInstance(result, ParseSuccess)
        predicate = result.query.filters[0].predicate
        self.assertEqual(predicate.sign, "weird")
        self.assertIsNone(predicate.operator)

    def test_empty_filters_parse_but_are_not_valid(self) -> None:
        result = parse_query('{"filters": []}')

        self.assertIsInstance(result, ParseSuccess)
        self.assertFalse(result.query.is_valid)

    def test_malformed_documents(self) -> None:
        cases = {
            "not json": "not json",
            "not an object": "[1, 2]",
            "missing filters": '{"rules": []}',
            "filters not a list": '{"filters": {"a": 1}}',
            "missing Data": '{"filters": [{"Operator": "AND"}]}',
            "missing param name": _doc({"Data": {"param": {}, "sign": "gt", "threshold": 1}, "Operator": "AND"}),
            "missing sign": _doc({"Data": {"param": {"name": "x"}, "threshold": 1}, "Operator": "AND"}),
            "missing threshold": _doc({"Data": {"param": {"name": "x"}, "sign": "gt"}, "Operator": "AND"}),
            "missing Operator": _doc({"Data": {"param": {"name": "x"}, "sign": "gt", "threshold": 1}}),
            "empty name": _doc(_filter("", "gt", 1)),
        }
        for label, raw in cases.items():
            with self.subTest(label):
                result = parse_query(raw)
                self.assertIsInstance(result, ParseFailure)
                self.assertEqual(result.error.kind, ParseErrorKind.MALFORMED)
                self.assertEqual(result.error.raw, raw)

    def test_deeply_nested_document_is_malformed(self) -> None:
        raw = "[" * 200000 + "]" * 200000

        result = parse_query(raw)

        self.assertIsInstance(result, ParseFailure)
        self.assertEqual(result.error.kind, ParseErrorKind.MALFORMED)
        self.assertEqual(result.error.raw, raw)

    def test_non_string_input_is_malformed(self) -> None:
        result = parse_query(None)

        self.assertIsInstance(result, ParseFailure)
        self.assertIsNone(result.error.raw)


if __name__ == "__main__":
    unittest.main()
