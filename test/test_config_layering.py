"""Tests for layered config parsing and validation."""

import os
import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ScreenDeck.config import load_config, load_config_with_defaults, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "api": {
            "base_url": "https://api.example.com",
            "timeout": 10,
            "page_size": 12,
            "saved_path": "/strategies/user/{user_id}",
            "public_path": "/strategies/public",
        },
        "session": {"user_env": "SCREENDECK_TEST_USER"},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parses_all_domains(self) -> None:
        with patch.dict(os.environ, {"SCREENDECK_TEST_USER": "alice"}):
            cfg = parse_config_dict(_base_raw_config())

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.api.base_url, "https://api.example.com")
        self.assertEqual(cfg.api.timeout, 10.0)
        self.assertEqual(cfg.api.page_size, 12)
        self.assertEqual(cfg.session.user_id, "alice")
        self.assertTrue(cfg.session.authenticated)

    def test_blank_user_is_unauthenticated(self) -> None:
        with patch.dict(os.environ, {"SCREENDECK_TEST_USER": "   "}):
            cfg = parse_config_dict(_base_raw_config())

        self.assertIsNone(cfg.session.user_id)
        self.assertFalse(cfg.session.authenticated)

    def test_optional_api_fields_default(self) -> None:
        raw = _base_raw_config()
        raw["api"] = {"base_url": "https://api.example.com"}

        cfg = parse_config_dict(raw)

        self.assertEqual(cfg.api.timeout, 30.0)
        self.assertEqual(cfg.api.page_size, 0)
        self.assertEqual(cfg.api.public_path, "/strategies/public")

    def test_validation_errors(self) -> None:
        cases = []

        missing_api = _base_raw_config()
        del missing_api["api"]
        cases.append(("missing api", missing_api, ValueError))

        bad_level = _base_raw_config()
        bad_level["log"]["level"] = "LOUD"
        cases.append(("bad level", bad_level, ValueError))

        bad_path = _base_raw_config()
        bad_path["api"]["saved_path"] = "/strategies/mine"
        cases.append(("saved path without user", bad_path, ValueError))

        bad_page_size = _base_raw_config()
        bad_page_size["api"]["page_size"] = True
        cases.append(("bool page size", bad_page_size, TypeError))

        bad_section = _base_raw_config()
        bad_section["session"] = "alice"
        cases.append(("session not a mapping", bad_section, TypeError))

        for label, raw, error in cases:
            with self.subTest(label):
                with self.assertRaises(error):
                    parse_config_dict(deepcopy(raw))

    def test_override_merges_with_defaults(self) -> None:
        tmp = Path(tempfile.mkdtemp())
        default_path = tmp / "default.yml"
        override_path = tmp / "override.yml"
        default_path.write_text(
            "log:\n  level: INFO\n  to_file: false\n  dir: log\n"
            "api:\n  base_url: https://api.example.com\n  page_size: 10\n",
            encoding="utf-8",
        )
        override_path.write_text("api:\n  page_size: 25\n", encoding="utf-8")

        cfg = load_config_with_defaults(override_path, default_path=default_path)

        self.assertEqual(cfg.api.page_size, 25)
        self.assertEqual(cfg.api.base_url, "https://api.example.com")
        self.assertEqual(cfg.runtime.level, "INFO")

    def test_repository_default_config_loads(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")

        self.assertEqual(cfg.session.user_env, "SCREENDECK_USER")
        self.assertEqual(cfg.api.saved_path, "/strategies/user/{user_id}")


if __name__ == "__main__":
    unittest.main()
