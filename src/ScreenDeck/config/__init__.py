"""Public configuration API for ScreenDeck."""

from __future__ import annotations

from ScreenDeck.config.api import ApiConfig
from ScreenDeck.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from ScreenDeck.config.runtime import RuntimeConfig
from ScreenDeck.config.session import SessionConfig

__all__ = [
    "ApiConfig",
    "AppConfig",
    "RuntimeConfig",
    "SessionConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
