"""Session domain configuration: who is signed in."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from ScreenDeck.config.common import expect_str, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Resolved user identity.

    `user_id` is None when the configured environment variable is unset or
    empty; saved screens are then neither fetched nor shown.
    """

    user_env: str
    user_id: str | None

    @property
    def authenticated(self) -> bool:
        return self.user_id is not None


def load_session(raw: Mapping[str, Any]) -> SessionConfig:
    section = get_section(raw, "session", required=False)
    user_env = expect_str(get_optional_value(section, "user_env", "SCREENDECK_USER"), "session.user_env")
    return SessionConfig(user_env=user_env, user_id=_load_user_from_env(user_env))


def check_session(config: SessionConfig) -> None:
    if not config.user_env.strip():
        raise ValueError("session.user_env must not be empty")


def _load_user_from_env(user_env: str) -> str | None:
    if not user_env:
        return None
    value = os.getenv(user_env, "").strip()
    return value or None
