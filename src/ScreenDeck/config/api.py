"""Backend API domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ScreenDeck.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Screens API settings.

    Attributes:
        base_url: API root URL.
        timeout: Request timeout in seconds.
        page_size: Page size requested from the backend; 0 leaves it to the
            backend default.
        saved_path: Path template for a user's screens (``{user_id}``).
        public_path: Path for public screens.
    """

    base_url: str
    timeout: float
    page_size: int
    saved_path: str
    public_path: str


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    section = get_section(raw, "api", required=True)
    return ApiConfig(
        base_url=expect_str(get_required_value(section, "base_url", "api.base_url"), "api.base_url"),
        timeout=expect_float(get_optional_value(section, "timeout", 30), "api.timeout"),
        page_size=expect_int(get_optional_value(section, "page_size", 0), "api.page_size"),
        saved_path=expect_str(
            get_optional_value(section, "saved_path", "/strategies/user/{user_id}"),
            "api.saved_path",
        ),
        public_path=expect_str(
            get_optional_value(section, "public_path", "/strategies/public"),
            "api.public_path",
        ),
    )


def check_api(config: ApiConfig) -> None:
    """Validate API constraints.

    Raises:
        ValueError: If values violate API constraints.
    """
    if not config.base_url.strip():
        raise ValueError("api.base_url must not be empty")
    if config.timeout <= 0:
        raise ValueError("api.timeout must be > 0")
    if config.page_size < 0:
        raise ValueError("api.page_size must be >= 0")
    if "{user_id}" not in config.saved_path:
        raise ValueError("api.saved_path must contain {user_id}")
