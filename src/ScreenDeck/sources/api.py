"""Screens backend HTTP client."""

from __future__ import annotations

import random
import time
from typing import Any
from urllib.parse import quote

import requests

from ScreenDeck.core.models import ScreenPage
from ScreenDeck.services.pagination import FetchError
from ScreenDeck.sources.parser import parse_screen_page
from ScreenDeck.utils.log import log

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 4
BASE_PAUSE = 0.8
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "screendeck/0.1",
    "Accept": "application/json",
}


class ScreensApiClient:
    """Low-level HTTP client for the page-based screens API."""

    def __init__(
        self,
        base_url: str,
        *,
        saved_path: str = "/strategies/user/{user_id}",
        public_path: str = "/strategies/public",
        page_size: int | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: API root, e.g. ``https://api.example.com``.
            saved_path: Path template for a user's screens; ``{user_id}`` is
                substituted URL-quoted.
            public_path: Path for public screens.
            page_size: Page size sent to the backend; omitted when None.
            timeout: Request timeout in seconds.
            session: Optional preconfigured session.
        """
        if not base_url:
            raise ValueError("base_url cannot be empty")
        self.base_url = base_url.rstrip("/")
        self.saved_path = saved_path
        self.public_path = public_path
        self.page_size = page_size
        self.timeout = timeout
        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    def fetch_saved_screens(self, user_id: str, page: int) -> ScreenPage:
        """Fetch one page of screens owned by `user_id`.

        Raises:
            FetchError: When the request fails or the response is unusable.
        """
        path = self.saved_path.format(user_id=quote(str(user_id), safe=""))
        return self._fetch_page(path, page)

    def fetch_public_screens(self, page: int) -> ScreenPage:
        """Fetch one page of public/sample screens.

        Raises:
            FetchError: When the request fails or the response is unusable.
        """
        return self._fetch_page(self.public_path, page)

    def _fetch_page(self, path: str, page: int) -> ScreenPage:
        url = f"{self.base_url}/{path.lstrip('/')}"
        params = {"page": str(page)}
        if self.page_size:
            params["page_size"] = str(self.page_size)
        try:
            response = self._get_with_retry(url, params=params)
            response.raise_for_status()
            payload: Any = response.json()
            return parse_screen_page(payload)
        except (requests.RequestException, ValueError) as error:
            raise FetchError(f"GET {url} page={page} failed: {error}") from error

    def _get_with_retry(self, url: str, *, params: dict[str, str]) -> requests.Response:
        """Issue GET with retries for transient failures."""
        last_error: Exception | None = None
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                response = self._session.get(url, params=params, headers=HEADERS, timeout=self.timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if isinstance(error, requests.HTTPError):
                    status_code = getattr(error.response, "status_code", None)
                    if status_code not in RETRYABLE_STATUS:
                        raise
                if attempt < MAX_ATTEMPTS:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug("Screens API retry attempt=%d/%d delay=%.2fs error=%s", attempt, MAX_ATTEMPTS, delay, error)
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
