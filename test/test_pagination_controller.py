"""Tests for the paginated collection controller."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ScreenDeck.core.models import ScreenPage, ScreenRecord
from ScreenDeck.services.pagination import FetchError, PaginatedCollectionController


class _QueuedDispatcher:
    """Holds fetch jobs so tests decide completion order."""

    def __init__(self) -> None:
        self.jobs = []

    def __call__(self, job) -> None:
        self.jobs.append(job)

    def run(self, index: int) -> None:
        self.jobs.pop(index)()

    def run_all(self) -> None:
        while self.jobs:
            self.run(0)


class _StubFetcher:
    def __init__(self, pages: dict[int, ScreenPage], failing: set[int] | None = None) -> None:
        self.pages = pages
        self.failing = failing or set()
        self.calls: list[int] = []

    def __call__(self, page: int) -> ScreenPage:
        self.calls.append(page)
        if page in self.failing:
            raise FetchError(f"page {page} unavailable")
        return self.pages[page]


def _page(page: int, total_pages: int = 5) -> ScreenPage:
    return ScreenPage(
        items=[ScreenRecord(id=f"{page}-{i}", name=f"p{page} s{i}") for i in range(2)],
        total_pages=total_pages,
    )


class TestPaginatedCollectionController(unittest.TestCase):
    def test_start_loads_first_page(self) -> None:
        fetcher = _StubFetcher({1: _page(1, total_pages=3)})
        controller = PaginatedCollectionController("test", fetcher)

        controller.start()

        self.assertEqual(fetcher.calls, [1])
        self.assertEqual(controller.current_page, 1)
        self.assertEqual(controller.total_pages, 3)
        self.assertEqual([r.id for r in controller.items], ["1-0", "1-1"])

    def test_set_page_triggers_fetch(self) -> None:
        fetcher = _StubFetcher({1: _page(1), 2: _page(2)})
        controller = PaginatedCollectionController("test", fetcher)
        controller.start()

        controller.set_page(2)

        self.assertEqual(fetcher.calls, [1, 2])
        self.assertEqual(controller.current_page, 2)
        self.assertEqual(controller.items[0].id, "2-0")

    def test_stale_response_is_discarded(self) -> None:
        dispatcher = _QueuedDispatcher()
        fetcher = _StubFetcher({1: _page(1), 3: _page(3, total_pages=7), 4: _page(4, total_pages=9)})
        controller = PaginatedCollectionController("test", fetcher, dispatch=dispatcher)
        controller.start()
        dispatcher.run_all()

        controller.set_page(3)
        controller.set_page(4)
        dispatcher.run(1)  # page 4 completes first
        dispatcher.run(0)  # slow page 3 arrives late

        self.assertEqual(controller.current_page, 4)
        self.assertEqual(controller.total_pages, 9)
        self.assertEqual([r.id for r in controller.items], ["4-0", "4-1"])

    def test_on_page_loaded_reports_whether_applied(self) -> None:
        controller = PaginatedCollectionController("test", _StubFetcher({}), dispatch=lambda job: None)
        controller.set_page(2)

        self.assertFalse(controller.on_page_loaded(1, [ScreenRecord(id="x")], 4))
        self.assertTrue(controller.on_page_loaded(2, [ScreenRecord(id="y")], 4))
        self.assertEqual(controller.items, (ScreenRecord(id="y"),))
        self.assertEqual(controller.total_pages, 4)

    def test_failed_fetch_keeps_previous_page(self) -> None:
        fetcher = _StubFetcher({1: _page(1, total_pages=6)}, failing={2})
        controller = PaginatedCollectionController("test", fetcher)
        controller.start()
        before = controller.page_state

        controller.set_page(2)

        self.assertEqual(controller.items, before.items)
        self.assertEqual(controller.total_pages, before.total_pages)
        self.assertEqual(controller.current_page, 2)
        self.assertIsInstance(controller.last_error, FetchError)

        controller.dismiss_error()
        self.assertIsNone(controller.last_error)

    def test_disabled_controller_never_fetches(self) -> None:
        fetcher = _StubFetcher({1: _page(1)})
        controller = PaginatedCollectionController("saved", fetcher, enabled=False)

        controller.start()
        controller.set_page(2)

        self.assertEqual(fetcher.calls, [])
        self.assertEqual(controller.items, ())

    def test_closed_controller_ignores_late_completion(self) -> None:
        dispatcher = _QueuedDispatcher()
        fetcher = _StubFetcher({1: _page(1)})
        controller = PaginatedCollectionController("test", fetcher, dispatch=dispatcher)
        controller.start()

        controller.close()
        dispatcher.run_all()

        self.assertTrue(controller.closed)
        self.assertEqual(controller.items, ())

    def test_invalid_page_rejected(self) -> None:
        controller = PaginatedCollectionController("test", _StubFetcher({}))
        for bad in (0, -1, True, 1.5):
            with self.subTest(bad):
                with self.assertRaises(ValueError):
                    controller.set_page(bad)

    def test_total_pages_defaults_to_one(self) -> None:
        controller = PaginatedCollectionController("test", _StubFetcher({1: ScreenPage(items=[], total_pages=None)}))

        controller.start()

        self.assertEqual(controller.total_pages, 1)

    def test_instances_do_not_share_state(self) -> None:
        saved = PaginatedCollectionController("saved", _StubFetcher({1: _page(1), 2: _page(2)}))
        public = PaginatedCollectionController("public", _StubFetcher({1: _page(1)}))
        saved.start()
        public.start()

        saved.set_page(2)

        self.assertEqual(public.current_page, 1)
        self.assertEqual(public.items[0].id, "1-0")


if __name__ == "__main__":
    unittest.main()
