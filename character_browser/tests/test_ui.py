import asyncio
import copy
import os
import tempfile
import unittest
from unittest.mock import AsyncMock

from textual.widgets import Static

from simple_logger import Slogger

from ..config import DEFAULT_CONFIG
from ..di import Container
from ..errors import HttpStatusError
from ..interfaces.page_fetcher import FetchResult
from ..ui.app import CharacterBrowserApp
from ..ui.controllers.status_bar import StatusBarController
from ..ui.widgets.character_table import CharacterTable
from ..ui.widgets.pagination import Pagination
from .test_pagination_controller import FakeFetcher, RICK_AND_MORTY


class GatedFetcher(FakeFetcher):
    """Holds `slow_page` until the gate opens; every other page answers at once."""

    def __init__(self, gate, slow_page):
        super().__init__()
        self.gate = gate
        self.slow_page = slow_page

    async def fetch_page(self, page_number):
        if page_number == self.slow_page:
            await self.gate.wait()
        return await super().fetch_page(page_number)


class TestCharactersScreen(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self._log_path = Slogger.log_path
        Slogger.log_path = os.path.join(self.tmpdir.name, "ui.log")

        self.fetcher = FakeFetcher()
        self.fetcher.responses[1] = FetchResult.success(1, RICK_AND_MORTY)
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.app = CharacterBrowserApp(self.config, container=Container(self.config, page_fetcher=self.fetcher))

    def tearDown(self):
        Slogger.log_path = self._log_path
        self.tmpdir.cleanup()

    async def settle(self, pilot):
        await pilot.pause()
        await self.app.workers.wait_for_complete()
        await pilot.pause()

    async def test_first_page_is_rendered(self):
        async with self.app.run_test() as pilot:
            await self.settle(pilot)
            table = self.app.screen.query_one(CharacterTable)

            self.assertEqual(self.fetcher.calls, [1])
            self.assertEqual(table.row_count, 2)
            self.assertTrue(table.display)
            self.assertTrue(self.app.screen.query_one("#prev-page").disabled)

    async def test_keys_page_forward_and_back(self):
        async with self.app.run_test() as pilot:
            await self.settle(pilot)

            await pilot.press("n")
            await self.settle(pilot)
            self.assertEqual(self.app.controller.page, 2)
            self.assertFalse(self.app.screen.query_one("#prev-page").disabled)

            await pilot.press("p")
            await self.settle(pilot)
            await pilot.press("p")
            await self.settle(pilot)

            self.assertEqual(self.app.controller.page, 1)
            self.assertEqual(self.fetcher.calls, [1, 2, 1])

    async def test_next_button_requests_next_page(self):
        async with self.app.run_test() as pilot:
            await self.settle(pilot)

            await pilot.click("#next-page")
            await self.settle(pilot)

            self.assertEqual(self.app.controller.page, 2)
            self.assertEqual(self.app.screen.query_one(Pagination).current_page, 2)

    async def test_error_view_replaces_list(self):
        self.fetcher.responses[2] = FetchResult.failure(2, HttpStatusError(500, "Internal Server Error", page=2))

        async with self.app.run_test() as pilot:
            await self.settle(pilot)
            await pilot.press("n")
            await self.settle(pilot)

            table = self.app.screen.query_one(CharacterTable)
            error_view = self.app.screen.query_one("#error-view", Static)
            self.assertFalse(table.display)
            self.assertTrue(error_view.display)
            self.assertIn("500", self.app.controller.state.error)

            await pilot.press("n")
            await self.settle(pilot)

            self.assertTrue(table.display)
            self.assertFalse(error_view.display)

    async def test_late_stale_response_clears_loading_marker(self):
        """Page 2 answers after page 3 settled; the status bar must not stay in loading."""
        gate = asyncio.Event()
        fetcher = GatedFetcher(gate, slow_page=2)
        fetcher.responses[1] = FetchResult.success(1, RICK_AND_MORTY)
        app = CharacterBrowserApp(self.config, container=Container(self.config, page_fetcher=fetcher))

        async with app.run_test() as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            await pilot.press("n")
            await pilot.pause()
            await pilot.press("n")
            for _ in range(20):
                await pilot.pause()
                if app.controller.in_flight == 1:
                    break
            self.assertEqual(app.controller.state.list_state.items[0].name, "p3-a")
            self.assertIn("Loading page 3", app.screen.status_controller.text)

            gate.set()
            await app.workers.wait_for_complete()
            await pilot.pause()

            self.assertEqual(app.controller.page, 3)
            self.assertEqual(app.controller.in_flight, 0)
            self.assertEqual(app.controller.state.list_state.items[0].name, "p3-a")
            self.assertNotIn("Loading", app.screen.status_controller.text)

    async def test_fetcher_close_failure_is_logged_on_exit(self):
        self.fetcher.aclose = AsyncMock(side_effect=RuntimeError("close failed"))

        async with self.app.run_test() as pilot:
            await self.settle(pilot)

        self.fetcher.aclose.assert_awaited_once()
        with open(Slogger.log_path, encoding="utf-8") as f:
            log = f.read()
        self.assertIn("Error closing page fetcher", log)
        self.assertIn("close failed", log)
        self.assertIn("TRACEBACK", log)


class TestStatusBarFormat(unittest.TestCase):
    def test_format(self):
        from ..models.pagination import ListState, PageInfo, ViewState

        state = ViewState(page=2, list_state=ListState.of(RICK_AND_MORTY), page_info=PageInfo(count=826, pages=42))

        self.assertEqual(StatusBarController.format(state), "Page: 2 | Characters: 2 | Total: 826")
        self.assertEqual(
            StatusBarController.format(ViewState(page=3, error="boom"), loading_page=3),
            "Page: 3 | Error | Loading page 3...",
        )


if __name__ == "__main__":
    unittest.main()
