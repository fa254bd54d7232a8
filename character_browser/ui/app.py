"""
Main Textual application class for the Character Browser
"""

from __future__ import annotations

from typing import Any, Awaitable, Dict, Optional

from textual.app import App
from textual.binding import Binding

from character_browser.di import build_container, Container
from character_browser.services.pagination_controller import PaginationController
from character_browser.ui.screens.characters_screen import CharactersScreen
from simple_logger import Slogger


class CharacterBrowserApp(App):
    """Terminal browser for a paginated remote character collection."""

    TITLE = "Character Browser"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    # ------------------------------------------------------------------ #
    # init / mount
    # ------------------------------------------------------------------ #

    def __init__(self, config: Dict[str, Any], container: Optional[Container] = None) -> None:
        super().__init__()
        self.config = config
        self.container: Container = container or build_container(config)
        self.controller: PaginationController = self.container.pagination_controller(
            scheduler=self.schedule_fetch
        )

    def on_mount(self) -> None:
        self.push_screen(
            CharactersScreen(
                controller=self.controller,
                event_bus=self.container.event_bus,
                scroll_sync=self.container.scroll_sync,
                config=self.config,
                id="characters_screen",
            )
        )
        Slogger.info("Character browser mounted", {"start_page": self.controller.page})
        self.controller.start()

    async def on_unmount(self) -> None:
        try:
            await self.container.aclose()
        except Exception as e:
            # Shutting down anyway; keep the traceback for the log
            Slogger.exception(e, "Error closing page fetcher", {"app": "CharacterBrowserApp"})

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    def schedule_fetch(self, coro: Awaitable[None]) -> None:
        """Run a fetch coroutine as a worker; fetches never cancel each other."""
        self.run_worker(coro, group="page_fetch", exclusive=False)
