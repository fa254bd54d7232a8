# character_browser/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Dict, Any, Optional

from character_browser.core.event_bus import EventBus
from character_browser.interfaces.page_fetcher import PageFetcherInterface
from character_browser.services.page_fetcher import HttpPageFetcher
from character_browser.services.pagination_controller import PaginationController, Scheduler
from character_browser.services.scroll_sync import ScrollSynchronizer


class Container:
    """Holds lazily-created singletons."""

    def __init__(self, config: Dict[str, Any], page_fetcher: Optional[PageFetcherInterface] = None) -> None:
        self._cfg = config
        self._event_bus: EventBus | None = None
        self._page_fetcher: PageFetcherInterface | None = page_fetcher
        self._scroll_sync: ScrollSynchronizer | None = None
        self._controller: PaginationController | None = None

    # ---------- infra ----------
    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            debug = self._cfg.get("logging", {}).get("level", "INFO").upper() == "DEBUG"
            self._event_bus = EventBus(debug_logging=debug)
        return self._event_bus

    @property
    def page_fetcher(self) -> PageFetcherInterface:
        if self._page_fetcher is None:
            api = self._cfg.get("api", {})
            self._page_fetcher = HttpPageFetcher(
                base_url=api["base_url"],
                timeout=api.get("timeout", 15),
                impersonate=api.get("impersonate"),
            )
        return self._page_fetcher

    # ---------- services ----------
    @property
    def scroll_sync(self) -> ScrollSynchronizer:
        if self._scroll_sync is None:
            self._scroll_sync = ScrollSynchronizer(self.event_bus)
        return self._scroll_sync

    def pagination_controller(self, scheduler: Optional[Scheduler] = None) -> PaginationController:
        """The controller, built on first call with the given scheduler."""
        if self._controller is None:
            pagination = self._cfg.get("pagination", {})
            # Subscribe the scroll synchronizer before anything can publish
            _ = self.scroll_sync
            self._controller = PaginationController(
                self.page_fetcher,
                self.event_bus,
                scheduler=scheduler,
                start_page=pagination.get("start_page", 1),
                discard_stale_responses=pagination.get("discard_stale_responses", True),
            )
        return self._controller

    async def aclose(self) -> None:
        if self._page_fetcher is not None:
            await self._page_fetcher.aclose()


# convenience factory
def build_container(config: Dict[str, Any]) -> Container:
    """Create a container for the given config."""
    return Container(config)
