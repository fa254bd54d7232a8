# File: character_browser/services/pagination_controller.py

import asyncio
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Optional, Set

from ..core.event_bus import EventBus
from ..errors import FetchError
from ..events import EventType
from ..interfaces.page_fetcher import FetchResult, PageFetcherInterface
from ..models.pagination import ListState, ViewState

logger = logging.getLogger(__name__)

Scheduler = Callable[[Awaitable[None]], Any]


class PaginationController:
    """
    Owns the page number and the list/error state, and drives one fetch per
    page change.

    Navigation is synchronous: it mutates the page and publishes
    PAGE_CHANGED. The controller's own PAGE_CHANGED subscription schedules
    the fetch; the fetch coroutine runs on the event loop and, when it
    settles, replaces the view state and publishes STATE_CHANGED followed by
    LIST_REPLACED or ERROR_SET.

    Each scheduled fetch gets a ticket. With discard_stale_responses on, a
    result whose ticket is not the newest one issued is dropped, so a slow
    response can never overwrite a newer page.
    """

    def __init__(
        self,
        fetcher: PageFetcherInterface,
        event_bus: EventBus,
        scheduler: Optional[Scheduler] = None,
        start_page: int = 1,
        discard_stale_responses: bool = True,
    ):
        """
        Args:
            fetcher: Page fetcher used for every fetch attempt
            event_bus: Bus the controller publishes on and listens to
            scheduler: Runs a fetch coroutine in the background; defaults to
                an asyncio task on the running loop
            start_page: Initial page number (>= 1)
            discard_stale_responses: Drop results superseded by a newer fetch
        """
        if start_page < 1:
            raise ValueError(f"start_page must be >= 1, got {start_page}")

        self.fetcher = fetcher
        self.event_bus = event_bus
        self.discard_stale_responses = discard_stale_responses
        self._scheduler = scheduler or self._spawn
        self._state = ViewState(page=start_page)
        self._latest_ticket = 0
        self._in_flight = 0
        self._tasks: Set[asyncio.Task] = set()

        self.event_bus.subscribe(EventType.PAGE_CHANGED, self._on_page_changed)

    # ------------------------------------------------------------------ #
    # state access
    # ------------------------------------------------------------------ #

    @property
    def page(self) -> int:
        return self._state.page

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def in_flight(self) -> int:
        return self._in_flight

    # ------------------------------------------------------------------ #
    # navigation
    # ------------------------------------------------------------------ #

    def start(self) -> None:
        """Announce the initial page, which triggers the first fetch."""
        logger.info(f"Starting at page {self.page}")
        self.event_bus.publish(EventType.PAGE_CHANGED, page=self.page, previous=None)

    def go_to_next_page(self) -> None:
        # No upper bound: the remote collection answers past-the-end pages itself
        self._set_page(self.page + 1)

    def go_to_previous_page(self) -> None:
        self._set_page(max(self.page - 1, 1))

    def reload(self) -> None:
        """Fetch the current page again without changing it."""
        logger.info(f"Reloading page {self.page}")
        self._schedule_fetch(self.page)

    def unsubscribe(self) -> None:
        self.event_bus.unsubscribe(EventType.PAGE_CHANGED, self._on_page_changed)

    async def wait_for_pending(self) -> None:
        """Wait until every fetch started by the default scheduler has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _set_page(self, new_page: int) -> None:
        previous = self.page
        if new_page == previous:
            logger.debug(f"Page unchanged at {previous}; nothing to fetch")
            return
        self._state = replace(self._state, page=new_page)
        logger.debug(f"Page {previous} -> {new_page}")
        self.event_bus.publish(EventType.PAGE_CHANGED, page=new_page, previous=previous)

    def _on_page_changed(self, page: int, **_: Any) -> None:
        self._schedule_fetch(page)

    def _schedule_fetch(self, page: int) -> None:
        self._latest_ticket += 1
        ticket = self._latest_ticket
        self._in_flight += 1
        coro = self._fetch_and_apply(page, ticket)
        try:
            self._scheduler(coro)
        except Exception:
            # Nothing was started: roll back so older fetches still count as newest
            coro.close()
            self._latest_ticket -= 1
            self._in_flight -= 1
            logger.error(f"Could not schedule fetch for page {page}", exc_info=True)
            raise
        self.event_bus.publish(EventType.FETCH_STARTED, page=page, ticket=ticket)

    def _spawn(self, coro: Awaitable[None]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        # Hold a reference until done; the loop only keeps weak ones
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch_and_apply(self, page: int, ticket: int) -> None:
        try:
            result = await self.fetcher.fetch_page(page)
        except Exception as e:
            # A fetcher bug still ends up in the error view, never in a crash
            logger.error(f"Unexpected error fetching page {page}: {e}", exc_info=True)
            result = FetchResult.failure(page, FetchError(f"unexpected error ({e})", page=page))
        finally:
            self._in_flight -= 1
        self._apply(result, ticket)

    def _apply(self, result: FetchResult, ticket: int) -> None:
        if self.discard_stale_responses and ticket != self._latest_ticket:
            logger.info(
                f"Discarding stale response for page {result.page} "
                f"(ticket {ticket}, latest {self._latest_ticket})"
            )
            self.event_bus.publish(
                EventType.FETCH_DISCARDED, page=result.page, ticket=ticket, latest_ticket=self._latest_ticket
            )
            return

        if result.ok:
            list_state = ListState.of(result.characters)
            self._state = replace(
                self._state, list_state=list_state, error=None, page_info=result.page_info
            )
            self.event_bus.publish(EventType.STATE_CHANGED, state=self._state)
            self.event_bus.publish(EventType.LIST_REPLACED, page=result.page, list_state=list_state)
        else:
            # The stale list stays in place; the error view hides it
            message = str(result.error)
            self._state = replace(self._state, error=message)
            self.event_bus.publish(EventType.STATE_CHANGED, state=self._state)
            self.event_bus.publish(EventType.ERROR_SET, page=result.page, error=message)
