"""
Main Characters screen: one page of characters with prev/next navigation
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, Static

from character_browser.core.event_bus import EventBus
from character_browser.events import EventType
from character_browser.models.pagination import ViewState
from character_browser.services.pagination_controller import PaginationController
from character_browser.services.scroll_sync import ScrollSynchronizer

from character_browser.ui.controllers.status_bar import StatusBarController
from character_browser.ui.messages import NextPageRequested, PreviousPageRequested
from character_browser.ui.widgets.character_table import CharacterTable
from character_browser.ui.widgets.pagination import Pagination
from simple_logger import Slogger


class CharactersScreen(Screen):
    """Character list with an error view that replaces it while a fetch has failed."""

    BINDINGS = [
        ("n", "next_page", "Next Page"),
        ("p", "prev_page", "Previous Page"),
        ("r", "reload", "Reload"),
    ]

    DEFAULT_CSS = """
    #list-title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        padding: 1 0;
    }

    #characters-table {
        height: 1fr;
    }

    #error-view {
        height: 1fr;
        content-align: center middle;
        color: $error;
    }
    """

    # ------------------------------------------------------------------ #

    def __init__(
        self,
        controller: PaginationController,
        event_bus: EventBus,
        scroll_sync: ScrollSynchronizer,
        config: Dict[str, Any],
        *,
        id: str = "characters_screen",
    ) -> None:
        super().__init__(id=id)

        self.config = config
        self.controller = controller
        self.event_bus = event_bus
        self.scroll_sync = scroll_sync
        self._loading_page: Optional[int] = None

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Container(id="main-container"):
            with Vertical(id="content-area"):
                title = self.config.get("ui", {}).get("title", "Character List")
                yield Label(title, id="list-title")
                yield CharacterTable(id="characters-table")
                yield Static("", id="error-view", markup=False)
                yield Pagination(id="pagination")

        yield Static(id="status-bar", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#error-view", Static).display = False
        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))

        self.event_bus.subscribe(EventType.PAGE_CHANGED, self._on_page_changed)
        self.event_bus.subscribe(EventType.FETCH_STARTED, self._on_fetch_started)
        self.event_bus.subscribe(EventType.FETCH_DISCARDED, self._on_fetch_discarded)
        self.event_bus.subscribe(EventType.STATE_CHANGED, self._on_state_changed)

        self.scroll_sync.attach(self.query_one(CharacterTable))
        self.render_state(self.controller.state)

    def on_unmount(self) -> None:
        self.scroll_sync.detach()
        self.event_bus.unsubscribe(EventType.PAGE_CHANGED, self._on_page_changed)
        self.event_bus.unsubscribe(EventType.FETCH_STARTED, self._on_fetch_started)
        self.event_bus.unsubscribe(EventType.FETCH_DISCARDED, self._on_fetch_discarded)
        self.event_bus.unsubscribe(EventType.STATE_CHANGED, self._on_state_changed)

    # ------------------------------------------------------------------ #
    # Action handlers
    # ------------------------------------------------------------------ #

    def action_next_page(self) -> None:
        self.controller.go_to_next_page()

    def action_prev_page(self) -> None:
        self.controller.go_to_previous_page()

    def action_reload(self) -> None:
        self.controller.reload()

    def on_next_page_requested(self, event: NextPageRequested) -> None:
        self.controller.go_to_next_page()

    def on_previous_page_requested(self, event: PreviousPageRequested) -> None:
        self.controller.go_to_previous_page()

    # ------------------------------------------------------------------ #
    # Bus handlers
    # ------------------------------------------------------------------ #

    def _on_page_changed(self, page: int, **_: Any) -> None:
        state = self.controller.state
        self.query_one(Pagination).update_page(page, state.page_info)
        self.status_controller.update(state, self._loading_page)

    def _on_fetch_started(self, page: int, **_: Any) -> None:
        self._loading_page = page
        self.status_controller.show_loading(self.controller.state, page)

    def _on_fetch_discarded(self, page: int, ticket: int, **_: Any) -> None:
        Slogger.debug(f"Ignored stale response for page {page}", {"screen": "CharactersScreen", "ticket": ticket})
        # No STATE_CHANGED follows a discard, so the last settle may happen here
        if self.controller.in_flight == 0:
            self._loading_page = None
            self.status_controller.update(self.controller.state, self._loading_page)

    def _on_state_changed(self, state: ViewState, **_: Any) -> None:
        if self.controller.in_flight == 0:
            self._loading_page = None
        self.render_state(state)

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def render_state(self, state: ViewState) -> None:
        """Show either the error view or the list, never both."""
        table = self.query_one(CharacterTable)
        error_view = self.query_one("#error-view", Static)

        if state.show_error:
            Slogger.warning(state.error, {"screen": "CharactersScreen", "page": state.page})
            error_view.update(state.error)
            error_view.display = True
            table.display = False
        else:
            table.show_characters(state.renderable)
            error_view.display = False
            table.display = True

        self.query_one(Pagination).update_page(state.page, state.page_info)
        self.status_controller.update(state, self._loading_page)
