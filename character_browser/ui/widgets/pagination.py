"""
Pagination widget for stepping through character pages
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Button, Label

from character_browser.models.pagination import PageInfo
from character_browser.ui.messages import NextPageRequested, PreviousPageRequested


class Pagination(Container):
    """
    Pagination bar with prev and next buttons and a page indicator
    """

    DEFAULT_CSS = """
    Pagination {
        layout: horizontal;
        height: 3;
        content-align: center middle;
    }

    Pagination > Button {
        min-width: 16;
        margin: 0 1;
    }

    Pagination > #page-indicator {
        min-width: 15;
        height: 3;
        content-align: center middle;
    }
    """

    current_page = reactive(1)

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.page_info: Optional[PageInfo] = None

    def compose(self) -> ComposeResult:
        yield Button("< Prev", id="prev-page", classes="page-button")
        yield Label("Page [b]1[/b]", id="page-indicator", classes="page-indicator")
        yield Button("Next >", id="next-page", classes="page-button")

    def on_mount(self) -> None:
        self.update_page(self.current_page, self.page_info)

    def update_page(self, current: int, page_info: Optional[PageInfo] = None) -> None:
        """
        Show the current page and, when the source reported it, the page count.

        The next button is never disabled: the source's page count is shown
        for orientation only.
        """
        self.page_info = page_info
        self.current_page = current

        indicator = self.query_one("#page-indicator", Label)
        if page_info is not None:
            indicator.update(f"Page [b]{current}[/b] of [b]{page_info.pages}[/b]")
        else:
            indicator.update(f"Page [b]{current}[/b]")

        self.query_one("#prev-page", Button).disabled = current <= 1

    def watch_current_page(self, current_page: int) -> None:
        if self.is_mounted:
            self.query_one("#prev-page", Button).disabled = current_page <= 1

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Forward button presses as page requests"""
        event.stop()
        if event.button.id == "prev-page":
            self.post_message(PreviousPageRequested())
        elif event.button.id == "next-page":
            self.post_message(NextPageRequested())
