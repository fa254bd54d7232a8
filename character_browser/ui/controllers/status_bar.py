# character_browser/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from typing import Optional

from textual.widgets import Static

from character_browser.models.pagination import ViewState


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar
        self._last_text = ""

    @property
    def text(self) -> str:
        return self._last_text

    # ------------------------------------------------------------------ #
    # public helpers
    # ------------------------------------------------------------------ #

    def update(self, state: ViewState, loading_page: Optional[int] = None) -> None:
        """Refresh the whole status line from a view state."""
        self._write(self.format(state, loading_page))

    def show_loading(self, state: ViewState, page: int) -> None:
        self.update(state, loading_page=page)

    @staticmethod
    def format(state: ViewState, loading_page: Optional[int] = None) -> str:
        parts: list[str] = [f"Page: {state.page}"]

        if state.show_error:
            parts.append("Error")
        else:
            parts.append(f"Characters: {len(state.list_state)}")

        if state.page_info is not None:
            parts.append(f"Total: {state.page_info.count}")

        if loading_page is not None:
            parts.append(f"Loading page {loading_page}...")

        return " | ".join(parts)

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _write(self, text: str) -> None:
        self._last_text = text
        self._bar.update(text)
