"""
Custom DataTable widget for displaying characters
"""

from typing import Iterable, Optional

from rich.text import Text
from textual.widgets import DataTable

from character_browser.interfaces.scroll_target import ScrollTarget
from character_browser.models.character import Character


class CharacterTable(DataTable, ScrollTarget):
    """
    DataTable of one page of characters, keyed by character id
    """

    COLUMNS = ("ID", "Name", "Status", "Species", "Origin", "Location")

    STATUS_STYLES = {
        "alive": "green",
        "dead": "red",
    }

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True

    def on_mount(self) -> None:
        self.add_class("characters-table")
        self.add_columns(*self.COLUMNS)

    def show_characters(self, characters: Iterable[Character]) -> None:
        """Replace every row with the given characters."""
        self.clear()
        for character in characters:
            self.add_row(
                str(character.id),
                character.name,
                self._status_cell(character.status),
                character.species or "unknown",
                character.origin_name or "unknown",
                character.location_name or "unknown",
                key=character.key,
            )

    @classmethod
    def _status_cell(cls, status: str) -> Text:
        style = cls.STATUS_STYLES.get(status.lower(), "dim")
        return Text(status or "unknown", style=style)

    def scroll_to_top(self) -> None:
        self.scroll_to(y=0, animate=True)
