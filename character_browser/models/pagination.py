"""Page metadata and the list/error state that the controller replaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

from character_browser.models.character import Character


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Pagination meta-data reported by the remote collection."""

    count: int           # total items in the whole collection
    pages: int           # total number of pages
    next: Optional[str] = None
    prev: Optional[str] = None

    @classmethod
    def from_api(cls, info: Any) -> Optional["PageInfo"]:
        """Parse the `info` object; anything unusable yields None."""
        if not isinstance(info, dict):
            return None
        count, pages = info.get("count"), info.get("pages")
        if not isinstance(count, int) or not isinstance(pages, int):
            return None
        return cls(count=count, pages=pages, next=info.get("next"), prev=info.get("prev"))


# eq=False: every ListState is its own replacement event, even when two
# instances hold the same characters.
@dataclass(frozen=True, eq=False)
class ListState:
    """Either Populated (items given) or Empty (no page loaded yet)."""

    items: Tuple[Character, ...] = ()
    populated: bool = False

    @classmethod
    def empty(cls) -> "ListState":
        return cls()

    @classmethod
    def of(cls, characters: Sequence[Character]) -> "ListState":
        return cls(items=tuple(characters), populated=True)

    @property
    def is_empty(self) -> bool:
        return not self.populated

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class ViewState:
    """Snapshot the presentation layer renders from."""

    page: int = 1
    list_state: ListState = field(default_factory=ListState.empty)
    error: Optional[str] = None
    page_info: Optional[PageInfo] = None

    @property
    def show_error(self) -> bool:
        # The error view always wins over a (possibly stale) list
        return self.error is not None

    @property
    def renderable(self) -> Tuple[Character, ...]:
        return () if self.show_error else self.list_state.items
