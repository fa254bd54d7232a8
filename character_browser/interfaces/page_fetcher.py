# character_browser/interfaces/page_fetcher.py

from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import FetchError
from ..models.character import Character
from ..models.pagination import PageInfo


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch attempt. Exactly one of characters/error is set."""
    page: int
    characters: Optional[Tuple[Character, ...]] = None
    page_info: Optional[PageInfo] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, page: int, characters, page_info: Optional[PageInfo] = None) -> "FetchResult":
        return cls(page=page, characters=tuple(characters), page_info=page_info)

    @classmethod
    def failure(cls, page: int, error: FetchError) -> "FetchResult":
        return cls(page=page, error=error)


class PageFetcherInterface:
    """Interface for fetching one page of characters from the remote collection."""

    async def fetch_page(self, page_number: int) -> FetchResult:
        """
        Fetch a single page.

        Args:
            page_number: 1-based page index

        Returns:
            FetchResult carrying either the page's characters or the FetchError
            (NetworkError, HttpStatusError or DecodeError). Fetch errors are
            never raised.

        Raises:
            ValueError: If page_number is below 1
        """
        raise NotImplementedError("Subclasses must implement this method")

    async def aclose(self) -> None:
        """Release any network resources held by the fetcher."""
        raise NotImplementedError("Subclasses must implement this method")
