from .page_fetcher import HttpPageFetcher
from .pagination_controller import PaginationController
from .scroll_sync import ScrollSynchronizer

__all__ = ["HttpPageFetcher", "PaginationController", "ScrollSynchronizer"]
