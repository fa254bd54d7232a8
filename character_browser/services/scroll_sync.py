# File: character_browser/services/scroll_sync.py

import logging
from typing import Any, Optional

from ..core.event_bus import EventBus
from ..events import EventType
from ..interfaces.scroll_target import ScrollTarget

logger = logging.getLogger(__name__)


class ScrollSynchronizer:
    """Scrolls the attached list view to the top once per list replacement."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self._target: Optional[ScrollTarget] = None
        self.issued = 0
        self.dropped = 0
        self.event_bus.subscribe(EventType.LIST_REPLACED, self._on_list_replaced)

    @property
    def target(self) -> Optional[ScrollTarget]:
        return self._target

    def attach(self, target: ScrollTarget) -> None:
        self._target = target

    def detach(self) -> None:
        self._target = None

    def unsubscribe(self) -> None:
        self.event_bus.unsubscribe(EventType.LIST_REPLACED, self._on_list_replaced)

    def _on_list_replaced(self, **_: Any) -> None:
        # Keyed on the event itself: an identical list still resets the scroll
        if self._target is None:
            self.dropped += 1
            logger.debug("List replaced with no view attached; scroll command dropped")
            return
        self._target.scroll_to_top()
        self.issued += 1
