# File: character_browser/events.py

from enum import Enum


class EventType(Enum):
    # Navigation
    PAGE_CHANGED = "page_changed"

    # Fetch cycle
    FETCH_STARTED = "fetch_started"
    FETCH_DISCARDED = "fetch_discarded"

    # State replacement
    LIST_REPLACED = "list_replaced"
    ERROR_SET = "error_set"
    STATE_CHANGED = "state_changed"
