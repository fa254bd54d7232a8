# character_browser/core/event_bus.py

import logging
from typing import Callable, Dict, Any, List

from ..events import EventType

logger = logging.getLogger(__name__)


class EventBus:
    """
    Synchronous publish/subscribe dispatcher.

    Handlers run in subscription order on the caller's thread, inside
    publish(). The pagination controller, the scroll synchronizer and the
    screen all talk through one bus, so none of them holds a reference to
    another's internals.
    """

    def __init__(self, debug_logging: bool = False):
        """
        Initialize a new event bus.

        Args:
            debug_logging: Whether to log every published event
        """
        self.listeners: Dict[EventType, List[Callable[..., Any]]] = {}
        self.debug_logging = debug_logging

    def subscribe(self, event_type: EventType, callback: Callable[..., Any]) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to subscribe to
            callback: Called with the event's keyword data
        """
        if event_type not in self.listeners:
            self.listeners[event_type] = []

        if callback not in self.listeners[event_type]:
            self.listeners[event_type].append(callback)
            logger.debug(f"Subscribed to event '{event_type.name}'")

    def unsubscribe(self, event_type: EventType, callback: Callable[..., Any]) -> bool:
        """
        Unsubscribe from an event type.

        Returns:
            True if the callback was subscribed, False otherwise
        """
        if event_type in self.listeners and callback in self.listeners[event_type]:
            self.listeners[event_type].remove(callback)
            logger.debug(f"Unsubscribed from event '{event_type.name}'")
            return True
        return False

    def publish(self, event_type: EventType, **data: Any) -> None:
        """
        Publish an event to every subscriber of its type.

        Args:
            event_type: Type of event to publish
            **data: Data passed to each handler as keyword arguments
        """
        if self.debug_logging:
            logger.debug(f"Event published: {event_type.name} - {data}")

        # Copy so a handler may unsubscribe itself while we iterate
        for callback in list(self.listeners.get(event_type, [])):
            try:
                callback(**data)
            except Exception as e:
                # One broken handler must not starve the others
                logger.error(f"Error in event handler for '{event_type.name}': {e}", exc_info=True)

    def get_subscriber_count(self, event_type: EventType) -> int:
        return len(self.listeners.get(event_type, []))

    def has_subscribers(self, event_type: EventType) -> bool:
        return self.get_subscriber_count(event_type) > 0

    def clear_all_subscriptions(self) -> None:
        """
        Clear all event subscriptions.
        Useful for testing or when shutting down the application.
        """
        self.listeners.clear()
        logger.debug("All event subscriptions cleared")
