import unittest
from unittest.mock import Mock

from ..core.event_bus import EventBus
from ..events import EventType
from ..interfaces.scroll_target import ScrollTarget
from ..models.pagination import ListState
from ..services.scroll_sync import ScrollSynchronizer


class TestScrollSynchronizer(unittest.TestCase):
    def setUp(self):
        self.bus = EventBus()
        self.sync = ScrollSynchronizer(self.bus)
        self.target = Mock(spec=ScrollTarget)

    def test_each_replacement_scrolls_once(self):
        self.sync.attach(self.target)

        self.bus.publish(EventType.LIST_REPLACED, page=1, list_state=ListState.of([]))
        self.bus.publish(EventType.LIST_REPLACED, page=1, list_state=ListState.of([]))

        self.assertEqual(self.target.scroll_to_top.call_count, 2)
        self.assertEqual(self.sync.issued, 2)

    def test_other_events_do_not_scroll(self):
        self.sync.attach(self.target)

        self.bus.publish(EventType.ERROR_SET, page=1, error="boom")
        self.bus.publish(EventType.PAGE_CHANGED, page=2, previous=1)

        self.target.scroll_to_top.assert_not_called()

    def test_command_is_dropped_not_queued(self):
        self.bus.publish(EventType.LIST_REPLACED, page=1, list_state=ListState.of([]))
        self.sync.attach(self.target)

        self.target.scroll_to_top.assert_not_called()
        self.assertEqual(self.sync.dropped, 1)

    def test_detach_and_unsubscribe(self):
        self.sync.attach(self.target)
        self.sync.detach()
        self.assertIsNone(self.sync.target)

        self.sync.attach(self.target)
        self.sync.unsubscribe()
        self.bus.publish(EventType.LIST_REPLACED, page=1, list_state=ListState.of([]))

        self.target.scroll_to_top.assert_not_called()
        self.assertFalse(self.bus.has_subscribers(EventType.LIST_REPLACED))


if __name__ == "__main__":
    unittest.main()
