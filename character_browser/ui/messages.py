# character_browser/ui/messages.py
"""Message classes for the application."""

from __future__ import annotations

from textual.message import Message


class NextPageRequested(Message):
    """The user asked for the next page."""


class PreviousPageRequested(Message):
    """The user asked for the previous page."""
