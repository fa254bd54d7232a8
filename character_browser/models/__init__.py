"""Character browser data models."""

from character_browser.models.character import Character
from character_browser.models.pagination import ListState, PageInfo, ViewState

__all__ = ["Character", "ListState", "PageInfo", "ViewState"]
