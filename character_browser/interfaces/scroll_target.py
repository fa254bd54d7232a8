# character_browser/interfaces/scroll_target.py


class ScrollTarget:
    """
    The one capability the core has over the presentation layer's list view.

    Implementations scroll the view to offset 0, animated.
    """

    def scroll_to_top(self) -> None:
        raise NotImplementedError("Subclasses must implement this method")
