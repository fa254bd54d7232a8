"""Terminal browser for a paginated remote character collection."""

__version__ = "0.1.0"
