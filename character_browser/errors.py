# character_browser/errors.py

from typing import Optional


class CharacterBrowserError(Exception):
    """Base class for all character browser errors."""
    pass


class FetchError(CharacterBrowserError):
    """A page could not be fetched. str(error) is the message shown to the user."""

    prefix = "Error fetching characters"

    def __init__(self, detail: str, page: Optional[int] = None):
        self.detail = detail
        self.page = page
        super().__init__(f"{self.prefix}: {detail}")


class NetworkError(FetchError):
    """The request never got a response (connection refused, DNS, timeout)."""
    pass


class HttpStatusError(FetchError):
    """A response arrived with a non-success status."""

    def __init__(self, status_code: int, reason: str = "", page: Optional[int] = None):
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code} {reason}".rstrip()
        super().__init__(detail, page=page)


class DecodeError(FetchError):
    """The response body did not have the expected shape."""
    pass


class ConfigError(CharacterBrowserError):
    """Error related to configuration."""
    pass
