# File: character_browser/services/page_fetcher.py

import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession

from ..errors import DecodeError, FetchError, HttpStatusError, NetworkError
from ..interfaces.page_fetcher import FetchResult, PageFetcherInterface
from ..models.character import Character
from ..models.pagination import PageInfo

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rickandmortyapi.com/api/character"
DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_IMPERSONATE_BROWSER = "chrome110"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.5",
}


def _reason_phrase(status_code: int, reason: Optional[str]) -> str:
    """Status text from the response, or the standard phrase (HTTP/2 sends none)."""
    if reason:
        return reason
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class HttpPageFetcher(PageFetcherInterface):
    """
    Fetches one page of the remote character collection per call.

    A single GET per page, no retries. Transport, status and body failures are
    turned into a FetchResult carrying the error, so callers only ever see
    results.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        impersonate: Optional[str] = DEFAULT_IMPERSONATE_BROWSER,
        session: Optional[AsyncSession] = None,
    ):
        """
        Args:
            base_url: Collection endpoint; `?page=<n>` is appended per request
            timeout: Request timeout in seconds
            impersonate: curl_cffi browser profile, or None for plain curl
            session: Pre-built session; one is created lazily when omitted
        """
        self.base_url = base_url
        self.timeout = timeout
        self.impersonate = impersonate
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> AsyncSession:
        # Created on first use so it binds to the running event loop
        if self._session is None:
            self._session = AsyncSession(headers=DEFAULT_HEADERS)
        return self._session

    async def fetch_page(self, page_number: int) -> FetchResult:
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")

        try:
            body = await self._request_page(page_number)
            characters = self._parse_results(body, page_number)
        except FetchError as e:
            logger.warning(f"Fetch for page {page_number} failed: {e}")
            return FetchResult.failure(page_number, e)

        page_info = PageInfo.from_api(body.get("info"))
        logger.info(f"Fetched page {page_number}: {len(characters)} characters")
        return FetchResult.success(page_number, characters, page_info)

    async def _request_page(self, page_number: int) -> Dict[str, Any]:
        """GET one page and return the decoded JSON object."""
        session = self._get_session()
        request_kwargs: Dict[str, Any] = {
            "params": {"page": page_number},
            "timeout": self.timeout,
        }
        if self.impersonate:
            request_kwargs["impersonate"] = self.impersonate

        logger.debug(f"Requesting {self.base_url} page={page_number}")
        try:
            response = await session.get(self.base_url, **request_kwargs)
        except CurlError as e:
            raise NetworkError(f"could not reach {self.base_url} ({e})", page=page_number) from e

        status_code = response.status_code
        if not 200 <= status_code < 300:
            reason = _reason_phrase(status_code, getattr(response, "reason", None))
            raise HttpStatusError(status_code, reason, page=page_number)

        try:
            body = response.json()
        except ValueError as e:
            raise DecodeError(f"response body is not valid JSON ({e})", page=page_number) from e

        if not isinstance(body, dict):
            raise DecodeError("response body is not a JSON object", page=page_number)
        return body

    @staticmethod
    def _parse_results(body: Dict[str, Any], page_number: int) -> List[Character]:
        results = body.get("results")
        if not isinstance(results, list):
            raise DecodeError("response has no 'results' array", page=page_number)

        try:
            return [Character.from_api(record) for record in results]
        except DecodeError as e:
            raise DecodeError(e.detail, page=page_number) from e

    async def aclose(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
