import unittest
from unittest.mock import AsyncMock, Mock

from curl_cffi import CurlError

from ..errors import DecodeError, HttpStatusError, NetworkError
from ..services.page_fetcher import HttpPageFetcher

BASE_URL = "https://rickandmortyapi.com/api/character"


def make_response(status_code=200, reason="OK", body=None, json_error=None):
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


class TestHttpPageFetcher(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.session = Mock()
        self.session.get = AsyncMock()
        self.fetcher = HttpPageFetcher(base_url=BASE_URL, timeout=5, impersonate=None, session=self.session)

    async def test_success_returns_characters_and_info(self):
        self.session.get.return_value = make_response(body={
            "info": {"count": 826, "pages": 42, "next": f"{BASE_URL}?page=2", "prev": None},
            "results": [{"id": 1, "name": "Rick"}, {"id": 2, "name": "Morty"}],
        })

        result = await self.fetcher.fetch_page(1)

        self.assertTrue(result.ok)
        self.assertEqual([c.name for c in result.characters], ["Rick", "Morty"])
        self.assertEqual(result.page_info.pages, 42)
        self.session.get.assert_awaited_once_with(BASE_URL, params={"page": 1}, timeout=5)

    async def test_impersonate_is_forwarded_when_set(self):
        fetcher = HttpPageFetcher(base_url=BASE_URL, timeout=5, impersonate="chrome110", session=self.session)
        self.session.get.return_value = make_response(body={"results": []})

        await fetcher.fetch_page(4)

        self.session.get.assert_awaited_once_with(
            BASE_URL, params={"page": 4}, timeout=5, impersonate="chrome110"
        )

    async def test_empty_results_is_a_valid_page(self):
        self.session.get.return_value = make_response(body={"results": []})

        result = await self.fetcher.fetch_page(7)

        self.assertTrue(result.ok)
        self.assertEqual(result.characters, ())
        self.assertIsNone(result.page_info)

    async def test_http_status_failure(self):
        self.session.get.return_value = make_response(status_code=500, reason="Internal Server Error")

        result = await self.fetcher.fetch_page(3)

        self.assertFalse(result.ok)
        self.assertIsNone(result.characters)
        self.assertIsInstance(result.error, HttpStatusError)
        self.assertEqual(result.error.status_code, 500)
        self.assertIn("500", str(result.error))
        self.assertIn("Internal Server Error", str(result.error))

    async def test_missing_reason_falls_back_to_standard_phrase(self):
        self.session.get.return_value = make_response(status_code=404, reason="")

        result = await self.fetcher.fetch_page(99)

        self.assertIn("HTTP 404 Not Found", str(result.error))

    async def test_transport_failure_is_network_error(self):
        self.session.get.side_effect = CurlError("Failed to connect to host")

        result = await self.fetcher.fetch_page(2)

        self.assertIsInstance(result.error, NetworkError)
        self.assertEqual(result.error.page, 2)

    async def test_invalid_json_is_decode_error(self):
        self.session.get.return_value = make_response(json_error=ValueError("Expecting value"))

        result = await self.fetcher.fetch_page(1)

        self.assertIsInstance(result.error, DecodeError)

    async def test_wrong_shapes_are_decode_errors(self):
        bodies = [
            ["not", "an", "object"],
            {"info": {}},
            {"results": {"id": 1}},
            {"results": [{"name": "no id"}]},
        ]
        for body in bodies:
            with self.subTest(body=body):
                self.session.get.return_value = make_response(body=body)
                result = await self.fetcher.fetch_page(1)
                self.assertIsInstance(result.error, DecodeError)
                self.assertIsNone(result.characters)

    async def test_page_below_one_is_rejected(self):
        with self.assertRaises(ValueError):
            await self.fetcher.fetch_page(0)
        self.session.get.assert_not_awaited()

    async def test_injected_session_is_not_closed(self):
        self.session.close = AsyncMock()

        await self.fetcher.aclose()

        self.session.close.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
