import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import requests

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from brawlapi.client import DEFAULT_BASE_URL, BrawlAPI  # noqa: E402
from brawlapi.errors import ConfigurationError, TransportError  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


class FakeResponse:
    def __init__(self, *, json_payload=None, json_error=False, status_error=None, status_code=200):
        self._json_payload = json_payload
        self._json_error = json_error
        self._status_error = status_error
        self.status_code = status_code

    def raise_for_status(self):
        if self._status_error:
            raise self._status_error

    def json(self):
        if self._json_error:
            raise ValueError("bad json")
        return self._json_payload


class FakeSession:
    def __init__(self, response: FakeResponse):
        self.response = response
        self.calls = []

    def request(self, method, url, params=None, headers=None, timeout=None):
        self.calls.append((method, url, params, headers, timeout))
        return self.response


class RaisingSession:
    def __init__(self, error: BaseException):
        self.error = error
        self.calls = 0

    def request(self, method, url, params=None, headers=None, timeout=None):
        self.calls += 1
        raise self.error


class ConstructionTests(unittest.TestCase):
    def test_missing_token_raises(self):
        with self.assertRaises(ConfigurationError):
            BrawlAPI()

    def test_empty_token_raises(self):
        with self.assertRaises(ConfigurationError):
            BrawlAPI("")
        with self.assertRaises(ConfigurationError):
            BrawlAPI("   ")

    def test_non_string_token_raises(self):
        with self.assertRaises(ConfigurationError):
            BrawlAPI(1234)  # type: ignore[arg-type]

    def test_token_and_base_url_are_read_only(self):
        client = BrawlAPI("secret")
        self.assertEqual(client.token, "secret")
        self.assertEqual(client.base_url, DEFAULT_BASE_URL)
        with self.assertRaises(AttributeError):
            client.token = "other"  # type: ignore[misc]
        with self.assertRaises(AttributeError):
            client.base_url = "http://other/"  # type: ignore[misc]

    def test_base_url_gets_trailing_slash(self):
        client = BrawlAPI("secret", base_url="http://example.com/api")
        self.assertEqual(client.base_url, "http://example.com/api/")

    def test_repr_hides_token(self):
        self.assertNotIn("secret", repr(BrawlAPI("secret")))


class RequestTests(unittest.TestCase):
    def make_client(self, session, **kwargs):
        return BrawlAPI("secret", base_url="http://example.com/api/", session=session, **kwargs)

    def test_request_builds_url_query_and_headers(self):
        session = FakeSession(FakeResponse(json_payload={"ok": True}))
        client = self.make_client(session)
        client.request("leaderboards/players", params={"count": 5, "brawler": None, "": "x"})
        self.assertEqual(len(session.calls), 1)
        method, url, params, headers, timeout = session.calls[0]
        self.assertEqual(method, "GET")
        self.assertEqual(url, "http://example.com/api/leaderboards/players")
        self.assertEqual(params, {"count": 5})
        self.assertEqual(headers, {"Authorization": "secret"})
        self.assertEqual(timeout, client.default_timeout)

    def test_request_strips_leading_slash(self):
        session = FakeSession(FakeResponse(json_payload={}))
        client = self.make_client(session)
        client.request("/leaderboards/clubs")
        self.assertEqual(session.calls[0][1], "http://example.com/api/leaderboards/clubs")

    def test_request_empty_endpoint_is_root(self):
        session = FakeSession(FakeResponse(json_payload={}))
        client = self.make_client(session)
        client.request("")
        self.assertEqual(session.calls[0][1], "http://example.com/api/")

    def test_request_timeout_override(self):
        session = FakeSession(FakeResponse(json_payload={}))
        client = self.make_client(session, default_timeout=7)
        client.request("misc")
        client.request("misc", timeout=2)
        self.assertEqual(session.calls[0][4], 7)
        self.assertEqual(session.calls[1][4], 2)

    def test_request_explicit_zero_timeout_is_kept(self):
        session = FakeSession(FakeResponse(json_payload={}))
        client = self.make_client(session, default_timeout=7)
        client.request("misc", timeout=0)
        self.assertEqual(session.calls[0][4], 0)

    def test_request_unwraps_data_envelope(self):
        session = FakeSession(FakeResponse(json_payload={"data": {"season": 3}}))
        client = self.make_client(session)
        self.assertEqual(client.request("misc"), {"season": 3})

    def test_request_returns_list_and_plain_objects(self):
        response = FakeResponse(json_payload=[{"tag": "A"}])
        session = FakeSession(response)
        client = self.make_client(session)
        self.assertEqual(client.request("leaderboards/clubs"), [{"tag": "A"}])
        response._json_payload = {"tag": "#ABC"}
        self.assertEqual(client.request("player"), {"tag": "#ABC"})

    def test_request_non_json_raises(self):
        session = FakeSession(FakeResponse(json_error=True))
        client = self.make_client(session)
        with self.assertRaises(TransportError) as ctx:
            client.request("misc")
        self.assertIsInstance(ctx.exception.cause, ValueError)
        self.assertIs(ctx.exception.__cause__, ctx.exception.cause)

    def test_request_http_error_raises(self):
        error = requests.HTTPError("404 Client Error")
        response = FakeResponse(json_payload={"message": "Not Found"}, status_error=error, status_code=404)
        client = self.make_client(FakeSession(response))
        with self.assertRaises(TransportError) as ctx:
            client.request("player", params={"tag": "2PP"})
        self.assertIs(ctx.exception.cause, error)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.url, "http://example.com/api/player")
        self.assertIn("Server message: Not Found", str(ctx.exception))

    def test_request_http_error_uses_error_field(self):
        error = requests.HTTPError("bad")
        response = FakeResponse(json_payload={"error": "nope"}, status_error=error, status_code=400)
        client = self.make_client(FakeSession(response))
        with self.assertRaises(TransportError) as ctx:
            client.request("club")
        self.assertIn("Server error: nope", str(ctx.exception))

    def test_request_http_error_uses_detail_field(self):
        error = requests.HTTPError("bad")
        response = FakeResponse(json_payload={"detail": "nope"}, status_error=error, status_code=400)
        client = self.make_client(FakeSession(response))
        with self.assertRaises(TransportError) as ctx:
            client.request("club")
        self.assertIn("Details: nope", str(ctx.exception))

    def test_request_http_error_bad_json_body(self):
        error = requests.HTTPError("bad")
        response = FakeResponse(json_error=True, status_error=error, status_code=500)
        client = self.make_client(FakeSession(response))
        with self.assertRaises(TransportError) as ctx:
            client.request("club")
        self.assertEqual(str(ctx.exception), "bad")
        self.assertEqual(ctx.exception.status_code, 500)

    def test_request_connection_error_keeps_cause(self):
        error = requests.ConnectionError("unreachable")
        session = RaisingSession(error)
        client = self.make_client(session)
        with self.assertRaises(TransportError) as ctx:
            client.request("about")
        self.assertIs(ctx.exception.cause, error)
        self.assertIs(ctx.exception.__cause__, error)
        self.assertIsNone(ctx.exception.status_code)
        self.assertEqual(session.calls, 1)

    def test_request_other_exception_propagates(self):
        client = self.make_client(RaisingSession(RuntimeError("boom")))
        with self.assertRaises(RuntimeError):
            client.request("about")

    def test_request_uses_requests_module_without_session(self):
        client = BrawlAPI("secret")
        response = FakeResponse(json_payload={"ok": True})
        with patch("brawlapi.client.requests.request", return_value=response) as mocked:
            self.assertEqual(client.request("about"), {"ok": True})
        mocked.assert_called_once()
        self.assertEqual(mocked.call_args.args, ("GET", client.base_url + "about"))

    def test_request_failure_is_logged(self):
        client = self.make_client(RaisingSession(requests.Timeout("slow")))
        with self.assertLogs("brawlapi.client", level="WARNING") as logs:
            with self.assertRaises(TransportError):
                client.request("about")
        self.assertTrue(any("Request failed" in line for line in logs.output))
        self.assertFalse(any("secret" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
