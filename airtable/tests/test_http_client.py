# airtable/tests/test_http_client.py
import logging
import unittest
from unittest.mock import MagicMock, patch

import requests

from airtable.exceptions import DecodeError, HTTPStatusError, TransportError
from airtable.http.client import HttpResponse, HttpTransport
from airtable.logging_utils import correlation_id_ctx


def _resp(status=200, text='{"records": []}'):
    r = MagicMock()
    r.status_code = status
    r.text = text
    r.headers = {"Content-Type": "application/json"}
    return r


class TestHttpTransport(unittest.TestCase):
    def setUp(self):
        self.t = HttpTransport("keyABC", timeout=7, log_requests=False)

    def test_default_headers(self):
        self.assertEqual(self.t.session.headers["Authorization"], "Bearer keyABC")
        self.assertEqual(self.t.session.headers["Content-Type"], "application/json")

    def test_get_passes_timeout_and_returns_response(self):
        with patch.object(self.t.session, "request", return_value=_resp()) as req:
            out = self.t.get("https://api.airtable.com/v0/appX/Words?offset=")

        req.assert_called_once_with(
            "GET",
            "https://api.airtable.com/v0/appX/Words?offset=",
            data=None,
            timeout=7.0,
        )
        self.assertIsInstance(out, HttpResponse)
        self.assertEqual(out.status, 200)
        self.assertEqual(out.json(), {"records": []})

    def test_post_and_patch_send_body(self):
        with patch.object(self.t.session, "request", return_value=_resp()) as req:
            self.t.post("https://x.test/t", '{"fields": {}}')
            self.t.patch("https://x.test/t/rec1", '{"id": "rec1", "fields": {}}')

        methods = [c.args[0] for c in req.call_args_list]
        bodies = [c.kwargs["data"] for c in req.call_args_list]
        self.assertEqual(methods, ["POST", "PATCH"])
        self.assertEqual(bodies[1], '{"id": "rec1", "fields": {}}')

    def test_non_2xx_raises_with_status_and_body(self):
        body = '{"error": {"type": "INVALID_FILTER_BY_FORMULA"}}'
        with patch.object(self.t.session, "request", return_value=_resp(422, body)):
            with self.assertRaises(HTTPStatusError) as cm:
                self.t.get("https://x.test/t")

        err = cm.exception
        self.assertEqual(err.status, 422)
        self.assertEqual(err.method, "GET")
        self.assertEqual(err.body, body)
        self.assertIn("INVALID_FILTER_BY_FORMULA", str(err))

    def test_network_failure_wrapped(self):
        with patch.object(
            self.t.session, "request", side_effect=requests.ConnectionError("reset")
        ):
            with self.assertRaises(TransportError) as cm:
                self.t.get("https://x.test/t")
        self.assertNotIsInstance(cm.exception, HTTPStatusError)
        self.assertIsInstance(cm.exception.__cause__, requests.ConnectionError)

    def test_non_json_body(self):
        with patch.object(self.t.session, "request", return_value=_resp(200, "<html/>")):
            out = self.t.get("https://x.test/t")
        with self.assertRaises(DecodeError):
            out.json()

    def test_request_runs_under_fresh_correlation_id(self):
        seen = []

        def _capture(*a, **kw):
            seen.append(correlation_id_ctx.get())
            return _resp()

        with patch.object(self.t.session, "request", side_effect=_capture):
            self.t.get("https://x.test/t")
            self.t.get("https://x.test/t")

        self.assertEqual(len(seen), 2)
        self.assertNotEqual(seen[0], "-")
        self.assertNotEqual(seen[0], seen[1])
        self.assertEqual(correlation_id_ctx.get(), "-")

    def test_request_logging(self):
        t = HttpTransport("keyABC", log_requests=True)
        with patch.object(t.session, "request", return_value=_resp()):
            with self.assertLogs("airtable.http.client", level=logging.INFO) as logs:
                t.get("https://x.test/t")
        self.assertTrue(any(">> GET https://x.test/t" in m for m in logs.output))
        self.assertTrue(any("<< GET https://x.test/t 200" in m for m in logs.output))
