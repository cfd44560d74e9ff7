# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import json
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from alfred_firefox.lib.browser.client import FirefoxClient, new_client
from alfred_firefox.lib.browser.models import Bookmark, HistoryEntry, RunBookmarkletArg, Tab
from alfred_firefox.lib.errors import ClientError


def _response(result=None, error=None, request_id: int = 1) -> bytes:
    return (json.dumps({"id": request_id, "result": result, "error": error}) + "\n").encode("utf-8")


class ClientTestCase(unittest.TestCase):
    def setUp(self) -> None:
        patcher = unittest.mock.patch("alfred_firefox.lib.browser.client.socket.socket")
        self.mock_socket_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.sock = unittest.mock.MagicMock()
        self.mock_socket_cls.return_value.__enter__.return_value = self.sock
        self.client = FirefoxClient(Path("/tmp/firefox.sock"), timeout=2.0)

    def reply(self, *chunks: bytes) -> None:
        self.sock.recv.side_effect = [*chunks, b""]

    def sent_request(self) -> dict:
        raw = self.sock.sendall.call_args[0][0]
        self.assertTrue(raw.endswith(b"\n"))
        return json.loads(raw.decode("utf-8"))


class TransportTests(ClientTestCase):
    def test_request_format(self) -> None:
        self.reply(_response([]))

        self.client.history("python")

        self.assertEqual(
            self.sent_request(),
            {"id": 1, "method": "Firefox.History", "params": ["python"]},
        )
        self.sock.settimeout.assert_called_once_with(2.0)
        self.sock.connect.assert_called_once_with("/tmp/firefox.sock")

    def test_request_ids_increase(self) -> None:
        self.sock.recv.side_effect = [_response(None), _response(None, request_id=2)]

        self.client.ping()
        self.client.ping()

        self.assertEqual(self.sent_request()["id"], 2)

    def test_response_split_across_reads(self) -> None:
        data = _response([{"id": "1", "title": "Example", "url": "https://example.com"}])
        self.reply(data[:10], data[10:])

        entries = self.client.history("exa")

        self.assertEqual(entries, [HistoryEntry("1", "Example", "https://example.com")])

    def test_remote_error_raised(self) -> None:
        self.reply(_response(error="unknown bookmark"))

        with self.assertRaises(ClientError) as ctx:
            self.client.run_bookmarklet(RunBookmarkletArg("zz"))
        self.assertEqual(str(ctx.exception), "unknown bookmark")

    def test_empty_response(self) -> None:
        self.reply()

        with self.assertRaises(ClientError):
            self.client.ping()

    def test_invalid_json(self) -> None:
        self.reply(b"not json\n")

        with self.assertRaises(ClientError) as ctx:
            self.client.ping()
        self.assertIn("Invalid response", str(ctx.exception))

    def test_timeout(self) -> None:
        self.sock.recv.side_effect = TimeoutError()

        with self.assertRaises(ClientError) as ctx:
            self.client.tabs()
        self.assertIn("timeout", str(ctx.exception))

    def test_connection_refused(self) -> None:
        self.sock.connect.side_effect = ConnectionRefusedError()

        with self.assertRaises(ClientError) as ctx:
            self.client.tabs()
        self.assertEqual(str(ctx.exception), "Firefox extension is not running")


class MethodTests(ClientTestCase):
    def test_bookmarks(self) -> None:
        self.reply(
            _response(
                [
                    {"id": "b1", "title": "Docs", "url": "https://docs.python.org"},
                    {"id": "b2", "title": "Reader", "url": "javascript:go()"},
                ]
            )
        )

        marks = self.client.bookmarks("doc")

        self.assertEqual(marks[0], Bookmark("b1", "Docs", "https://docs.python.org"))
        self.assertTrue(marks[1].is_bookmarklet)
        self.assertEqual(self.sent_request()["method"], "Firefox.Bookmarks")

    def test_null_result_is_empty_list(self) -> None:
        self.reply(_response(None))
        self.assertEqual(self.client.tabs(), [])

    def test_tabs(self) -> None:
        self.reply(
            _response(
                [{"id": 3, "title": "T", "url": "https://t.org", "windowId": 1, "index": 2, "active": True}]
            )
        )

        tabs = self.client.tabs()

        self.assertEqual(tabs, [Tab(3, "T", "https://t.org", window_id=1, index=2, active=True)])
        self.assertEqual(self.sent_request()["params"], [None])

    def test_current_tab(self) -> None:
        self.reply(_response({"id": 8, "title": "Now", "url": "https://now.org"}))

        tab = self.client.current_tab()

        self.assertEqual(tab.id, 8)
        self.assertEqual(self.sent_request()["method"], "Firefox.CurrentTab")

    def test_current_tab_missing(self) -> None:
        self.reply(_response(None))

        with self.assertRaises(ClientError):
            self.client.current_tab()

    def test_malformed_tab_is_client_error(self) -> None:
        for result in (
            [{"id": "seven", "title": "T", "url": "https://t.org"}],
            [{"id": 3, "title": "T", "url": "https://t.org", "windowId": None}],
            ["not an object"],
            {"id": 3},
        ):
            with self.subTest(result=result):
                self.reply(_response(result))
                with self.assertRaises(ClientError) as ctx:
                    self.client.tabs()
                self.assertIn("Invalid response", str(ctx.exception))

    def test_malformed_current_tab_is_client_error(self) -> None:
        self.reply(_response({"id": "x", "title": "Now", "url": "https://now.org"}))

        with self.assertRaises(ClientError):
            self.client.current_tab()

    def test_run_bookmarklet_payload(self) -> None:
        self.reply(_response(None))

        self.client.run_bookmarklet(RunBookmarkletArg("b2", 5))

        self.assertEqual(
            self.sent_request(),
            {"id": 1, "method": "Firefox.RunBookmarklet", "params": [{"bookmarkId": "b2", "tabId": 5}]},
        )

    def test_tab_commands(self) -> None:
        for call, method in (
            (self.client.activate_tab, "ActivateTab"),
            (self.client.close_tab, "CloseTab"),
            (self.client.close_tabs_left, "CloseTabsLeft"),
            (self.client.close_tabs_right, "CloseTabsRight"),
            (self.client.close_tabs_other, "CloseTabsOther"),
        ):
            with self.subTest(method=method):
                self.reply(_response(None))
                call(11)
                req = self.sent_request()
                self.assertEqual(req["method"], f"Firefox.{method}")
                self.assertEqual(req["params"], [11])


class NewClientTests(unittest.TestCase):
    def test_missing_socket(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ClientError) as ctx:
                new_client(Path(td) / "firefox.sock")
        self.assertEqual(str(ctx.exception), "Firefox extension is not running")

    def test_existing_socket_path(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "firefox.sock"
            path.touch()
            client = new_client(path, timeout=1.5)
        self.assertEqual(client.socket_path, path)
        self.assertEqual(client.timeout, 1.5)
