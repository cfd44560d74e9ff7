# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Client for the Firefox extension's local RPC socket.

The extension's native-messaging host listens on a Unix socket. Requests
and responses are single-line JSON-RPC objects::

    -> {"id": 1, "method": "Firefox.History", "params": ["query"]}
    <- {"id": 1, "result": [...], "error": null}

A non-null ``error`` is raised as :class:`ClientError`.
"""

import itertools
import json
import socket
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ..errors import ClientError
from .models import Bookmark, HistoryEntry, RunBookmarkletArg, Tab

_MAX_RESPONSE_BYTES = 16 * 1024 * 1024

T = TypeVar("T")


def _decode(factory: Callable[[dict[str, Any]], T], data: Any) -> T:
    """Build a model from one result object, raising ClientError on bad data."""
    if not isinstance(data, dict):
        raise ClientError(f"Invalid response from Firefox: expected an object, got {data!r}")
    try:
        return factory(data)
    except (TypeError, ValueError) as e:
        raise ClientError(f"Invalid response from Firefox: {e}") from e


def _decode_list(factory: Callable[[dict[str, Any]], T], data: Any) -> list[T]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ClientError(f"Invalid response from Firefox: expected a list, got {data!r}")
    return [_decode(factory, d) for d in data]


class FirefoxClient:
    """Synchronous JSON-RPC client. One connection per call."""

    def __init__(self, socket_path: Path, timeout: float = 5.0) -> None:
        self.socket_path = Path(socket_path)
        self.timeout = timeout
        self._ids = itertools.count(1)

    # ---------- Transport ----------

    def call(self, method: str, arg: Any = None) -> Any:
        """Invoke ``Firefox.<method>`` and return its result."""
        request_id = next(self._ids)
        payload = {
            "id": request_id,
            "method": f"Firefox.{method}",
            "params": [arg],
        }
        message = json.dumps(payload) + "\n"

        try:
            with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
                sock.settimeout(self.timeout)
                sock.connect(str(self.socket_path))
                sock.sendall(message.encode("utf-8"))
                data = self._read_line(sock)
        except TimeoutError:
            raise ClientError("Firefox not responding (timeout)") from None
        except (FileNotFoundError, ConnectionRefusedError):
            raise ClientError("Firefox extension is not running") from None
        except OSError as e:
            raise ClientError(f"Connection to Firefox failed: {e}") from e

        if not data:
            raise ClientError("No response from Firefox")

        try:
            response = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ClientError(f"Invalid response from Firefox: {e}") from e
        if not isinstance(response, dict):
            raise ClientError("Invalid response from Firefox: not an object")

        error = response.get("error")
        if error:
            raise ClientError(str(error))
        return response.get("result")

    @staticmethod
    def _read_line(sock: socket.socket) -> bytes:
        buf = b""
        while b"\n" not in buf:
            chunk = sock.recv(4096)
            if not chunk:
                break
            buf += chunk
            if len(buf) > _MAX_RESPONSE_BYTES:
                raise ClientError("Response from Firefox is too large")
        return buf.split(b"\n", 1)[0].strip()

    # ---------- Queries ----------

    def ping(self) -> None:
        self.call("Ping")

    def history(self, query: str) -> list[HistoryEntry]:
        return _decode_list(HistoryEntry.from_dict, self.call("History", query))

    def bookmarks(self, query: str) -> list[Bookmark]:
        return _decode_list(Bookmark.from_dict, self.call("Bookmarks", query))

    def tabs(self) -> list[Tab]:
        return _decode_list(Tab.from_dict, self.call("Tabs"))

    def current_tab(self) -> Tab:
        data = self.call("CurrentTab")
        if not isinstance(data, dict):
            raise ClientError("No active tab")
        return _decode(Tab.from_dict, data)

    # ---------- Commands ----------

    def run_bookmarklet(self, arg: RunBookmarkletArg) -> None:
        self.call("RunBookmarklet", arg.to_dict())

    def activate_tab(self, tab_id: int) -> None:
        self.call("ActivateTab", tab_id)

    def close_tab(self, tab_id: int) -> None:
        self.call("CloseTab", tab_id)

    def close_tabs_left(self, tab_id: int) -> None:
        self.call("CloseTabsLeft", tab_id)

    def close_tabs_right(self, tab_id: int) -> None:
        self.call("CloseTabsRight", tab_id)

    def close_tabs_other(self, tab_id: int) -> None:
        self.call("CloseTabsOther", tab_id)


def new_client(socket_path: Path, timeout: float = 5.0) -> FirefoxClient:
    """Return a client for *socket_path*.

    Raises ClientError if the socket does not exist, which means the
    extension's host process is not running.
    """
    path = Path(socket_path)
    if not path.exists():
        raise ClientError("Firefox extension is not running")
    return FirefoxClient(path, timeout=timeout)
