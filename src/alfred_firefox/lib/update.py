# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Workflow update check against GitHub releases.

The check itself runs in a background process (``alfred-firefox update``)
and stores its result in ``<cache_dir>/update.json``. Foreground commands
only read that file, so they never wait on the network.
"""

import json
import time
from pathlib import Path
from typing import Any
from urllib import request
from urllib.error import URLError

from ._util.fs import ensure_dir, read_json, write_json
from ._util.logging_utils import _log_debug
from .core.version import parse_version
from .errors import WorkflowError
from .ui.opener import open_target

GITHUB_API = "https://api.github.com"
WORKFLOW_SUFFIX = ".alfredworkflow"


def _latest_release(releases: list[dict[str, Any]]) -> tuple[str, str] | None:
    """Return (version, download_url) of the newest usable release.

    Drafts, prereleases and releases without a ``.alfredworkflow`` asset
    are ignored.
    """
    best: tuple[tuple[int, ...], str, str] | None = None
    for rel in releases:
        if not isinstance(rel, dict) or rel.get("draft") or rel.get("prerelease"):
            continue
        tag = str(rel.get("tag_name") or "")
        parsed = parse_version(tag)
        if not parsed:
            continue
        url = next(
            (
                a.get("browser_download_url")
                for a in rel.get("assets") or []
                if str(a.get("name", "")).endswith(WORKFLOW_SUFFIX) and a.get("browser_download_url")
            ),
            None,
        )
        if not url:
            continue
        if best is None or parsed > best[0]:
            best = (parsed, tag.lstrip("v"), url)
    if best is None:
        return None
    return best[1], best[2]


class Updater:
    def __init__(
        self,
        repo: str,
        current_version: str,
        cache_dir: Path,
        interval_hours: float = 24,
    ) -> None:
        self.repo = repo
        self.current_version = current_version
        self.cache_dir = Path(cache_dir)
        self.interval = interval_hours * 3600

    @property
    def state_path(self) -> Path:
        return self.cache_dir / "update.json"

    def _state(self) -> dict[str, Any]:
        return read_json(self.state_path)

    def check_due(self) -> bool:
        """True if no check has been recorded within the interval."""
        checked_at = self._state().get("checked_at")
        if not isinstance(checked_at, (int, float)):
            return True
        return time.time() - checked_at >= self.interval

    def fetch_releases(self) -> list[dict[str, Any]]:
        url = f"{GITHUB_API}/repos/{self.repo}/releases"
        req = request.Request(url, headers={"Accept": "application/vnd.github+json"})
        try:
            with request.urlopen(req, timeout=30) as response:
                data = json.loads(response.read().decode("utf-8"))
        except (URLError, OSError, ValueError) as e:
            raise WorkflowError(f"update check failed: {e}") from e
        if not isinstance(data, list):
            raise WorkflowError("update check failed: unexpected response from GitHub")
        return data

    def check_for_update(self) -> None:
        """Fetch releases and record the newest one."""
        _log_debug(f"fetching releases for {self.repo} ...")
        latest = _latest_release(self.fetch_releases())
        state: dict[str, Any] = {"checked_at": time.time()}
        if latest:
            state["latest_version"], state["download_url"] = latest
        write_json(self.state_path, state)

    def update_available(self) -> bool:
        latest = self._state().get("latest_version")
        if not latest:
            return False
        return parse_version(str(latest)) > parse_version(self.current_version)

    def install_update(self) -> Path:
        """Download the newest release and open it, which makes Alfred install it."""
        state = self._state()
        url = state.get("download_url")
        if not self.update_available() or not url:
            raise WorkflowError("no update available")

        ensure_dir(self.cache_dir)
        target = self.cache_dir / f"alfred-firefox-{state['latest_version']}{WORKFLOW_SUFFIX}"
        _log_debug(f"downloading {url} to {target} ...")
        try:
            with request.urlopen(url, timeout=60) as response:
                target.write_bytes(response.read())
        except (URLError, OSError) as e:
            raise WorkflowError(f"download failed: {e}") from e

        open_target(str(target))
        return target
