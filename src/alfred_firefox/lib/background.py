"""Detached background processes guarded by pid files.

A job is identified by a tag (e.g. ``update``). Its pid is stored in
``<cache_dir>/<tag>.pid``; a pid file whose process is gone is stale and
removed on the next check.
"""

import os
import subprocess
from pathlib import Path

from ._util.fs import ensure_dir
from ._util.logging_utils import _log_debug


class BackgroundRunner:
    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir)

    def pid_path(self, tag: str) -> Path:
        return self.cache_dir / f"{tag}.pid"

    def _read_pid(self, tag: str) -> int | None:
        try:
            return int(self.pid_path(tag).read_text(encoding="utf-8").strip())
        except (OSError, ValueError):
            return None

    def is_running(self, tag: str) -> bool:
        """Return True if the job tagged *tag* is still alive."""
        pid = self._read_pid(tag)
        if pid is None:
            self.pid_path(tag).unlink(missing_ok=True)
            return False
        try:
            os.kill(pid, 0)
        except ProcessLookupError:
            _log_debug(f"removing stale pid file for {tag!r} (pid {pid})")
            self.pid_path(tag).unlink(missing_ok=True)
            return False
        except PermissionError:
            # Exists but owned by someone else
            return True
        return True

    def run_in_background(self, tag: str, argv: list[str]) -> int:
        """Start *argv* detached from this process and record its pid.

        Does not wait for the child. Returns the child's pid.
        """
        ensure_dir(self.cache_dir)
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        self.pid_path(tag).write_text(str(proc.pid), encoding="utf-8")
        _log_debug(f"started background job {tag!r} (pid {proc.pid}): {argv}")
        return proc.pid
