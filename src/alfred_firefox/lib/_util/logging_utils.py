"""Utility functions for logging."""

import os
import sys


def _log_debug(message: str) -> None:
    """Append a simple debug line to the workflow log.

    Writes timestamped lines to ``data_root()/alfred-firefox.log``. When
    Alfred's debugger is open (``alfred_debug=1``) the line is also written
    to stderr, which Alfred shows in the debug pane; stdout is reserved for
    feedback JSON. Fully exception-safe: any IO error is silently ignored so
    this function never raises or affects callers.
    """
    try:
        import time

        from ..core.paths import data_root

        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        line = f"[{timestamp}] {message}\n"
        if os.environ.get("alfred_debug") == "1":
            sys.stderr.write(line)
        log_path = data_root() / "alfred-firefox.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(line)
    except Exception:
        pass
