# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""System clipboard integration for the Copy URL action."""

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class ClipboardCopyResult:
    """Outcome of a clipboard copy attempt."""

    ok: bool
    method: str | None = None
    error: str | None = None


def _clipboard_candidates() -> list[tuple[str, list[str]]]:
    """Return an ordered list of (name, command) clipboard helper candidates."""
    if sys.platform == "darwin":
        return [("pbcopy", ["pbcopy"])]

    candidates: list[tuple[str, list[str]]] = []
    wayland = os.environ.get("XDG_SESSION_TYPE") == "wayland" or bool(
        os.environ.get("WAYLAND_DISPLAY")
    )
    x11 = os.environ.get("XDG_SESSION_TYPE") == "x11" or bool(os.environ.get("DISPLAY"))

    if wayland:
        candidates.append(("wl-copy", ["wl-copy", "--type", "text/plain"]))
    if x11:
        candidates.append(("xclip", ["xclip", "-selection", "clipboard"]))
        candidates.append(("xsel", ["xsel", "--clipboard", "--input"]))

    if not candidates:
        candidates.extend(
            [
                ("wl-copy", ["wl-copy", "--type", "text/plain"]),
                ("xclip", ["xclip", "-selection", "clipboard"]),
                ("xsel", ["xsel", "--clipboard", "--input"]),
            ]
        )
    return candidates


def copy_to_clipboard(text: str) -> ClipboardCopyResult:
    """Copy *text* with the first clipboard helper that works.

    An empty string is refused without running any helper. When every
    available helper fails, ``error`` holds the last failure message.
    """
    if not text:
        return ClipboardCopyResult(ok=False, error="Nothing to copy.")

    available = [(name, cmd) for name, cmd in _clipboard_candidates() if shutil.which(cmd[0])]
    if not available:
        return ClipboardCopyResult(ok=False, error="No clipboard helper found on PATH.")

    errors: list[str] = []
    for name, cmd in available:
        try:
            subprocess.run(cmd, input=text, check=True, text=True, capture_output=True)
            return ClipboardCopyResult(ok=True, method=name)
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or e.stdout or "").strip()
            errors.append(f"{name} failed" + (f": {detail}" if detail else ""))
        except OSError as e:
            errors.append(f"{name} error: {e}")

    return ClipboardCopyResult(ok=False, error=errors[-1] if errors else "Clipboard copy failed.")
