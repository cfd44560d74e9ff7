"""Helpers for opening URLs and files in desktop applications."""

import shutil
import subprocess
import sys

from ..errors import WorkflowError

FIREFOX_APP = "Firefox"


def _open_command(target: str, app: str | None = None) -> list[str]:
    """Return the command that opens *target*, optionally in a named app."""
    if sys.platform == "darwin":
        cmd = ["open"]
        if app:
            cmd += ["-a", app]
        return cmd + [target]

    if app:
        binary = shutil.which(app.lower())
        if binary:
            return [binary, target]
    return ["xdg-open", target]


def open_target(target: str, app: str | None = None) -> None:
    """Open a URL or file, raising WorkflowError if the opener fails."""
    cmd = _open_command(target, app=app)
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError:
        raise WorkflowError(f"cannot open {target!r}: {cmd[0]} not found") from None
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or e.stdout or "").strip()
        raise WorkflowError(
            f"cannot open {target!r}" + (f": {detail}" if detail else "")
        ) from e


def open_in_firefox(url: str) -> None:
    open_target(url, app=FIREFOX_APP)


def open_in_default_browser(url: str) -> None:
    open_target(url)
