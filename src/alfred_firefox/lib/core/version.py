# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
# SPDX-License-Identifier: Apache-2.0

"""Version information for alfred-firefox.

Single source of truth for the running version, used by the update check
and the ``--version`` flag.
"""

import os
import re


def get_version() -> str:
    """Return the running workflow version.

    Alfred exports the version from the workflow's info.plist as
    ``alfred_workflow_version``; that wins because it is what the user
    installed. Otherwise fall back to the installed package version.
    """
    env = os.environ.get("alfred_workflow_version", "").strip()
    if env:
        return env

    try:
        from alfred_firefox import __version__

        return __version__
    except (ImportError, AttributeError):
        return "unknown"


def parse_version(text: str) -> tuple[int, ...]:
    """Parse a release version into a comparable tuple.

    A leading ``v`` is stripped and only the dotted numeric prefix is used,
    so ``v0.4.1-beta`` becomes ``(0, 4, 1)``. Unparseable input yields ``()``,
    which sorts below every real version.
    """
    match = re.match(r"\s*v?(\d+(?:\.\d+)*)", text or "")
    if not match:
        return ()
    parts = [int(p) for p in match.group(1).split(".")]
    # Trailing zeros don't change the version: 1.0 == 1.0.0
    while len(parts) > 1 and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


def format_version_string(version: str) -> str:
    """Format the version for ``--version`` output."""
    return f"{version}\nLicense: Apache-2.0"
