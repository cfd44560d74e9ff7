# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Commands forwarded between invocations through Alfred variables.

Every actionable item carries the command Alfred should run next. Alfred
exports the item's variables to the environment and re-invokes the CLI, so
the variable names (``CMD``, ``ACTION``, ``URL``, ``TITLE``, ``TAB``,
``BOOKMARK``) are a wire format. Both directions go through the classes
here: handlers call :meth:`variables` when building items, and the CLI calls
:func:`from_variables` to resume.
"""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class OpenURL:
    """Run URL action *action* on *url* (``CMD=url``)."""

    url: str
    action: str
    title: str = ""

    command = "url"

    def variables(self) -> dict[str, str]:
        out = {"CMD": self.command, "ACTION": self.action, "URL": self.url}
        if self.title:
            out["TITLE"] = self.title
        return out

    def to_argv(self) -> list[str]:
        return [self.command, "-url", self.url, "-action", self.action]


@dataclass(frozen=True)
class RunTabAction:
    """Run tab action *action* on tab *tab_id* (``CMD=tab``)."""

    tab_id: int
    action: str
    url: str = ""
    title: str = ""

    command = "tab"

    def variables(self) -> dict[str, str]:
        out = {"CMD": self.command, "ACTION": self.action, "TAB": str(self.tab_id)}
        if self.url:
            out["URL"] = self.url
        if self.title:
            out["TITLE"] = self.title
        return out

    def to_argv(self) -> list[str]:
        return [self.command, "-tab", str(self.tab_id), "-action", self.action]


@dataclass(frozen=True)
class RunBookmarklet:
    """Run a bookmarklet, in the active tab when *tab_id* is 0."""

    bookmark_id: str
    tab_id: int = 0

    command = "run-bookmarklet"

    def variables(self) -> dict[str, str]:
        out = {"CMD": self.command, "BOOKMARK": self.bookmark_id}
        if self.tab_id:
            out["TAB"] = str(self.tab_id)
        return out

    def to_argv(self) -> list[str]:
        argv = [self.command, "-bookmark", self.bookmark_id]
        if self.tab_id:
            argv += ["-tab", str(self.tab_id)]
        return argv


@dataclass(frozen=True)
class ShowActions:
    """Show the action list (``CMD=actions``).

    Used on modifiers, where the target tab and URL are inherited from the
    item's own variables, so only ``CMD`` changes.
    """

    tab_id: int = 0
    url: str = ""

    command = "actions"

    def variables(self) -> dict[str, str]:
        out = {"CMD": self.command}
        if self.tab_id:
            out["TAB"] = str(self.tab_id)
        if self.url:
            out["URL"] = self.url
        return out

    def to_argv(self) -> list[str]:
        argv = [self.command]
        if self.tab_id:
            argv += ["-tab", str(self.tab_id)]
        if self.url:
            argv += ["-url", self.url]
        return argv


NextCommand = OpenURL | RunTabAction | RunBookmarklet | ShowActions


def _tab_id(value: str | None) -> int:
    try:
        return int(value or 0)
    except ValueError:
        raise ValueError(f"invalid TAB variable: {value!r}") from None


def from_variables(env: Mapping[str, str]) -> NextCommand | None:
    """Rebuild the forwarded command from Alfred variables.

    Returns None when ``CMD`` is unset. Raises ValueError for an unknown
    ``CMD`` or a malformed ``TAB``.
    """
    cmd = env.get("CMD", "").strip()
    if not cmd:
        return None

    if cmd == OpenURL.command:
        return OpenURL(url=env.get("URL", ""), action=env.get("ACTION", ""), title=env.get("TITLE", ""))
    if cmd == RunTabAction.command:
        return RunTabAction(
            tab_id=_tab_id(env.get("TAB")),
            action=env.get("ACTION", ""),
            url=env.get("URL", ""),
            title=env.get("TITLE", ""),
        )
    if cmd == RunBookmarklet.command:
        return RunBookmarklet(bookmark_id=env.get("BOOKMARK", ""), tab_id=_tab_id(env.get("TAB")))
    if cmd == ShowActions.command:
        return ShowActions(tab_id=_tab_id(env.get("TAB")), url=env.get("URL", ""))
    raise ValueError(f"unknown forwarded command: {cmd!r}")
