# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Named tab and URL actions.

Two registries exist: tab actions take a tab ID, URL actions take a URL.
Both are built per process by :func:`build_registries` and handed to the
command handlers through the workflow context.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from ._util.logging_utils import _log_debug
from .browser.client import FirefoxClient
from .errors import UnknownActionError, WorkflowError
from .icons import (
    ICON_CLIPBOARD,
    ICON_CLOSE,
    ICON_FIREFOX,
    ICON_TAB,
    ICON_URL,
)
from .ui.clipboard import copy_to_clipboard
from .ui.opener import open_in_default_browser, open_in_firefox

T = TypeVar("T", contravariant=True)
A = TypeVar("A")

ACTIVATE_TAB = "Activate Tab"
OPEN_IN_FIREFOX = "Open in Firefox"
OPEN_IN_DEFAULT_BROWSER = "Open in Default Browser"
COPY_URL = "Copy URL"

# Built-in tab actions: (name, icon, FirefoxClient method taking a tab ID)
TAB_ACTIONS = (
    (ACTIVATE_TAB, ICON_TAB, "activate_tab"),
    ("Close Tab", ICON_CLOSE, "close_tab"),
    ("Close Tabs to Left", ICON_CLOSE, "close_tabs_left"),
    ("Close Tabs to Right", ICON_CLOSE, "close_tabs_right"),
    ("Close Other Tabs", ICON_CLOSE, "close_tabs_other"),
)
URL_ACTION_NAMES = (OPEN_IN_FIREFOX, OPEN_IN_DEFAULT_BROWSER, COPY_URL)
BUILTIN_ACTION_NAMES = tuple(name for name, _, _ in TAB_ACTIONS) + URL_ACTION_NAMES


class Action(Protocol[T]):
    """A named operation on a target (tab ID or URL)."""

    @property
    def name(self) -> str: ...

    @property
    def icon(self) -> str: ...

    def run(self, target: T) -> None: ...


@dataclass(frozen=True)
class FuncAction(Generic[A]):
    """Action backed by a plain callable."""

    name: str
    icon: str
    func: Callable[[A], None]

    def run(self, target: A) -> None:
        self.func(target)


class ActionRegistry(Generic[A]):
    """Ordered mapping of action name to action."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._actions: dict[str, Action[A]] = {}

    def register(self, action: Action[A]) -> None:
        if action.name in self._actions:
            raise ValueError(f"duplicate {self.kind} action: {action.name!r}")
        self._actions[action.name] = action

    def get(self, name: str) -> Action[A]:
        try:
            return self._actions[name]
        except KeyError:
            raise UnknownActionError(name) from None

    def names(self) -> list[str]:
        return list(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[Action[A]]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)


def _copy_url(url: str) -> None:
    result = copy_to_clipboard(url)
    if not result.ok:
        raise WorkflowError(f"copy failed: {result.error}")
    _log_debug(f"copied {url!r} to clipboard via {result.method}")


def build_registries(
    client: Callable[[], FirefoxClient],
) -> tuple[ActionRegistry[int], ActionRegistry[str]]:
    """Return the (tab_actions, url_actions) registries.

    *client* is called only when a tab action runs, so building the
    registries never touches the extension socket.
    """
    tab_actions: ActionRegistry[int] = ActionRegistry("tab")
    for name, icon, method in TAB_ACTIONS:
        tab_actions.register(
            FuncAction(name, icon, lambda tab_id, m=method: getattr(client(), m)(tab_id))
        )

    url_actions: ActionRegistry[str] = ActionRegistry("URL")
    url_actions.register(FuncAction(OPEN_IN_FIREFOX, ICON_FIREFOX, open_in_firefox))
    url_actions.register(FuncAction(OPEN_IN_DEFAULT_BROWSER, ICON_URL, open_in_default_browser))
    url_actions.register(FuncAction(COPY_URL, ICON_CLIPBOARD, _copy_url))

    return tab_actions, url_actions
