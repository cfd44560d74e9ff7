# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""User-defined actions from the ``actions:`` section of config.yml.

Example::

    actions:
      - name: Reader View
        kind: bookmarklet
        bookmark: Xyz123abc
        key: alt
      - name: Copy URL
        kind: url
        key: ctrl

``kind`` is one of ``bookmarklet`` (run a bookmarklet in the tab),
``tab`` (a registered tab action) or ``url`` (a registered URL action).
Entries with a ``key`` are attached to search results as modifiers;
bookmarklet entries are also listed in the action list for a tab.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .errors import ConfigError
from .feedback import MODIFIER_KEYS, Item
from .icons import ICON_BOOKMARKLET
from .next_command import OpenURL, RunBookmarklet, RunTabAction

KINDS = ("bookmarklet", "tab", "url")


@dataclass(frozen=True)
class CustomAction:
    name: str
    kind: str  # "bookmarklet" | "tab" | "url"
    bookmark_id: str = ""
    key: str | None = None

    @property
    def needs_tab(self) -> bool:
        return self.kind in ("bookmarklet", "tab")


def parse_custom_action(entry: Any, index: int) -> CustomAction:
    """Validate one ``actions:`` entry. Raises ConfigError on bad input."""
    where = f"actions[{index}]"
    if not isinstance(entry, dict):
        raise ConfigError(f"{where}: expected a mapping, got {type(entry).__name__}")

    name = str(entry.get("name") or "").strip()
    if not name:
        raise ConfigError(f"{where}: 'name' is required")

    kind = str(entry.get("kind") or "").strip().lower()
    if kind not in KINDS:
        raise ConfigError(f"{where} ({name}): 'kind' must be one of {', '.join(KINDS)}")

    bookmark_id = str(entry.get("bookmark") or "").strip()
    if kind == "bookmarklet" and not bookmark_id:
        raise ConfigError(f"{where} ({name}): bookmarklet actions need a 'bookmark' ID")

    key = entry.get("key")
    if key is not None:
        key = str(key).strip().lower()
        if key not in MODIFIER_KEYS:
            raise ConfigError(
                f"{where} ({name}): 'key' must be one of {', '.join(MODIFIER_KEYS)}"
            )

    return CustomAction(name=name, kind=kind, bookmark_id=bookmark_id, key=key)


class CustomActions:
    """Loaded custom actions; decorates result items with extra modifiers."""

    def __init__(self, actions: list[CustomAction] | None = None) -> None:
        self.actions = list(actions or [])

    def __iter__(self) -> Iterator[CustomAction]:
        return iter(self.actions)

    def __len__(self) -> int:
        return len(self.actions)

    def bookmarklets(self) -> list[CustomAction]:
        return [a for a in self.actions if a.kind == "bookmarklet"]

    def add(self, item: Item, is_tab: bool) -> Item:
        """Attach a modifier to *item* for each custom action bound to a key.

        Modifiers are keyed by modifier key and only added if the key is
        still free, so built-in modifiers (cmd = Other Actions) and earlier
        custom actions are never replaced. Tab-only kinds are skipped for
        items that are not tabs.
        """
        for action in self.actions:
            if action.key is None or item.has_modifier(action.key):
                continue
            if action.needs_tab and not is_tab:
                continue

            tab_id = int(item.variables.get("TAB", "0") or 0)
            url = item.variables.get("URL", "")
            title = item.variables.get("TITLE", "")

            if action.kind == "bookmarklet":
                nxt = RunBookmarklet(bookmark_id=action.bookmark_id, tab_id=tab_id)
                icon = ICON_BOOKMARKLET
            elif action.kind == "tab":
                nxt = RunTabAction(tab_id=tab_id, action=action.name, url=url, title=title)
                icon = None
            else:
                nxt = OpenURL(url=url, action=action.name, title=title)
                icon = None

            item.new_modifier(
                action.key,
                subtitle=action.name,
                arg=item.arg,
                icon=icon,
                variables=nxt.variables(),
            )
        return item


def load_custom_actions(entries: list[Any]) -> CustomActions:
    """Build :class:`CustomActions` from the raw ``actions:`` list."""
    return CustomActions([parse_custom_action(e, i) for i, e in enumerate(entries or [])])
