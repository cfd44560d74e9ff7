# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Alfred Script Filter feedback.

Handlers add :class:`Item` objects to a :class:`Feedback` and finish with
:meth:`Feedback.send`, which writes the JSON Alfred expects::

    {"items": [{"title": ..., "arg": ..., "variables": {...}, "mods": {...}}]}

Item variables are how state reaches the next invocation: Alfred exports
them as environment variables when the user actions the item.
"""

import json
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from rapidfuzz import fuzz, utils

from .icons import ICON_ERROR, ICON_WARNING

MODIFIER_KEYS = ("cmd", "alt", "ctrl", "shift", "fn")

# Minimum rapidfuzz partial_ratio score for an item to survive filter()
FILTER_MIN_SCORE = 80


@dataclass
class Modifier:
    """Alternate action shown while a modifier key is held."""

    key: str
    subtitle: str | None = None
    arg: str | None = None
    valid: bool = True
    icon: str | None = None
    variables: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"valid": self.valid}
        if self.subtitle is not None:
            data["subtitle"] = self.subtitle
        if self.arg is not None:
            data["arg"] = self.arg
        if self.icon:
            data["icon"] = {"path": self.icon}
        if self.variables:
            data["variables"] = dict(self.variables)
        return data


@dataclass
class Item:
    """One row of Alfred results.

    An item is either actionable (``valid`` with an ``arg``) or purely
    informational (not valid, no ``arg``).
    """

    title: str
    subtitle: str = ""
    arg: str | None = None
    uid: str | None = None
    valid: bool = False
    icon: str | None = None
    autocomplete: str | None = None
    copytext: str | None = None
    variables: dict[str, str] = field(default_factory=dict)
    modifiers: dict[str, Modifier] = field(default_factory=dict)

    def set_vars(self, variables: dict[str, str]) -> "Item":
        self.variables.update(variables)
        return self

    def has_modifier(self, key: str) -> bool:
        return key in self.modifiers

    def new_modifier(self, key: str, **kwargs: Any) -> Modifier:
        """Add a modifier for *key*, seeded with a copy of this item's variables.

        Variables passed in ``variables`` are layered on top of the inherited
        ones, so a modifier only needs to state what it changes.
        """
        if key not in MODIFIER_KEYS:
            raise ValueError(f"invalid modifier key: {key!r}")
        extra = kwargs.pop("variables", None) or {}
        mod = Modifier(key=key, variables={**self.variables, **extra}, **kwargs)
        self.modifiers[key] = mod
        return mod

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "subtitle": self.subtitle,
            "valid": self.valid,
        }
        if self.arg is not None:
            data["arg"] = self.arg
        if self.uid:
            data["uid"] = self.uid
        if self.icon:
            data["icon"] = {"path": self.icon}
        if self.autocomplete is not None:
            data["autocomplete"] = self.autocomplete
        if self.copytext is not None:
            data["text"] = {"copy": self.copytext}
        if self.variables:
            data["variables"] = dict(self.variables)
        if self.modifiers:
            data["mods"] = {key: mod.to_dict() for key, mod in self.modifiers.items()}
        return data


class Feedback:
    """Accumulates items for one invocation and writes them to stdout."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.items: list[Item] = []
        self.text_errors = False
        self.sent = False
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def is_empty(self) -> bool:
        return not self.items

    def new_item(self, title: str, **kwargs: Any) -> Item:
        item = Item(title=title, **kwargs)
        self.items.append(item)
        return item

    def filter(self, query: str) -> list[Item]:
        """Keep items whose title fuzzy-matches *query*, best first.

        Returns the items that were removed.
        """
        if not query:
            return []
        scored = []
        rejected = []
        for item in self.items:
            score = fuzz.partial_ratio(query, item.title, processor=utils.default_process)
            if score >= FILTER_MIN_SCORE:
                scored.append((score, item))
            else:
                rejected.append(item)
        # sorted() is stable: equal scores keep their original order
        scored.sort(key=lambda pair: pair[0], reverse=True)
        self.items = [item for _, item in scored]
        return rejected

    def warn(self, title: str, subtitle: str = "") -> None:
        """Replace the results with a single warning and send immediately."""
        self.items = [Item(title=title, subtitle=subtitle, icon=ICON_WARNING)]
        self.send()

    def warn_empty(self, title: str, subtitle: str = "") -> None:
        """Add a warning item if there are no results."""
        if self.is_empty:
            self.new_item(title, subtitle=subtitle, icon=ICON_WARNING)

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}

    def send(self) -> None:
        if self.sent:
            return
        json.dump(self.to_dict(), self.stream, ensure_ascii=False)
        self.stream.write("\n")
        self.stream.flush()
        self.sent = True

    def fatal(self, error: BaseException) -> None:
        """Report *error* to the user and exit with status 1.

        Action commands run behind Alfred's "Post Notification" output, so they
        set ``text_errors`` and get the bare message. List commands get a single
        error item instead.
        """
        message = str(error) or error.__class__.__name__
        if self.text_errors:
            self.stream.write(message + "\n")
            self.stream.flush()
        else:
            self.items = [Item(title=message, subtitle="Error", icon=ICON_ERROR)]
            self.sent = False
            self.send()
        raise SystemExit(1)
