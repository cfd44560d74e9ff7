"""Browser data models.

Pure data types with no socket I/O. The companion ``client`` module fetches
them from the Firefox extension.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HistoryEntry:
    """One browsing history row matching a query."""

    id: str
    title: str
    url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryEntry":
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            url=str(data.get("url") or ""),
        )


@dataclass(frozen=True)
class Bookmark:
    """A bookmark. Bookmarklets are bookmarks whose URL is a script."""

    id: str
    title: str
    url: str

    @property
    def is_bookmarklet(self) -> bool:
        return self.url.lower().startswith("javascript:")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bookmark":
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            url=str(data.get("url") or ""),
        )


@dataclass(frozen=True)
class Tab:
    """An open browser tab."""

    id: int
    title: str
    url: str
    window_id: int = 0
    index: int = 0
    active: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Tab":
        return cls(
            id=int(data.get("id", 0)),
            title=str(data.get("title") or ""),
            url=str(data.get("url") or ""),
            window_id=int(data.get("windowId", 0)),
            index=int(data.get("index", 0)),
            active=bool(data.get("active", False)),
        )


@dataclass(frozen=True)
class RunBookmarkletArg:
    """Arguments for running a bookmarklet. ``tab_id`` 0 means the active tab."""

    bookmark_id: str
    tab_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"bookmarkId": self.bookmark_id, "tabId": self.tab_id}
