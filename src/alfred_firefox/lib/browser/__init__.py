"""Firefox extension client and the records it returns."""

from .client import FirefoxClient, new_client
from .models import Bookmark, HistoryEntry, RunBookmarkletArg, Tab

__all__ = [
    "Bookmark",
    "FirefoxClient",
    "HistoryEntry",
    "RunBookmarkletArg",
    "Tab",
    "new_client",
]
