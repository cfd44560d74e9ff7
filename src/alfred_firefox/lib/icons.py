"""Icon paths, relative to the workflow directory Alfred runs us from."""

ICON_BOOKMARK = "icons/bookmark.png"
ICON_BOOKMARKLET = "icons/bookmarklet.png"
ICON_CLIPBOARD = "icons/clipboard.png"
ICON_CLOSE = "icons/close.png"
ICON_ERROR = "icons/error.png"
ICON_FIREFOX = "icons/firefox.png"
ICON_HISTORY = "icons/history.png"
ICON_MORE = "icons/more.png"
ICON_OK = "icons/ok.png"
ICON_TAB = "icons/tab.png"
ICON_UPDATE_AVAILABLE = "icons/update-available.png"
ICON_UPDATE_OK = "icons/update-ok.png"
ICON_URL = "icons/url.png"
ICON_WARNING = "icons/warning.png"
