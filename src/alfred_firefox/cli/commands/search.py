# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Search commands: history, bookmarks, bookmarklets, run-bookmarklet."""

from __future__ import annotations

import argparse

from ...lib._util.logging_utils import _log_debug
from ...lib.browser.models import RunBookmarkletArg
from ...lib.feedback import Item
from ...lib.icons import ICON_BOOKMARK, ICON_BOOKMARKLET, ICON_HISTORY, ICON_MORE
from ...lib.next_command import OpenURL, RunBookmarklet, ShowActions
from ...lib.workflow import Workflow
from ._options import add_bookmark, add_query, add_tab

MIN_QUERY_LENGTH = 3


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register search subcommands."""
    p = subparsers.add_parser("history", help="Search browsing history")
    add_query(p, required=True)

    p = subparsers.add_parser("bookmarks", help="Search bookmarks")
    add_query(p, required=True)

    p = subparsers.add_parser(
        "bookmarklets", help="Search bookmarklets and execute in frontmost tab"
    )
    add_query(p, required=True)

    p = subparsers.add_parser(
        "run-bookmarklet",
        help="Execute bookmarklet in the specified tab (default: active tab)",
    )
    add_bookmark(p)
    add_tab(p, help="Tab ID (default: active tab)")


def dispatch(args: argparse.Namespace, wf: Workflow) -> bool:
    """Handle search commands.  Returns True if handled."""
    if args.cmd == "history":
        cmd_history(wf, args.query)
        return True
    if args.cmd == "bookmarks":
        cmd_bookmarks(wf, args.query)
        return True
    if args.cmd == "bookmarklets":
        cmd_bookmarklets(wf, args.query)
        return True
    if args.cmd == "run-bookmarklet":
        cmd_run_bookmarklet(wf, args.bookmark, args.tab)
        return True
    return False


def _query_too_short(wf: Workflow, query: str) -> bool:
    if len(query) < MIN_QUERY_LENGTH:
        wf.feedback.warn("Query Too Short", f"Please enter at least {MIN_QUERY_LENGTH} characters")
        return True
    return False


def _url_item(wf: Workflow, title: str, url: str, uid: str, icon: str) -> Item:
    """Build a history/bookmark result: ↩ runs the default URL action."""
    it = wf.feedback.new_item(
        title,
        subtitle=url,
        arg=url,
        uid=uid,
        valid=True,
        icon=icon,
        variables=OpenURL(url=url, action=wf.default_url_action, title=title).variables(),
    )
    it.new_modifier(
        "cmd",
        subtitle="Other Actions…",
        arg="",
        icon=ICON_MORE,
        variables=ShowActions().variables(),
    )
    return it


def cmd_history(wf: Workflow, query: str) -> None:
    wf.check_for_update()
    if _query_too_short(wf, query):
        return

    _log_debug(f"searching history for {query!r} ...")
    entries = wf.client().history(query)

    custom = wf.custom_actions()
    for h in entries:
        custom.add(_url_item(wf, h.title, h.url, h.id, ICON_HISTORY), is_tab=False)

    wf.feedback.warn_empty("No Results", "Try a different query?")
    wf.feedback.send()


def cmd_bookmarks(wf: Workflow, query: str) -> None:
    wf.check_for_update()
    if _query_too_short(wf, query):
        return

    _log_debug(f"searching bookmarks for {query!r} ...")
    bookmarks = wf.client().bookmarks(query)

    custom = wf.custom_actions()
    for bm in bookmarks:
        if bm.is_bookmarklet:
            continue
        custom.add(_url_item(wf, bm.title, bm.url, bm.id, ICON_BOOKMARK), is_tab=False)

    wf.feedback.warn_empty("No Results", "Try a different query?")
    wf.feedback.send()


def cmd_bookmarklets(wf: Workflow, query: str) -> None:
    wf.check_for_update()
    if _query_too_short(wf, query):
        return

    _log_debug(f"searching bookmarklets for {query!r} ...")
    bookmarks = wf.client().bookmarks(query)

    for bm in bookmarks:
        if not bm.is_bookmarklet:
            continue
        wf.feedback.new_item(
            bm.title,
            subtitle="↩ to execute in current tab",
            uid=bm.id,
            copytext=f"bkm:{bm.id},{bm.title}",
            arg=bm.url,
            icon=ICON_BOOKMARKLET,
            valid=True,
            variables=RunBookmarklet(bookmark_id=bm.id).variables(),
        )

    wf.feedback.warn_empty("No Results", "Try a different query?")
    wf.feedback.send()


def cmd_run_bookmarklet(wf: Workflow, bookmark_id: str, tab_id: int = 0) -> None:
    _log_debug(f"running bookmarklet {bookmark_id!r} in tab #{tab_id} ...")
    wf.client().run_bookmarklet(RunBookmarkletArg(bookmark_id=bookmark_id, tab_id=tab_id))
