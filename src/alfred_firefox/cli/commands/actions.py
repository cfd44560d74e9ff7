# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Action commands: actions, url, open-url."""

from __future__ import annotations

import argparse

from ...lib._util.logging_utils import _log_debug
from ...lib.icons import ICON_BOOKMARKLET
from ...lib.next_command import OpenURL, RunBookmarklet, RunTabAction
from ...lib.ui.opener import open_in_default_browser
from ...lib.workflow import Workflow
from ._options import add_action, add_query, add_tab, add_url


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register action subcommands."""
    p = subparsers.add_parser("actions", help="View/filter and execute tab/URL actions")
    add_tab(p)
    add_url(p)
    add_query(p)

    p = subparsers.add_parser("url", help="Execute URL action")
    add_url(p, required=True)
    add_action(p)

    p = subparsers.add_parser("open-url", help="Open URL in the default browser")
    add_url(p, required=True)


def dispatch(args: argparse.Namespace, wf: Workflow) -> bool:
    """Handle action commands.  Returns True if handled."""
    if args.cmd == "actions":
        cmd_actions(wf, tab_id=args.tab, url=args.url, query=args.query)
        return True
    if args.cmd == "url":
        cmd_url(wf, args.url, args.action)
        return True
    if args.cmd == "open-url":
        cmd_open_url(wf, args.url)
        return True
    return False


def cmd_actions(wf: Workflow, tab_id: int = 0, url: str = "", query: str = "") -> None:
    """List tab actions (plus custom bookmarklets) and URL actions for a target."""
    if tab_id:
        for a in wf.tab_actions:
            wf.feedback.new_item(
                a.name,
                uid=a.name,
                copytext=a.name,
                arg=a.name,
                icon=a.icon,
                valid=True,
                variables=RunTabAction(tab_id=tab_id, action=a.name).variables(),
            )

        for c in wf.custom_actions().bookmarklets():
            wf.feedback.new_item(
                c.name,
                uid=c.bookmark_id,
                copytext=f"bkm:{c.bookmark_id},{c.name}",
                arg=c.bookmark_id,
                icon=ICON_BOOKMARKLET,
                valid=True,
                variables=RunBookmarklet(bookmark_id=c.bookmark_id, tab_id=tab_id).variables(),
            )

    if url:
        for a in wf.url_actions:
            wf.feedback.new_item(
                a.name,
                uid=a.name,
                copytext=a.name,
                arg=a.name,
                icon=a.icon,
                valid=True,
                variables=OpenURL(url=url, action=a.name).variables(),
            )

    if query:
        wf.feedback.filter(query)

    wf.feedback.warn_empty("No Matching Actions", "Try a different query?")
    wf.feedback.send()


def cmd_url(wf: Workflow, url: str, action: str) -> None:
    _log_debug(f"running action {action!r} on URL {url!r} ...")
    wf.url_actions.get(action).run(url)


def cmd_open_url(wf: Workflow, url: str) -> None:
    _log_debug(f"opening URL {url!r} ...")
    open_in_default_browser(url)
