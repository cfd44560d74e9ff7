# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tab commands: tabs, current-tab, tab."""

from __future__ import annotations

import argparse

from ...lib._util.logging_utils import _log_debug
from ...lib.actions import ACTIVATE_TAB
from ...lib.icons import ICON_MORE, ICON_TAB
from ...lib.next_command import RunTabAction, ShowActions
from ...lib.workflow import Workflow
from ._options import add_action, add_query, add_tab
from .actions import cmd_actions


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register tab subcommands."""
    p = subparsers.add_parser("tabs", help="Filter Firefox tabs and perform actions on them")
    add_query(p)

    p = subparsers.add_parser("current-tab", help="Filter and run actions for current tab")
    add_query(p)

    p = subparsers.add_parser("tab", help="Execute tab action")
    add_tab(p, required=True)
    add_action(p)


def dispatch(args: argparse.Namespace, wf: Workflow) -> bool:
    """Handle tab commands.  Returns True if handled."""
    if args.cmd == "tabs":
        cmd_tabs(wf, args.query)
        return True
    if args.cmd == "current-tab":
        cmd_current_tab(wf, args.query)
        return True
    if args.cmd == "tab":
        cmd_tab(wf, args.tab, args.action)
        return True
    return False


def cmd_tabs(wf: Workflow, query: str = "") -> None:
    _log_debug(f"fetching tabs for query {query!r} ...")
    wf.check_for_update()

    tabs = wf.client().tabs()

    custom = wf.custom_actions()
    for t in tabs:
        # uid is the title, not the ID: tabs with the same title share
        # Alfred's ranking history.
        it = wf.feedback.new_item(
            t.title,
            subtitle=t.url,
            arg=t.url,
            uid=t.title,
            valid=True,
            icon=ICON_TAB,
            variables=RunTabAction(
                tab_id=t.id, action=ACTIVATE_TAB, url=t.url, title=t.title
            ).variables(),
        )
        it.new_modifier(
            "cmd",
            subtitle="Other Actions",
            arg="",
            icon=ICON_MORE,
            variables=ShowActions().variables(),
        )
        custom.add(it, is_tab=True)

    if query:
        wf.feedback.filter(query)

    wf.feedback.warn_empty("No Matching Tabs", "Try a different query?")
    wf.feedback.send()


def cmd_current_tab(wf: Workflow, query: str = "") -> None:
    tab = wf.client().current_tab()
    _log_debug(f"current tab is #{tab.id} ({tab.url})")
    cmd_actions(wf, tab_id=tab.id, url=tab.url, query=query)


def cmd_tab(wf: Workflow, tab_id: int, action: str) -> None:
    _log_debug(f"running action {action!r} on tab #{tab_id} ...")
    wf.tab_actions.get(action).run(tab_id)
