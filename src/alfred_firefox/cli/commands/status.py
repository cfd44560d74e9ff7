# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Workflow status commands: update, options."""

from __future__ import annotations

import argparse

from ...lib._util.logging_utils import _log_debug
from ...lib.errors import ClientError
from ...lib.icons import ICON_BOOKMARK, ICON_ERROR, ICON_OK, ICON_UPDATE_AVAILABLE, ICON_UPDATE_OK
from ...lib.next_command import OpenURL
from ...lib.workflow import Workflow
from ._options import add_query

# Autocomplete value of the "Update Available" item; Alfred runs options
# again with this as the query when the user selects it.
UPDATE_KEYWORD = "workflow:update"


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register status subcommands."""
    subparsers.add_parser("update", help="Check if newer version of workflow is available")

    p = subparsers.add_parser("options", help="Show workflow status, info and options")
    add_query(p)


def dispatch(args: argparse.Namespace, wf: Workflow) -> bool:
    """Handle status commands.  Returns True if handled."""
    if args.cmd == "update":
        cmd_update(wf)
        return True
    if args.cmd == "options":
        cmd_options(wf, args.query)
        return True
    return False


def cmd_update(wf: Workflow) -> None:
    """Check for a newer release; the result is shown later by ``options``."""
    _log_debug("checking for update ...")
    wf.updater.check_for_update()
    if wf.updater.update_available():
        _log_debug("a newer version of the workflow is available")


def _connection_item(wf: Workflow) -> None:
    try:
        wf.client().ping()
    except ClientError as e:
        wf.feedback.new_item("No Connection to Firefox", subtitle=str(e), icon=ICON_ERROR)
        return
    wf.feedback.new_item(
        "Connected to Firefox",
        subtitle="Extension is installed and running",
        icon=ICON_OK,
    )


def cmd_options(wf: Workflow, query: str = "") -> None:
    if query.strip() == UPDATE_KEYWORD:
        wf.feedback.text_errors = True
        target = wf.updater.install_update()
        _log_debug(f"opened update {target}")
        return

    _connection_item(wf)

    if wf.updater.update_available():
        wf.feedback.new_item(
            "Update Available",
            subtitle="↩ or ⇥ to install new version",
            autocomplete=UPDATE_KEYWORD,
            icon=ICON_UPDATE_AVAILABLE,
            valid=False,
        )
    else:
        wf.feedback.new_item("Workflow is Up to Date", icon=ICON_UPDATE_OK, valid=False)

    help_url = wf.settings.help_url
    wf.feedback.new_item(
        "Documentation",
        subtitle="Open documentation in your browser",
        arg=help_url,
        valid=True,
        icon=ICON_BOOKMARK,
        variables=OpenURL(url=help_url, action=wf.default_url_action).variables(),
    )

    if query:
        wf.feedback.filter(query)

    wf.feedback.warn_empty("No Matching Items", "Try a different query?")
    wf.feedback.send()
