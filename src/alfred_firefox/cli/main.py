#!/usr/bin/env python3

import argparse
import os
import sys
from collections.abc import Mapping

import argcomplete

from ..lib._util.logging_utils import _log_debug
from ..lib.core.version import format_version_string, get_version
from ..lib.errors import WorkflowError
from ..lib.feedback import Feedback
from ..lib.next_command import from_variables
from ..lib.workflow import build_workflow
from .commands import actions, search, status, tabs

COMMAND_MODULES = (search, tabs, actions, status)

# Commands that perform an action instead of listing results. Alfred feeds
# their output to a notification, so errors are reported as plain text.
ACTION_COMMANDS = frozenset({"run-bookmarklet", "tab", "url", "open-url", "update"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alfred-firefox",
        description="alfred-firefox – search and control Firefox from Alfred",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Search commands print Alfred Script Filter JSON. Action commands\n"
            "print nothing on success.\n"
            "\n"
            "Run without arguments to resume the command forwarded in the\n"
            "CMD/ACTION/URL/TITLE/TAB/BOOKMARK environment variables.\n"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"alfred-firefox {format_version_string(get_version())}",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in COMMAND_MODULES:
        module.register(sub)
    return parser


def resume_argv(env: Mapping[str, str]) -> list[str] | None:
    """Return argv for the command forwarded in *env*, or None if there is none."""
    nxt = from_variables(env)
    if nxt is None:
        return None
    _log_debug(f"resuming forwarded command {nxt!r}")
    return nxt.to_argv()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    argcomplete.autocomplete(parser)

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        try:
            argv = resume_argv(os.environ) or []
        except ValueError as e:
            parser.error(str(e))

    args = parser.parse_args(argv)
    _log_debug(f"command: {args.cmd} {argv[1:]}")

    feedback = Feedback()
    feedback.text_errors = args.cmd in ACTION_COMMANDS
    try:
        wf = build_workflow(feedback=feedback)
        for module in COMMAND_MODULES:
            if module.dispatch(args, wf):
                return
        parser.error("Unknown command")
    except WorkflowError as e:
        _log_debug(f"{args.cmd} failed: {e}")
        feedback.fatal(e)


if __name__ == "__main__":
    main()
