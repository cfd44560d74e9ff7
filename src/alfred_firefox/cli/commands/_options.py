"""Flag definitions shared by several subcommands.

Flags keep their historical single-dash spelling (``-query``) because
existing Alfred workflow scripts call the program that way; the usual
double-dash form is accepted too.

``-tab``, ``-url``, ``-action`` and ``-bookmark`` default to the variables
Alfred forwarded from the previous invocation (``TAB``, ``URL``, ``ACTION``,
``BOOKMARK``), so a Script Filter such as ``actions -query <q>`` keeps the
target chosen on the previous screen. A flag given on the command line wins.
"""

import argparse
import os

from ._completers import complete_action_names, set_completer


def _env_default(name: str) -> str:
    return os.environ.get(name, "").strip()


def add_query(parser: argparse.ArgumentParser, required: bool = False) -> None:
    parser.add_argument(
        "-query",
        "--query",
        dest="query",
        default="",
        required=required,
        help="Search query" if required else "Filter results by query",
    )


def add_tab(parser: argparse.ArgumentParser, required: bool = False, help: str = "Tab ID") -> None:
    env = _env_default("TAB")
    # A string default goes through type=int, so a malformed TAB is a usage error
    parser.add_argument(
        "-tab",
        "--tab",
        dest="tab",
        type=int,
        default=env or 0,
        required=required and not env,
        help=help,
    )


def add_url(parser: argparse.ArgumentParser, required: bool = False) -> None:
    env = _env_default("URL")
    parser.add_argument(
        "-url", "--url", dest="url", default=env, required=required and not env, help="URL"
    )


def add_action(parser: argparse.ArgumentParser) -> None:
    env = _env_default("ACTION")
    _a = parser.add_argument(
        "-action", "--action", dest="action", default=env, required=not env, help="Action name"
    )
    set_completer(_a, complete_action_names)


def add_bookmark(parser: argparse.ArgumentParser) -> None:
    env = _env_default("BOOKMARK")
    parser.add_argument(
        "-bookmark",
        "--bookmark",
        dest="bookmark",
        default=env,
        required=not env,
        help="Bookmark ID",
    )
