"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from ...lib.actions import BUILTIN_ACTION_NAMES


def complete_action_names(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:
    """Return tab and URL action names matching *prefix* for argcomplete."""
    names = list(BUILTIN_ACTION_NAMES)
    if prefix:
        names = [n for n in names if n.lower().startswith(prefix.lower())]
    return names


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
