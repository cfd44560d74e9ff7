# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Exceptions for operational failures.

Anything derived from :class:`WorkflowError` is reported to the user by the
CLI entry point. Short queries and empty results are not errors; handlers
render those as warning items instead.
"""


class WorkflowError(Exception):
    """Base class for failures surfaced to the user."""


class ClientError(WorkflowError):
    """The Firefox extension could not be reached or returned an error."""


class UnknownActionError(WorkflowError):
    """No tab or URL action is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'unknown action "{name}"')
        self.name = name


class ConfigError(WorkflowError):
    """The user configuration is invalid."""
