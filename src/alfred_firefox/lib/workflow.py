# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Per-process workflow context.

:func:`build_workflow` constructs everything a command needs once, at
startup: settings, the feedback sink, the action registries, custom actions
and the updater. Command handlers receive the context instead of reaching
for module-level state.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from ._util.logging_utils import _log_debug
from .actions import ActionRegistry, build_registries
from .background import BackgroundRunner
from .browser.client import FirefoxClient, new_client
from .core.config import Settings, load_settings
from .core.paths import cache_root
from .core.version import get_version
from .custom_actions import CustomActions, load_custom_actions
from .feedback import Feedback
from .update import Updater

UPDATE_TAG = "update"


@dataclass
class Workflow:
    settings: Settings
    feedback: Feedback
    tab_actions: ActionRegistry[int]
    url_actions: ActionRegistry[str]
    updater: Updater
    runner: BackgroundRunner
    client_factory: Callable[[], FirefoxClient]
    custom_loader: Callable[[], CustomActions]
    # argv that re-runs this program, used for the background update job
    self_argv: list[str] = field(default_factory=lambda: [sys.executable, "-m", "alfred_firefox.cli"])
    _client: FirefoxClient | None = field(default=None, repr=False)

    def client(self) -> FirefoxClient:
        """Return the extension client, creating it on first use.

        Raises ClientError if the extension cannot be reached.
        """
        if self._client is None:
            self._client = self.client_factory()
        return self._client

    def custom_actions(self) -> CustomActions:
        return self.custom_loader()

    @property
    def default_url_action(self) -> str:
        return self.settings.default_url_action

    def check_for_update(self) -> None:
        """Start a background update check if one is due and none is running.

        Failing to start the job is logged and otherwise ignored; the
        command that triggered the check carries on.
        """
        try:
            if self.updater.check_due() and not self.runner.is_running(UPDATE_TAG):
                self.runner.run_in_background(UPDATE_TAG, [*self.self_argv, "update"])
        except OSError as e:
            _log_debug(f"could not start background update check: {e}")


def build_workflow(settings: Settings | None = None, feedback: Feedback | None = None) -> Workflow:
    settings = settings or load_settings()
    cache_dir = cache_root()
    version = get_version()
    _log_debug(f"alfred-firefox {version}, socket={settings.socket_path}")

    state: dict[str, FirefoxClient] = {}

    def client_factory() -> FirefoxClient:
        if "client" not in state:
            state["client"] = new_client(settings.socket_path, timeout=settings.client_timeout)
        return state["client"]

    tab_actions, url_actions = build_registries(client_factory)

    return Workflow(
        settings=settings,
        feedback=feedback or Feedback(),
        tab_actions=tab_actions,
        url_actions=url_actions,
        updater=Updater(
            settings.update_repo,
            version,
            cache_dir,
            interval_hours=settings.update_interval_hours,
        ),
        runner=BackgroundRunner(cache_dir),
        client_factory=client_factory,
        custom_loader=lambda: load_custom_actions(settings.custom_actions),
    )
