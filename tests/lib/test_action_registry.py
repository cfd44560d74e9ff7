# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import unittest
import unittest.mock

from alfred_firefox.cli.commands._completers import complete_action_names
from alfred_firefox.lib.actions import (
    BUILTIN_ACTION_NAMES,
    ActionRegistry,
    FuncAction,
    build_registries,
)
from alfred_firefox.lib.errors import UnknownActionError
from test_utils import FakeClient


class RegistryTests(unittest.TestCase):
    def test_keeps_registration_order(self) -> None:
        reg: ActionRegistry[str] = ActionRegistry("URL")
        for name in ("b", "a", "c"):
            reg.register(FuncAction(name, "icon.png", lambda _: None))

        self.assertEqual(reg.names(), ["b", "a", "c"])
        self.assertEqual([a.name for a in reg], ["b", "a", "c"])
        self.assertEqual(len(reg), 3)
        self.assertIn("a", reg)

    def test_duplicate_name_rejected(self) -> None:
        reg: ActionRegistry[str] = ActionRegistry("URL")
        reg.register(FuncAction("Copy URL", "icon.png", lambda _: None))

        with self.assertRaises(ValueError):
            reg.register(FuncAction("Copy URL", "other.png", lambda _: None))

    def test_unknown_name(self) -> None:
        reg: ActionRegistry[int] = ActionRegistry("tab")

        with self.assertRaises(UnknownActionError) as ctx:
            reg.get("Nope")
        self.assertEqual(ctx.exception.name, "Nope")
        self.assertEqual(str(ctx.exception), 'unknown action "Nope"')

    def test_run_passes_target(self) -> None:
        func = unittest.mock.Mock()
        reg: ActionRegistry[int] = ActionRegistry("tab")
        reg.register(FuncAction("Poke", "icon.png", func))

        reg.get("Poke").run(9)

        func.assert_called_once_with(9)


class BuiltinRegistryTests(unittest.TestCase):
    def test_builtin_names(self) -> None:
        tab_actions, url_actions = build_registries(FakeClient)  # type: ignore[arg-type]

        self.assertEqual(
            tab_actions.names(),
            ["Activate Tab", "Close Tab", "Close Tabs to Left", "Close Tabs to Right", "Close Other Tabs"],
        )
        self.assertEqual(url_actions.names(), ["Open in Firefox", "Open in Default Browser", "Copy URL"])

    def test_builtin_names_match_registries(self) -> None:
        tab_actions, url_actions = build_registries(FakeClient)  # type: ignore[arg-type]

        self.assertEqual(list(BUILTIN_ACTION_NAMES), tab_actions.names() + url_actions.names())

    def test_completer_filters_by_prefix(self) -> None:
        self.assertEqual(
            complete_action_names("close t", argparse.Namespace()),
            ["Close Tab", "Close Tabs to Left", "Close Tabs to Right"],
        )
        self.assertEqual(len(complete_action_names("", argparse.Namespace())), 8)

    def test_building_does_not_create_client(self) -> None:
        factory = unittest.mock.Mock()

        build_registries(factory)

        factory.assert_not_called()

    def test_tab_actions_call_matching_client_method(self) -> None:
        client = FakeClient()
        tab_actions, _ = build_registries(lambda: client)  # type: ignore[arg-type,return-value]

        for name, method in (
            ("Activate Tab", "activate_tab"),
            ("Close Tab", "close_tab"),
            ("Close Tabs to Left", "close_tabs_left"),
            ("Close Tabs to Right", "close_tabs_right"),
            ("Close Other Tabs", "close_tabs_other"),
        ):
            with self.subTest(name=name):
                client.calls.clear()
                tab_actions.get(name).run(4)
                self.assertEqual(client.calls, [(method, 4)])

    def test_default_browser_action_opens_without_app(self) -> None:
        with unittest.mock.patch("alfred_firefox.lib.ui.opener.open_target") as mock_open:
            _, url_actions = build_registries(FakeClient)  # type: ignore[arg-type]
            url_actions.get("Open in Default Browser").run("https://x.org")
            url_actions.get("Open in Firefox").run("https://x.org")

        self.assertEqual(
            mock_open.call_args_list,
            [
                unittest.mock.call("https://x.org"),
                unittest.mock.call("https://x.org", app="Firefox"),
            ],
        )
