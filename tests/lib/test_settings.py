# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from alfred_firefox.lib.core import config as cfg
from alfred_firefox.lib.core import paths
from alfred_firefox.lib.errors import ConfigError
from test_utils import workflow_env


class PathTests(unittest.TestCase):
    def test_env_overrides(self) -> None:
        with workflow_env() as env:
            self.assertEqual(paths.data_root(), env.data_dir)
            self.assertEqual(paths.cache_root(), env.cache_dir)
            self.assertEqual(paths.config_root(), env.config_dir)

    def test_alfred_workflow_dirs(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            env = {"alfred_workflow_data": f"{td}/data", "alfred_workflow_cache": f"{td}/cache"}
            with unittest.mock.patch.dict(os.environ, env, clear=True):
                self.assertEqual(paths.data_root(), Path(td) / "data")
                self.assertEqual(paths.cache_root(), Path(td) / "cache")
                # Config lives with the data by default
                self.assertEqual(paths.config_root(), Path(td) / "data")

    def test_platform_default(self) -> None:
        with unittest.mock.patch.dict(os.environ, {}, clear=True):
            with unittest.mock.patch(
                "alfred_firefox.lib.core.paths._user_cache_dir", return_value="/platform/cache"
            ) as mock_dir:
                self.assertEqual(paths.cache_root(), Path("/platform/cache"))
        mock_dir.assert_called_once_with("alfred-firefox")


class ConfigFileTests(unittest.TestCase):
    def test_config_file_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "custom.yml"
            with unittest.mock.patch.dict(os.environ, {"ALFRED_FIREFOX_CONFIG_FILE": str(cfg_path)}):
                self.assertEqual(cfg.config_path(), cfg_path.resolve())

    def test_missing_config_is_empty(self) -> None:
        with workflow_env():
            self.assertEqual(cfg.load_config(), {})

    def test_non_mapping_config_is_empty(self) -> None:
        with workflow_env() as env:
            env.config_file.write_text("- just\n- a list\n", encoding="utf-8")
            self.assertEqual(cfg.load_config(), {})

    def test_invalid_yaml_raises(self) -> None:
        with workflow_env() as env:
            env.config_file.write_text("client: [unclosed\n", encoding="utf-8")
            with self.assertRaises(ConfigError) as ctx:
                cfg.load_config()
        self.assertIn("config.yml", str(ctx.exception))

    def test_get_section_ignores_scalars(self) -> None:
        self.assertEqual(cfg.get_section({"urls": "oops"}, "urls"), {})
        self.assertEqual(cfg.get_section({}, "urls"), {})
        self.assertEqual(cfg.get_section({"urls": {"a": 1}}, "urls"), {"a": 1})


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with workflow_env() as env:
            s = cfg.load_settings()

        self.assertEqual(s.socket_path, env.cache_dir / "firefox.sock")
        self.assertEqual(s.client_timeout, 5.0)
        self.assertEqual(s.default_url_action, "Open in Firefox")
        self.assertEqual(s.help_url, "https://github.com/deanishe/alfred-firefox")
        self.assertEqual(s.update_repo, "deanishe/alfred-firefox")
        self.assertEqual(s.update_interval_hours, 24)
        self.assertEqual(s.custom_actions, [])

    def test_values_from_config(self) -> None:
        with workflow_env() as env:
            env.config_file.write_text(
                "client:\n"
                f"  socket: {env.base}/ff.sock\n"
                "  timeout: 1.5\n"
                "urls:\n"
                "  default_action: Open in Default Browser\n"
                "help_url: https://example.com/help\n"
                "update:\n"
                "  repo: someone/fork\n"
                "  interval_hours: 6\n"
                "actions:\n"
                "  - name: Copy URL\n"
                "    kind: url\n"
                "    key: alt\n",
                encoding="utf-8",
            )
            s = cfg.load_settings()

        self.assertEqual(s.socket_path, env.base / "ff.sock")
        self.assertEqual(s.client_timeout, 1.5)
        self.assertEqual(s.default_url_action, "Open in Default Browser")
        self.assertEqual(s.help_url, "https://example.com/help")
        self.assertEqual(s.update_repo, "someone/fork")
        self.assertEqual(s.update_interval_hours, 6)
        self.assertEqual(s.custom_actions, [{"name": "Copy URL", "kind": "url", "key": "alt"}])

    def test_bad_numbers_are_config_errors(self) -> None:
        cases = [
            ("client:\n  timeout: fast\n", "client.timeout"),
            ("client:\n  timeout: 0\n", "client.timeout"),
            ("update:\n  interval_hours: [1, 2]\n", "update.interval_hours"),
        ]
        for text, where in cases:
            with self.subTest(where=where, text=text):
                with workflow_env() as env:
                    env.config_file.write_text(text, encoding="utf-8")
                    with self.assertRaises(ConfigError) as ctx:
                        cfg.load_settings()
                self.assertIn(where, str(ctx.exception))

    def test_actions_must_be_a_list(self) -> None:
        with workflow_env() as env:
            env.config_file.write_text("actions: nope\n", encoding="utf-8")
            self.assertEqual(cfg.load_settings().custom_actions, [])
