# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config, data, and cache directories.

When run by Alfred, the workflow's own data and cache directories are
exported as ``alfred_workflow_data`` and ``alfred_workflow_cache``; those
take precedence over the platform defaults.
"""

import os
from pathlib import Path

from platformdirs import user_cache_dir as _user_cache_dir, user_data_dir as _user_data_dir

APP_NAME = "alfred-firefox"


def data_root() -> Path:
    """
    Persistent data (log file, default config location).

    Priority:
      1. ALFRED_FIREFOX_DATA_DIR
      2. alfred_workflow_data (set by Alfred)
      3. platformdirs user data dir
    """
    env = os.getenv("ALFRED_FIREFOX_DATA_DIR") or os.getenv("alfred_workflow_data")
    if env:
        return Path(env).expanduser()
    return Path(_user_data_dir(APP_NAME))


def cache_root() -> Path:
    """
    Transient state (extension socket, update check, pid files).

    Priority:
      1. ALFRED_FIREFOX_CACHE_DIR
      2. alfred_workflow_cache (set by Alfred)
      3. platformdirs user cache dir
    """
    env = os.getenv("ALFRED_FIREFOX_CACHE_DIR") or os.getenv("alfred_workflow_cache")
    if env:
        return Path(env).expanduser()
    return Path(_user_cache_dir(APP_NAME))


def config_root() -> Path:
    """Directory holding ``config.yml``. Defaults to :func:`data_root`."""
    env = os.getenv("ALFRED_FIREFOX_CONFIG_DIR")
    if env:
        return Path(env).expanduser()
    return data_root()
