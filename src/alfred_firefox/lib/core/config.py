import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from ..errors import ConfigError
from .paths import cache_root, config_root

DEFAULT_URL_ACTION = "Open in Firefox"
DEFAULT_HELP_URL = "https://github.com/deanishe/alfred-firefox"
DEFAULT_UPDATE_REPO = "deanishe/alfred-firefox"
DEFAULT_UPDATE_INTERVAL_HOURS = 24
DEFAULT_CLIENT_TIMEOUT = 5.0


# ---------- Config file ----------


def config_path() -> Path:
    """Config file path.

    Resolution order:
    - ALFRED_FIREFOX_CONFIG_FILE env (returned as-is, even if missing)
    - config_root()/config.yml
    """
    env_file = os.environ.get("ALFRED_FIREFOX_CONFIG_FILE")
    if env_file:
        return Path(env_file).expanduser().resolve()
    return config_root() / "config.yml"


def load_config() -> dict[str, Any]:
    cfg_path = config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid config file {cfg_path}: {e}") from e
    if not isinstance(data, dict):
        return {}
    return data


def get_section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a top-level section from *cfg*, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``urls: "oops"``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Settings ----------


def _number(value: Any, where: str) -> float:
    """Coerce a numeric config value, raising ConfigError on bad input."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{where} must be a number, got {value!r}") from None
    if number <= 0:
        raise ConfigError(f"{where} must be positive, got {value!r}")
    return number


@dataclass(frozen=True)
class Settings:
    """Resolved workflow settings, built once per process."""

    socket_path: Path
    client_timeout: float = DEFAULT_CLIENT_TIMEOUT
    default_url_action: str = DEFAULT_URL_ACTION
    help_url: str = DEFAULT_HELP_URL
    update_repo: str = DEFAULT_UPDATE_REPO
    update_interval_hours: float = DEFAULT_UPDATE_INTERVAL_HOURS
    # Raw ``actions:`` entries, validated by the custom action loader
    custom_actions: list[dict[str, Any]] = field(default_factory=list)


def load_settings() -> Settings:
    """Build :class:`Settings` from the config file and defaults."""
    cfg = load_config()
    client = get_section(cfg, "client")
    urls = get_section(cfg, "urls")
    update = get_section(cfg, "update")

    socket = client.get("socket")
    socket_path = Path(socket).expanduser() if socket else cache_root() / "firefox.sock"

    actions = cfg.get("actions") or []
    if not isinstance(actions, list):
        actions = []

    return Settings(
        socket_path=socket_path,
        client_timeout=_number(client.get("timeout", DEFAULT_CLIENT_TIMEOUT), "client.timeout"),
        default_url_action=str(urls.get("default_action") or DEFAULT_URL_ACTION),
        help_url=str(cfg.get("help_url") or DEFAULT_HELP_URL),
        update_repo=str(update.get("repo") or DEFAULT_UPDATE_REPO),
        update_interval_hours=_number(
            update.get("interval_hours", DEFAULT_UPDATE_INTERVAL_HOURS), "update.interval_hours"
        ),
        custom_actions=actions,
    )
