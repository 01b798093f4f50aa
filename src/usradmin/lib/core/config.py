import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from ..util.config_stack import ConfigStack, load_yaml_scope
from .paths import config_root, state_root as _state_root_base

COLOR_MODES = ("auto", "always", "never")

# Raised while reading an unreadable, non-UTF-8 or malformed YAML config file
CONFIG_ERRORS = (OSError, ValueError, yaml.YAMLError)

# ---------- Global config ----------


def global_config_search_paths() -> list[Path]:
    """Return the config files that make up the global config, lowest priority first.

    - If USRADMIN_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, all existing files of:
        1) /etc/usradmin/config.yml
        2) sys.prefix/etc/usradmin/config.yml
        3) config_root()/config.yml (user config, highest priority)
    """
    env_file = os.environ.get("USRADMIN_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    candidates = [
        Path("/etc/usradmin/config.yml"),
        Path(sys.prefix) / "etc" / "usradmin" / "config.yml",
        config_root() / "config.yml",
    ]
    paths: list[Path] = []
    for c in candidates:
        if c not in paths:
            paths.append(c)
    return paths


def global_config_stack() -> ConfigStack:
    """Build the layered global config from :func:`global_config_search_paths`."""
    stack = ConfigStack()
    for path in global_config_search_paths():
        stack.push(load_yaml_scope(_scope_level(path), path))
    return stack


def _scope_level(path: Path) -> str:
    if os.environ.get("USRADMIN_CONFIG_FILE"):
        return "env"
    if path == config_root() / "config.yml":
        return "user"
    if path.is_relative_to(sys.prefix):
        return "prefix"
    return "system"


def load_global_config() -> dict[str, Any]:
    return global_config_stack().resolve()


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``ui: "oops"``),
    returns ``{}`` so callers can use ``.get()`` safely.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value


# ---------- Values ----------


def state_root() -> Path:
    """Writable state directory.

    Precedence:
    - Environment variable USRADMIN_STATE_DIR
    - Global config ``paths.state_root`` (ignored unless it is a string)
    - Otherwise, usradmin.lib.core.paths.state_root() (FHS/XDG handling).
    """
    env = os.environ.get("USRADMIN_STATE_DIR")
    if env:
        return Path(env).expanduser().resolve()
    try:
        val = get_global_section("paths").get("state_root")
        if isinstance(val, str) and val:
            return Path(val).expanduser().resolve()
    except CONFIG_ERRORS:
        pass
    return _state_root_base().resolve()


def color_mode() -> str:
    """Return ``ui.color`` (auto, always, never).

    Unknown values and an unreadable global config mean ``auto``.
    """
    try:
        mode = str(get_global_section("ui").get("color", "auto")).lower()
    except CONFIG_ERRORS:
        return "auto"
    return mode if mode in COLOR_MODES else "auto"


def debug_log_enabled() -> bool:
    """Return ``log.debug`` from the global config (default True)."""
    try:
        return bool(get_global_section("log").get("debug", True))
    except CONFIG_ERRORS:
        return True
