"""Configuration resolution: flags -> env -> config file -> defaults."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from boxtable._tty import supports_unicode
from boxtable.models import DEFAULT_NO_DATA_LABEL

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "fancy"
ASCII_FALLBACK_STYLE = "plus_minus"
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "boxtable"
CONFIG_FILE = CONFIG_DIR / "config.toml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BoxtableConfig:
    """Resolved rendering configuration."""

    style: str = DEFAULT_STYLE
    no_data_label: str = DEFAULT_NO_DATA_LABEL
    show_header: bool = True


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML config file, return empty dict if missing."""
    if not path.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib  # type: ignore[no-redef]
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        logger.warning("Failed to parse config file: %s", path)
        return {}


def _resolve(
    flag_value: str | None,
    env_var: str,
    toml_value: str | None,
    default: str = "",
) -> str:
    """Resolve a config value using the precedence chain."""
    if flag_value:
        return flag_value
    env = os.getenv(env_var)
    if env:
        return env
    if toml_value:
        return toml_value
    return default


def _resolve_bool(
    flag_value: bool | None,
    env_var: str,
    toml_value: Any,
    default: bool,
) -> bool:
    """Resolve a boolean setting; unrecognized env strings are ignored."""
    if flag_value is not None:
        return flag_value
    env = os.getenv(env_var, "").strip().lower()
    if env in _TRUE_VALUES:
        return True
    if env in _FALSE_VALUES:
        return False
    if env:
        logger.warning("Ignoring unrecognized boolean value for %s: %s", env_var, env)
    if isinstance(toml_value, bool):
        return toml_value
    return default


def default_style() -> str:
    """Box-drawing style when the terminal can show it, plain ASCII otherwise."""
    return DEFAULT_STYLE if supports_unicode() else ASCII_FALLBACK_STYLE


def resolve_config(
    *,
    style: str | None = None,
    no_data_label: str | None = None,
    show_header: bool | None = None,
    profile: str | None = None,
) -> BoxtableConfig:
    """Resolve configuration from all sources.

    Resolution order: flags -> env vars -> config file -> defaults.
    """
    toml_data = _load_toml(CONFIG_FILE)

    # Determine which profile section to read
    profile_name = profile or os.getenv("BOXTABLE_PROFILE", "default")
    if profile_name == "default":
        profile_data = toml_data.get("default", {})
    else:
        profile_data = toml_data.get("profiles", {}).get(profile_name, {})

    resolved_style = _resolve(
        style,
        "BOXTABLE_STYLE",
        profile_data.get("style"),
        default=default_style(),
    )

    resolved_label = _resolve(
        no_data_label,
        "BOXTABLE_NO_DATA_LABEL",
        profile_data.get("no_data_label"),
        default=DEFAULT_NO_DATA_LABEL,
    )

    resolved_header = _resolve_bool(
        show_header,
        "BOXTABLE_SHOW_HEADER",
        profile_data.get("show_header"),
        default=True,
    )

    return BoxtableConfig(
        style=resolved_style,
        no_data_label=resolved_label,
        show_header=resolved_header,
    )
