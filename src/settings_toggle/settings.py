"""Preferences of settings-toggle itself, read from an optional YAML file."""

import logging
from pathlib import Path
from typing import Any

import yaml

from .editors import DEFAULT_EDITORS
from .models import Editor
from .models import ToolSettings
from .utils import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM = "claude"
DEFAULT_SETTINGS_FLAG = "--settings"


def default_config_path() -> Path:
    """Location of the preferences file when --config is not given."""
    return Path.home() / ".config" / "settings-toggle" / "config.yaml"


def default_settings_dir() -> Path:
    """Directory scanned for settings files when nothing else is configured."""
    return Path.home() / ".claude"


def load_tool_settings(path: Path | None = None, overrides: dict[str, Any] | None = None) -> ToolSettings:
    """Resolve the tool's preferences.

    Resolution order (highest to lowest priority):
    1. overrides (command-line options; None values are ignored)
    2. YAML preferences file
    3. Built-in defaults

    Args:
        path: Preferences file (default: ~/.config/settings-toggle/config.yaml)
        overrides: Values that win over the file

    Returns:
        Fully resolved ToolSettings
    """
    defaults = {
        "settings_dir": str(default_settings_dir()),
        "program": DEFAULT_PROGRAM,
        "settings_flag": DEFAULT_SETTINGS_FLAG,
    }

    merged = deep_merge(defaults, _read_yaml(path or default_config_path()) or {})
    if overrides:
        merged = deep_merge(merged, {key: value for key, value in overrides.items() if value is not None})

    editors = DEFAULT_EDITORS
    if "editors" in merged:
        editors = _parse_editors(merged["editors"])

    return ToolSettings(
        settings_dir=Path(str(merged["settings_dir"])).expanduser().absolute(),
        program=str(merged["program"]),
        settings_flag=str(merged["settings_flag"]),
        editors=editors,
    )


def _read_yaml(path: Path) -> dict[str, Any] | None:
    """Read YAML preferences file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary from YAML or None if the file is missing or unusable
    """
    if not path.exists():
        return None

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read preferences from {path}: {e}")
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring preferences in {path}: expected a mapping, got {type(data).__name__}")
        return None
    return data


def _parse_editors(raw: Any) -> tuple[Editor, ...]:
    """Turn the 'editors' list from YAML into Editor objects, skipping bad entries."""
    if not isinstance(raw, list):
        logger.warning("Ignoring 'editors' preference: expected a list")
        return DEFAULT_EDITORS

    editors = []
    for entry in raw:
        if isinstance(entry, dict) and entry.get("name") and str(entry.get("command", "")).strip():
            editors.append(Editor(name=str(entry["name"]), command=str(entry["command"]).strip()))
        else:
            logger.warning(f"Ignoring editor entry {entry!r}: needs 'name' and 'command'")
    return tuple(editors)
