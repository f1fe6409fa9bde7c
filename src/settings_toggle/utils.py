"""Utility functions for settings-toggle."""

import shutil
import signal
import subprocess
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> deep_merge({"program": "claude"}, {"program": "claude-dev"})
        {'program': 'claude-dev'}

        >>> deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
        {'a': {'b': 1, 'c': 3}}
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def is_command_available(cmd: str) -> bool:
    """Check whether a command resolves on this platform.

    Windows asks ``where``; everywhere else the lookup mirrors ``command -v``
    through ``shutil.which``.
    """
    if sys.platform == "win32":
        try:
            result = subprocess.run(
                ["where", cmd],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            return False
        return result.returncode == 0

    return shutil.which(cmd) is not None


@contextmanager
def interrupts_deferred_to_child() -> Iterator[None]:
    """Survive SIGINT in this process while a foreground child owns the terminal.

    A no-op handler is installed rather than SIG_IGN: ignored signals stay
    ignored across exec, caught ones reset to the default, so the child keeps
    normal Ctrl-C.
    """
    previous = signal.signal(signal.SIGINT, _swallow_interrupt)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def _swallow_interrupt(signum, frame) -> None:
    pass
