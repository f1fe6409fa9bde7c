"""Exceptions for settings-toggle."""


class ToggleError(Exception):
    """Base exception for settings-toggle errors."""

    pass


class ConfigValidationError(ToggleError):
    """Proposed configuration name is not acceptable."""

    pass


class ConfigFileError(ToggleError):
    """Error reading, writing or deleting a configuration file."""

    pass


class SpawnError(ToggleError):
    """External program or editor could not be started."""

    pass


class PromptCancelled(ToggleError):
    """User interrupted an interactive prompt."""

    pass
