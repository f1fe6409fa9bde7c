"""Configuration store backed by a flat settings directory."""

import logging
import re
from pathlib import Path

from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .models import DEFAULT_NAME
from .models import Configuration

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "settings.json"
EMPTY_CONTENT = b"{}"

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
_FILENAME_PATTERN = re.compile(r"settings\.([A-Za-z0-9_-]+)\.json")


class ConfigStore:
    """Discovers and manages settings files in a single directory.

    The directory is the only source of truth. Nothing is cached: every call
    to list_configurations() scans the directory again, so files added or
    removed outside the tool show up on the next call.

    Layout:
    - settings.json is the "default" configuration
    - settings.<name>.json is the configuration <name>

    Args:
        settings_dir: Directory holding the settings files
    """

    def __init__(self, settings_dir: Path):
        self.settings_dir = settings_dir

    # ===== Discovery =====

    def list_configurations(self) -> list[Configuration]:
        """List configurations found in the settings directory.

        Returns:
            Configurations with "default" first, the rest sorted by name.
            Empty when the directory is missing or empty.
        """
        if not self.settings_dir.is_dir():
            logger.debug(f"Settings directory {self.settings_dir} does not exist")
            return []

        try:
            entries = [entry for entry in self.settings_dir.iterdir() if entry.is_file()]
        except OSError as e:
            logger.warning(f"Failed to scan {self.settings_dir}: {e}")
            return []

        default = None
        named = []
        for entry in entries:
            if entry.name == DEFAULT_FILENAME:
                default = Configuration(name=DEFAULT_NAME, path=entry.absolute())
                continue

            match = _FILENAME_PATTERN.fullmatch(entry.name)
            if not match:
                continue

            name = match.group(1)
            if name == DEFAULT_NAME:
                # settings.default.json would shadow settings.json
                logger.debug(f"Ignoring {entry.name}: name is reserved")
                continue
            named.append(Configuration(name=name, path=entry.absolute()))

        named.sort(key=lambda config: config.name)
        configs = [default] + named if default else named
        logger.debug(f"Found {len(configs)} configuration(s) in {self.settings_dir}")
        return configs

    def path_for(self, name: str) -> Path:
        """Get the backing path for a named configuration.

        Args:
            name: Configuration name

        Returns:
            Absolute path of settings.json for "default", settings.<name>.json otherwise
        """
        filename = DEFAULT_FILENAME if name == DEFAULT_NAME else f"settings.{name}.json"
        return (self.settings_dir / filename).absolute()

    # ===== Create / Delete =====

    def validate_name(self, name: str) -> None:
        """Check a proposed name for a new configuration.

        Args:
            name: Proposed configuration name

        Raises:
            ConfigValidationError: If the name is empty, malformed, reserved or taken
        """
        if not name.strip():
            raise ConfigValidationError("Name cannot be empty")
        if not _NAME_PATTERN.fullmatch(name):
            raise ConfigValidationError("Name can only contain letters, numbers, hyphens, and underscores")
        if name == DEFAULT_NAME:
            raise ConfigValidationError(f'"{DEFAULT_NAME}" is reserved for {DEFAULT_FILENAME}')
        if self.path_for(name).exists():
            raise ConfigValidationError(f'Configuration "{name}" already exists')

    def create_configuration(self, name: str, copy_from: Configuration | None = None) -> Configuration:
        """Create a new configuration file.

        Args:
            name: Name of the new configuration
            copy_from: Existing configuration whose content is copied verbatim,
                or None to start from an empty JSON object

        Returns:
            The created configuration

        Raises:
            ConfigValidationError: If the name is not acceptable
            ConfigFileError: If the source cannot be read or the file cannot be written
        """
        self.validate_name(name)

        content = EMPTY_CONTENT
        if copy_from is not None:
            content = self.read_content(copy_from)

        path = self.path_for(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise ConfigFileError(f"Failed to write file: {e}") from e

        source = copy_from.name if copy_from else "empty"
        logger.info(f"Created configuration '{name}' at {path} (from {source})")
        return Configuration(name=name, path=path)

    def delete_configuration(self, config: Configuration) -> None:
        """Remove a configuration's backing file.

        Refusing to delete "default" is up to the caller.

        Args:
            config: Configuration to delete

        Raises:
            ConfigFileError: If the file cannot be removed
        """
        try:
            config.path.unlink()
        except OSError as e:
            raise ConfigFileError(f"Failed to delete file: {e}") from e
        logger.info(f"Deleted configuration '{config.name}' ({config.path})")

    # ===== Content =====

    def read_content(self, config: Configuration) -> bytes:
        """Read a configuration file's raw content.

        Raises:
            ConfigFileError: If the file cannot be read
        """
        try:
            return config.path.read_bytes()
        except OSError as e:
            raise ConfigFileError(f"Failed to read file: {e}") from e
