"""Data models for settings-toggle."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_NAME = "default"


@dataclass(frozen=True)
class Configuration:
    """One settings file in the settings directory.

    Attributes:
        name: "default" for settings.json, otherwise the <name> in settings.<name>.json
        path: Absolute path to the backing file
    """

    name: str
    path: Path

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_NAME


class Action(Enum):
    """Fixed actions offered below the configuration list."""

    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    EXIT = "exit"


@dataclass(frozen=True)
class LaunchChoice:
    """Main menu selection: launch the program with this configuration."""

    config: Configuration


@dataclass(frozen=True)
class ActionChoice:
    """Main menu selection: perform one of the fixed actions."""

    action: Action


Choice = LaunchChoice | ActionChoice


class MenuState(Enum):
    """States of the interactive menu loop."""

    MAIN_MENU = "main_menu"
    CREATE_FLOW = "create_flow"
    EDIT_FLOW = "edit_flow"
    DELETE_FLOW = "delete_flow"
    LAUNCHING = "launching"
    EXITED = "exited"


@dataclass(frozen=True)
class Editor:
    """External text editor.

    Attributes:
        name: Label shown in the editor prompt
        command: Shell command the file path is appended to (e.g. "code -w")
    """

    name: str
    command: str

    @property
    def executable(self) -> str:
        return self.command.split()[0]


@dataclass(frozen=True)
class ToolSettings:
    """Preferences of the tool itself, as opposed to the files it manages.

    Attributes:
        settings_dir: Directory holding settings.json and settings.<name>.json
        program: Program launched with the selected configuration
        settings_flag: Flag passed before the configuration path
        editors: Editors offered by the edit flow, in preference order
    """

    settings_dir: Path
    program: str
    settings_flag: str
    editors: tuple[Editor, ...]
