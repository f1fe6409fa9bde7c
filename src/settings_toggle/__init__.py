"""settings-toggle: Switch between named settings files and launch a program with one.

Settings files live in a single directory (typically ~/.claude):
- settings.json is the "default" configuration
- settings.<name>.json is the configuration <name>

The directory is re-read every time the menu is shown, so files changed
outside the tool are picked up immediately.

Public API:
    ConfigStore: List, create and delete configurations in a directory
    MenuController: Interactive create/edit/delete/launch loop
    EditorLauncher: Open a configuration in an installed editor
    ProgramLauncher: Run the target program with a configuration
    Configuration, Editor, ToolSettings: Data models
    load_tool_settings: Resolve the tool's own preferences
    ToggleError, ConfigValidationError, ConfigFileError, SpawnError,
    PromptCancelled: Exception types

Example:
    ```python
    from pathlib import Path
    from settings_toggle import ConfigStore

    store = ConfigStore(Path.home() / ".claude")
    glm = store.create_configuration("glm", copy_from=None)
    print([config.name for config in store.list_configurations()])
    ```
"""

__version__ = "0.1.0"

from .editors import EditorLauncher  # noqa: E402
from .exceptions import ConfigFileError  # noqa: E402
from .exceptions import ConfigValidationError  # noqa: E402
from .exceptions import PromptCancelled  # noqa: E402
from .exceptions import SpawnError  # noqa: E402
from .exceptions import ToggleError  # noqa: E402
from .launcher import ProgramLauncher  # noqa: E402
from .menu import MenuController  # noqa: E402
from .models import Configuration  # noqa: E402
from .models import Editor  # noqa: E402
from .models import ToolSettings  # noqa: E402
from .settings import load_tool_settings  # noqa: E402
from .store import ConfigStore  # noqa: E402

__all__ = [
    "ConfigStore",
    "MenuController",
    "EditorLauncher",
    "ProgramLauncher",
    "Configuration",
    "Editor",
    "ToolSettings",
    "load_tool_settings",
    "ToggleError",
    "ConfigValidationError",
    "ConfigFileError",
    "SpawnError",
    "PromptCancelled",
]
