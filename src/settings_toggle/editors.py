"""Detection and launching of external text editors."""

import logging
import shlex
import subprocess
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .exceptions import SpawnError
from .models import Configuration
from .models import Editor
from .prompts import Prompter
from .utils import interrupts_deferred_to_child
from .utils import is_command_available

logger = logging.getLogger(__name__)

DEFAULT_EDITORS: tuple[Editor, ...] = (
    Editor(name="Nano", command="nano"),
    Editor(name="Vim", command="vim"),
    Editor(name="VS Code", command="code -w"),
    Editor(name="Cursor", command="cursor -w"),
)

# Exit status a shell reports when it cannot find the command
_COMMAND_NOT_FOUND = 9009 if sys.platform == "win32" else 127


def available_editors(editors: tuple[Editor, ...] = DEFAULT_EDITORS) -> list[Editor]:
    """Filter editors down to those installed on this machine, keeping order."""
    found = [editor for editor in editors if is_command_available(editor.executable)]
    logger.debug(f"Available editors: {[editor.name for editor in found]}")
    return found


def build_shell_command(editor: Editor, path: Path) -> str:
    """Build the shell command line that opens path in editor."""
    if sys.platform == "win32":
        quoted = subprocess.list2cmdline([str(path)])
    else:
        quoted = shlex.quote(str(path))
    return f"{editor.command} {quoted}"


def open_in_editor(editor: Editor, path: Path) -> int:
    """Run editor on path through the shell and wait for it to close.

    Args:
        editor: Editor to run
        path: File to open

    Returns:
        Editor exit status

    Raises:
        SpawnError: If the shell or the editor could not be started
    """
    command = build_shell_command(editor, path)
    logger.debug(f"Running editor: {command}")

    try:
        with interrupts_deferred_to_child():
            result = subprocess.run(command, shell=True, check=False)
    except OSError as e:
        raise SpawnError(f"Failed to open editor: {e}") from e

    if result.returncode == _COMMAND_NOT_FOUND:
        raise SpawnError(f"Failed to open editor: {editor.executable} not found")
    return result.returncode


class EditorLauncher:
    """Lets the user pick an installed editor and opens a configuration in it.

    Args:
        prompter: Prompter used to choose the editor
        console: Console for user-facing messages
        editors: Candidate editors in preference order
    """

    def __init__(self, prompter: Prompter, console: Console, editors: tuple[Editor, ...] = DEFAULT_EDITORS):
        self.prompter = prompter
        self.console = console
        self.editors = editors

    def edit(self, config: Configuration) -> None:
        """Open config in an editor of the user's choice, blocking until it closes.

        Missing editors and spawn failures are reported, never raised.
        """
        editors = available_editors(self.editors)
        if not editors:
            names = ", ".join(editor.executable for editor in self.editors)
            self.console.print(f"\nNo editors found. Install one of: {escape(names)}.")
            return

        editor = self.prompter.select(
            "Choose an editor:",
            [(candidate.name, candidate) for candidate in editors],
        )

        self.console.print(f'\nOpening "{config.name}" in {escape(editor.executable)}...')
        try:
            status = open_in_editor(editor, config.path)
        except SpawnError as e:
            self.console.print(escape(str(e)), style="red")
            return

        if status != 0:
            logger.warning(f"{editor.executable} exited with status {status}")
        self.console.print("Editor closed.")
