"""Interactive menu driving the create/edit/delete/launch flows."""

import logging

from rich.console import Console
from rich.markup import escape

from .editors import EditorLauncher
from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .launcher import ProgramLauncher
from .models import Action
from .models import ActionChoice
from .models import Configuration
from .models import LaunchChoice
from .models import MenuState
from .prompts import Prompter
from .store import ConfigStore

logger = logging.getLogger(__name__)


class MenuController:
    """State machine behind the interactive menu.

    MAIN_MENU re-reads the settings directory every time it is entered and
    dispatches to one of the flows, each of which returns to MAIN_MENU.
    LAUNCHING and EXITED are terminal: run() returns the exit status the
    process should end with. PromptCancelled from any prompt propagates out
    of run() untouched.

    Args:
        store: Configuration store to list and modify
        prompter: Source of user answers
        editor_launcher: Opens configurations for editing
        program_launcher: Runs the target program
        console: Console for user-facing messages
    """

    def __init__(
        self,
        store: ConfigStore,
        prompter: Prompter,
        editor_launcher: EditorLauncher,
        program_launcher: ProgramLauncher,
        console: Console,
    ):
        self.store = store
        self.prompter = prompter
        self.editor_launcher = editor_launcher
        self.program_launcher = program_launcher
        self.console = console
        self.state = MenuState.MAIN_MENU
        self._selected: Configuration | None = None

    def run(self) -> int:
        """Drive the menu until a configuration is launched or the user exits.

        Returns:
            0 after Exit, otherwise the launched program's exit status

        Raises:
            PromptCancelled: If the user interrupts a prompt
            SpawnError: If the target program cannot be started
        """
        self.state = MenuState.MAIN_MENU
        while True:
            logger.debug(f"Entering {self.state.name}")
            match self.state:
                case MenuState.MAIN_MENU:
                    self.state = self._main_menu()
                case MenuState.CREATE_FLOW:
                    self._create_flow()
                    self.state = MenuState.MAIN_MENU
                case MenuState.EDIT_FLOW:
                    self._edit_flow()
                    self.state = MenuState.MAIN_MENU
                case MenuState.DELETE_FLOW:
                    self._delete_flow()
                    self.state = MenuState.MAIN_MENU
                case MenuState.LAUNCHING:
                    return self.program_launcher.launch(self._selected)
                case MenuState.EXITED:
                    return 0

    # ===== Main Menu =====

    def _main_menu(self) -> MenuState:
        configs = self.store.list_configurations()

        self.console.print("\n[bold]--- Settings Toggle ---[/bold]\n")

        if not configs:
            self.console.print(f"No configurations found in {escape(str(self.store.settings_dir))}")
            self.console.print("Expected format: settings.{name}.json\n")
            if self.prompter.confirm("Would you like to create a new configuration?", default=True):
                return MenuState.CREATE_FLOW
            return MenuState.EXITED

        options = [(config.name, LaunchChoice(config)) for config in configs]
        options += [
            None,
            ("+ Create new", ActionChoice(Action.CREATE)),
            ("✎ Edit", ActionChoice(Action.EDIT)),
            ("✕ Delete", ActionChoice(Action.DELETE)),
            ("Exit", ActionChoice(Action.EXIT)),
        ]
        choice = self.prompter.select("Select configuration:", options)

        match choice:
            case LaunchChoice(config=config):
                self._selected = config
                return MenuState.LAUNCHING
            case ActionChoice(action=Action.CREATE):
                return MenuState.CREATE_FLOW
            case ActionChoice(action=Action.EDIT):
                return MenuState.EDIT_FLOW
            case ActionChoice(action=Action.DELETE):
                return MenuState.DELETE_FLOW
            case ActionChoice(action=Action.EXIT):
                return MenuState.EXITED
        raise AssertionError(f"Unhandled menu choice: {choice!r}")

    # ===== Flows =====

    def _create_flow(self) -> Configuration | None:
        """Ask for a name and a source, then create the configuration."""
        while True:
            name = self.prompter.text("Enter a name for the new configuration")
            try:
                self.store.validate_name(name)
                break
            except ConfigValidationError as e:
                self.console.print(escape(str(e)), style="red")

        copy_from = None
        configs = self.store.list_configurations()
        if configs:
            copy_from = self.prompter.select(
                "Initialize from:",
                [("Empty config", None)] + [(config.name, config) for config in configs],
            )

        try:
            config = self.store.create_configuration(name, copy_from)
        except (ConfigValidationError, ConfigFileError) as e:
            self.console.print(escape(str(e)), style="red")
            return None

        self.console.print(f'\nCreated "{config.name}" at {escape(str(config.path))}')
        return config

    def _edit_flow(self) -> None:
        configs = self.store.list_configurations()
        if not configs:
            self.console.print("\nNo configurations to edit.")
            return

        config = self.prompter.select(
            "Select a configuration to edit:",
            [(candidate.name, candidate) for candidate in configs],
        )
        self.editor_launcher.edit(config)

    def _delete_flow(self) -> None:
        deletable = [config for config in self.store.list_configurations() if not config.is_default]
        if not deletable:
            self.console.print("\nNo configurations to delete.")
            return

        config = self.prompter.select(
            "Select a configuration to delete:",
            [(candidate.name, candidate) for candidate in deletable],
        )
        if not self.prompter.confirm(f'Are you sure you want to delete "{config.name}"?', default=False):
            return

        try:
            self.store.delete_configuration(config)
        except ConfigFileError as e:
            self.console.print(escape(str(e)), style="red")
            return
        self.console.print(f'\nDeleted "{config.name}" configuration.')
