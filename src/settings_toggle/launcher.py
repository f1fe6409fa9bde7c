"""Hands the terminal over to the target program."""

import logging
import subprocess

from rich.console import Console
from rich.markup import escape

from .exceptions import SpawnError
from .models import Configuration
from .utils import interrupts_deferred_to_child

logger = logging.getLogger(__name__)


class ProgramLauncher:
    """Runs the target program with a selected configuration.

    The child inherits stdin/stdout/stderr and owns Ctrl-C while it runs.
    launch() only returns the child's exit status; ending this process with
    that status is left to the entry point.

    Args:
        program: Executable to run (e.g. "claude")
        settings_flag: Flag placed before the configuration path
        console: Console for the launch banner
    """

    def __init__(self, program: str, settings_flag: str, console: Console):
        self.program = program
        self.settings_flag = settings_flag
        self.console = console

    def build_command(self, config: Configuration) -> list[str]:
        """Build the argument vector for config.

        Returns:
            [program, settings_flag, absolute path of the configuration]
        """
        return [self.program, self.settings_flag, str(config.path.absolute())]

    def launch(self, config: Configuration) -> int:
        """Run the program with config and wait for it to exit.

        Args:
            config: Configuration to pass to the program

        Returns:
            The child's exit status, or 0 when it reported none (killed by a signal)

        Raises:
            SpawnError: If the program could not be started
        """
        command = self.build_command(config)
        self.console.print(f'\nLaunching {escape(self.program)} with "{config.name}" configuration...\n')
        logger.debug(f"Running {command}")

        try:
            with interrupts_deferred_to_child():
                result = subprocess.run(command, check=False)
        except OSError as e:
            raise SpawnError(f"Failed to launch {self.program}: {e}") from e

        # Negative status means the child died from a signal and has no exit code
        status = result.returncode if result.returncode > 0 else 0
        logger.debug(f"{self.program} exited with status {result.returncode}")
        return status
