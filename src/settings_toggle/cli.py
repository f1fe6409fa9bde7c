"""Command-line entry point."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .editors import EditorLauncher
from .exceptions import PromptCancelled
from .exceptions import SpawnError
from .exceptions import ToggleError
from .launcher import ProgramLauncher
from .menu import MenuController
from .prompts import RichPrompter
from .settings import load_tool_settings
from .store import ConfigStore

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.option(
    "--dir",
    "settings_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding settings.json and settings.<name>.json",
)
@click.option("--program", help="Program to launch with the selected configuration")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Preferences file (default: ~/.config/settings-toggle/config.yaml)",
)
@click.option("--list", "list_only", is_flag=True, help="Print configurations and exit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="settings-toggle")
@click.pass_context
def main(ctx, settings_dir, program, config_path, list_only, verbose):
    """Pick a settings file and launch the program with it."""
    _configure_logging(verbose)
    console = Console()
    controller = None

    try:
        tool_settings = load_tool_settings(config_path, {"settings_dir": settings_dir, "program": program})
        logger.debug(f"Using {tool_settings}")
        store = ConfigStore(tool_settings.settings_dir)

        if list_only:
            for config in store.list_configurations():
                click.echo(f"{config.name}\t{config.path}")
            ctx.exit(0)

        prompter = RichPrompter(console)
        controller = MenuController(
            store=store,
            prompter=prompter,
            editor_launcher=EditorLauncher(prompter, console, tool_settings.editors),
            program_launcher=ProgramLauncher(tool_settings.program, tool_settings.settings_flag, console),
            console=console,
        )
        status = controller.run()
    except (PromptCancelled, KeyboardInterrupt):
        logger.debug(f"Cancelled in {controller.state.name if controller else 'startup'}")
        console.print("\n")
        ctx.exit(0)
    except SpawnError as e:
        console.print(escape(str(e)), style="red")
        ctx.exit(1)
    except ToggleError as e:
        console.print(f"Error: {escape(str(e))}", style="red")
        ctx.exit(1)

    ctx.exit(status)


if __name__ == "__main__":
    main()
