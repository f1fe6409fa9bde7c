"""Interactive prompts rendered with rich."""

from collections.abc import Sequence
from typing import Optional
from typing import Protocol
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.prompt import Prompt

from .exceptions import PromptCancelled

T = TypeVar("T")

# A None entry in an option list is drawn as a separator line
Option = Optional[tuple[str, T]]


class Prompter(Protocol):
    """Interface the menu uses to ask the user things."""

    def select(self, message: str, options: Sequence[Option[T]]) -> T: ...

    def confirm(self, message: str, default: bool) -> bool: ...

    def text(self, message: str) -> str: ...


class RichPrompter:
    """Prompter backed by rich.prompt.

    Ctrl-C and end of input surface as PromptCancelled so callers have a
    single exception to treat as "user walked away".

    Args:
        console: Console to render prompts on
    """

    def __init__(self, console: Console):
        self.console = console

    def select(self, message: str, options: Sequence[Option[T]]) -> T:
        """Show a numbered list and return the value of the chosen entry."""
        values: list[T] = []
        self.console.print(f"[bold]{escape(message)}[/bold]")
        for option in options:
            if option is None:
                self.console.print("  [dim]──────────[/dim]")
                continue
            label, value = option
            values.append(value)
            self.console.print(f"  [cyan]{len(values)}[/cyan]. {escape(label)}")

        if not values:
            raise ValueError("select() needs at least one option")

        choices = [str(index) for index in range(1, len(values) + 1)]
        answer = self._ask(Prompt, "Choice", choices=choices, show_choices=False)
        return values[int(answer) - 1]

    def confirm(self, message: str, default: bool) -> bool:
        return self._ask(Confirm, message, default=default)

    def text(self, message: str) -> str:
        return self._ask(Prompt, message)

    def _ask(self, prompt_cls, message, **kwargs):
        try:
            return prompt_cls.ask(message, console=self.console, **kwargs)
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptCancelled(message) from e
