"""Shared fixtures: a scripted prompter and fake launchers."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from rich.console import Console
from settings_toggle import PromptCancelled


class ScriptedPrompter:
    """Prompter that answers from a list of scripted responses.

    Responses for select() are labels; confirm() takes bools; text() takes
    strings. A PromptCancelled instance in the script is raised instead.
    Every prompt is recorded in ``asked`` as (kind, message, labels).
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self):
        if not self.answers:
            raise AssertionError(f"Prompter ran out of answers after {self.asked}")
        answer = self.answers.pop(0)
        if isinstance(answer, PromptCancelled):
            raise answer
        return answer

    def select(self, message, options):
        labeled = [option for option in options if option is not None]
        labels = [label for label, _ in labeled]
        self.asked.append(("select", message, labels))
        answer = self._next()
        for label, value in labeled:
            if label == answer:
                return value
        raise AssertionError(f"{answer!r} is not one of {labels}")

    def confirm(self, message, default):
        self.asked.append(("confirm", message, default))
        return self._next()

    def text(self, message):
        self.asked.append(("text", message, None))
        return self._next()


class FakeProgramLauncher:
    """Records launches instead of spawning anything."""

    def __init__(self, status=0):
        self.status = status
        self.launched = []

    def launch(self, config):
        self.launched.append(config)
        return self.status


class FakeEditorLauncher:
    """Records which configurations were opened."""

    def __init__(self):
        self.edited = []

    def edit(self, config):
        self.edited.append(config)


@pytest.fixture
def settings_dir():
    """Temporary settings directory."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def console():
    """Console that records output instead of writing to the terminal."""
    return Console(record=True, force_terminal=False, width=120)


@pytest.fixture
def program_launcher():
    """Launcher that records instead of spawning."""
    return FakeProgramLauncher()


@pytest.fixture
def editor_launcher():
    """Editor launcher that records instead of spawning."""
    return FakeEditorLauncher()


@pytest.fixture
def scripted_prompter():
    """Factory for prompters with scripted answers."""
    return ScriptedPrompter
