"""Tests for editor detection and launching."""

import signal
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from settings_toggle import Configuration
from settings_toggle import Editor
from settings_toggle import EditorLauncher
from settings_toggle import SpawnError
from settings_toggle.editors import DEFAULT_EDITORS
from settings_toggle.editors import available_editors
from settings_toggle.editors import build_shell_command
from settings_toggle.editors import open_in_editor


class TestAvailableEditors:
    """Test editor detection."""

    def test_default_preference_order(self):
        """Test the built-in editors and their commands."""
        assert [(editor.name, editor.command) for editor in DEFAULT_EDITORS] == [
            ("Nano", "nano"),
            ("Vim", "vim"),
            ("VS Code", "code -w"),
            ("Cursor", "cursor -w"),
        ]

    def test_probes_first_token(self):
        """Test multi-token commands are probed by their executable only."""
        with patch("settings_toggle.editors.is_command_available", return_value=True) as probe:
            available_editors()

        assert [call.args[0] for call in probe.call_args_list] == ["nano", "vim", "code", "cursor"]

    def test_filters_and_keeps_order(self):
        """Test only installed editors remain, in preference order."""
        installed = {"vim", "cursor"}
        with patch("settings_toggle.editors.is_command_available", side_effect=lambda cmd: cmd in installed):
            names = [editor.name for editor in available_editors()]

        assert names == ["Vim", "Cursor"]

    def test_none_installed(self):
        """Test an empty result when nothing resolves."""
        with patch("settings_toggle.editors.is_command_available", return_value=False):
            assert available_editors() == []


class TestOpenInEditor:
    """Test running an editor process."""

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX quoting")
    def test_build_shell_command_quotes_path(self):
        """Test the path is appended after the editor's own arguments, shell-quoted."""
        editor = Editor(name="VS Code", command="code -w")

        command = build_shell_command(editor, Path("/home/me/.claude/settings.my config.json"))

        assert command == "code -w '/home/me/.claude/settings.my config.json'"

    def test_runs_through_shell_and_waits(self, tmp_path):
        """Test the editor runs via the shell with inherited stdio."""
        path = tmp_path / "settings.json"
        with patch("settings_toggle.editors.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(args="nano", returncode=0)
            status = open_in_editor(Editor(name="Nano", command="nano"), path)

        assert status == 0
        args, kwargs = run.call_args
        assert args[0] == build_shell_command(Editor(name="Nano", command="nano"), path)
        assert kwargs["shell"] is True
        assert "stdout" not in kwargs and "stdin" not in kwargs

    def test_sigint_swallowed_while_editor_runs(self, tmp_path):
        """Test Ctrl-C belongs to the editor while it is open."""
        seen = []

        def fake_run(*args, **kwargs):
            seen.append(signal.getsignal(signal.SIGINT))
            return subprocess.CompletedProcess(args=args[0], returncode=0)

        before = signal.getsignal(signal.SIGINT)
        with patch("settings_toggle.editors.subprocess.run", side_effect=fake_run):
            open_in_editor(Editor(name="Vim", command="vim"), tmp_path / "settings.json")

        assert len(seen) == 1
        assert seen[0] not in (signal.SIG_IGN, signal.SIG_DFL, signal.default_int_handler)
        assert signal.getsignal(signal.SIGINT) == before

    def test_oserror_becomes_spawn_error(self, tmp_path):
        """Test a shell that cannot start raises SpawnError."""
        with patch("settings_toggle.editors.subprocess.run", side_effect=OSError("no shell")):
            with pytest.raises(SpawnError, match="Failed to open editor: no shell"):
                open_in_editor(Editor(name="Nano", command="nano"), tmp_path / "settings.json")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell status")
    def test_command_not_found_becomes_spawn_error(self, tmp_path):
        """Test the shell's command-not-found status raises SpawnError."""
        with patch("settings_toggle.editors.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(args="code", returncode=127)
            with pytest.raises(SpawnError, match="code not found"):
                open_in_editor(Editor(name="VS Code", command="code -w"), tmp_path / "settings.json")


class TestEditorLauncher:
    """Test the interactive edit step."""

    @pytest.fixture
    def config(self, tmp_path):
        path = tmp_path / "settings.glm.json"
        path.write_text("{}")
        return Configuration(name="glm", path=path)

    def test_no_editors_found(self, scripted_prompter, console, config):
        """Test a missing editor is reported without prompting."""
        prompter = scripted_prompter([])
        launcher = EditorLauncher(prompter, console)

        with patch("settings_toggle.editors.is_command_available", return_value=False):
            launcher.edit(config)

        assert prompter.asked == []
        assert "No editors found. Install one of: nano, vim, code, cursor." in console.export_text()

    def test_opens_chosen_editor(self, scripted_prompter, console, config):
        """Test the chosen editor is run on the configuration's path."""
        prompter = scripted_prompter(["Vim"])
        launcher = EditorLauncher(prompter, console)

        with (
            patch("settings_toggle.editors.is_command_available", side_effect=lambda cmd: cmd in {"nano", "vim"}),
            patch("settings_toggle.editors.open_in_editor", return_value=0) as opener,
        ):
            launcher.edit(config)

        assert prompter.asked == [("select", "Choose an editor:", ["Nano", "Vim"])]
        opener.assert_called_once_with(Editor(name="Vim", command="vim"), config.path)
        output = console.export_text()
        assert 'Opening "glm" in vim...' in output
        assert "Editor closed." in output

    def test_spawn_failure_is_reported(self, scripted_prompter, console, config):
        """Test an editor that fails to start is reported, not raised."""
        prompter = scripted_prompter(["Nano"])
        launcher = EditorLauncher(prompter, console)

        with (
            patch("settings_toggle.editors.is_command_available", return_value=True),
            patch("settings_toggle.editors.open_in_editor", side_effect=SpawnError("Failed to open editor: boom")),
        ):
            launcher.edit(config)

        output = console.export_text()
        assert "Failed to open editor: boom" in output
        assert "Editor closed." not in output

    def test_custom_editor_list(self, scripted_prompter, console, config):
        """Test editors from preferences replace the built-in list."""
        prompter = scripted_prompter(["Micro"])
        launcher = EditorLauncher(prompter, console, editors=(Editor(name="Micro", command="micro"),))

        with (
            patch("settings_toggle.editors.is_command_available", return_value=True),
            patch("settings_toggle.editors.open_in_editor", return_value=0) as opener,
        ):
            launcher.edit(config)

        opener.assert_called_once_with(Editor(name="Micro", command="micro"), config.path)

    def test_editor_names_with_markup(self, scripted_prompter, console, config):
        """Test editor commands containing rich markup are printed literally."""
        prompter = scripted_prompter([])
        launcher = EditorLauncher(prompter, console, editors=(Editor(name="Odd", command="odd[/x]"),))

        with patch("settings_toggle.editors.is_command_available", return_value=False):
            launcher.edit(config)

        assert "Install one of: odd[/x]." in console.export_text()
