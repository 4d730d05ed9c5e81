"""Tests for the action dispatcher."""

import subprocess
from contextlib import contextmanager
from pathlib import Path

import pytest

from claude_tui import actions as actions_module
from claude_tui.actions import ActionDispatcher, spawn_detached
from claude_tui.config import ClaudeTuiConfig
from claude_tui.discovery import DocumentLinker


class Recorder:
    """Records Popen/run invocations."""

    def __init__(self, returncode: int = 0, error: Exception | None = None) -> None:
        self.calls: list[tuple[list[str], dict]] = []
        self.returncode = returncode
        self.error = error

    def popen(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.error:
            raise self.error
        return object()

    def run(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.error:
            raise self.error
        return subprocess.CompletedProcess(args, self.returncode)


class SuspendSpy:
    """Context manager factory that tracks enter/exit."""

    def __init__(self) -> None:
        self.events: list[str] = []

    @contextmanager
    def __call__(self):
        self.events.append("suspend")
        try:
            yield
        finally:
            self.events.append("resume")


@pytest.fixture
def notes(tmp_path: Path) -> Path:
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def dispatcher(notes: Path) -> ActionDispatcher:
    config = ClaudeTuiConfig(opener_command="open", vault_name="NV", vault_subpath="Personal/App")
    return ActionDispatcher(config, linker=DocumentLinker(notes))


class TestSpawnDetached:
    """Tests for fire-and-forget spawning."""

    def test_spawn_failure_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a missing opener does not raise."""
        recorder = Recorder(error=FileNotFoundError("open"))
        monkeypatch.setattr(actions_module.subprocess, "Popen", recorder.popen)
        spawn_detached(["open", "/tmp"])
        assert recorder.calls[0][0] == ["open", "/tmp"]

    def test_output_discarded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "Popen", recorder.popen)
        spawn_detached(["open", "/tmp"])
        kwargs = recorder.calls[0][1]
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL


class TestOpenInFileBrowser:
    """Tests for open_in_file_browser()."""

    def test_opens_project_path(self, dispatcher: ActionDispatcher, make_project, monkeypatch: pytest.MonkeyPatch) -> None:
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "Popen", recorder.popen)
        project = make_project("alpha")
        dispatcher.open_in_file_browser(project)
        assert recorder.calls[0][0] == ["open", str(project.path)]

    def test_no_selection(self, dispatcher: ActionDispatcher, monkeypatch: pytest.MonkeyPatch) -> None:
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "Popen", recorder.popen)
        dispatcher.open_in_file_browser(None)
        assert recorder.calls == []


class TestOpenLinkedDocument:
    """Tests for open_linked_document()."""

    def test_opens_obsidian_uri(
        self, dispatcher: ActionDispatcher, notes: Path, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the note is resolved at call time and opened by URI."""
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "Popen", recorder.popen)
        project = make_project("daily-digest", has_linked_document=False)
        (notes / "Daily Digest.md").write_text("")

        uri = dispatcher.open_linked_document(project)

        assert uri == "obsidian://open?vault=NV&file=Personal%2FApp%2FDaily%20Digest"
        assert recorder.calls[0][0] == ["open", uri]

    def test_missing_note_is_noop(
        self, dispatcher: ActionDispatcher, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a note deleted since the scan opens nothing."""
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "Popen", recorder.popen)
        assert dispatcher.open_linked_document(make_project("gone", has_linked_document=True)) is None
        assert recorder.calls == []

    def test_no_selection(self, dispatcher: ActionDispatcher) -> None:
        assert dispatcher.open_linked_document(None) is None


class TestLaunchAssistant:
    """Tests for launch_assistant()."""

    def test_runs_in_project_directory(
        self, dispatcher: ActionDispatcher, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test claude --continue runs with the project as cwd inside the suspend scope."""
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "run", recorder.run)
        suspend = SuspendSpy()
        project = make_project("alpha")

        assert dispatcher.launch_assistant(project, suspend) is None

        args, kwargs = recorder.calls[0]
        assert args == ["claude", "--continue"]
        assert kwargs["cwd"] == project.path
        assert suspend.events == ["suspend", "resume"]

    def test_nonzero_exit_is_warning(
        self, dispatcher: ActionDispatcher, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(actions_module.subprocess, "run", Recorder(returncode=2).run)
        suspend = SuspendSpy()
        warning = dispatcher.launch_assistant(make_project("alpha"), suspend)
        assert warning == "claude exited with status 2"
        assert suspend.events == ["suspend", "resume"]

    def test_spawn_failure_restores_terminal(
        self, dispatcher: ActionDispatcher, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a missing assistant binary is reported and the terminal restored."""
        recorder = Recorder(error=FileNotFoundError("claude"))
        monkeypatch.setattr(actions_module.subprocess, "run", recorder.run)
        suspend = SuspendSpy()
        warning = dispatcher.launch_assistant(make_project("alpha"), suspend)
        assert warning.startswith("Failed to launch claude")
        assert suspend.events == ["suspend", "resume"]

    def test_unexpected_error_still_restores(
        self, dispatcher: ActionDispatcher, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        recorder = Recorder(error=KeyboardInterrupt())
        monkeypatch.setattr(actions_module.subprocess, "run", recorder.run)
        suspend = SuspendSpy()
        with pytest.raises(KeyboardInterrupt):
            dispatcher.launch_assistant(make_project("alpha"), suspend)
        assert suspend.events == ["suspend", "resume"]

    def test_no_selection(self, dispatcher: ActionDispatcher) -> None:
        """Test nothing is suspended without a project."""
        suspend = SuspendSpy()
        assert dispatcher.launch_assistant(None, suspend) is None
        assert suspend.events == []

    def test_custom_command(self, notes: Path, make_project, monkeypatch: pytest.MonkeyPatch) -> None:
        recorder = Recorder()
        monkeypatch.setattr(actions_module.subprocess, "run", recorder.run)
        config = ClaudeTuiConfig(assistant_command="claude-beta", assistant_args=["--continue", "--verbose"])
        ActionDispatcher(config, linker=DocumentLinker(notes)).launch_assistant(make_project("a"), SuspendSpy())
        assert recorder.calls[0][0] == ["claude-beta", "--continue", "--verbose"]
