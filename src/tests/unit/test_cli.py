"""Tests for the notestatus command-line interface."""

from datetime import date

import pytest
from typer.testing import CliRunner

from notestatus.interfaces.cli.app import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, vault):
    """Run a CLI command against the temp vault."""

    def _invoke(*args: str):
        return runner.invoke(app, [*args, "--vault", str(vault)])

    return _invoke


class TestTransitionCommands:
    """Tests for the status-setting commands."""

    def test_todo(self, invoke, make_note):
        """todo sets the status property."""
        note = make_note("# Plan\n")

        result = invoke("todo", "note.md")

        assert result.exit_code == 0
        assert note.read_text() == "---\nstatus: todo\n---\n# Plan\n"

    def test_in_progress_stamps_started(self, invoke, make_note):
        """in-progress stamps today's date."""
        note = make_note("---\nstatus: todo\n---\n")

        result = invoke("in-progress", "note.md")

        assert result.exit_code == 0
        assert f"started: {date.today().isoformat()}" in note.read_text()

    def test_waiting_then_completed(self, invoke, make_note):
        """Completing a waiting note drops waiting-since."""
        note = make_note("---\nstatus: todo\n---\n")

        invoke("waiting", "note.md")
        result = invoke("completed", "note.md")

        assert result.exit_code == 0
        text = note.read_text()
        assert "status: completed" in text
        assert "waiting-since" not in text

    def test_clear(self, invoke, make_note):
        """clear removes every tracked property."""
        note = make_note("---\ntitle: Plan\nstatus: todo\nstarted: 2024-01-01\n---\n")

        result = invoke("clear", "note.md")

        assert result.exit_code == 0
        assert "status cleared" in result.output
        assert note.read_text() == "---\ntitle: Plan\n---\n"

    def test_missing_note_exits_with_error(self, invoke):
        """A missing note is reported and exits with 1."""
        result = invoke("someday", "missing.md")

        assert result.exit_code == 1
        assert "Note not found" in result.output


class TestReadCommands:
    """Tests for show and list."""

    def test_show(self, invoke, make_note):
        """show prints the tracked properties only."""
        make_note("---\ntitle: Plan\nstatus: waiting\nwaiting-since: 2024-01-01\n---\n")

        result = invoke("show", "note.md")

        assert result.exit_code == 0
        assert "waiting-since" in result.output
        assert "2024-01-01" in result.output
        assert "Plan" not in result.output

    def test_show_untracked(self, invoke, make_note):
        """show reports notes without a status."""
        make_note("# Plan\n")

        result = invoke("show", "note.md")

        assert result.exit_code == 0
        assert "no status tracked" in result.output

    def test_list_filters_by_status(self, invoke, make_note):
        """list shows notes with the requested status."""
        make_note("---\nstatus: todo\n---\n", "a.md")
        make_note("---\nstatus: waiting\n---\n", "b.md")
        make_note("# untracked\n", "c.md")

        result = invoke("list", "--status", "waiting")

        assert result.exit_code == 0
        assert "b.md" in result.output
        assert "a.md" not in result.output
        assert "c.md" not in result.output

    def test_list_empty(self, invoke):
        """list reports an empty vault."""
        result = invoke("list")

        assert result.exit_code == 0
        assert "No notes with a status" in result.output
