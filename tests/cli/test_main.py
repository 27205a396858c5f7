"""Unit tests for the CLI main module."""

import contextlib
import io
from unittest.mock import patch

import pyperclip
import pytest

from dir2clip.cli.main import main, success_message
from dir2clip.cli.signal_handler import SignalHandler
from dir2clip.exceptions import WalkInterruptedError
from dir2clip.snapshot import Snapshot
from dir2clip.types import EntryKind


@pytest.fixture
def mock_clipboard():
    with patch("dir2clip.clipboard.pyperclip.copy") as mock_copy:
        yield mock_copy


@pytest.fixture(autouse=True)
def no_signal_setup():
    with patch("dir2clip.cli.main.setup_signal_handling"):
        yield


def run_main(argv):
    """Run main() with the given arguments, returning (exit code, stdout, stderr)."""
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = 0
    with patch("sys.argv", ["dir2clip", *argv]), contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        try:
            main()
        except SystemExit as e:
            code = e.code
    return code, stdout.getvalue(), stderr.getvalue()


def test_success_message():
    """Test the success messages for files and directories."""
    assert success_message(Snapshot("", EntryKind.FILE, "a.txt")) == 'Copied content of "a.txt" to clipboard!'
    assert (
        success_message(Snapshot("", EntryKind.DIRECTORY, "proj"))
        == 'Copied directory snapshot of "proj" to clipboard!'
    )


def test_copy_directory(project_dir, mock_clipboard):
    """Test copying a directory snapshot to the clipboard."""
    code, _, stderr = run_main([str(project_dir)])

    assert code == 0
    text = mock_clipboard.call_args[0][0]
    assert text.startswith("Directory Tree:\n📁 src/\n")
    assert "node_modules" not in text
    assert 'Copied directory snapshot of "proj" to clipboard!' in stderr


def test_copy_file(project_dir, mock_clipboard):
    """Test copying a single file to the clipboard."""
    code, _, stderr = run_main([str(project_dir / "a.txt")])

    assert code == 0
    mock_clipboard.assert_called_once_with("a.txt\n```\nhello\n```\n\n")
    assert 'Copied content of "a.txt" to clipboard!' in stderr


def test_binary_file_fails_and_clipboard_unchanged(project_dir, mock_clipboard):
    """Test that a binary target fails without touching the clipboard."""
    code, _, stderr = run_main([str(project_dir / "blob.bin")])

    assert code == 1
    mock_clipboard.assert_not_called()
    assert "Error: Failed to copy content: Cannot read" in stderr


def test_missing_target_fails(tmp_path, mock_clipboard):
    """Test that a missing target fails without touching the clipboard."""
    code, _, stderr = run_main([str(tmp_path / "missing")])

    assert code == 1
    mock_clipboard.assert_not_called()
    assert "Cannot access" in stderr


def test_clipboard_unavailable(project_dir):
    """Test the error reported when no clipboard is available."""
    with patch("dir2clip.clipboard.pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard")):
        code, _, stderr = run_main([str(project_dir / "a.txt")])

    assert code == 1
    assert "Clipboard is not available" in stderr


def test_ignore_option(project_dir, mock_clipboard):
    """Test that -i patterns are applied."""
    run_main(["-i", "src", str(project_dir)])
    text = mock_clipboard.call_args[0][0]
    assert "main.py" not in text
    assert "a.txt" in text


def test_environment_patterns(project_dir, mock_clipboard, monkeypatch):
    """Test that DIR2CLIP_EXCLUDE patterns are applied."""
    monkeypatch.setenv("DIR2CLIP_EXCLUDE", "utils")
    run_main([str(project_dir)])
    text = mock_clipboard.call_args[0][0]
    assert "helpers.py" not in text
    assert "main.py" in text


def test_gitignore_option(project_dir, mock_clipboard, tmp_path):
    """Test that -e rules are applied."""
    gitignore = tmp_path / "rules"
    gitignore.write_text("*.py\n")
    run_main(["-e", str(gitignore), str(project_dir)])
    text = mock_clipboard.call_args[0][0]
    assert ".py" not in text
    assert "a.txt" in text


def test_missing_rules_file(project_dir, mock_clipboard):
    """Test that a missing rules file is a runtime error."""
    code, _, stderr = run_main(["-e", str(project_dir / "nope"), str(project_dir)])
    assert code == 1
    assert "Rules file not found" in stderr
    mock_clipboard.assert_not_called()


def test_output_file(project_dir, tmp_path, mock_clipboard):
    """Test writing the snapshot to a file."""
    output = tmp_path / "snapshot.md"
    code, _, stderr = run_main(["-o", str(output), str(project_dir / "a.txt")])

    assert code == 0
    mock_clipboard.assert_not_called()
    assert output.read_text(encoding="utf-8") == "a.txt\n```\nhello\n```\n\n"
    assert f'Copied content of "a.txt" to {output}!' in stderr


def test_print_option(project_dir, mock_clipboard):
    """Test writing the snapshot to stdout."""
    with (
        patch("sys.argv", ["dir2clip", "-p", str(project_dir / "a.txt")]),
        patch("dir2clip.cli.main.SafeWriter") as mock_writer,
        patch("sys.stdout") as mock_stdout,
    ):
        mock_stdout.fileno.return_value = 1
        main()

    mock_clipboard.assert_not_called()
    mock_writer.assert_called_once_with(1)
    writer = mock_writer.return_value.__enter__.return_value
    writer.write.assert_called_once_with("a.txt\n```\nhello\n```\n\n")


def test_usage_error():
    """Test that a missing target exits with code 2."""
    code, _, _ = run_main([])
    assert code == 2


def test_interrupted_walk_exits_without_copying(project_dir, mock_clipboard):
    """Test that Ctrl+C during the walk exits 130 without copying."""
    handler = SignalHandler()
    handler.sigint_received.set()
    with patch("dir2clip.cli.main.signal_handler", handler):
        code, stdout, stderr = run_main([str(project_dir)])

    assert code == 130
    mock_clipboard.assert_not_called()
    assert stdout == ""
    assert stderr == ""


def test_walk_polls_signal_handler(project_dir, mock_clipboard):
    """Test that the walk is given the signal handler's interrupt check."""
    handler = SignalHandler()
    with (
        patch("dir2clip.cli.main.signal_handler", handler),
        patch("dir2clip.cli.main.create_snapshot", side_effect=WalkInterruptedError("proj")) as mock_create,
    ):
        code, _, _ = run_main([str(project_dir)])

    assert code == 130
    assert mock_create.call_args.kwargs["interrupt_check"] == handler.interrupted
    mock_clipboard.assert_not_called()


def test_second_ctrl_c_exits_130(project_dir, mock_clipboard):
    """Test that KeyboardInterrupt exits 130 without an error message."""
    with patch("dir2clip.cli.main.create_snapshot", side_effect=KeyboardInterrupt):
        code, _, stderr = run_main([str(project_dir)])

    assert code == 130
    assert "Error" not in stderr
    mock_clipboard.assert_not_called()
