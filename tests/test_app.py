from unittest import mock

import pytest

from blaupause.app import CopyState


def _dirs(tmp_path):
    source = tmp_path / "source"
    target = tmp_path / "target"
    source.mkdir()
    target.mkdir()
    return str(source), str(target)


def test_defaults_cannot_copy():
    state = CopyState()
    assert state.can_copy() is False
    assert (state.archive_copy, state.delete_copy, state.validate_copy) == (False, False, False)


def test_can_copy_with_existing_directories(tmp_path):
    source, target = _dirs(tmp_path)
    assert CopyState(source=source, target=target).can_copy() is True


def test_cannot_copy_with_missing_target(tmp_path):
    source, _ = _dirs(tmp_path)
    state = CopyState(source=source, target=str(tmp_path / "missing"))
    assert state.can_copy() is False


def test_command_per_platform():
    assert CopyState(platform="linux").command() == "rsync"
    assert CopyState(platform="win32").command() == "ROBOCOPY"


def test_arguments_reflect_options():
    state = CopyState(
        source="/s", target="/t", archive_copy=True, validate_copy=True, platform="darwin"
    )
    args = state.arguments()
    assert args[0] == "-ha"
    assert "--checksum" in args
    assert "--delete-during" not in args
    assert args[-2:] == ["/s", "/t"]


def test_command_line_joins_command_and_arguments():
    state = CopyState(source="/s", target="/t", platform="linux")
    assert state.command_line() == "rsync " + " ".join(state.arguments())


def test_validate_availability():
    assert CopyState(platform="win32").validate_available is False
    assert CopyState(platform="linux").validate_available is True


def test_execute_requires_directories(tmp_path):
    state = CopyState(source=str(tmp_path / "a"), target=str(tmp_path / "b"))
    with pytest.raises(ValueError):
        state.execute()


def test_execute_reports_missing_tool(tmp_path, capsys):
    source, target = _dirs(tmp_path)
    state = CopyState(source=source, target=target, platform="linux")
    with mock.patch("shutil.which", return_value=None):
        result = state.execute()
    captured = capsys.readouterr()
    assert result is None
    assert state.command_line() in captured.out
    assert "Executable not found: rsync" in captured.err