from __future__ import annotations

from pathlib import Path

import pytest

from lined.actions import SAVE_FAILED, SAVED
from lined.runtime.config import EditorConfig
from lined.session import EditorSession
from lined.storage import LineFile, StorageError


def make_session(path: Path) -> EditorSession:
    return EditorSession.open(path, config=EditorConfig())


def run_command(session: EditorSession, command: str):
    session.feed(":" + command)
    return session.step("ENTER")


def test_write_quit_saves_and_stops(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    session = make_session(target)

    session.feed("ia")
    session.step("ENTER")
    session.feed("b")
    session.step("ESC")
    view = run_command(session, "wq")

    assert target.read_text() == "a\nb\n"
    assert view.running is False
    assert view.status == SAVED


def test_write_keeps_session_running(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("old\n")
    session = make_session(target)

    session.feed("x")
    view = run_command(session, "w")

    assert target.read_text() == "ld\n"
    assert view.running is True
    assert view.mode == "normal"
    assert view.status == SAVED
    assert session.buffer.document.dirty is False


def test_force_quit_discards_changes(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("keep\n")
    session = make_session(target)

    session.feed("dd")
    view = run_command(session, "q!")

    assert view.running is False
    assert target.read_text() == "keep\n"


def test_failed_save_reports_and_keeps_running(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def refuse(self: LineFile, lines: object) -> int:
        raise StorageError("disk full", path=self.path)

    monkeypatch.setattr(LineFile, "save", refuse)
    session = make_session(tmp_path / "notes.txt")

    view = run_command(session, "wq")

    assert view.status == SAVE_FAILED
    assert view.running is True
    assert view.mode == "normal"


def test_write_without_backing_file_fails() -> None:
    session = EditorSession(config=EditorConfig())

    view = run_command(session, "w")

    assert view.status == SAVE_FAILED


def test_unknown_command_returns_to_normal(tmp_path: Path) -> None:
    session = make_session(tmp_path / "notes.txt")
    unknown: list[object] = []
    session.bus.subscribe("command.unknown", unknown.append)

    view = run_command(session, "wat")

    assert view.mode == "normal"
    assert view.running is True
    assert unknown == ["wat"]


def test_commands_match_exactly(tmp_path: Path) -> None:
    session = make_session(tmp_path / "notes.txt")

    view = run_command(session, "q ")

    assert view.running is True
    assert session.last_result is not None
    assert session.last_result.status == "command_unknown"


def test_undo_and_redo_commands(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("abc\n")
    session = make_session(target)
    session.feed("x")

    run_command(session, "u")
    assert session.buffer.lines == ("abc",)

    run_command(session, "redo")
    assert session.buffer.lines == ("bc",)

    run_command(session, "redo")
    assert session.last_result is not None
    assert session.last_result.status == "noop"


def test_command_line_backspace(tmp_path: Path) -> None:
    session = make_session(tmp_path / "notes.txt")

    session.feed(":qx")
    session.step("BACKSPACE")
    view = session.step("ENTER")

    assert view.running is False


def test_submitted_commands_are_kept_in_history(tmp_path: Path) -> None:
    session = make_session(tmp_path / "notes.txt")

    run_command(session, "u")
    run_command(session, "nope")

    state = session.context.extras["command_state"]
    assert state["history"] == ["u", "nope"]
