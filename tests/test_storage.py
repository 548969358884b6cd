from __future__ import annotations

from pathlib import Path

import pytest

from lined.storage import LineFile, StorageError


def test_missing_file_is_new_with_one_empty_line(tmp_path: Path) -> None:
    store = LineFile(tmp_path / "absent.txt")

    assert store.load() == [""]
    assert store.is_new is True


def test_load_strips_final_terminator(tmp_path: Path) -> None:
    target = tmp_path / "lines.txt"
    target.write_bytes(b"one\ntwo\n")

    assert LineFile(target).load() == ["one", "two"]


def test_load_without_final_terminator(tmp_path: Path) -> None:
    target = tmp_path / "lines.txt"
    target.write_bytes(b"one\ntwo")

    assert LineFile(target).load() == ["one", "two"]


def test_empty_file_loads_one_empty_line(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    store = LineFile(target)

    assert store.load() == [""]
    assert store.is_new is False


def test_save_terminates_every_line(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    written = LineFile(target).save(["a", "", "b"])

    assert target.read_bytes() == b"a\n\nb\n"
    assert written == 5


def test_undecodable_bytes_survive_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "latin.txt"
    raw = b"caf\xe9\nok\n"
    target.write_bytes(raw)
    store = LineFile(target)

    lines = store.load()
    store.save(lines)

    assert target.read_bytes() == raw


def test_save_into_missing_directory_raises(tmp_path: Path) -> None:
    store = LineFile(tmp_path / "missing" / "out.txt")

    with pytest.raises(StorageError) as excinfo:
        store.save(["x"])

    assert excinfo.value.path.endswith("out.txt")
