"""Tests for loading, writing and resolving the recent file."""

from __future__ import annotations

from pathlib import Path

import pytest

from dmenu_recent.errors import HistoryWriteError, PathError
from dmenu_recent.history import load_history, resolve_path, save_history


def test_load_history_dedupes_against_new_item(tmp_path):
    path = tmp_path / "recent"
    path.write_text("b\na\nc\n", encoding="utf-8")
    entries = ["a"]
    assert load_history(entries, path, 6) == 2
    assert entries == ["a", "b", "c"]


def test_load_history_drops_duplicate_lines_in_file(tmp_path):
    path = tmp_path / "recent"
    path.write_text("x\ny\nx\ny\nz\n", encoding="utf-8")
    entries = ["new"]
    load_history(entries, path, 10)
    assert entries == ["new", "x", "y", "z"]


def test_load_history_stops_at_cap(tmp_path):
    path = tmp_path / "recent"
    path.write_text("x\ny\nz\nw\n", encoding="utf-8")
    entries = ["q"]
    assert load_history(entries, path, 3) == 2
    assert entries == ["q", "x", "y"]


def test_load_history_never_reads_past_cap(tmp_path):
    path = tmp_path / "recent"
    path.write_bytes(b"a\nb\n\xff\xfe broken\nc\n")
    entries = ["q"]
    load_history(entries, path, 3)
    assert entries == ["q", "a", "b"]


def test_load_history_stops_at_undecodable_line(tmp_path):
    path = tmp_path / "recent"
    path.write_bytes(b"a\n\xff\xfe broken\nb\n")
    entries = ["q"]
    assert load_history(entries, path, 6) == 1
    assert entries == ["q", "a"]


def test_load_history_missing_file_is_empty(tmp_path):
    entries = ["only"]
    assert load_history(entries, tmp_path / "nope", 6) == 0
    assert entries == ["only"]


def test_load_history_directory_is_empty(tmp_path):
    entries = ["only"]
    assert load_history(entries, tmp_path, 6) == 0
    assert entries == ["only"]


def test_load_history_keeps_last_line_without_newline(tmp_path):
    path = tmp_path / "recent"
    path.write_text("a\nb", encoding="utf-8")
    entries = ["c"]
    load_history(entries, path, 6)
    assert entries == ["c", "a", "b"]


def test_load_history_full_list_reads_nothing(tmp_path):
    path = tmp_path / "recent"
    path.write_text("a\n", encoding="utf-8")
    entries = ["q"]
    assert load_history(entries, path, 1) == 0
    assert entries == ["q"]


def test_save_history_overwrites_file(tmp_path):
    path = tmp_path / "recent"
    path.write_text("old\nstuff\nhere\n", encoding="utf-8")
    save_history(["a", "b"], path)
    assert path.read_text(encoding="utf-8") == "a\nb\n"


def test_save_history_reports_unwritable_path(tmp_path):
    with pytest.raises(HistoryWriteError) as excinfo:
        save_history(["a"], tmp_path)
    assert str(tmp_path) in str(excinfo.value)


def test_resolve_path_allows_missing_file(tmp_path):
    resolved = resolve_path(tmp_path / "recent")
    assert resolved == tmp_path.resolve() / "recent"
    assert resolved.is_absolute()


def test_resolve_path_follows_symlinks(tmp_path):
    real = tmp_path / "real"
    real.write_text("a\n", encoding="utf-8")
    link = tmp_path / "link"
    link.symlink_to(real)
    assert resolve_path(link) == real.resolve()


def test_resolve_path_relative(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_path(Path("recent")) == tmp_path.resolve() / "recent"


def test_resolve_path_missing_parent(tmp_path):
    with pytest.raises(PathError):
        resolve_path(tmp_path / "missing" / "recent")


def test_resolve_path_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(PathError):
        resolve_path(blocker / "recent")
