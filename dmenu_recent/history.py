# history.py
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator, List

from .errors import HistoryWriteError, PathError


def resolve_path(path: Path) -> Path:
    """Return the absolute, symlink-free form of ``path``.

    The file itself may be missing (first run), but its parent directory
    has to exist.
    """
    try:
        parent = path.parent.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathError(f"Cannot resolve {path}: {getattr(exc, 'strerror', None) or exc}") from exc
    if not parent.is_dir():
        raise PathError(f"Cannot resolve {path}: {parent} is not a directory")
    try:
        return (parent / path.name).resolve()
    except (OSError, RuntimeError) as exc:
        raise PathError(f"Cannot resolve {path}: {exc}") from exc


def _read_lines(handle: BinaryIO) -> Iterator[str]:
    # Stops quietly at EOF or at the first line that can't be read or decoded.
    while True:
        try:
            raw = handle.readline()
            if not raw:
                return
            if raw.endswith(b"\n"):
                raw = raw[:-1]
            line = raw.decode("utf-8")
        except (OSError, UnicodeDecodeError):
            return
        yield line


def load_history(entries: List[str], path: Path, max_count: int) -> int:
    """Append the deduplicated contents of ``path`` to ``entries``.

    ``entries`` already holds the new item. Reading stops once the list
    holds ``max_count`` entries. A missing or unreadable file counts as an
    empty history. Returns how many entries came from the file.
    """
    before = len(entries)
    if before >= max_count:
        return 0
    try:
        handle = path.open("rb")
    except OSError:
        return 0

    with handle:
        for line in _read_lines(handle):
            if line not in entries:
                entries.append(line)
            if len(entries) >= max_count:
                break

    return len(entries) - before


def save_history(entries: List[str], path: Path) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            for entry in entries:
                handle.write(f"{entry}\n")
    except OSError as exc:
        raise HistoryWriteError(f"Cannot write {path}: {exc.strerror or exc}") from exc
