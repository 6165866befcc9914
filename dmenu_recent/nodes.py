from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import default_file_path
from .errors import EmptyInput, InputError, PathError
from .history import load_history, resolve_path, save_history
from .state import State


console = Console(stderr=True, highlight=False, soft_wrap=True)


def _trace(state: State, message: str) -> None:
    if state.get("verbose"):
        console.print(f"[dim]{escape(message)}[/]")


def read_input(state: State) -> State:
    try:
        raw = sys.stdin.buffer.readline()
        if not raw:
            raise EmptyInput()
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        item = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputError("stream did not contain valid UTF-8") from exc
    except OSError as exc:
        raise InputError(f"Cannot read input: {exc.strerror or exc}") from exc
    _trace(state, f"[input] {item!r}")
    return {"item": item}


def resolve_file(state: State) -> State:
    file_arg = state.get("file_arg")
    if file_arg is None:
        path = default_file_path()
    elif not file_arg:
        raise PathError("Cannot resolve an empty path")
    else:
        path = Path(file_arg)
    recent_file = resolve_path(path)
    _trace(state, f"[file] {recent_file}")
    return {"recent_file": recent_file}


def load(state: State) -> State:
    # the submitted item always survives, even with --count 0
    max_count = max(state.get("max_count", 1), 1)
    entries = [state["item"]]
    loaded = load_history(entries, state["recent_file"], max_count)
    _trace(state, f"[load] {loaded} entries kept from history (cap {max_count})")
    return {"entries": entries, "loaded": loaded}


def write(state: State) -> State:
    save_history(state["entries"], state["recent_file"])
    _trace(state, f"[write] {len(state['entries'])} entries written")
    return {"written": True}


def report(state: State) -> State:
    print(state["item"], flush=True)
    return {"reported": True}
