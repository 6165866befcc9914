from __future__ import annotations

import argparse
import os
import re
import sys
from typing import List, Optional

from rich.markup import escape

from . import __version__
from .config import DEFAULT_COUNT, MAX_COUNT
from .errors import InvalidCount, RecentError
from .graph import build_graph
from .nodes import console
from .state import State


_COUNT_RE = re.compile(r"\+?[0-9]+")


class _Parser(argparse.ArgumentParser):
    # Usage errors share the "Error: ..." line and exit status 1.
    def error(self, message: str):
        _print_error(message)
        raise SystemExit(1)


def _print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/] {escape(message)}")


def parse_count(value: str) -> int:
    # same range as an unsigned 32-bit count
    if _COUNT_RE.fullmatch(value) and len(value.lstrip("+").lstrip("0")) <= 10:
        count = int(value)
        if count <= MAX_COUNT:
            return count
    raise InvalidCount("Count must be an integer.")


def _count_arg(value: str) -> int:
    try:
        return parse_count(value)
    except InvalidCount as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: Optional[List[str]] = None):
    p = _Parser(
        prog="dmenu-recent",
        description="Read a command from STDIN, move it to the top of the recent file, and echo it.",
    )
    p.add_argument("file", nargs="?", default=None, help="The file to use for the database (default: ~/.dmenu.recent)")
    p.add_argument("-c", "--count", type=_count_arg, default=DEFAULT_COUNT, help="The number of items to remember")
    p.add_argument("--no-output", action="store_true", help="Do not output anything after adding to the recent file.")
    p.add_argument("-v", "--verbose", action="store_true", help="Trace each step on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def _silence_stdout() -> None:
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    state: State = {
        "file_arg": args.file,
        "max_count": args.count,
        "no_output": args.no_output,
        "verbose": args.verbose,
    }
    app = build_graph()
    try:
        app.invoke(state)
    except RecentError as exc:
        _print_error(str(exc))
        raise SystemExit(1)
    except BrokenPipeError:
        # the reader went away after the file was written
        _silence_stdout()
    raise SystemExit(0)
