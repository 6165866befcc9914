from __future__ import annotations

from pathlib import Path
from typing import List, Optional
from typing_extensions import TypedDict


class State(TypedDict, total=False):
    # settings, fixed for the run
    file_arg: Optional[str]
    max_count: int
    no_output: bool
    verbose: bool

    # input
    item: str

    # resolved target
    recent_file: Path

    # working list, most-recent-first
    entries: List[str]
    loaded: int
    written: bool
    reported: bool
