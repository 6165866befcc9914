import os
from pathlib import Path

DEFAULT_FILENAME = ".dmenu.recent"
DEFAULT_COUNT = 6


def default_file_path() -> Path:
    home = os.getenv("HOME") or "./"
    return Path(home) / DEFAULT_FILENAME
# largest count accepted on the command line (u32)
MAX_COUNT = 4294967295
