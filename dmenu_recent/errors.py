from __future__ import annotations


class RecentError(Exception):
    """Base class for failures reported as ``Error: ...`` with exit status 1."""


class EmptyInput(RecentError):
    def __init__(self) -> None:
        super().__init__("Expected input, but got nothing.")


class PathError(RecentError):
    pass


class InvalidCount(RecentError):
    pass


class HistoryWriteError(RecentError):
    pass


class InputError(RecentError):
    pass
