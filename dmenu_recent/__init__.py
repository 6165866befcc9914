"""Remember launcher picks in a small most-recently-used file."""

__version__ = "0.1.0"

from .cli import main

__all__ = ["main", "__version__"]
