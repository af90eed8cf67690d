"""Public API for redis dump repair."""

from .functions import repair, repair_bytes, repair_file, tokenize

__all__ = [
    "repair",
    "repair_bytes",
    "repair_file",
    "tokenize",
]
