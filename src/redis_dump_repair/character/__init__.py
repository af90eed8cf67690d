"""Byte processing layer for redis dump repair.

This module provides the byte cursor the tokenizer reads from.
"""

from .stream import ByteCursor, SourceType

__all__ = [
    "ByteCursor",
    "SourceType",
]
