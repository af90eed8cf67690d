"""Repair layer: rewrites a token stream as a replayable dump."""

from .rewriter import (
    ARGUMENT_ESCAPES,
    DumpRepairer,
    escape_argument,
    format_command,
)

__all__ = [
    "ARGUMENT_ESCAPES",
    "DumpRepairer",
    "escape_argument",
    "format_command",
]
