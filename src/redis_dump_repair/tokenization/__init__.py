"""Tokenization layer for redis dump repair.

Key Components:
    DumpTokenizer: Single-pass tokenizer over a dump's bytes
    Token: Immutable token value
    TokenKind: Enumeration of token kinds
    TokenizerState: Lifecycle states of a tokenizer
"""

from .tokenizer import (
    BARE_STRING_BYTES,
    QUOTED_ESCAPES,
    DumpTokenizer,
    TokenizerState,
    is_bare_string_byte,
)
from .tokens import EOF_TOKEN, INVALID_TOKEN, NEWLINE_TOKEN, Token, TokenKind

__all__ = [
    "BARE_STRING_BYTES",
    "DumpTokenizer",
    "EOF_TOKEN",
    "INVALID_TOKEN",
    "NEWLINE_TOKEN",
    "QUOTED_ESCAPES",
    "Token",
    "TokenKind",
    "TokenizerState",
    "is_bare_string_byte",
]
