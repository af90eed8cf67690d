"""Token types produced by the dump tokenizer."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from redis_dump_repair.shared.errors import TokenValueError


class TokenKind(Enum):
    """Kinds of tokens in a dump."""

    INVALID = auto()    # Accompanies a failure, never returned on success
    STRING = auto()     # Bare or quoted string, unescaped
    NEWLINE = auto()    # End of a logical line
    EOF = auto()        # End of input


@dataclass(frozen=True)
class Token:
    """Immutable lexical unit.

    Only STRING and NEWLINE tokens carry a value.
    """

    kind: TokenKind
    raw: Optional[bytes] = None

    @classmethod
    def string(cls, value: bytes) -> "Token":
        """Create a STRING token holding ``value``."""
        return cls(TokenKind.STRING, bytes(value))

    @property
    def value(self) -> bytes:
        """The token's bytes.

        Raises:
            TokenValueError: For EOF and INVALID tokens
        """
        if self.kind in (TokenKind.INVALID, TokenKind.EOF):
            raise TokenValueError(f"cannot get value of token kind {self.kind.name}")
        return self.raw

    @property
    def has_value(self) -> bool:
        return self.kind in (TokenKind.STRING, TokenKind.NEWLINE)

    def __repr__(self) -> str:
        if self.has_value:
            return f"Token({self.kind.name}, {self.raw!r})"
        return f"Token({self.kind.name})"


INVALID_TOKEN = Token(TokenKind.INVALID)
NEWLINE_TOKEN = Token(TokenKind.NEWLINE, b"\n")
EOF_TOKEN = Token(TokenKind.EOF)
