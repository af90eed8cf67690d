"""Single-pass tokenizer for redis-dump command dumps.

A dump holds one command per line. Tokens on a line are separated by spaces and
are either bare strings drawn from a restricted alphabet or single-quoted
strings holding arbitrary bytes, where backslash and quote are escaped with a
backslash. The tokenizer is byte-oriented and never re-scans: once it has
returned the end-of-input token or raised, every further request replays that
terminal condition.
"""

import logging
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from redis_dump_repair.character import ByteCursor, SourceType
from redis_dump_repair.shared.config import RepairConfig
from redis_dump_repair.shared.errors import (
    EndOfInputError,
    InvalidEscapeError,
    MissingSeparatorError,
    TokenizationError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)

from .tokens import EOF_TOKEN, NEWLINE_TOKEN, Token, TokenKind

SPACE = ord(" ")
NEWLINE = ord("\n")
QUOTE = ord("'")
BACKSLASH = ord("\\")

BARE_STRING_BYTES = frozenset(
    b"abcdefghijklmnopqrstuvwxyz"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"0123456789"
    b"_:-"
)

# Byte following a backslash inside a quoted string -> byte copied to the value
QUOTED_ESCAPES: Mapping[int, int] = MappingProxyType({
    BACKSLASH: BACKSLASH,
    QUOTE: QUOTE,
})

logger = logging.getLogger(__name__)


class TokenizerState(Enum):
    """Lifecycle of a tokenizer."""

    SCANNING = auto()   # Tokens may still be requested
    DONE = auto()       # End-of-input token has been returned
    FAILED = auto()     # An error has been raised


def is_bare_string_byte(byte: int) -> bool:
    """Return whether ``byte`` may appear in an unquoted string."""
    return byte in BARE_STRING_BYTES


class DumpTokenizer:
    """Pull-based tokenizer over a dump's bytes.

    Example:
        >>> tokenizer = DumpTokenizer(b"set foo 'bar'\\n")
        >>> [token.value for token in tokenizer]
        [b'set', b'foo', b'bar', b'\\n']
    """

    def __init__(
        self,
        source: SourceType,
        config: Optional[RepairConfig] = None,
    ) -> None:
        """Initialize the tokenizer.

        Args:
            source: Binary file-like object, bytes, or an existing ByteCursor
            config: Repair configuration, used for the read buffer size
        """
        self.config = config or RepairConfig.default()
        if isinstance(source, ByteCursor):
            self._cursor = source
        else:
            self._cursor = ByteCursor(source, self.config.buffer_size)

        self._state = TokenizerState.SCANNING
        self._error: Optional[Exception] = None
        self._just_read_string = False

    @property
    def state(self) -> TokenizerState:
        return self._state

    @property
    def error(self) -> Optional[Exception]:
        """The stored terminal error, if the tokenizer has finished."""
        return self._error

    @property
    def position(self) -> int:
        """Number of input bytes consumed so far."""
        return self._cursor.position

    def next_token(self) -> Token:
        """Return the next token.

        Returns:
            A STRING or NEWLINE token, or EOF_TOKEN once the input is exhausted

        Raises:
            TokenizationError: If the input violates the dump grammar
            EndOfInputError: If called again after EOF_TOKEN was returned
            OSError: If reading the source fails
        """
        if self._state is not TokenizerState.SCANNING:
            raise self._error

        try:
            token = self._scan()
        except (TokenizationError, OSError) as e:
            self._state = TokenizerState.FAILED
            self._error = e
            logger.debug("Tokenization stopped: %s", e)
            raise

        if token.kind is TokenKind.EOF:
            self._state = TokenizerState.DONE
            self._error = EndOfInputError()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the end-of-input token."""
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    def _scan(self) -> Token:
        cursor = self._cursor
        while True:
            byte = cursor.read()
            if byte is None:
                return EOF_TOKEN

            if byte == SPACE:
                self._just_read_string = False
                continue
            if byte == NEWLINE:
                self._just_read_string = False
                return NEWLINE_TOKEN

            if byte == QUOTE:
                if self._just_read_string:
                    raise MissingSeparatorError(cursor.position - 1)
                self._just_read_string = True
                return self._scan_quoted(cursor.position - 1)

            if is_bare_string_byte(byte):
                # Offset here is one past the string's first byte
                if self._just_read_string:
                    raise MissingSeparatorError(cursor.position)
                self._just_read_string = True
                return self._scan_bare(byte)

            raise UnexpectedCharacterError(byte, cursor.position - 1)

    def _scan_quoted(self, start: int) -> Token:
        cursor = self._cursor
        value = bytearray()
        escaping = False
        while True:
            byte = cursor.read()
            if byte is None:
                raise UnterminatedStringError(start)

            if escaping:
                unescaped = QUOTED_ESCAPES.get(byte)
                if unescaped is None:
                    raise InvalidEscapeError(cursor.position - 2)
                value.append(unescaped)
                escaping = False
                continue

            if byte == BACKSLASH:
                escaping = True
            elif byte == QUOTE:
                return Token.string(value)
            else:
                value.append(byte)

    def _scan_bare(self, first: int) -> Token:
        cursor = self._cursor
        value = bytearray((first,))
        while True:
            byte = cursor.read()
            if byte is None:
                return Token.string(value)

            if is_bare_string_byte(byte):
                value.append(byte)
                continue

            if byte in (SPACE, NEWLINE):
                cursor.unread()
                return Token.string(value)

            raise UnexpectedCharacterError(byte, cursor.position - 1)
