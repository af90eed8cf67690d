"""Byte cursor over a binary source with a single byte of pushback.

The cursor owns its own read buffer and lookahead slot, so any object with a
``read(n)`` method works as a source regardless of how it buffers internally.
"""

import io
from typing import BinaryIO, Optional, Union

from redis_dump_repair.shared.config import DEFAULT_BUFFER_SIZE
from redis_dump_repair.shared.errors import PushbackError

# Type definitions for input data
SourceType = Union[bytes, bytearray, memoryview, BinaryIO]


class ByteCursor:
    """Sequential byte reader that counts consumed bytes.

    Attributes:
        position: Number of bytes consumed so far. Pushing a byte back
            decrements it again.
    """

    def __init__(
        self, source: SourceType, buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        """Initialize the cursor.

        Args:
            source: Binary file-like object or bytes-like object
            buffer_size: Number of bytes requested from the source per read
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        if buffer_size <= 0:
            raise ValueError("buffer_size must be > 0")

        self._source = source
        self._buffer_size = buffer_size
        self._buffer = b""
        self._index = 0
        self._last: Optional[int] = None
        self._pushback: Optional[int] = None
        self._exhausted = False
        self.position = 0

    def read(self) -> Optional[int]:
        """Consume and return the next byte, or ``None`` at end of input.

        Raises:
            OSError: If the underlying source fails
        """
        if self._pushback is not None:
            byte = self._pushback
            self._pushback = None
        else:
            byte = self._next_byte()
            if byte is None:
                self._last = None
                return None

        self._last = byte
        self.position += 1
        return byte

    def unread(self) -> None:
        """Push the most recently read byte back onto the stream.

        Raises:
            PushbackError: If there is no byte to push back, or one is
                already pushed back
        """
        if self._pushback is not None:
            raise PushbackError("only one byte can be pushed back at a time")
        if self._last is None:
            raise PushbackError("no byte has been read since the last pushback")

        self._pushback = self._last
        self._last = None
        self.position -= 1

    def _next_byte(self) -> Optional[int]:
        if self._index >= len(self._buffer):
            if self._exhausted:
                return None
            chunk = self._source.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
                return None
            self._buffer = chunk
            self._index = 0

        byte = self._buffer[self._index]
        self._index += 1
        return byte
