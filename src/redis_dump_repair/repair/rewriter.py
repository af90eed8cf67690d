"""Token-stream rewriter that produces a replayable dump.

The first string on each line is the command name and is written padded to a
fixed width. Every further string is an argument, written after a single space
as a double-quoted string in which line breaks, backslashes, double quotes and
NUL bytes are escaped.
"""

import time
from types import MappingProxyType
from typing import BinaryIO, Mapping, Optional, Tuple

from redis_dump_repair.shared.config import DEFAULT_COMMAND_WIDTH, RepairConfig
from redis_dump_repair.shared.logging import get_logger
from redis_dump_repair.shared.result import RepairMetrics
from redis_dump_repair.tokenization import DumpTokenizer, TokenKind

MS_PER_SECOND = 1000

# Byte in an argument -> bytes written in its place
ARGUMENT_ESCAPES: Mapping[int, bytes] = MappingProxyType({
    ord("\n"): b"\\n",
    ord("\r"): b"\\r",
    ord("\\"): b"\\\\",
    ord('"'): b'\\"',
    0x00: b"\\x00",
})

_ENCODE_TABLE: Tuple[bytes, ...] = tuple(
    ARGUMENT_ESCAPES.get(byte, bytes((byte,))) for byte in range(256)
)


def format_command(name: bytes, width: int = DEFAULT_COMMAND_WIDTH) -> bytes:
    """Left-justify a command name to ``width`` bytes without truncating it."""
    return name.ljust(width, b" ")


def escape_argument(value: bytes) -> bytes:
    """Return ``value`` as a double-quoted, escaped argument."""
    return b'"' + b"".join(_ENCODE_TABLE[byte] for byte in value) + b'"'


class DumpRepairer:
    """Rewrites a tokenized dump onto a binary sink.

    Output is written token by token. If the tokenizer or the sink fails, the
    error propagates and whatever was already written stays in the sink.
    """

    def __init__(
        self,
        tokenizer: DumpTokenizer,
        sink: BinaryIO,
        config: Optional[RepairConfig] = None,
    ) -> None:
        """Initialize the repairer.

        Args:
            tokenizer: Tokenizer positioned at the start of the dump
            sink: Binary file-like object receiving the repaired dump
            config: Repair configuration, defaults to the tokenizer's
        """
        self.tokenizer = tokenizer
        self.sink = sink
        self.config = config or tokenizer.config
        self.logger = get_logger(__name__, self.config.correlation_id, "repairer")
        self.metrics = RepairMetrics()
        self._at_line_start = True

    def run(self) -> RepairMetrics:
        """Consume every token and write the repaired dump.

        Returns:
            RepairMetrics for the completed pass

        Raises:
            TokenizationError: If the dump is malformed
            OSError: If reading the source or writing the sink fails
        """
        start_time = time.time()

        while True:
            token = self.tokenizer.next_token()

            if token.kind is TokenKind.EOF:
                break

            if token.kind is TokenKind.NEWLINE:
                self._write(token.value)
                self.metrics.lines += 1
                self._at_line_start = True
            elif self._at_line_start:
                self._write(format_command(token.value, self.config.command_width))
                self.metrics.commands += 1
                self._at_line_start = False
            else:
                self._write(b" " + escape_argument(token.value))
                self.metrics.arguments += 1

        self.metrics.bytes_read = self.tokenizer.position
        self.metrics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
        self.logger.debug(
            "Rewrote dump",
            extra={
                "lines": self.metrics.lines,
                "commands": self.metrics.commands,
                "arguments": self.metrics.arguments,
            }
        )
        return self.metrics

    @property
    def ended_mid_line(self) -> bool:
        """Whether the last line written lacks a terminating newline."""
        return not self._at_line_start

    def _write(self, data: bytes) -> None:
        self.sink.write(data)
        self.metrics.bytes_written += len(data)
