"""Exception hierarchy for redis dump repair.

Every failure is terminal for the current pass. Grammar violations carry the
byte offset at which they were detected; contract violations signal programming
errors rather than malformed input.
"""

from pathlib import Path
from typing import List, Optional, Union


class DumpRepairError(Exception):
    """Base exception for all repair errors."""


class TokenizationError(DumpRepairError):
    """Raised when the dump violates the token grammar."""

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


class UnexpectedCharacterError(TokenizationError):
    """A byte that cannot start or continue a token."""

    def __init__(self, character: int, offset: int) -> None:
        super().__init__(
            f"unexpected character 0x{character:x} at position {offset}", offset
        )
        self.character = character


class InvalidEscapeError(TokenizationError):
    """A backslash in a quoted string not followed by a backslash or quote."""

    def __init__(self, offset: int) -> None:
        super().__init__(
            f"unescaped backslash or invalid escape sequence at position {offset}",
            offset,
        )


class MissingSeparatorError(TokenizationError):
    """A string that starts right after another string."""

    def __init__(self, offset: int) -> None:
        super().__init__(
            f"expected space or newline before string at position {offset}", offset
        )


class UnterminatedStringError(TokenizationError, EOFError):
    """End of input inside a quoted string."""

    def __init__(self, offset: int) -> None:
        super().__init__(
            f"unterminated quoted string starting at position {offset}", offset
        )


class EndOfInputError(TokenizationError, EOFError):
    """The tokenizer was queried after it returned the end-of-input token."""

    def __init__(self) -> None:
        super().__init__("end of input")


class ContractError(DumpRepairError):
    """A caller broke the usage contract of a component."""


class TokenValueError(ContractError, ValueError):
    """The value of a valueless token was requested."""


class PushbackError(ContractError):
    """More than one byte was pushed back without an intervening read."""


class _FileError(DumpRepairError):
    """Wraps an ``OSError`` raised while accessing one of the pass's files."""

    default_action = "accessing file"

    def __init__(
        self, path: Union[str, Path], cause: OSError, action: Optional[str] = None
    ) -> None:
        super().__init__(str(cause))
        self.path = Path(path)
        self.cause = cause
        self.action = action or self.default_action


class InputFileError(_FileError):
    """The input dump could not be opened or read."""

    default_action = "opening input file"


class OutputFileError(_FileError):
    """The output file could not be created or written."""

    default_action = "creating output file"


class ConfigError(DumpRepairError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
