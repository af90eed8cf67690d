"""Configuration for the repair pass.

The configuration is an immutable dataclass validated on construction, so a
single instance can be shared between the cursor, the rewriter and the CLI.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from .errors import ConfigValidationError

DEFAULT_COMMAND_WIDTH = 8
DEFAULT_BUFFER_SIZE = 8192
VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class RepairConfig:
    """Settings shared by every layer of the repair pass.

    Attributes:
        command_width: Minimum field width of the command name on each line
        buffer_size: Number of bytes read from the source at a time
        logging_level: Level name used when the CLI configures logging
        correlation_id: Optional correlation ID attached to log records
    """

    command_width: int = DEFAULT_COMMAND_WIDTH
    buffer_size: int = DEFAULT_BUFFER_SIZE
    logging_level: str = "WARNING"
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.command_width < 0:
            raise ConfigValidationError(
                "command_width must be >= 0",
                field_name="command_width",
                suggestions=[f"Use the default width of {DEFAULT_COMMAND_WIDTH}"],
            )
        if self.buffer_size <= 0:
            raise ConfigValidationError(
                "buffer_size must be > 0",
                field_name="buffer_size",
                suggestions=[f"Use the default size of {DEFAULT_BUFFER_SIZE}"],
            )
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {VALID_LOGGING_LEVELS}",
                field_name="logging_level",
            )

    @classmethod
    def default(cls) -> "RepairConfig":
        """Create the configuration with an eight-byte command column."""
        return cls()

    def override(self, **kwargs: Any) -> "RepairConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Configuration fields to override

        Returns:
            New validated RepairConfig instance

        Raises:
            ConfigValidationError: If a field is unknown or a value is invalid
        """
        try:
            return replace(self, **kwargs)
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration field: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)
