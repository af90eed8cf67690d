"""Shared utilities for redis dump repair.

This module provides the configuration object, result types, exception
hierarchy and logging helpers used across all processing layers.
"""

from .config import RepairConfig
from .errors import (
    ConfigError,
    ConfigValidationError,
    ContractError,
    DumpRepairError,
    EndOfInputError,
    InputFileError,
    InvalidEscapeError,
    MissingSeparatorError,
    OutputFileError,
    PushbackError,
    TokenizationError,
    TokenValueError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from .logging import CorrelationLogger, configure_logging, get_logger
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    RepairMetrics,
    RepairResult,
)

__all__ = [
    "RepairConfig",
    "ConfigError",
    "ConfigValidationError",
    "ContractError",
    "DumpRepairError",
    "EndOfInputError",
    "InputFileError",
    "InvalidEscapeError",
    "MissingSeparatorError",
    "OutputFileError",
    "PushbackError",
    "TokenizationError",
    "TokenValueError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "RepairMetrics",
    "RepairResult",
]
