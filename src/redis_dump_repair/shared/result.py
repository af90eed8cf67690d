"""Result objects and diagnostic types for the repair pass.

A returned result always describes a completed pass; failures are raised, never
folded into a result.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    WARNING = auto()


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class RepairMetrics:
    """Counters collected while rewriting a dump."""

    bytes_read: int = 0
    bytes_written: int = 0
    lines: int = 0
    commands: int = 0
    arguments: int = 0
    processing_time_ms: float = 0.0

    @property
    def tokens(self) -> int:
        """Number of string and newline tokens consumed."""
        return self.commands + self.arguments + self.lines

    @property
    def bytes_per_second(self) -> float:
        """Calculate input bytes processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.bytes_read * 1000.0) / self.processing_time_ms


@dataclass
class RepairResult:
    """Outcome of a completed repair pass."""

    metrics: RepairMetrics
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    correlation_id: Optional[str] = None
    output_path: Optional[Path] = None

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Append a diagnostic entry to the result."""
        self.diagnostics.append(
            DiagnosticEntry(severity, message, component, details)
        )

    def summary(self) -> Dict[str, Any]:
        """Summarize the pass as a plain dictionary."""
        return {
            "bytes_read": self.metrics.bytes_read,
            "bytes_written": self.metrics.bytes_written,
            "lines": self.metrics.lines,
            "commands": self.metrics.commands,
            "arguments": self.metrics.arguments,
            "processing_time_ms": self.metrics.processing_time_ms,
            "diagnostics": [d.message for d in self.diagnostics],
        }
