"""Tests for result objects and error types."""

from pathlib import Path

import pytest

from redis_dump_repair.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    DumpRepairError,
    InputFileError,
    InvalidEscapeError,
    MissingSeparatorError,
    OutputFileError,
    RepairMetrics,
    RepairResult,
    TokenizationError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)


class TestRepairMetrics:
    """Tests for RepairMetrics."""

    def test_derived_values(self):
        """Test throughput and token totals."""
        metrics = RepairMetrics(
            bytes_read=2000, lines=2, commands=2, arguments=3,
            processing_time_ms=500.0,
        )
        assert metrics.bytes_per_second == 4000.0
        assert metrics.tokens == 7

    def test_zero_time(self):
        """Test throughput without elapsed time."""
        assert RepairMetrics(bytes_read=10).bytes_per_second == 0.0


class TestRepairResult:
    """Tests for RepairResult."""

    def test_summary(self):
        """Test the dictionary summary."""
        result = RepairResult(metrics=RepairMetrics(lines=1), output_path=Path("x"))
        result.add_diagnostic(DiagnosticSeverity.WARNING, "done", "test")

        summary = result.summary()
        assert summary["lines"] == 1
        assert summary["diagnostics"] == ["done"]

    def test_diagnostic_validation(self):
        """Test that diagnostics need a message and component."""
        with pytest.raises(ValueError, match="message cannot be empty"):
            DiagnosticEntry(DiagnosticSeverity.WARNING, "", "test")
        with pytest.raises(ValueError, match="component cannot be empty"):
            DiagnosticEntry(DiagnosticSeverity.WARNING, "msg", "")


class TestErrors:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize("error", [
        UnexpectedCharacterError(0x7e, 1),
        InvalidEscapeError(2),
        MissingSeparatorError(3),
        UnterminatedStringError(4),
    ])
    def test_grammar_errors(self, error):
        """Test that grammar errors carry offsets and share a base class."""
        assert isinstance(error, TokenizationError)
        assert isinstance(error, DumpRepairError)
        assert error.offset is not None
        assert str(error).endswith(f"position {error.offset}")

    def test_file_errors(self):
        """Test wrapping of OSError."""
        cause = PermissionError("denied")
        error = InputFileError("in.txt", cause)
        assert error.path == Path("in.txt")
        assert error.cause is cause
        assert error.action == "opening input file"
        assert str(error) == "denied"
        assert OutputFileError("o", cause, "writing to output file").action == (
            "writing to output file"
        )
