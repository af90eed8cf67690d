"""Tests for the repair benchmark."""

from redis_dump_repair.api import repair_bytes
from redis_dump_repair.tools import (
    BenchmarkResult,
    BenchmarkSuite,
    RepairBenchmark,
    generate_dump,
)


class TestGenerateDump:
    """Tests for synthetic dumps."""

    def test_bare_dump(self):
        """Test a bare-string dump."""
        assert generate_dump(2) == b"SET key:0 value-0\nSET key:1 value-1\n"

    def test_quoted_dump_is_repairable(self):
        """Test that the quoted dump is valid input."""
        output = repair_bytes(generate_dump(3, quoted=True))
        assert output.count(b"\n") == 3
        assert b"\\x00" in output


class TestBenchmarkSuite:
    """Tests for result aggregation."""

    def test_statistics(self):
        """Test statistics over successful runs."""
        suite = BenchmarkSuite()
        suite.add_result(BenchmarkResult("a", 10.0, 0.0, 1000, 10, True))
        suite.add_result(BenchmarkResult("a", 20.0, 0.0, 1000, 10, True))
        suite.add_result(BenchmarkResult("a", 0.0, 0.0, 0, 0, False, "boom"))

        stats = suite.get_statistics("a", "processing_time_ms")
        assert stats["count"] == 2
        assert stats["mean"] == 15.0

        report = suite.generate_report()
        assert report["test_cases"] == ["a"]
        assert report["summary"]["a"]["successful_runs"] == 2

    def test_empty_statistics(self):
        """Test statistics for an unknown test case."""
        assert BenchmarkSuite().get_statistics("missing", "processing_time_ms") == {}


class TestRepairBenchmark:
    """Tests for running the benchmark."""

    def test_run_small_cases(self):
        """Test a short benchmark run."""
        benchmark = RepairBenchmark(warmup_runs=0, benchmark_runs=2)
        suite = benchmark.run(["small_bare", "small_quoted"])

        assert len(suite.results) == 4
        assert all(r.success for r in suite.results)
        assert all(r.tokens_generated > 0 for r in suite.results)
        assert all(r.memory_used_mb >= 0.0 for r in suite.results)

    def test_failed_case(self):
        """Test that malformed dumps are recorded as failures."""
        result = RepairBenchmark(warmup_runs=0).benchmark_case("bad", b"'open")
        assert not result.success
        assert "unterminated" in result.error_message
