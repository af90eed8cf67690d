"""Performance benchmarking for the repair pass.

This module measures repair throughput and resident memory over synthetic
dumps, so that performance regressions in the tokenizer or the rewriter show up
over time.
"""

import gc
import io
import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import psutil

from redis_dump_repair.api import repair
from redis_dump_repair.shared import DumpRepairError, RepairConfig, get_logger


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    test_case: str
    processing_time_ms: float
    memory_used_mb: float
    bytes_processed: int
    tokens_generated: int
    success: bool
    error_message: Optional[str] = None

    @property
    def bytes_per_second(self) -> float:
        """Calculate input bytes processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.bytes_processed * 1000.0) / self.processing_time_ms

    @property
    def tokens_per_second(self) -> float:
        """Calculate tokens generated per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.tokens_generated * 1000.0) / self.processing_time_ms


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with statistical analysis."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "Repair Benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        """Add a benchmark result to the suite."""
        self.results.append(result)

    def get_results_by_test_case(self, test_case: str) -> List[BenchmarkResult]:
        """Get all results for a specific test case."""
        return [r for r in self.results if r.test_case == test_case]

    def get_statistics(self, test_case: str, metric: str) -> Dict[str, float]:
        """Get statistical analysis of one metric for a test case."""
        values = [
            getattr(r, metric) for r in self.get_results_by_test_case(test_case)
            if r.success
        ]
        if not values:
            return {}

        return {
            "min": min(values),
            "max": max(values),
            "mean": statistics.mean(values),
            "median": statistics.median(values),
            "stdev": statistics.stdev(values) if len(values) > 1 else 0.0,
            "count": len(values)
        }

    def generate_report(self) -> Dict[str, Any]:
        """Generate a benchmark report grouped by test case."""
        test_cases = sorted(set(r.test_case for r in self.results))

        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "test_cases": test_cases,
            "summary": {},
        }

        for test_case in test_cases:
            case_results = self.get_results_by_test_case(test_case)
            successful = [r for r in case_results if r.success]
            report["summary"][test_case] = {
                "total_runs": len(case_results),
                "successful_runs": len(successful),
                "throughput": self.get_statistics(test_case, "bytes_per_second"),
                "processing_time_ms": self.get_statistics(
                    test_case, "processing_time_ms"
                ),
                "memory": self.get_statistics(test_case, "memory_used_mb"),
            }

        return report


def generate_dump(lines: int, quoted: bool = False) -> bytes:
    """Generate a synthetic dump with ``lines`` SET commands.

    With ``quoted``, values are single-quoted and hold the bytes the repair
    pass has to escape.
    """
    out = bytearray()
    for i in range(lines):
        if quoted:
            out += b"SET 'key:%d' 'line\nbreak\r\\\\ \"q\" \x00 \\'%d\\''\n" % (i, i)
        else:
            out += b"SET key:%d value-%d\n" % (i, i)
    return bytes(out)


class RepairBenchmark:
    """Repair throughput and memory benchmark."""

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        warmup_runs: int = 3,
        benchmark_runs: int = 10,
        config: Optional[RepairConfig] = None,
    ) -> None:
        """Initialize benchmark.

        Args:
            correlation_id: Optional correlation ID for tracking
            warmup_runs: Number of warmup runs before benchmarking
            benchmark_runs: Number of benchmark runs per test case
            config: Repair configuration used for every run
        """
        self.correlation_id = correlation_id
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.config = config or RepairConfig(correlation_id=correlation_id)
        self.logger = get_logger(__name__, correlation_id, "benchmark")
        self.test_cases = self._create_test_cases()

    def _create_test_cases(self) -> Dict[str, bytes]:
        return {
            "small_bare": generate_dump(10),
            "small_quoted": generate_dump(10, quoted=True),
            "large_bare": generate_dump(10000),
            "large_quoted": generate_dump(10000, quoted=True),
        }

    def _measure_memory_usage(self) -> float:
        """Get current memory usage in MB."""
        process = psutil.Process()
        return process.memory_info().rss / 1024 / 1024

    def benchmark_case(self, test_case: str, dump: bytes) -> BenchmarkResult:
        """Run a single timed repair pass over ``dump``."""
        gc.collect()
        memory_before = self._measure_memory_usage()
        start_time = time.time()

        try:
            result = repair(dump, io.BytesIO(), self.config)
            success = True
            error_message = None
            tokens_generated = result.metrics.tokens
        except DumpRepairError as e:
            success = False
            error_message = str(e)
            tokens_generated = 0

        processing_time = (time.time() - start_time) * 1000
        memory_used = max(0.0, self._measure_memory_usage() - memory_before)

        return BenchmarkResult(
            test_case=test_case,
            processing_time_ms=processing_time,
            memory_used_mb=memory_used,
            bytes_processed=len(dump),
            tokens_generated=tokens_generated,
            success=success,
            error_message=error_message,
        )

    def run(self, test_cases: Optional[List[str]] = None) -> BenchmarkSuite:
        """Run the benchmark over the selected test cases.

        Args:
            test_cases: Names of test cases to run, all of them by default

        Returns:
            BenchmarkSuite holding one result per timed run
        """
        suite = BenchmarkSuite()
        selected = test_cases or list(self.test_cases)

        for name in selected:
            dump = self.test_cases[name]
            for _ in range(self.warmup_runs):
                self.benchmark_case(name, dump)
            for _ in range(self.benchmark_runs):
                suite.add_result(self.benchmark_case(name, dump))

            self.logger.info(
                "Benchmarked test case",
                extra={
                    "test_case": name,
                    "throughput": suite.get_statistics(name, "bytes_per_second"),
                }
            )

        return suite
