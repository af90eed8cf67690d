"""Developer tools for redis dump repair."""

from .benchmarks import (
    BenchmarkResult,
    BenchmarkSuite,
    RepairBenchmark,
    generate_dump,
)

__all__ = [
    "BenchmarkResult",
    "BenchmarkSuite",
    "RepairBenchmark",
    "generate_dump",
]
