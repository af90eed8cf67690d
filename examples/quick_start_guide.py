#!/usr/bin/env python3
"""
Quick Start Guide for redis-dump-repair.

Shows the module-level API on a small dump that the redis-dump exporter could
not have written safely: a raw line break, a backslash and a double quote
inside a quoted value.
"""

import io
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from redis_dump_repair import DumpTokenizer, TokenizationError, repair, repair_bytes
from redis_dump_repair.tools import RepairBenchmark

DUMP = b"select 0\nset greeting 'hello\nworld'\nset path 'C:\\\\tmp \"x\"'\n"


def quick_start_example():
    """Tokenize and repair a small dump."""
    print("Step 1: Tokens")
    print("-" * 30)
    for token in DumpTokenizer(DUMP):
        print(f"{token.kind.name:8} {token.value!r}")

    print("\nStep 2: Repaired dump")
    print("-" * 30)
    sys.stdout.write(repair_bytes(DUMP).decode("latin-1"))

    print("\nStep 3: Metrics")
    print("-" * 30)
    result = repair(DUMP, io.BytesIO())
    for key, value in result.summary().items():
        print(f"{key}: {value}")

    print("\nStep 4: Malformed input")
    print("-" * 30)
    try:
        repair_bytes(b"set key 'unterminated\n")
    except TokenizationError as e:
        print(f"Error parsing input: {e}")


def benchmark_example():
    """Run a short benchmark."""
    print("\nStep 5: Benchmark")
    print("-" * 30)
    suite = RepairBenchmark(warmup_runs=1, benchmark_runs=3).run(["large_quoted"])
    stats = suite.get_statistics("large_quoted", "bytes_per_second")
    print(f"Throughput: {stats['mean'] / 1024 / 1024:.1f} MB/s")


if __name__ == "__main__":
    quick_start_example()
    benchmark_example()
