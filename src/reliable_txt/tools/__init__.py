"""Developer tools for ReliableTXT processing."""

from .benchmarks import (
    BenchmarkResult,
    BenchmarkSuite,
    CodecBenchmark,
    generate_text,
)

__all__ = [
    "BenchmarkResult",
    "BenchmarkSuite",
    "CodecBenchmark",
    "generate_text",
]
