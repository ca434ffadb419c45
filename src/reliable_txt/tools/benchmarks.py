"""Performance benchmarking for the ReliableTXT codec.

This module times encode/decode round trips for every encoding kind over
generated texts and tracks process memory with psutil, so throughput of the
four encodings can be compared and regressions spotted over time.
"""

import gc
import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import psutil

from reliable_txt.character.encoding import ReliableTxtEncoding
from reliable_txt.codec import decode, encode
from reliable_txt.shared.config import BenchmarkConfig, ReliableTxtConfig
from reliable_txt.shared.logging import get_logger

# Repeating units for generated texts; each contains a line feed
TEST_CASE_UNITS: Dict[str, str] = {
    "ascii": "The quick brown fox jumps over the lazy dog.\n",
    "bmp": "Grüße, мир, 世界, \ufeffünïcödé\n",
    "supplementary": "𝔸𝔹ℂ 😀 𐍈 text\n",
}


def generate_text(test_case: str, size: int) -> str:
    """Build a text of exactly ``size`` code points from a test case unit."""
    unit = TEST_CASE_UNITS[test_case]
    repeats = size // len(unit) + 1
    return (unit * repeats)[:size]


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    encoding: str
    test_case: str
    processing_time_ms: float
    memory_used_mb: float
    characters_processed: int
    bytes_processed: int
    success: bool
    error_message: Optional[str] = None

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    @property
    def bytes_per_second(self) -> float:
        """Calculate encoded bytes processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.bytes_processed * 1000.0) / self.processing_time_ms

    @property
    def bytes_per_character(self) -> float:
        """Average encoded size of a character, preamble included."""
        if self.characters_processed <= 0:
            return 0.0
        return self.bytes_processed / self.characters_processed


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with statistical analysis."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "Codec Benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        """Add a benchmark result to the suite."""
        self.results.append(result)

    def get_results_by_encoding(self, encoding: str) -> List[BenchmarkResult]:
        """Get all results for a specific encoding."""
        return [r for r in self.results if r.encoding == encoding]

    def get_results_by_test_case(self, test_case: str) -> List[BenchmarkResult]:
        """Get all results for a specific test case."""
        return [r for r in self.results if r.test_case == test_case]

    def get_statistics(self, encoding: str, metric: str) -> Dict[str, float]:
        """Get statistical analysis of one metric for an encoding."""
        values = [
            getattr(result, metric)
            for result in self.get_results_by_encoding(encoding)
            if result.success
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
        """Generate benchmark report grouped by encoding and test case."""
        encodings = sorted(set(r.encoding for r in self.results))
        test_cases = sorted(set(r.test_case for r in self.results))

        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "encodings": encodings,
            "test_cases": test_cases,
            "summary": {},
            "failures": [],
        }

        for encoding in encodings:
            encoding_results = self.get_results_by_encoding(encoding)
            successful = [r for r in encoding_results if r.success]
            report["summary"][encoding] = {
                "total_runs": len(encoding_results),
                "successful_runs": len(successful),
                "success_rate": len(successful) / len(encoding_results),
                "throughput": self.get_statistics(encoding, "characters_per_second"),
                "bytes_per_character": self.get_statistics(
                    encoding, "bytes_per_character"
                ),
                "memory": self.get_statistics(encoding, "memory_used_mb"),
            }

        for result in self.results:
            if not result.success:
                report["failures"].append({
                    "encoding": result.encoding,
                    "test_case": result.test_case,
                    "error": result.error_message,
                })

        return report


class CodecBenchmark:
    """Round-trip benchmark of encode and decode for every encoding kind."""

    def __init__(
        self,
        config: Optional[BenchmarkConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        self.config = config or ReliableTxtConfig().benchmark
        self.logger = get_logger(__name__, correlation_id, "benchmark")
        self.process = psutil.Process()

    def _memory_mb(self) -> float:
        return self.process.memory_info().rss / (1024 * 1024)

    def run_case(
        self,
        encoding: ReliableTxtEncoding,
        test_case: str,
        text: str
    ) -> BenchmarkResult:
        """Time one encode/decode round trip and verify it reproduces the input."""
        if self.config.track_memory:
            gc.collect()
        memory_before = self._memory_mb() if self.config.track_memory else 0.0

        start_time = time.perf_counter()
        try:
            data = encode(text, encoding)
            decoded_encoding, decoded_text = decode(data)
        except Exception as e:
            self.logger.exception(
                "Benchmark round trip failed",
                extra={"encoding": encoding.value, "test_case": test_case}
            )
            return BenchmarkResult(
                encoding=encoding.value,
                test_case=test_case,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
                memory_used_mb=0.0,
                characters_processed=len(text),
                bytes_processed=0,
                success=False,
                error_message=str(e)
            )
        processing_time_ms = (time.perf_counter() - start_time) * 1000

        memory_after = self._memory_mb() if self.config.track_memory else 0.0
        round_trip_ok = decoded_encoding is encoding and decoded_text == text

        return BenchmarkResult(
            encoding=encoding.value,
            test_case=test_case,
            processing_time_ms=processing_time_ms,
            memory_used_mb=max(0.0, memory_after - memory_before),
            characters_processed=len(text),
            bytes_processed=len(data),
            success=round_trip_ok,
            error_message=None if round_trip_ok else "Round trip mismatch"
        )

    def run(self, suite_name: str = "Codec Benchmark") -> BenchmarkSuite:
        """Run every test case at every configured size for all encodings."""
        suite = BenchmarkSuite(suite_name=suite_name)
        self.logger.info(
            "Starting codec benchmark",
            extra={
                "iterations": self.config.iterations,
                "text_sizes": list(self.config.text_sizes),
            }
        )

        for size in self.config.text_sizes:
            for test_case in TEST_CASE_UNITS:
                text = generate_text(test_case, size)
                for encoding in ReliableTxtEncoding:
                    for _ in range(self.config.warmup_iterations):
                        decode(encode(text, encoding))
                    for _ in range(self.config.iterations):
                        suite.add_result(
                            self.run_case(encoding, f"{test_case}_{size}", text)
                        )

        self.logger.info(
            "Codec benchmark finished",
            extra={"total_results": len(suite.results)}
        )
        return suite
