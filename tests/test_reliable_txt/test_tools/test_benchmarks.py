"""Tests for codec benchmarking."""

import pytest

from reliable_txt.character.encoding import ReliableTxtEncoding
from reliable_txt.shared.config import BenchmarkConfig, ReliableTxtConfig
from reliable_txt.tools.benchmarks import (
    TEST_CASE_UNITS,
    BenchmarkResult,
    BenchmarkSuite,
    CodecBenchmark,
    generate_text,
)


def _result(encoding="utf-8", time_ms=10.0, success=True, chars=1000, data=1003):
    return BenchmarkResult(
        encoding=encoding,
        test_case="ascii_1000",
        processing_time_ms=time_ms,
        memory_used_mb=0.5,
        characters_processed=chars,
        bytes_processed=data,
        success=success,
        error_message=None if success else "failed"
    )


class TestGenerateText:
    """Test benchmark text generation."""

    @pytest.mark.parametrize("test_case", list(TEST_CASE_UNITS))
    def test_exact_size(self, test_case):
        """Test that generated texts have the requested length."""
        assert len(generate_text(test_case, 137)) == 137

    def test_supplementary_text_has_astral_characters(self):
        """Test that the supplementary case exercises surrogate pairs."""
        text = generate_text("supplementary", 50)

        assert any(ord(char) > 0xFFFF for char in text)


class TestBenchmarkResult:
    """Test derived benchmark metrics."""

    def test_rates(self):
        """Test throughput and size ratios."""
        result = _result(time_ms=500.0, chars=1000, data=2000)

        assert result.characters_per_second == 2000.0
        assert result.bytes_per_second == 4000.0
        assert result.bytes_per_character == 2.0

    def test_zero_time_and_size(self):
        """Test guards against division by zero."""
        result = _result(time_ms=0.0, chars=0)

        assert result.characters_per_second == 0.0
        assert result.bytes_per_second == 0.0
        assert result.bytes_per_character == 0.0


class TestBenchmarkSuite:
    """Test statistics and reports."""

    def test_statistics(self):
        """Test statistics over successful results."""
        suite = BenchmarkSuite()
        suite.add_result(_result(time_ms=10.0))
        suite.add_result(_result(time_ms=20.0))
        suite.add_result(_result(time_ms=30.0, success=False))

        stats = suite.get_statistics("utf-8", "processing_time_ms")

        assert stats["count"] == 2
        assert stats["min"] == 10.0
        assert stats["max"] == 20.0
        assert stats["mean"] == 15.0

    def test_statistics_unknown_encoding(self):
        """Test that unknown encodings give empty statistics."""
        assert BenchmarkSuite().get_statistics("utf-32", "processing_time_ms") == {}

    def test_report(self):
        """Test report structure and failure listing."""
        suite = BenchmarkSuite(suite_name="unit")
        suite.add_result(_result())
        suite.add_result(_result(encoding="utf-16", success=False))

        report = suite.generate_report()

        assert report["suite_name"] == "unit"
        assert report["total_results"] == 2
        assert report["encodings"] == ["utf-16", "utf-8"]
        assert report["summary"]["utf-8"]["success_rate"] == 1.0
        assert report["summary"]["utf-16"]["success_rate"] == 0.0
        assert report["failures"] == [
            {"encoding": "utf-16", "test_case": "ascii_1000", "error": "failed"}
        ]


@pytest.mark.performance
class TestCodecBenchmark:
    """Test running the codec benchmark."""

    def test_run_covers_every_encoding_and_case(self):
        """Test a small benchmark run end to end."""
        config = BenchmarkConfig(
            iterations=2, warmup_iterations=1, text_sizes=[64], track_memory=True
        )

        suite = CodecBenchmark(config).run()

        expected = len(ReliableTxtEncoding) * len(TEST_CASE_UNITS) * 2
        assert len(suite.results) == expected
        assert all(result.success for result in suite.results)
        assert suite.generate_report()["failures"] == []

    def test_run_case_bytes_include_preamble(self):
        """Test the byte count of a single round trip."""
        benchmark = CodecBenchmark(ReliableTxtConfig.quick().benchmark)

        result = benchmark.run_case(ReliableTxtEncoding.UTF_32, "ascii_3", "abc")

        assert result.success
        assert result.bytes_processed == 16
        assert result.memory_used_mb == 0.0

    def test_run_case_reports_failures(self):
        """Test that codec errors are recorded, not raised."""
        benchmark = CodecBenchmark(ReliableTxtConfig.quick().benchmark)

        result = benchmark.run_case(ReliableTxtEncoding.UTF_8, "broken", "a\ud800")

        assert result.success is False
        assert "Invalid code point" in result.error_message
