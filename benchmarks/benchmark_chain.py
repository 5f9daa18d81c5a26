"""Benchmark chained formatting vs the native % operator.

Run with:
    pytest benchmarks/benchmark_chain.py -v --benchmark-only
"""

try:
    import pytest

    from chainfmt import Formatter, format_sequence

    ROW = "%-12s %6d %8.3f"

    @pytest.mark.benchmark(group="format-row")
    def test_benchmark_chained_rows(benchmark, record_values):
        """Chained substitution, one session per row."""

        def run():
            for name, count, ratio in record_values:
                (Formatter(ROW) % name % count % ratio).materialize()

        benchmark(run)

    @pytest.mark.benchmark(group="format-row")
    def test_benchmark_native_rows(benchmark, record_values):
        """Native % operator (baseline for ratio)."""

        def run():
            for row in record_values:
                ROW % row

        benchmark(run)

    @pytest.mark.benchmark(group="format-sequence")
    def test_benchmark_format_sequence(benchmark, long_values):
        """One session reused across a sequence with buffer retries."""
        benchmark(format_sequence, "[%s]", long_values)

    @pytest.mark.benchmark(group="format-sequence")
    def test_benchmark_native_join(benchmark, long_values):
        """str.join over native renderings (baseline for ratio)."""
        benchmark(lambda: ", ".join("[%s]" % v for v in long_values))

except ImportError:
    pass  # pytest not available
