"""Tests for chainfmt.profiling: format profiling API."""

from chainfmt import Formatter, format_sequence
from chainfmt.profiling import (
    FormatAccumulator,
    get_format_accumulator,
    profiled_format,
)


class TestGetFormatAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_format_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_format():
            pass
        assert get_format_accumulator() is None


class TestProfiledFormat:
    def test_yields_accumulator(self) -> None:
        with profiled_format() as acc:
            assert isinstance(acc, FormatAccumulator)
            assert get_format_accumulator() is acc

    def test_records_session_and_substitutions(self) -> None:
        with profiled_format() as acc:
            result = (Formatter("%s is %d") % "Ada" % 36).materialize()
        assert acc.sessions == 1
        assert acc.substitutions == 2
        assert acc.output_length == len(result)

    def test_sequence_uses_one_session(self) -> None:
        with profiled_format() as acc:
            format_sequence("%d", range(5))
        assert acc.sessions == 1
        assert acc.substitutions == 5

    def test_total_duration_non_negative(self) -> None:
        with profiled_format() as acc:
            Formatter("x").materialize()
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = FormatAccumulator().summary()
        assert summary["sessions"] == 0
        assert summary["substitutions"] == 0
        assert summary["buffer_retries"] == 0
        assert summary["output_length"] == 0
        assert "total_ms" in summary
