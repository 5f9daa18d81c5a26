"""Tests for the snprintf bridge to host formatting."""

import pytest

from chainfmt.native import render_directive, snprintf, to_host_directive


class TestToHostDirective:
    @pytest.mark.parametrize(
        ("directive", "expected"),
        [
            ("%d", "%d"),
            ("%ld", "%d"),
            ("%lld", "%d"),
            ("%hhu", "%u"),
            ("%zu", "%u"),
            ("%-08.3Lf", "%-08.3f"),
            ("%p", "%#x"),
            ("%12p", "%#12x"),
        ],
    )
    def test_translation(self, directive: str, expected: str) -> None:
        assert to_host_directive(directive) == expected


class TestRenderDirective:
    def test_integer_with_length_modifier(self) -> None:
        assert render_directive("%lld", 2**40) == str(2**40)

    def test_pointer(self) -> None:
        assert render_directive("%p", 0xDEADBEEF) == "0xdeadbeef"

    def test_null_pointer(self) -> None:
        assert render_directive("%p", None) == "(nil)"
        assert render_directive("%p", 0) == "(nil)"

    def test_null_pointer_keeps_width(self) -> None:
        assert render_directive("%8p", None) == "   (nil)"
        assert render_directive("%-8p", None) == "(nil)   "

    def test_char_from_code_point(self) -> None:
        assert render_directive("%c", 65) == "A"


class TestSnprintf:
    def test_fits(self) -> None:
        assert snprintf(16, "%d", 123) == ("123", 3)

    def test_truncates_leaving_terminator_slot(self) -> None:
        assert snprintf(4, "%d", 123456) == ("123", 6)

    def test_zero_size_reports_length_only(self) -> None:
        assert snprintf(0, "%s", "abc") == ("", 3)

    def test_type_error_is_negative(self) -> None:
        assert snprintf(16, "%d", "abc") == ("", -1)

    def test_star_width_is_negative(self) -> None:
        assert snprintf(16, "%*d", 5) == ("", -1)

    def test_not_a_directive_is_negative(self) -> None:
        assert snprintf(16, "", 1) == ("", -1)
        assert snprintf(16, "d", 1) == ("", -1)

    def test_code_point_overflow_is_negative(self) -> None:
        assert snprintf(16, "%c", 0x110000)[1] == -1
