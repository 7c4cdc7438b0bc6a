"""
Unit tests for range notation parsing.

Covers:
1. Bare, closed ("N-M") and open ("N+") ranges
2. Lenient number reading (grouping commas, trailing symbols, fractions)
3. Failures for non-numeric and decreasing ranges
"""

import pytest

from payout_tool.ranges import (
    Interval,
    NumberFormatError,
    RangeFormatError,
    parse_number,
    parse_range,
)


class TestParseNumber:
    """Lenient leading-number parsing"""

    def test_plain_integer(self) -> None:
        assert parse_number("42") == 42

    def test_grouping_separators(self) -> None:
        assert parse_number("1,000") == 1000
        assert parse_number("12,500,000") == 12500000

    def test_trailing_symbols_ignored(self) -> None:
        assert parse_number("10+") == 10
        assert parse_number("7 entries") == 7

    def test_leading_whitespace(self) -> None:
        assert parse_number(" 10") == 10

    def test_fraction_truncated(self) -> None:
        assert parse_number("2.9") == 2
        assert parse_number("-2.9") == -2

    def test_negative(self) -> None:
        assert parse_number("-5") == -5

    @pytest.mark.parametrize("text", ["", "abc", "+", "-", "x10"])
    def test_non_numeric_raises(self, text: str) -> None:
        with pytest.raises(NumberFormatError):
            parse_number(text)


class TestParseRange:
    """The three range notations"""

    @pytest.mark.parametrize("a,b", [(1, 1), (3, 10), (2, 3), (11, 100)])
    def test_closed_range(self, a: int, b: int) -> None:
        assert parse_range(f"{a}-{b}") == Interval(a, b)

    @pytest.mark.parametrize("a", [1, 10, 250])
    def test_open_range(self, a: int) -> None:
        r = parse_range(f"{a}+")
        assert r == Interval(a, None)
        assert r.unbounded

    @pytest.mark.parametrize("a", [1, 2, 100])
    def test_bare_number(self, a: int) -> None:
        r = parse_range(str(a))
        assert r == Interval(a, a)
        assert not r.unbounded

    def test_closed_range_with_grouping(self) -> None:
        assert parse_range("1,001-5,000") == Interval(1001, 5000)

    def test_spaces_around_separator(self) -> None:
        assert parse_range("3 - 10") == Interval(3, 10)

    def test_leading_minus_is_not_a_separator(self) -> None:
        assert parse_range("-5") == Interval(-5, -5)

    def test_dash_takes_precedence_over_plus(self) -> None:
        assert parse_range("3-10+") == Interval(3, 10)

    def test_numeric_cell_text(self) -> None:
        assert parse_range("100") == Interval(100, 100)

    @pytest.mark.parametrize("text", ["abc", "Range \\ Ranks", "5-", "a-5", "x+"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(RangeFormatError):
            parse_range(text)

    def test_malformed_chains_number_error(self) -> None:
        with pytest.raises(RangeFormatError) as exc:
            parse_range("abc")
        assert isinstance(exc.value.__cause__, NumberFormatError)

    def test_decreasing_range_raises(self) -> None:
        with pytest.raises(RangeFormatError):
            parse_range("10-3")
