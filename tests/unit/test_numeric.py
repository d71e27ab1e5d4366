"""Unit tests for numeric helpers."""

import math

import pytest

from traderedge_app.utils.numeric import floor_to, round_half_up, to_float


class TestRoundHalfUp:
    """Test suite for half-up rounding."""

    def test_halves_round_up(self) -> None:
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(2.5, 0) == 3.0

    def test_builtin_round_differs(self) -> None:
        """Banker's rounding would give 2.0 here."""
        assert round(2.5) == 2
        assert round_half_up(2.5, 0) == 3.0

    def test_one_decimal(self) -> None:
        assert round_half_up(30.04, 1) == pytest.approx(30.0)


class TestFloorTo:
    """Test suite for truncation."""

    def test_truncates(self) -> None:
        assert floor_to(0.4499, 2) == pytest.approx(0.44)
        assert floor_to(44.9, 0) == 44.0


class TestToFloat:
    """Test suite for price parsing."""

    @pytest.mark.parametrize("value,expected", [
        (1.0845, 1.0845),
        ("1.0845", 1.0845),
        (" 150.5 ", 150.5),
        (2, 2.0),
    ])
    def test_parses_numbers(self, value, expected) -> None:
        assert to_float(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", True, math.nan, math.inf, [1.0]])
    def test_unusable_values_become_zero(self, value) -> None:
        assert to_float(value) == 0.0

    def test_trailing_garbage_is_rejected(self) -> None:
        """No numeric-prefix parsing: the whole string must be a number."""
        assert to_float("1.0845abc") == 0.0
