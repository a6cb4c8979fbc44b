"""Tests for half-up rounding helpers."""

import pytest

from training_engine.math.rounding import round_half_up, round_to


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected", [(2.5, 3), (3.5, 4), (2.4, 2), (-2.5, -2), (-2.6, -3), (0.0, 0)]
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    def test_differs_from_builtin(self) -> None:
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3


class TestRoundTo:
    def test_one_decimal(self) -> None:
        assert round_to(31.578, 1) == pytest.approx(31.6)
        assert round_to(-16.666, 1) == pytest.approx(-16.7)
