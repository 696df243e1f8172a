"""
Tests for fixed-point rounding helpers.
"""

from decimal import Decimal

import pytest

from mmbot.services.market_maker.implementations.precision import (
    quantity_and_adjusted_total,
    round_down,
    round_up,
)


class TestRounding:
    """Round up / round down to a number of decimal places."""

    def test_round_up_moves_away_from_zero(self):
        assert round_up(Decimal("1.231"), 2) == Decimal("1.24")

    def test_round_down_truncates(self):
        assert round_down(Decimal("1.239"), 2) == Decimal("1.23")

    def test_exact_values_are_unchanged(self):
        assert round_up(Decimal("1.23"), 2) == Decimal("1.23")
        assert round_down(Decimal("1.23"), 2) == Decimal("1.23")

    def test_zero_places(self):
        assert round_up(Decimal("2.1"), 0) == Decimal("3")
        assert round_down(Decimal("2.9"), 0) == Decimal("2")

    def test_result_has_requested_exponent(self):
        assert round_up(Decimal("5"), 4).as_tuple().exponent == -4

    def test_negative_places_rejected(self):
        with pytest.raises(ValueError):
            round_up(Decimal("1"), -1)


class TestQuantityAndAdjustedTotal:
    """Quantity is rounded up, then the notional is recomputed."""

    def test_quantity_rounded_up_and_total_recomputed(self):
        result = quantity_and_adjusted_total(Decimal("99.99"), Decimal("10"), 4, 2)

        # 10 / 99.99 = 0.100010001...
        assert result.quantity == Decimal("0.1001")
        # 99.99 * 0.1001 = 10.008999
        assert result.adjusted_total == Decimal("10.01")

    def test_notional_never_below_target(self):
        price = Decimal("0.0021")
        target = Decimal("10")

        result = quantity_and_adjusted_total(price, target, 4, 6)

        assert result.quantity == Decimal("4761.9048")
        assert price * result.quantity >= target
        assert result.adjusted_total == Decimal("10.000001")

    def test_adjusted_total_respects_cost_precision(self):
        for price in ("0.0021", "1.337", "99.99", "64250.5"):
            result = quantity_and_adjusted_total(Decimal(price), Decimal("10"), 8, 6)
            assert result.adjusted_total.as_tuple().exponent >= -6
            assert result.quantity.as_tuple().exponent >= -8

    def test_exact_division_keeps_target(self):
        result = quantity_and_adjusted_total(Decimal("2"), Decimal("10"), 4, 2)

        assert result.quantity == Decimal("5")
        assert result.adjusted_total == Decimal("10")
