"""
Tests for ladder order construction.
"""

from decimal import Decimal

import pytest

from mmbot.adapters.exchanges import OrderSide
from mmbot.services.market_maker import MarketMakerError
from mmbot.services.market_maker.implementations import GridOrderBuilderImpl
from mmbot.services.market_maker.models import PairConfig, ReferenceBase


@pytest.fixture
def builder(make_config):
    return GridOrderBuilderImpl(make_config(grid_levels=2))


class TestLadderPrices:

    def test_innermost_level_average_reference(self, builder, snapshot):
        """bid 100 / ask 102 -> reference 101; level 0 is one interval away."""
        buy = builder.build_buy_order("XPR_XMD", snapshot, 0)
        sell = builder.build_sell_order("XPR_XMD", snapshot, 0)

        assert buy.side == OrderSide.BUY
        assert buy.price == Decimal("99.99")
        assert sell.side == OrderSide.SELL
        assert sell.price == Decimal("102.01")

    def test_second_level(self, builder, snapshot):
        assert builder.build_buy_order("XPR_XMD", snapshot, 1).price == Decimal("98.98")
        assert builder.build_sell_order("XPR_XMD", snapshot, 1).price == Decimal("103.02")

    def test_buy_rounds_down_and_sell_rounds_up(self, builder, make_snapshot):
        snap = make_snapshot(highest_bid="100", lowest_ask="101")

        # 100.5 * 0.99 = 99.495, 100.5 * 1.01 = 101.505
        assert builder.build_buy_order("XPR_XMD", snap, 0).price == Decimal("99.49")
        assert builder.build_sell_order("XPR_XMD", snap, 0).price == Decimal("101.51")

    def test_prices_move_outward_with_index(self, builder, snapshot):
        reference = builder.reference_price("XPR_XMD", snapshot)
        buys = [builder.build_buy_order("XPR_XMD", snapshot, i).price for i in range(6)]
        sells = [builder.build_sell_order("XPR_XMD", snapshot, i).price for i in range(6)]

        assert all(a > b for a, b in zip(buys, buys[1:]))
        assert all(a < b for a, b in zip(sells, sells[1:]))
        assert max(buys) <= reference <= min(sells)

    def test_prices_use_ask_precision(self, builder, snapshot):
        for i in range(4):
            assert builder.build_buy_order("XPR_XMD", snapshot, i).price.as_tuple().exponent == -2
            assert builder.build_sell_order("XPR_XMD", snapshot, i).price.as_tuple().exponent == -2

    def test_pair_base_and_interval_are_used(self, make_config, snapshot):
        config = make_config(pairs=[PairConfig("XPR_XMD", Decimal("0.02"), ReferenceBase.BID)])
        builder = GridOrderBuilderImpl(config)

        # reference 100 (highest bid)
        assert builder.build_buy_order("XPR_XMD", snapshot, 0).price == Decimal("98.00")
        assert builder.build_sell_order("XPR_XMD", snapshot, 0).price == Decimal("102.00")

    def test_unconfigured_symbol_uses_defaults(self, builder, snapshot):
        """0.01 interval and average reference."""
        assert builder.build_buy_order("OTHER_XMD", snapshot, 0).price == Decimal("99.99")

    def test_negative_index_rejected(self, builder, snapshot):
        with pytest.raises(ValueError):
            builder.build_buy_order("XPR_XMD", snapshot, -1)

    def test_buy_price_rounding_to_zero_is_rejected(self, builder, make_snapshot):
        snap = make_snapshot(highest_bid="0.004", lowest_ask="0.004", last_price="0.004")

        with pytest.raises(MarketMakerError, match="buy price for XPR_XMD level 0 rounds to 0"):
            builder.build_buy_order("XPR_XMD", snap, 0)

    def test_sell_still_built_when_buy_price_rounds_to_zero(self, builder, make_snapshot):
        snap = make_snapshot(highest_bid="0.004", lowest_ask="0.004", last_price="0.004")

        # 0.004 * 1.01 = 0.00404 -> 0.01
        assert builder.build_sell_order("XPR_XMD", snap, 0).price == Decimal("0.01")

    def test_ladder_reaching_zero_is_rejected(self, make_config, snapshot):
        config = make_config(pairs=[PairConfig("XPR_XMD", Decimal("0.5"), ReferenceBase.AVERAGE)])
        builder = GridOrderBuilderImpl(config)

        # 101 * (1 - 0.5 * 2) = 0
        assert builder.build_buy_order("XPR_XMD", snapshot, 0).price == Decimal("50.50")
        with pytest.raises(MarketMakerError, match="level 1"):
            builder.build_buy_order("XPR_XMD", snapshot, 1)


class TestLadderSizes:
    """Buy size is the adjusted ask-currency total, sell size is the bid-currency quantity."""

    def test_buy_submits_adjusted_total(self, builder, snapshot):
        buy = builder.build_buy_order("XPR_XMD", snapshot, 0)

        # min cost 1000 / 100 = 10; 10 / 99.99 -> 0.1001; 99.99 * 0.1001 -> 10.01
        assert buy.quantity == Decimal("10.01")

    def test_sell_submits_quantity(self, builder, snapshot):
        sell = builder.build_sell_order("XPR_XMD", snapshot, 0)

        # 10 / 102.01 = 0.09803 -> 0.0981
        assert sell.quantity == Decimal("0.0981")

    def test_sizes_cover_minimum_order(self, builder, snapshot, market):
        minimum = market.min_order_cost()
        for i in range(3):
            buy = builder.build_buy_order("XPR_XMD", snapshot, i)
            sell = builder.build_sell_order("XPR_XMD", snapshot, i)
            assert buy.quantity >= minimum
            assert sell.price * sell.quantity >= minimum

    def test_orders_carry_symbol_and_level(self, builder, snapshot):
        order = builder.build_sell_order("XPR_XMD", snapshot, 1)

        assert order.symbol == "XPR_XMD"
        assert order.level_index == 1
        assert order.is_sell_order()
        assert not order.is_buy_order()
