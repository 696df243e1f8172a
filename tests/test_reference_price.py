"""
Tests for reference price selection.
"""

from decimal import Decimal

import pytest

from mmbot.services.market_maker.implementations import select_reference_price
from mmbot.services.market_maker.models import ReferenceBase


class TestSelectReferencePrice:

    def test_bid_uses_highest_bid(self, snapshot):
        assert select_reference_price(ReferenceBase.BID, snapshot) == Decimal("100")

    def test_ask_uses_lowest_ask(self, snapshot):
        assert select_reference_price(ReferenceBase.ASK, snapshot) == Decimal("102")

    def test_last_uses_last_price(self, snapshot):
        assert select_reference_price(ReferenceBase.LAST, snapshot) == Decimal("101.5")

    def test_average_uses_mid_price(self, snapshot):
        assert select_reference_price(ReferenceBase.AVERAGE, snapshot) == Decimal("101")

    @pytest.mark.parametrize("base", [None, "BID", "bogus", 42])
    def test_unrecognised_values_fall_back_to_average(self, snapshot, base):
        """Raw strings and other values are not members, so they average silently."""
        assert select_reference_price(base, snapshot) == Decimal("101")

    def test_odd_spread_average_is_exact(self, make_snapshot):
        snap = make_snapshot(highest_bid="100", lowest_ask="101")
        assert select_reference_price(ReferenceBase.AVERAGE, snap) == Decimal("100.5")


class TestReferenceBaseParse:

    @pytest.mark.parametrize("raw, expected", [
        ("BID", ReferenceBase.BID),
        ("ask", ReferenceBase.ASK),
        (" Last ", ReferenceBase.LAST),
        ("AVERAGE", ReferenceBase.AVERAGE),
        ("MID", ReferenceBase.AVERAGE),
        (None, ReferenceBase.AVERAGE),
        (ReferenceBase.BID, ReferenceBase.BID),
    ])
    def test_parse(self, raw, expected):
        assert ReferenceBase.parse(raw) is expected

    def test_is_known(self):
        assert ReferenceBase.is_known("bid")
        assert not ReferenceBase.is_known("MID")
        assert not ReferenceBase.is_known(None)
