"""Pytest configuration for market maker tests."""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mmbot.logging import initialize_logging, shutdown_logging  # noqa: E402
from mmbot.adapters.exchanges import (  # noqa: E402
    ExchangeConfig,
    MarketInfo,
    OpenOrderData,
    OrderSide,
    TokenInfo,
)
from mmbot.adapters.exchanges.adapters import PaperExchange  # noqa: E402
from mmbot.services.market_maker.models import (  # noqa: E402
    MarketSnapshot,
    PairConfig,
    ReferenceBase,
    StrategyConfig,
)


@pytest.fixture(scope="session", autouse=True)
def test_logging(tmp_path_factory):
    """Send log files to a temporary directory for the whole session."""
    log_dir = tmp_path_factory.mktemp("logs")
    initialize_logging(log_dir=str(log_dir), level="DEBUG", enable_console=False)
    yield log_dir
    shutdown_logging()


@pytest.fixture
def make_market():
    """Build a market: ask precision 2 (price), bid precision 4 (quantity), min cost 10."""

    def _make(market_id=1, symbol="XPR_XMD", bid_precision=4, ask_precision=2, order_min=1000):
        return MarketInfo(
            market_id=market_id,
            symbol=symbol,
            bid_token=TokenInfo(code=symbol.split("_")[0], precision=bid_precision,
                                multiplier=Decimal(10) ** bid_precision),
            ask_token=TokenInfo(code=symbol.split("_")[-1], precision=ask_precision,
                                multiplier=Decimal(10) ** ask_precision),
            order_min=Decimal(order_min),
        )

    return _make


@pytest.fixture
def market(make_market):
    return make_market()


@pytest.fixture
def make_snapshot(market):
    def _make(highest_bid="100", lowest_ask="102", last_price="101.5", snapshot_market=None):
        return MarketSnapshot(
            market=snapshot_market or market,
            last_price=Decimal(last_price),
            highest_bid=Decimal(highest_bid),
            lowest_ask=Decimal(lowest_ask),
        )

    return _make


@pytest.fixture
def snapshot(make_snapshot):
    return make_snapshot()


@pytest.fixture
def make_config():
    def _make(grid_levels=3, pairs=None, username="tester"):
        if pairs is None:
            pairs = [PairConfig("XPR_XMD", Decimal("0.01"), ReferenceBase.AVERAGE)]
        return StrategyConfig(grid_levels=grid_levels, pairs=tuple(pairs), username=username)

    return _make


@pytest.fixture
def make_open_orders():
    """Open orders for one market: n_buys buys then n_sells sells."""

    def _make(n_buys=0, n_sells=0, market_id=1):
        orders = []
        for i in range(n_buys):
            orders.append(OpenOrderData(order_id=f"b{market_id}-{i}", market_id=market_id, side=OrderSide.BUY))
        for i in range(n_sells):
            orders.append(OpenOrderData(order_id=f"s{market_id}-{i}", market_id=market_id, side=OrderSide.SELL))
        return orders

    return _make


PAPER_MARKETS = [
    {
        "market_id": 1,
        "symbol": "XPR_XMD",
        "bid_token": {"code": "XPR", "precision": 4, "multiplier": 10000},
        "ask_token": {"code": "XMD", "precision": 2, "multiplier": 100},
        "order_min": 1000,
        "last_price": "101.5",
        "bids": ["100", "99"],
        "asks": ["102", "103"],
    },
    {
        "market_id": 2,
        "symbol": "XBTC_XMD",
        "bid_token": {"code": "XBTC", "precision": 8},
        "ask_token": {"code": "XMD", "precision": 2},
        "order_min": 1000,
        "last_price": "64250.5",
        "bids": ["64200"],
        "asks": ["64300"],
    },
]


@pytest.fixture
def make_paper_exchange():
    def _make(markets=None, open_orders=None):
        return PaperExchange(ExchangeConfig(
            exchange_id="paper",
            name="paper",
            extra_params={
                "markets": PAPER_MARKETS if markets is None else markets,
                "open_orders": open_orders or [],
            },
        ))

    return _make


@pytest.fixture
def paper_exchange(make_paper_exchange):
    return make_paper_exchange()
