"""
行情数据服务

封装交易所适配器的行情和挂单查询：
- 交易对查找（不存在时抛出 MarketNotFoundError）
- 最新价与一档订单簿并发获取，组装为 MarketSnapshot
- 账户挂单按市场过滤

适配器的任何异常统一包装为 MarketDataUnavailableError。
"""

import asyncio
from typing import List

from injector import inject

from ....logging import get_logger
from ....adapters.exchanges import ExchangeInterface, MarketInfo, OpenOrderData
from ..exceptions import MarketDataUnavailableError, MarketNotFoundError
from ..models import MarketSnapshot


class MarketDataService:
    """行情数据服务"""

    @inject
    def __init__(self, exchange: ExchangeInterface):
        self.logger = get_logger(__name__)
        self.exchange = exchange

    async def get_market(self, symbol: str) -> MarketInfo:
        """按符号查找交易对"""
        try:
            market = await self.exchange.get_market_by_symbol(symbol)
        except Exception as e:
            raise MarketDataUnavailableError(symbol, f"market lookup failed: {e}") from e

        if market is None:
            raise MarketNotFoundError(symbol)
        return market

    async def fetch_open_orders(self, account: str, market: MarketInfo) -> List[OpenOrderData]:
        """
        获取账户在指定市场的挂单

        Args:
            account: 账户名
            market: 交易对信息

        Returns:
            market_id 匹配的挂单列表
        """
        try:
            all_orders = await self.exchange.fetch_open_orders(account)
        except Exception as e:
            raise MarketDataUnavailableError(market.symbol, f"open orders: {e}") from e

        orders = [o for o in all_orders if o.market_id == market.market_id]
        self.logger.debug(
            f"{market.symbol} 当前挂单: {len(orders)}个 (账户全部挂单 {len(all_orders)}个)"
        )
        return orders

    async def fetch_snapshot(self, symbol: str, market: MarketInfo) -> MarketSnapshot:
        """
        获取市场快照

        订单簿某一侧为空时，该侧价格取最新成交价。
        """
        try:
            price, order_book = await asyncio.gather(
                self.exchange.fetch_latest_price(symbol),
                self.exchange.fetch_order_book(symbol, depth=1)
            )
        except Exception as e:
            raise MarketDataUnavailableError(symbol, str(e)) from e

        highest_bid = order_book.best_bid
        lowest_ask = order_book.best_ask
        if highest_bid is None:
            highest_bid = price
        if lowest_ask is None:
            lowest_ask = price

        snapshot = MarketSnapshot(
            market=market,
            last_price=price,
            highest_bid=highest_bid,
            lowest_ask=lowest_ask
        )
        self.logger.debug(
            f"{symbol} 行情: last={price} bid={highest_bid} ask={lowest_ask}"
        )
        return snapshot
