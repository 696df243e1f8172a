"""
挂单对账实现

按数量对账，而不是按价位对账：
层级只由循环下标决定，不检查哪些价位已经有挂单。
如果内层订单成交后外层仍在，新补的订单可能与已有挂单价位重复。
"""

from typing import List, Optional, Sequence, Tuple, Union

from injector import inject

from ....adapters.exchanges.models import OpenOrderData, OrderSide
from ..interfaces.grid_order_builder import IGridOrderBuilder
from ..interfaces.order_reconciler import IOrderReconciler
from ..models import LadderOrder, MarketSnapshot, StrategyConfig


class OpenOrderReconcilerImpl(IOrderReconciler):
    """挂单对账实现"""

    @inject
    def __init__(self, config: StrategyConfig, builder: IGridOrderBuilder):
        self.config = config
        self.builder = builder

    def count_open_orders(
        self,
        open_orders: Sequence[OpenOrderData],
        market_id: Union[int, str]
    ) -> Tuple[int, int]:
        buys = sells = 0
        for order in open_orders:
            if order.market_id != market_id:
                continue
            if order.side == OrderSide.BUY:
                buys += 1
            elif order.side == OrderSide.SELL:
                sells += 1
        return buys, sells

    def missing_orders(
        self,
        symbol: str,
        snapshot: MarketSnapshot,
        open_orders: Sequence[OpenOrderData],
        grid_levels: Optional[int] = None
    ) -> List[LadderOrder]:
        levels = self.config.grid_levels if grid_levels is None else grid_levels
        num_buys, num_sells = self.count_open_orders(open_orders, snapshot.market.market_id)

        orders: List[LadderOrder] = []
        for index in range(levels):
            if num_buys < levels:
                orders.append(self.builder.build_buy_order(symbol, snapshot, index))
                num_buys += 1

            if num_sells < levels:
                orders.append(self.builder.build_sell_order(symbol, snapshot, index))
                num_sells += 1

        return orders
