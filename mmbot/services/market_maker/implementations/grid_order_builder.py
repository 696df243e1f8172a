"""
阶梯订单构建器实现

价格规则：
- 买单：ref × (1 - interval × (index + 1))，按 ask 精度向下取整，不会高于目标折价
- 卖单：ref × (1 + interval × (index + 1))，按 ask 精度向上取整，不会低于目标溢价

数量规则（买卖两侧计价单位不同，保持现状）：
- 买单提交 adjusted_total（ask 货币金额）
- 卖单提交 quantity（bid 货币数量）

取整后价格不为正时抛出 MarketMakerError，由调用方在交易对边界记录。
"""

from decimal import Decimal

from injector import inject

from ....adapters.exchanges.models import OrderSide
from ..exceptions import MarketMakerError
from ..interfaces.grid_order_builder import IGridOrderBuilder
from ..models import LadderOrder, MarketSnapshot, StrategyConfig
from .precision import round_down, round_up, quantity_and_adjusted_total
from .reference_price import select_reference_price

_ONE = Decimal(1)


class GridOrderBuilderImpl(IGridOrderBuilder):
    """阶梯订单构建器实现"""

    @inject
    def __init__(self, config: StrategyConfig):
        self.config = config

    def reference_price(self, symbol: str, snapshot: MarketSnapshot) -> Decimal:
        """交易对当前的阶梯参考价"""
        return select_reference_price(self.config.get_pair(symbol).base, snapshot)

    def build_buy_order(self, symbol: str, snapshot: MarketSnapshot, index: int) -> LadderOrder:
        market = snapshot.market
        offset = self._level_offset(symbol, index)
        price = round_down(
            self.reference_price(symbol, snapshot) * (_ONE - offset),
            market.ask_token.precision
        )
        self._require_positive(symbol, OrderSide.BUY, index, price)
        sizing = quantity_and_adjusted_total(
            price,
            market.min_order_cost(),
            market.bid_token.precision,
            market.ask_token.precision
        )
        return LadderOrder(
            side=OrderSide.BUY,
            symbol=symbol,
            price=price,
            quantity=sizing.adjusted_total,
            level_index=index
        )

    def build_sell_order(self, symbol: str, snapshot: MarketSnapshot, index: int) -> LadderOrder:
        market = snapshot.market
        offset = self._level_offset(symbol, index)
        price = round_up(
            self.reference_price(symbol, snapshot) * (_ONE + offset),
            market.ask_token.precision
        )
        self._require_positive(symbol, OrderSide.SELL, index, price)
        sizing = quantity_and_adjusted_total(
            price,
            market.min_order_cost(),
            market.bid_token.precision,
            market.ask_token.precision
        )
        return LadderOrder(
            side=OrderSide.SELL,
            symbol=symbol,
            price=price,
            quantity=sizing.quantity,
            level_index=index
        )

    def _level_offset(self, symbol: str, index: int) -> Decimal:
        if index < 0:
            raise ValueError(f"阶梯层级不能为负数: {index}")
        return self.config.get_pair(symbol).grid_interval * (index + 1)

    @staticmethod
    def _require_positive(symbol: str, side: OrderSide, index: int, price: Decimal) -> None:
        """取整后价格必须为正，否则无法按金额计算数量"""
        if price <= 0:
            raise MarketMakerError(
                f"{side.value} price for {symbol} level {index} rounds to {price}; "
                f"reference price is too small for the ask precision or the ladder is too deep",
                symbol
            )
