"""
阶梯订单模型

由订单构建器生成，立即交给下单组件提交
"""

from dataclasses import dataclass
from decimal import Decimal

from ....adapters.exchanges.models import OrderSide


@dataclass(frozen=True)
class LadderOrder:
    """
    阶梯限价单

    注意 quantity 的计价单位随方向不同：
    - 买单：调整后的总金额（ask 货币）
    - 卖单：数量（bid 货币）
    """
    side: OrderSide             # 订单方向
    symbol: str                 # 交易对
    price: Decimal              # 限价（已按 ask 精度取整）
    quantity: Decimal           # 提交数量（见上）
    level_index: int = 0        # 阶梯层级（0 为最内层）

    def is_buy_order(self) -> bool:
        """是否为买单"""
        return self.side == OrderSide.BUY

    def is_sell_order(self) -> bool:
        """是否为卖单"""
        return self.side == OrderSide.SELL

    def __repr__(self) -> str:
        return (
            f"LadderOrder({self.symbol} L{self.level_index} "
            f"{self.side.value} {self.quantity}@{self.price})"
        )
