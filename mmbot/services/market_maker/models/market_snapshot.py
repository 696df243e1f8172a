"""
市场快照模型

每轮策略循环重新获取，不做持久化
"""

from dataclasses import dataclass
from decimal import Decimal

from ....adapters.exchanges.models import MarketInfo


@dataclass(frozen=True)
class MarketSnapshot:
    """
    市场快照

    订单簿某一侧没有深度时，对应的 highest_bid / lowest_ask 取最新成交价。
    """
    market: MarketInfo          # 交易对信息
    last_price: Decimal         # 最新成交价
    highest_bid: Decimal        # 买一价
    lowest_ask: Decimal         # 卖一价

    @property
    def mid_price(self) -> Decimal:
        """买一卖一中间价"""
        return (self.highest_bid + self.lowest_ask) / 2
