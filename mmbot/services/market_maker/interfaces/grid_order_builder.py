"""
阶梯订单构建器接口
"""

from abc import ABC, abstractmethod

from ..models import LadderOrder, MarketSnapshot


class IGridOrderBuilder(ABC):
    """
    阶梯订单构建器接口

    index 从参考价向外计数，0 为最内层。
    """

    @abstractmethod
    def build_buy_order(self, symbol: str, snapshot: MarketSnapshot, index: int) -> LadderOrder:
        """
        构建第 index 层买单

        Args:
            symbol: 交易对
            snapshot: 市场快照
            index: 阶梯层级（>= 0）
        """
        pass

    @abstractmethod
    def build_sell_order(self, symbol: str, snapshot: MarketSnapshot, index: int) -> LadderOrder:
        """
        构建第 index 层卖单

        Args:
            symbol: 交易对
            snapshot: 市场快照
            index: 阶梯层级（>= 0）
        """
        pass
