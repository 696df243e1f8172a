"""
挂单对账接口
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, Union

from ....adapters.exchanges.models import OpenOrderData
from ..models import LadderOrder, MarketSnapshot


class IOrderReconciler(ABC):
    """
    挂单对账接口

    根据现有挂单决定每侧还需补多少单
    """

    @abstractmethod
    def count_open_orders(
        self,
        open_orders: Sequence[OpenOrderData],
        market_id: Union[int, str]
    ) -> Tuple[int, int]:
        """
        统计指定市场的挂单数量

        Returns:
            (买单数, 卖单数)
        """
        pass

    @abstractmethod
    def missing_orders(
        self,
        symbol: str,
        snapshot: MarketSnapshot,
        open_orders: Sequence[OpenOrderData],
        grid_levels: Optional[int] = None
    ) -> List[LadderOrder]:
        """
        计算需要补挂的订单

        Returns:
            待提交订单列表（可能为空）
        """
        pass
