"""
参考价选择

纯函数：无副作用，无失败情况
"""

from decimal import Decimal
from typing import Any

from ..models import MarketSnapshot, ReferenceBase


def select_reference_price(base: Any, snapshot: MarketSnapshot) -> Decimal:
    """
    按锚定方式从快照中选出阶梯参考价

    BID -> 买一价；ASK -> 卖一价；LAST -> 最新成交价；
    其他任何值（包括未设置）-> 买一卖一中间价。
    """
    if base == ReferenceBase.BID:
        return snapshot.highest_bid
    if base == ReferenceBase.ASK:
        return snapshot.lowest_ask
    if base == ReferenceBase.LAST:
        return snapshot.last_price
    return snapshot.mid_price
