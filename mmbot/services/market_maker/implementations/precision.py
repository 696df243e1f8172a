"""
定点精度工具

所有价格、数量、金额都使用 Decimal 计算，按代币精度取整，
避免二进制浮点在多轮循环中累积误差。
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN, ROUND_UP


def _quantum(places: int) -> Decimal:
    if places < 0:
        raise ValueError(f"小数位数不能为负数: {places}")
    return Decimal(1).scaleb(-places)


def round_up(value: Decimal, places: int) -> Decimal:
    """向上取整（远离零）到 places 位小数"""
    return value.quantize(_quantum(places), rounding=ROUND_UP)


def round_down(value: Decimal, places: int) -> Decimal:
    """向下取整（趋向零）到 places 位小数"""
    return value.quantize(_quantum(places), rounding=ROUND_DOWN)


@dataclass(frozen=True)
class QuantityAndTotal:
    """数量与取整修正后的总金额"""
    quantity: Decimal           # 数量（bid 精度）
    adjusted_total: Decimal     # 价格 × 数量（ask 精度）


def quantity_and_adjusted_total(
    price: Decimal,
    target_cost: Decimal,
    quantity_precision: int,
    cost_precision: int
) -> QuantityAndTotal:
    """
    根据价格和目标金额计算下单数量

    数量向上取整，保证实际金额不低于最小下单要求；
    取整后数量不再精确对应 target_cost，因此按实际数量重新计算总金额（同样向上取整）。

    Args:
        price: 价格（ask 货币）
        target_cost: 目标金额（ask 货币）
        quantity_precision: 数量精度（bid 货币小数位）
        cost_precision: 金额精度（ask 货币小数位）
    """
    quantity = round_up(target_cost / price, quantity_precision)
    adjusted_total = round_up(price * quantity, cost_precision)
    return QuantityAndTotal(quantity=quantity, adjusted_total=adjusted_total)
