"""
做市系统实现

包含定点精度工具、参考价选择、阶梯订单构建、挂单对账、行情与下单服务
"""

from .precision import round_up, round_down, quantity_and_adjusted_total, QuantityAndTotal
from .reference_price import select_reference_price
from .grid_order_builder import GridOrderBuilderImpl
from .order_reconciler import OpenOrderReconcilerImpl
from .market_data_service import MarketDataService
from .order_submitter import OrderSubmitter

__all__ = [
    'round_up',
    'round_down',
    'quantity_and_adjusted_total',
    'QuantityAndTotal',
    'select_reference_price',
    'GridOrderBuilderImpl',
    'OpenOrderReconcilerImpl',
    'MarketDataService',
    'OrderSubmitter',
]
