"""
做市系统接口定义

定义做市系统各个组件的抽象接口
"""

from .grid_order_builder import IGridOrderBuilder
from .order_reconciler import IOrderReconciler
from .strategy_runner import IStrategyRunner

__all__ = [
    'IGridOrderBuilder',
    'IOrderReconciler',
    'IStrategyRunner',
]
