"""
做市系统数据模型

包含策略配置、市场快照、阶梯订单、循环结果等核心数据结构
"""

from .mm_config import PairConfig, StrategyConfig, ReferenceBase, DEFAULT_GRID_INTERVAL
from .market_snapshot import MarketSnapshot
from .ladder_order import LadderOrder
from .cycle_result import PairCycleResult, PairCycleStatus, CycleReport

__all__ = [
    'PairConfig',
    'StrategyConfig',
    'ReferenceBase',
    'DEFAULT_GRID_INTERVAL',
    'MarketSnapshot',
    'LadderOrder',
    'PairCycleResult',
    'PairCycleStatus',
    'CycleReport',
]
