"""
阶梯做市服务

在每个配置的交易对上维持买卖两侧各 grid_levels 个限价单，
价格以参考价为锚按固定比例向外展开。
"""

from .models import (
    PairConfig,
    StrategyConfig,
    ReferenceBase,
    MarketSnapshot,
    LadderOrder,
    PairCycleResult,
    PairCycleStatus,
    CycleReport,
)
from .exceptions import (
    MarketMakerError,
    MarketNotFoundError,
    MarketDataUnavailableError,
    SubmissionFailureError,
)
from .interfaces import IGridOrderBuilder, IOrderReconciler, IStrategyRunner
from .implementations import (
    GridOrderBuilderImpl,
    OpenOrderReconcilerImpl,
    MarketDataService,
    OrderSubmitter,
    select_reference_price,
)
from .coordinator import MarketMakerRunner
from .terminal_ui import CycleReportRenderer

__all__ = [
    'PairConfig',
    'StrategyConfig',
    'ReferenceBase',
    'MarketSnapshot',
    'LadderOrder',
    'PairCycleResult',
    'PairCycleStatus',
    'CycleReport',
    'MarketMakerError',
    'MarketNotFoundError',
    'MarketDataUnavailableError',
    'SubmissionFailureError',
    'IGridOrderBuilder',
    'IOrderReconciler',
    'IStrategyRunner',
    'GridOrderBuilderImpl',
    'OpenOrderReconcilerImpl',
    'MarketDataService',
    'OrderSubmitter',
    'select_reference_price',
    'MarketMakerRunner',
    'CycleReportRenderer',
]
