"""
策略循环结果模型
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class PairCycleStatus(Enum):
    """单个交易对本轮处理状态"""
    PLACED = "placed"      # 已补挂单
    SKIPPED = "skipped"    # 挂单充足，无需操作
    FAILED = "failed"      # 处理失败（已记录日志）


@dataclass
class PairCycleResult:
    """单个交易对本轮处理结果"""
    symbol: str
    status: PairCycleStatus
    orders_prepared: int = 0
    orders_placed: int = 0
    orders_failed: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != PairCycleStatus.FAILED


@dataclass
class CycleReport:
    """一轮策略循环的汇总"""
    results: List[PairCycleResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    finished_at: Optional[datetime] = None

    def add(self, result: PairCycleResult) -> None:
        self.results.append(result)

    def get(self, symbol: str) -> Optional[PairCycleResult]:
        """按交易对查找结果"""
        for result in self.results:
            if result.symbol == symbol:
                return result
        return None

    @property
    def failed(self) -> List[PairCycleResult]:
        return [r for r in self.results if not r.ok]

    @property
    def total_placed(self) -> int:
        return sum(r.orders_placed for r in self.results)

    @property
    def all_ok(self) -> bool:
        return not self.failed
