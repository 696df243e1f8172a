"""
策略运行器接口
"""

from abc import ABC, abstractmethod

from ..models import CycleReport


class IStrategyRunner(ABC):
    """策略运行器接口"""

    @abstractmethod
    async def run_cycle(self) -> CycleReport:
        """
        执行一轮策略循环

        按配置顺序处理每个交易对；单个交易对失败只记录，不影响其余交易对。
        """
        pass
