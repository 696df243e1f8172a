"""
做市策略运行器

每轮循环按配置顺序处理每个交易对：
1. 查找交易对，获取账户在该市场的挂单
2. 买卖两侧挂单都已达到 grid_levels 时跳过该交易对，继续处理下一个
3. 否则获取市场快照，对账得出缺失订单并并发提交

单个交易对的任何异常都在交易对边界捕获并记录，不影响其他交易对。
运行器本身不持有跨循环状态，每轮都从交易所重新读取挂单。
"""

import asyncio
from datetime import datetime
from typing import Callable, Optional

from injector import inject

from ....logging import get_logger, get_trading_logger
from ..interfaces.order_reconciler import IOrderReconciler
from ..interfaces.strategy_runner import IStrategyRunner
from ..implementations.market_data_service import MarketDataService
from ..implementations.order_submitter import OrderSubmitter
from ..exceptions import SubmissionFailureError
from ..models import (
    CycleReport, PairCycleResult, PairCycleStatus, StrategyConfig
)


class MarketMakerRunner(IStrategyRunner):
    """做市策略运行器"""

    @inject
    def __init__(
        self,
        config: StrategyConfig,
        market_data: MarketDataService,
        reconciler: IOrderReconciler,
        submitter: OrderSubmitter
    ):
        self.logger = get_logger(__name__)
        self.trading_logger = get_trading_logger()
        self.config = config
        self.market_data = market_data
        self.reconciler = reconciler
        self.submitter = submitter

        self._running = False
        self._cycles = 0

    async def run_cycle(self) -> CycleReport:
        report = CycleReport()

        for pair in self.config.pairs:
            symbol = pair.symbol
            self.logger.info(
                f"Executing {symbol} market maker trades on account {self.config.username}"
            )
            try:
                result = await self._process_pair(symbol)
            except SubmissionFailureError as e:
                self.logger.error(str(e))
                result = PairCycleResult(
                    symbol=symbol,
                    status=PairCycleStatus.FAILED,
                    orders_prepared=e.placed + len(e.failures),
                    orders_placed=e.placed,
                    orders_failed=len(e.failures),
                    error=str(e)
                )
            except Exception as e:
                self.logger.error(str(e))
                result = PairCycleResult(
                    symbol=symbol,
                    status=PairCycleStatus.FAILED,
                    error=str(e)
                )
            report.add(result)

        report.finished_at = datetime.now()
        self._cycles += 1
        return report

    async def _process_pair(self, symbol: str) -> PairCycleResult:
        levels = self.config.grid_levels

        market = await self.market_data.get_market(symbol)
        open_orders = await self.market_data.fetch_open_orders(self.config.username, market)

        buys, sells = self.reconciler.count_open_orders(open_orders, market.market_id)
        if buys >= levels and sells >= levels:
            self.logger.info(
                f"nothing to do - we have enough orders on the books for {symbol}"
            )
            return PairCycleResult(symbol=symbol, status=PairCycleStatus.SKIPPED)

        snapshot = await self.market_data.fetch_snapshot(symbol, market)
        orders = self.reconciler.missing_orders(symbol, snapshot, open_orders, levels)
        self.trading_logger.ladder_prepared(
            symbol,
            sum(1 for o in orders if o.is_buy_order()),
            sum(1 for o in orders if o.is_sell_order())
        )

        placed = await self.submitter.submit_orders(orders)
        return PairCycleResult(
            symbol=symbol,
            status=PairCycleStatus.PLACED,
            orders_prepared=len(orders),
            orders_placed=len(placed)
        )

    async def run_forever(
        self,
        interval: Optional[float] = None,
        on_report: Optional[Callable[[CycleReport], None]] = None
    ) -> None:
        """
        按固定间隔持续运行，直到 stop() 被调用或任务被取消

        Args:
            interval: 循环间隔（秒），默认使用配置中的 trade_interval
            on_report: 每轮结束后的回调
        """
        interval = self.config.trade_interval if interval is None else interval
        self._running = True
        self.logger.info(f"做市循环启动: 间隔 {interval}秒, 交易对 {', '.join(self.config.symbols)}")

        try:
            while self._running:
                report = await self.run_cycle()
                if on_report is not None:
                    on_report(report)
                if not self._running:
                    break
                await asyncio.sleep(interval)
        finally:
            self._running = False
            self.logger.info(f"做市循环结束: 共执行 {self._cycles} 轮")

    def stop(self) -> None:
        """请求在当前循环结束后停止"""
        self._running = False

    def is_running(self) -> bool:
        return self._running

    @property
    def cycles(self) -> int:
        """已完成的循环轮数"""
        return self._cycles
