"""
订单提交器

同一交易对的所有订单并发提交，全部完成后再汇总结果；
任何一笔失败（异常或被拒绝）都会在汇总后抛出 SubmissionFailureError。
"""

import asyncio
from typing import List, Sequence

from injector import inject

from ....logging import get_logger, get_trading_logger
from ....adapters.exchanges import ExchangeInterface, OrderResult
from ....adapters.exchanges.utils import format_order_log
from ..exceptions import SubmissionFailureError
from ..models import LadderOrder


class OrderSubmitter:
    """订单提交器"""

    @inject
    def __init__(self, exchange: ExchangeInterface):
        self.logger = get_logger(__name__)
        self.trading_logger = get_trading_logger()
        self.exchange = exchange

    async def submit_orders(self, orders: Sequence[LadderOrder]) -> List[OrderResult]:
        """
        并发提交订单

        Args:
            orders: 待提交的阶梯订单（同一交易对）

        Returns:
            全部成功时返回每笔订单的结果

        Raises:
            SubmissionFailureError: 至少一笔失败
        """
        if not orders:
            return []

        symbol = orders[0].symbol
        self.logger.info(f"开始提交订单: {symbol} {len(orders)}个")

        tasks = [self._submit(order) for order in orders]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        placed: List[OrderResult] = []
        failures: List[str] = []
        for order, result in zip(orders, results):
            side = order.side.value
            if isinstance(result, BaseException):
                reason = f"{type(result).__name__}: {result}"
                failures.append(f"{order!r}: {reason}")
                self.trading_logger.order_rejected(
                    order.symbol, side, order.quantity, order.price, reason,
                    level=order.level_index
                )
            elif not result.success:
                reason = result.error or "rejected"
                failures.append(f"{order!r}: {reason}")
                self.trading_logger.order_rejected(
                    order.symbol, side, order.quantity, order.price, reason,
                    level=order.level_index
                )
            else:
                placed.append(result)
                self.trading_logger.order_placed(
                    order.symbol, side, order.quantity, order.price,
                    level=order.level_index, order_id=result.order_id
                )

        self.logger.info(f"订单提交完成: {symbol} 成功{len(placed)}/{len(orders)}个")

        if failures:
            raise SubmissionFailureError(symbol, failures, placed=len(placed))
        return placed

    async def _submit(self, order: LadderOrder) -> OrderResult:
        self.logger.debug(format_order_log(
            "提交", order.side.value, str(order.quantity), str(order.price),
            order.symbol, order.level_index
        ))
        return await self.exchange.submit_limit_order(
            order.symbol, order.side, order.quantity, order.price
        )
