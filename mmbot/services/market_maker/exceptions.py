"""
做市系统异常定义

所有异常都在交易对边界被捕获并记录，不会中断其他交易对的处理。
"""

from typing import List, Optional


class MarketMakerError(Exception):
    """做市系统异常基类"""

    def __init__(self, message: str, symbol: Optional[str] = None):
        super().__init__(message)
        self.symbol = symbol


class MarketNotFoundError(MarketMakerError):
    """交易对不存在"""

    def __init__(self, symbol: str):
        super().__init__(f"Market {symbol} does not exist", symbol)


class MarketDataUnavailableError(MarketMakerError):
    """行情或挂单数据获取失败"""

    def __init__(self, symbol: str, reason: str):
        super().__init__(f"Market data for {symbol} unavailable: {reason}", symbol)
        self.reason = reason


class SubmissionFailureError(MarketMakerError):
    """
    部分或全部订单被拒绝

    在同一交易对的所有下单请求完成后抛出。
    """

    def __init__(self, symbol: str, failures: List[str], placed: int = 0):
        self.failures = list(failures)
        self.placed = placed
        summary = "; ".join(self.failures)
        super().__init__(
            f"{len(self.failures)} order(s) for {symbol} failed ({placed} placed): {summary}",
            symbol
        )
