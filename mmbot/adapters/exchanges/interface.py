"""
交易所统一接口定义

定义了做市核心调用的所有交易所能力，
确保不同交易所之间的API一致性和可替换性。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any
from decimal import Decimal

from .models import (
    OrderSide,
    MarketInfo,
    OrderBookData,
    OpenOrderData,
    OrderResult
)


class ExchangeStatus(Enum):
    """交易所状态枚举"""
    DISCONNECTED = "disconnected"    # 未连接
    CONNECTED = "connected"          # 已连接
    ERROR = "error"                  # 错误状态


@dataclass
class ExchangeConfig:
    """交易所配置数据模型"""
    exchange_id: str                         # 交易所ID (如 "paper")
    name: str                                # 交易所名称
    testnet: bool = False                    # 是否使用测试网
    request_timeout: int = 10                # 请求超时（秒）
    extra_params: Dict[str, Any] = field(default_factory=dict)  # 适配器专用参数


class ExchangeInterface(ABC):
    """
    交易所统一接口

    所有交易所适配器都必须实现此接口。
    采用异步设计，超时与重试策略由各适配器自行负责。
    """

    def __init__(self, config: ExchangeConfig):
        """
        初始化交易所接口

        Args:
            config: 交易所配置
        """
        self.config = config
        self.status = ExchangeStatus.DISCONNECTED

    # === 生命周期管理 ===

    @abstractmethod
    async def connect(self) -> bool:
        """
        连接到交易所

        Returns:
            bool: 连接是否成功
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """断开与交易所的连接"""
        pass

    # === 市场数据接口 ===

    @abstractmethod
    async def get_market_by_symbol(self, symbol: str) -> Optional[MarketInfo]:
        """
        按交易对符号查找市场

        Returns:
            MarketInfo，未找到时返回 None
        """
        pass

    @abstractmethod
    async def fetch_latest_price(self, symbol: str) -> Decimal:
        """获取最新成交价"""
        pass

    @abstractmethod
    async def fetch_order_book(self, symbol: str, depth: int = 1) -> OrderBookData:
        """
        获取订单簿快照

        Args:
            symbol: 交易对符号
            depth: 每侧档位数
        """
        pass

    # === 交易接口 ===

    @abstractmethod
    async def fetch_open_orders(self, account: str) -> List[OpenOrderData]:
        """获取账户全部挂单（所有市场）"""
        pass

    @abstractmethod
    async def submit_limit_order(
        self,
        symbol: str,
        side: OrderSide,
        quantity: Decimal,
        price: Decimal
    ) -> OrderResult:
        """
        提交限价单

        Returns:
            OrderResult: 被交易所拒绝时 success=False 并携带原因
        """
        pass

    # === 状态查询 ===

    def get_status(self) -> ExchangeStatus:
        """获取当前状态"""
        return self.status

    def is_connected(self) -> bool:
        """是否已连接"""
        return self.status == ExchangeStatus.CONNECTED

    def get_config(self) -> ExchangeConfig:
        """获取配置"""
        return self.config
