"""
交易所数据模型和枚举定义

定义了交易所适配层使用的所有数据结构和枚举类型，
做市核心只读取这些模型，不直接接触任何交易所原始数据。
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime
from typing import Dict, List, Optional, Any, Union
from decimal import Decimal


def _to_decimal(value: Any) -> Decimal:
    """统一转换为 Decimal（经由字符串，避免二进制浮点误差）"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class OrderSide(Enum):
    """订单方向枚举"""
    BUY = "buy"                      # 买入
    SELL = "sell"                    # 卖出


@dataclass(frozen=True)
class TokenInfo:
    """代币信息（精度与最小单位乘数）"""
    code: str                        # 代币代码 (如 "XPR")
    precision: int                   # 小数位数
    multiplier: Decimal              # 原始整数单位 -> 代币数量的乘数 (10 ** precision)

    def __post_init__(self):
        """数据验证和转换"""
        if isinstance(self.multiplier, (int, float, str)):
            object.__setattr__(self, 'multiplier', _to_decimal(self.multiplier))
        if self.precision < 0:
            raise ValueError(f"{self.code} 精度不能为负数: {self.precision}")


@dataclass(frozen=True)
class MarketInfo:
    """
    交易对信息

    bid_token 为基础货币（数量计价），ask_token 为计价货币（价格与金额计价）。
    order_min 以 ask_token 的原始整数单位表示。
    """
    market_id: Union[int, str]       # 交易所内部市场ID
    symbol: str                      # 交易对符号 (如 "XPR_XMD")
    bid_token: TokenInfo             # 基础货币
    ask_token: TokenInfo             # 计价货币
    order_min: Decimal               # 最小下单金额（ask_token 原始单位）

    def __post_init__(self):
        """数据验证和转换"""
        if isinstance(self.order_min, (int, float, str)):
            object.__setattr__(self, 'order_min', _to_decimal(self.order_min))

    def min_order_cost(self) -> Decimal:
        """最小下单金额（换算为 ask_token 数量）"""
        return self.order_min / self.ask_token.multiplier


@dataclass
class OrderBookLevel:
    """订单簿档位"""
    price: Decimal                   # 价格
    size: Optional[Decimal] = None   # 数量

    def __post_init__(self):
        """数据验证和转换"""
        self.price = _to_decimal(self.price)
        if self.size is not None:
            self.size = _to_decimal(self.size)


@dataclass
class OrderBookData:
    """订单簿数据模型"""
    symbol: str                      # 交易对
    bids: List[OrderBookLevel]       # 买单（价格从高到低）
    asks: List[OrderBookLevel]       # 卖单（价格从低到高）
    timestamp: Optional[datetime] = None

    @property
    def best_bid(self) -> Optional[Decimal]:
        """买一价（无深度时为 None）"""
        return self.bids[0].price if self.bids else None

    @property
    def best_ask(self) -> Optional[Decimal]:
        """卖一价（无深度时为 None）"""
        return self.asks[0].price if self.asks else None


@dataclass
class OpenOrderData:
    """账户挂单数据模型"""
    order_id: str                    # 订单ID
    market_id: Union[int, str]       # 所属市场ID
    side: OrderSide                  # 订单方向
    price: Optional[Decimal] = None  # 挂单价格
    quantity: Optional[Decimal] = None  # 挂单数量
    raw_data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """数据验证和转换"""
        if isinstance(self.side, str):
            self.side = OrderSide(self.side.lower())
        if self.price is not None:
            self.price = _to_decimal(self.price)
        if self.quantity is not None:
            self.quantity = _to_decimal(self.quantity)


@dataclass
class OrderResult:
    """下单结果"""
    success: bool                    # 是否成功
    symbol: str                      # 交易对
    side: OrderSide                  # 订单方向
    quantity: Decimal                # 提交数量
    price: Decimal                   # 提交价格
    order_id: Optional[str] = None   # 交易所订单ID（成功时）
    error: Optional[str] = None      # 失败原因（失败时）
