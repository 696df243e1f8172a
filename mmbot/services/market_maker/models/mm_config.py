"""
做市策略配置模型

启动时加载一次，之后只读；显式传入每个组件，不做全局查找。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple
from decimal import Decimal


# 未配置的交易对沿用的默认值
DEFAULT_GRID_INTERVAL = Decimal('0.01')


class ReferenceBase(Enum):
    """阶梯锚定价格来源"""
    BID = "BID"            # 买一价
    ASK = "ASK"            # 卖一价
    LAST = "LAST"          # 最新成交价
    AVERAGE = "AVERAGE"    # 买一卖一中间价（默认）

    @classmethod
    def parse(cls, value: Any) -> 'ReferenceBase':
        """
        解析配置值（大小写不敏感）

        无法识别的值（包括未设置）一律回落为 AVERAGE。
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                return cls.AVERAGE
        return cls.AVERAGE

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """配置值是否为可识别的来源"""
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value.strip().upper() in cls.__members__


@dataclass(frozen=True)
class PairConfig:
    """
    单个交易对的做市配置
    """
    symbol: str                                        # 交易对符号
    grid_interval: Decimal = DEFAULT_GRID_INTERVAL     # 每层价格间距（比例）
    base: ReferenceBase = ReferenceBase.AVERAGE        # 锚定价格来源

    def __post_init__(self):
        """数据验证和转换"""
        if isinstance(self.grid_interval, (int, float, str)):
            object.__setattr__(self, 'grid_interval', Decimal(str(self.grid_interval)))
        if not isinstance(self.base, ReferenceBase):
            object.__setattr__(self, 'base', ReferenceBase.parse(self.base))


@dataclass(frozen=True)
class StrategyConfig:
    """
    做市策略配置

    pairs 保持配置顺序；按交易对符号的索引在构造时建立一次。
    """
    grid_levels: int                                   # 每侧目标挂单数量
    pairs: Tuple[PairConfig, ...]                      # 交易对（按配置顺序）
    username: str = ""                                 # 查询挂单使用的账户
    trade_interval: int = 10                           # 连续运行时的循环间隔（秒）
    _pairs_by_symbol: Dict[str, PairConfig] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """初始化后建立索引并校验"""
        if not isinstance(self.pairs, tuple):
            object.__setattr__(self, 'pairs', tuple(self.pairs))
        if self.grid_levels < 1:
            raise ValueError(f"grid_levels 必须大于等于1，当前: {self.grid_levels}")
        object.__setattr__(self, '_pairs_by_symbol', {p.symbol: p for p in self.pairs})

    @property
    def symbols(self) -> Tuple[str, ...]:
        """配置的交易对符号（按配置顺序）"""
        return tuple(p.symbol for p in self.pairs)

    def get_pair(self, symbol: str) -> PairConfig:
        """
        获取交易对配置

        未配置的交易对返回默认配置（间距 0.01，锚定 AVERAGE）
        """
        pair = self._pairs_by_symbol.get(symbol)
        if pair is None:
            return PairConfig(symbol=symbol)
        return pair
