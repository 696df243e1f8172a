"""
配置管理器
负责加载和校验做市配置文件
"""

import yaml
from typing import Dict, Any, Optional, List
from pathlib import Path
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import logging

from ..services.market_maker.models import PairConfig, StrategyConfig, ReferenceBase

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """配置文件缺失或内容不合法"""


@dataclass
class ExchangeSettings:
    """交易所配置（name 之外的字段原样传给适配器）"""
    name: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LoggingSettings:
    """日志配置"""
    log_dir: str = "logs"
    level: str = "INFO"


@dataclass
class MarketMakerAppConfig:
    """完整的做市程序配置"""
    strategy: StrategyConfig
    exchange: ExchangeSettings
    logging: LoggingSettings
    source: Optional[Path] = None


class ConfigManager:
    """配置管理器 - 做市配置只在启动时加载一次"""

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self.app_config: Optional[MarketMakerAppConfig] = None

    def default_config_path(self) -> Path:
        return self.config_dir / "market_maker" / "default_market_maker.yaml"

    def load_market_maker_config(self, config_path: Optional[str] = None) -> MarketMakerAppConfig:
        """
        加载做市配置

        Args:
            config_path: 配置文件路径，默认 config/market_maker/default_market_maker.yaml

        Raises:
            ConfigError: 文件不存在、YAML 语法错误或字段校验失败
        """
        path = Path(config_path) if config_path else self.default_config_path()

        try:
            with open(path, 'r', encoding='utf-8') as file:
                config_data = yaml.safe_load(file)
        except FileNotFoundError as e:
            raise ConfigError(f"配置文件不存在: {path}") from e
        except OSError as e:
            raise ConfigError(f"无法读取配置文件 {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"配置文件 YAML 格式错误 {path}: {e}") from e

        if config_data is None:
            raise ConfigError(f"配置文件为空: {path}")

        self.app_config = self.parse(config_data, source=path)
        logger.info(
            f"成功加载做市配置: {path} "
            f"(交易对 {', '.join(self.app_config.strategy.symbols)}, "
            f"grid_levels={self.app_config.strategy.grid_levels})"
        )
        return self.app_config

    def parse(self, config_data: Any, source: Optional[Path] = None) -> MarketMakerAppConfig:
        """把已解析的 YAML 数据转换为配置对象"""
        if not isinstance(config_data, dict):
            raise ConfigError("配置文件顶层必须是映射")

        return MarketMakerAppConfig(
            strategy=self._parse_strategy(config_data.get('market_maker')),
            exchange=self._parse_exchange(config_data.get('exchange')),
            logging=self._parse_logging(config_data.get('logging')),
            source=source
        )

    def _parse_strategy(self, section: Any) -> StrategyConfig:
        if section is None:
            raise ConfigError("缺少 market_maker 配置段")
        if not isinstance(section, dict):
            raise ConfigError("market_maker 配置段必须是映射")

        username = section.get('username')
        if not username or not str(username).strip():
            raise ConfigError("market_maker.username 不能为空")

        grid_levels = section.get('grid_levels')
        if isinstance(grid_levels, bool) or not isinstance(grid_levels, int):
            raise ConfigError(f"market_maker.grid_levels 必须是整数: {grid_levels!r}")
        if grid_levels < 1:
            raise ConfigError(f"market_maker.grid_levels 必须大于等于1: {grid_levels}")

        trade_interval = section.get('trade_interval', 10)
        if isinstance(trade_interval, bool) or not isinstance(trade_interval, (int, float)) or trade_interval <= 0:
            raise ConfigError(f"market_maker.trade_interval 必须是正数: {trade_interval!r}")

        pairs = self._parse_pairs(section.get('pairs'), grid_levels)

        return StrategyConfig(
            grid_levels=grid_levels,
            pairs=tuple(pairs),
            username=str(username).strip(),
            trade_interval=trade_interval
        )

    def _parse_pairs(self, raw_pairs: Any, grid_levels: int) -> List[PairConfig]:
        if not raw_pairs or not isinstance(raw_pairs, list):
            raise ConfigError("market_maker.pairs 至少需要一个交易对")

        pairs: List[PairConfig] = []
        seen = set()
        for index, raw in enumerate(raw_pairs):
            prefix = f"market_maker.pairs[{index}]"
            if not isinstance(raw, dict):
                raise ConfigError(f"{prefix} 必须是映射")

            symbol = str(raw.get('symbol') or '').strip()
            if not symbol:
                raise ConfigError(f"{prefix}.symbol 不能为空")
            if symbol in seen:
                raise ConfigError(f"交易对重复: {symbol}")
            seen.add(symbol)

            grid_interval = self._parse_interval(raw.get('grid_interval'), f"{prefix}.grid_interval")
            # 最外层买单价格为 ref × (1 - interval × grid_levels)
            if grid_interval * grid_levels >= 1:
                raise ConfigError(
                    f"{prefix}.grid_interval × grid_levels 必须小于1: "
                    f"{grid_interval} × {grid_levels}"
                )

            raw_base = raw.get('base')
            if raw_base is not None and not ReferenceBase.is_known(raw_base):
                logger.warning(f"{symbol} 的 base={raw_base!r} 无法识别，使用 AVERAGE")

            pairs.append(PairConfig(
                symbol=symbol,
                grid_interval=grid_interval,
                base=ReferenceBase.parse(raw_base)
            ))
        return pairs

    @staticmethod
    def _parse_interval(value: Any, field_name: str) -> Decimal:
        if value is None or isinstance(value, bool):
            raise ConfigError(f"{field_name} 缺失或无效: {value!r}")
        try:
            interval = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise ConfigError(f"{field_name} 不是有效的数值: {value!r}") from e
        if not interval.is_finite() or not (Decimal('0') < interval < Decimal('1')):
            raise ConfigError(f"{field_name} 必须在 (0, 1) 区间内: {value!r}")
        return interval

    @staticmethod
    def _parse_exchange(section: Any) -> ExchangeSettings:
        if section is None:
            section = {'name': 'paper'}
        if not isinstance(section, dict):
            raise ConfigError("exchange 配置段必须是映射")

        name = str(section.get('name') or '').strip()
        if not name:
            raise ConfigError("exchange.name 不能为空")
        params = {k: v for k, v in section.items() if k != 'name'}
        return ExchangeSettings(name=name, params=params)

    @staticmethod
    def _parse_logging(section: Any) -> LoggingSettings:
        if section is None:
            return LoggingSettings()
        if not isinstance(section, dict):
            raise ConfigError("logging 配置段必须是映射")

        level = str(section.get('level', 'INFO')).upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigError(f"logging.level 无效: {level}")
        return LoggingSettings(
            log_dir=str(section.get('log_dir', 'logs')),
            level=level
        )
