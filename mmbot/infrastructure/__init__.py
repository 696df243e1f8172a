"""
基础设施层
"""

from .config_manager import (
    ConfigError,
    ConfigManager,
    ExchangeSettings,
    LoggingSettings,
    MarketMakerAppConfig,
)

__all__ = [
    'ConfigError',
    'ConfigManager',
    'ExchangeSettings',
    'LoggingSettings',
    'MarketMakerAppConfig',
]
