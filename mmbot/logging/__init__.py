"""
做市系统 - 统一日志入口

    from mmbot.logging import get_logger, get_trading_logger

    logger = get_logger(__name__)
    logger.info("订单提交完成", symbol="XPR_XMD", placed=4)

    get_trading_logger().order_placed("XPR_XMD", "buy", "10.01", "99.99")

未调用 initialize_logging 时使用默认配置（logs/ 目录，INFO 级别）。
"""

from .logger import (
    LogConfig,
    BaseLogger,
    SystemLogger,
    TradingLogger,
    ErrorLogger,
    ExchangeLogger,
    get_config,
    set_config,
    get_logger,
    get_system_logger,
    get_trading_logger,
    get_error_logger,
    get_exchange_logger,
    initialize_logging,
    shutdown_logging,
    get_health_status
)

__all__ = [
    'LogConfig',
    'BaseLogger',
    'SystemLogger',
    'TradingLogger',
    'ErrorLogger',
    'ExchangeLogger',
    'get_logger',
    'get_system_logger',
    'get_trading_logger',
    'get_error_logger',
    'get_exchange_logger',
    'initialize_logging',
    'shutdown_logging',
    'get_config',
    'set_config',
    'get_health_status'
]
