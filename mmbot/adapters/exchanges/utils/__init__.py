"""
交易所适配器工具模块

提供日志优化、格式化等工具函数
"""

from .setup_logging import (
    LoggingConfig,
    setup_optimized_logging,
)

from .log_formatter import (
    CompactFormatter,
    DetailedFormatter,
    ColoredFormatter,
    format_order_log,
)

__all__ = [
    'LoggingConfig',
    'setup_optimized_logging',
    'format_order_log',
    'CompactFormatter',
    'DetailedFormatter',
    'ColoredFormatter',
]
