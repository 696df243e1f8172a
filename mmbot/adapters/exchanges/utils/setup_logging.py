"""
做市模块日志配置

给核心模块的 logger 换上简写终端格式和共用的 market_maker.log 文件。
调用之后这些 logger 不再向上传播，避免与根 logger 重复输出。
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from .log_formatter import CompactFormatter, DetailedFormatter, ColoredFormatter


class LoggingConfig:
    """做市模块日志配置"""

    LOG_DIR = Path("logs")
    LOG_FILE = "market_maker.log"
    MAX_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 5

    MARKET_MAKER_MODULES = [
        'mmbot.services.market_maker.coordinator.strategy_runner',
        'mmbot.services.market_maker.implementations.order_submitter',
        'mmbot.services.market_maker.implementations.market_data_service',
    ]

    @classmethod
    def console_handler(cls, colored: bool, level: int) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter() if colored else CompactFormatter())
        return handler

    @classmethod
    def file_handler(cls) -> logging.Handler:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            cls.LOG_DIR / cls.LOG_FILE,
            maxBytes=cls.MAX_BYTES,
            backupCount=cls.BACKUP_COUNT,
            encoding='utf-8'
        )
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(DetailedFormatter())
        return handler

    @classmethod
    def apply(cls, name: str, colored: bool, level: int) -> logging.Logger:
        """替换单个 logger 的处理器"""
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        logger.setLevel(level)
        logger.propagate = False
        logger.addHandler(cls.console_handler(colored, level))
        logger.addHandler(cls.file_handler())
        return logger


def _supports_color() -> bool:
    isatty = getattr(sys.stdout, 'isatty', None)
    return bool(isatty and isatty())


def setup_optimized_logging(use_colored: bool = True,
                            debug: bool = False,
                            log_dir: Optional[str] = None) -> List[logging.Logger]:
    """
    为做市核心模块安装优化的日志格式

    Args:
        use_colored: 终端支持时使用彩色输出
        debug: 输出DEBUG级别日志
        log_dir: 日志目录（默认 logs）
    """
    if log_dir:
        LoggingConfig.LOG_DIR = Path(log_dir)
    level = logging.DEBUG if debug else logging.INFO
    colored = use_colored and _supports_color()

    loggers = [LoggingConfig.apply(name, colored, level) for name in LoggingConfig.MARKET_MAKER_MODULES]
    logging.getLogger(__name__).info("✅ 做市模块日志格式已配置")
    return loggers
