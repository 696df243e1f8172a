"""
做市系统 - 日志核心实现

每个日志器同时写控制台和按名称分文件的滚动日志；
关键字参数以 " | key=value" 的形式附加在消息末尾，方便 grep。
"""

import logging
from typing import Any, Callable, Dict, Optional, TypeVar
from pathlib import Path
from logging.handlers import RotatingFileHandler

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'

LoggerT = TypeVar('LoggerT', bound='BaseLogger')


def _parse_level(value: str) -> int:
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise AttributeError(f"未知的日志级别: {value}")
    return level


class LogConfig:
    """日志配置"""

    def __init__(self,
                 log_dir: str = "logs",
                 level: str = "INFO",
                 console_level: str = "INFO",
                 file_level: str = "DEBUG",
                 max_file_size: int = 5 * 1024 * 1024,
                 backup_count: int = 3,
                 enable_console: bool = True):
        self.log_dir = log_dir
        self.level = _parse_level(level)
        self.console_level = _parse_level(console_level)
        self.file_level = _parse_level(file_level)
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console

        Path(log_dir).mkdir(parents=True, exist_ok=True)

    def log_file(self, name: str) -> Path:
        return Path(self.log_dir) / f"{name}.log"


class BaseLogger:
    """
    基础日志器

    包装同名的标准库 logger，构造时重建它的处理器。
    """

    def __init__(self, name: str, config: Optional[LogConfig] = None):
        self.name = name
        self.config = config or LogConfig()
        self.logger = logging.getLogger(name)
        self._install_handlers()

    def _install_handlers(self):
        self.logger.setLevel(self.config.level)
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        if self.config.enable_console:
            self.logger.addHandler(self._console_handler())
        self.logger.addHandler(self._file_handler())

    def _console_handler(self) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(self.config.console_level)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        return handler

    def _file_handler(self) -> logging.Handler:
        handler = RotatingFileHandler(
            self.config.log_file(self.name),
            maxBytes=self.config.max_file_size,
            backupCount=self.config.backup_count,
            encoding='utf-8'
        )
        handler.setLevel(self.config.file_level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return handler

    def close(self):
        """关闭并移除全部处理器"""
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._with_extra(message, **kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(self._with_extra(message, **kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._with_extra(message, **kwargs))

    def error(self, message: str, **kwargs):
        self.logger.error(self._with_extra(message, **kwargs))

    def critical(self, message: str, **kwargs):
        self.logger.critical(self._with_extra(message, **kwargs))

    @staticmethod
    def _with_extra(message: str, **kwargs) -> str:
        if not kwargs:
            return message
        extra = " | ".join(f"{key}={value}" for key, value in kwargs.items())
        return f"{message} | {extra}"


class SystemLogger(BaseLogger):
    """系统日志器：组件启停"""

    def __init__(self, config: Optional[LogConfig] = None):
        super().__init__("system", config)

    def startup(self, component: str, version: str = "", **kwargs):
        self.info(f"🚀 组件启动: {component} {version}".rstrip(), component=component, **kwargs)

    def shutdown(self, component: str, reason: str = "", **kwargs):
        self.info(f"🛑 组件关闭: {component} ({reason})", component=component, **kwargs)


class TradingLogger(BaseLogger):
    """交易日志器：下单结果与每轮补单计划"""

    def __init__(self, config: Optional[LogConfig] = None):
        super().__init__("trading", config)

    def order_placed(self, symbol: str, side: str, quantity: Any, price: Any, **kwargs):
        self.info(f"📝 下单: {symbol} {side} {quantity}@{price}", **kwargs)

    def order_rejected(self, symbol: str, side: str, quantity: Any, price: Any, reason: str, **kwargs):
        self.error(f"❌ 下单失败: {symbol} {side} {quantity}@{price} ({reason})", **kwargs)

    def ladder_prepared(self, symbol: str, buys: int, sells: int, **kwargs):
        self.info(f"📊 {symbol} 待补挂单: 买{buys} 卖{sells}", **kwargs)


class ErrorLogger(BaseLogger):
    """错误日志器"""

    def __init__(self, config: Optional[LogConfig] = None):
        super().__init__("error", config)

    def exception(self, error: Exception, context: str = "", **kwargs):
        """记录异常（附带堆栈）"""
        self.logger.error(
            self._with_extra(f"⚠️ 异常: {context} {type(error).__name__}: {error}",
                             error_type=type(error).__name__, **kwargs),
            exc_info=(type(error), error, error.__traceback__)
        )


class ExchangeLogger(BaseLogger):
    """交易所日志器（每个适配器一个）"""

    def __init__(self, exchange_name: str, config: Optional[LogConfig] = None):
        super().__init__(f"exchange.{exchange_name}", config)
        self.exchange_name = exchange_name

    def adapter_start(self, **kwargs):
        self.info(f"🏪 {self.exchange_name} 适配器启动", **kwargs)

    def adapter_stop(self, reason: str = "", **kwargs):
        self.info(f"🛑 {self.exchange_name} 适配器停止 ({reason})", **kwargs)


# 名称 -> 日志器实例
_loggers: Dict[str, BaseLogger] = {}
_config: Optional[LogConfig] = None


def get_config() -> LogConfig:
    """当前日志配置（首次调用时使用默认值）"""
    global _config
    if _config is None:
        _config = LogConfig()
    return _config


def set_config(config: LogConfig):
    global _config
    _config = config


def _cached(key: str, factory: Callable[[LogConfig], LoggerT]) -> LoggerT:
    if key not in _loggers:
        _loggers[key] = factory(get_config())
    return _loggers[key]


def get_logger(name: str) -> BaseLogger:
    return _cached(name, lambda config: BaseLogger(name, config))


def get_system_logger() -> SystemLogger:
    return _cached("system", SystemLogger)


def get_trading_logger() -> TradingLogger:
    return _cached("trading", TradingLogger)


def get_error_logger() -> ErrorLogger:
    return _cached("error", ErrorLogger)


def get_exchange_logger(exchange_name: str) -> ExchangeLogger:
    return _cached(f"exchange.{exchange_name}",
                   lambda config: ExchangeLogger(exchange_name, config))


def initialize_logging(log_dir: str = "logs", level: str = "INFO", enable_console: bool = True) -> bool:
    """
    使用新配置重建日志系统

    已缓存的日志器会被丢弃；之后创建的组件使用新配置。

    Returns:
        配置无效或日志目录无法创建时返回 False
    """
    try:
        config = LogConfig(log_dir=log_dir, level=level, enable_console=enable_console)
    except (OSError, AttributeError) as e:
        logging.getLogger(__name__).error(f"日志系统初始化失败: {e}")
        return False

    for instance in _loggers.values():
        instance.close()
    _loggers.clear()
    set_config(config)

    get_system_logger().startup("MarketMakerLogging", "v1.0")
    return True


def shutdown_logging():
    """关闭全部日志器"""
    if "system" in _loggers:
        _loggers["system"].shutdown("MarketMakerLogging", "正常关闭")

    for instance in _loggers.values():
        instance.close()
    _loggers.clear()


def get_health_status() -> Dict[str, Any]:
    config = get_config()
    return {
        "status": "healthy",
        "version": "v1.0",
        "active_loggers": len(_loggers),
        "config": {
            "log_dir": config.log_dir,
            "level": logging.getLevelName(config.level)
        }
    }
