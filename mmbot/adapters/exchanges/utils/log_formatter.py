"""
做市日志格式化器

终端用单行简写格式，文件用带调用位置的完整格式；
两者都会给下单、跳过、失败类消息加上类型标签。
"""

import logging
import textwrap

# 标签 -> 关键字（按顺序匹配，第一个命中的生效）
MESSAGE_TAGS = (
    ('FAIL', ('下单失败', 'does not exist', 'unavailable', 'failed')),
    ('ORDER', ('下单', '挂单', '提交')),
    ('SKIP', ('nothing to do',)),
    ('PRICE', ('行情', 'price', '订单簿')),
)

MODULE_SHORTCUTS = {
    'mmbot.services.market_maker.coordinator.strategy_runner': 'Runner',
    'mmbot.services.market_maker.implementations.order_submitter': 'Submit',
    'mmbot.services.market_maker.implementations.market_data_service': 'Market',
    'mmbot.infrastructure.config_manager': 'Config',
    'exchange.paper': 'Paper',
}

LEVEL_LETTERS = {
    'DEBUG': 'D',
    'INFO': 'I',
    'WARNING': 'W',
    'ERROR': 'E',
    'CRITICAL': 'C',
}


def message_tag(message: str) -> str:
    """消息类型标签，无匹配时返回空字符串"""
    for tag, keywords in MESSAGE_TAGS:
        if any(keyword in message for keyword in keywords):
            return tag
    return ''


def short_module_name(name: str) -> str:
    """已知模块用简称，其余保留最后两段"""
    for prefix, shortcut in MODULE_SHORTCUTS.items():
        if name.startswith(prefix):
            return shortcut
    return '.'.join(name.split('.')[-2:])


class CompactFormatter(logging.Formatter):
    """
    终端单行格式

        12:00:01 [Runner   ] I - Executing XPR_XMD market maker trades on account alice
    """

    def __init__(self):
        super().__init__(datefmt='%H:%M:%S')

    def format(self, record):
        letter = LEVEL_LETTERS.get(record.levelname, record.levelname[:1])
        line = (
            f"{self.formatTime(record, self.datefmt)} "
            f"[{short_module_name(record.name):9s}] {letter} - {record.getMessage()}"
        )
        if record.exc_info:
            line += '\n' + textwrap.indent(self.formatException(record.exc_info), '  │ ')
        return line


class DetailedFormatter(logging.Formatter):
    """文件格式：毫秒时间戳、完整 logger 名称和调用位置"""

    def format(self, record):
        message = record.getMessage()
        tag = message_tag(message)
        timestamp = f"{self.formatTime(record, '%Y-%m-%d %H:%M:%S')}.{int(record.msecs):03d}"

        line = f"{timestamp} [{record.levelname:8s}] [{record.name}] {record.funcName}:{record.lineno}"
        if tag:
            line += f" [{tag}]"
        line += f" - {message}"

        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


class ColoredFormatter(CompactFormatter):
    """带 ANSI 颜色的终端格式"""

    RESET = '\033[0m'
    DIM = '\033[2m'

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }

    TAG_COLORS = {
        'FAIL': '\033[91m',
        'ORDER': '\033[94m',
        'SKIP': '\033[93m',
        'PRICE': '\033[90m',
    }

    def format(self, record):
        message = record.getMessage()
        tag = message_tag(message)
        color = self.LEVEL_COLORS.get(record.levelname, '')
        letter = LEVEL_LETTERS.get(record.levelname, record.levelname[:1])

        line = (
            f"{self.DIM}{self.formatTime(record, self.datefmt)}{self.RESET} "
            f"{color}[{letter}]{self.RESET} "
            f"{self.DIM}[{short_module_name(record.name):9s}]{self.RESET} "
        )
        if tag:
            line += f"{self.TAG_COLORS[tag]}[{tag}]{self.RESET} "
        return line + message


def format_order_log(action: str, side: str, quantity: str, price: str,
                     symbol: str, level_index: int = None) -> str:
    """
    订单日志消息

        提交 🟢 XPR_XMD BUY 10.01@99.99 [L0]
    """
    marker = "🟢" if side.lower() == "buy" else "🔴"
    message = f"{action} {marker} {symbol} {side.upper()} {quantity}@{price}"
    if level_index is not None:
        message += f" [L{level_index}]"
    return message
