"""
Tests for the logging wrappers and console/file formatters.
"""

import logging

import pytest

from mmbot.adapters.exchanges.utils import (
    ColoredFormatter,
    CompactFormatter,
    DetailedFormatter,
    LoggingConfig,
    format_order_log,
    setup_optimized_logging,
)
from mmbot.logging import get_health_status, get_logger, get_trading_logger


def make_record(name, message, level=logging.INFO):
    return logging.LogRecord(name, level, __file__, 10, message, None, None, func="run_cycle")


class TestLoggers:

    def test_extra_fields_are_appended(self, caplog):
        logger = get_logger("mmbot.tests.extra")

        with caplog.at_level(logging.INFO):
            logger.info("订单提交完成", symbol="XPR_XMD", placed=2)

        assert "订单提交完成 | symbol=XPR_XMD | placed=2" in caplog.text

    def test_loggers_are_cached(self):
        assert get_logger("mmbot.tests.cached") is get_logger("mmbot.tests.cached")
        assert get_trading_logger() is get_trading_logger()

    def test_trading_logger_order_rejected(self, caplog):
        with caplog.at_level(logging.INFO):
            get_trading_logger().order_rejected("XPR_XMD", "sell", "0.0981", "102.01", "post-only")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "XPR_XMD sell 0.0981@102.01 (post-only)" in record.getMessage()

    def test_health_status(self, test_logging):
        status = get_health_status()

        assert status["status"] == "healthy"
        assert status["config"]["log_dir"] == str(test_logging)


class TestFormatters:

    def test_compact_shortens_known_modules(self):
        record = make_record("mmbot.services.market_maker.coordinator.strategy_runner", "hello")

        line = CompactFormatter().format(record)

        assert "[Runner   ] I - hello" in line

    def test_compact_keeps_last_two_parts_of_unknown_modules(self):
        line = CompactFormatter().format(make_record("a.b.c.d", "x", logging.WARNING))

        assert "[c.d      ] W - x" in line

    def test_detailed_tags_skip_messages(self):
        record = make_record("runner", "nothing to do - we have enough orders on the books for XPR_XMD")

        line = DetailedFormatter().format(record)

        assert "[SKIP]" in line
        assert "run_cycle:10" in line

    def test_colored_tags_order_messages(self):
        line = ColoredFormatter().format(make_record("submitter", "📝 下单: XPR_XMD buy 10.01@99.99"))

        assert "[ORDER]" in line
        assert line.endswith("📝 下单: XPR_XMD buy 10.01@99.99")

    def test_format_order_log(self):
        assert format_order_log("提交", "buy", "10.01", "99.99", "XPR_XMD", 0) == \
            "提交 🟢 XPR_XMD BUY 10.01@99.99 [L0]"
        assert format_order_log("提交", "sell", "1", "2", "XPR_XMD") == "提交 🔴 XPR_XMD SELL 1@2"


class TestSetupOptimizedLogging:

    @pytest.fixture
    def restore_market_maker_loggers(self, monkeypatch):
        monkeypatch.setattr(LoggingConfig, "LOG_DIR", LoggingConfig.LOG_DIR)
        yield
        for name in LoggingConfig.MARKET_MAKER_MODULES:
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.propagate = True

    def test_installs_handlers_on_market_maker_loggers(self, tmp_path, restore_market_maker_loggers):
        loggers = setup_optimized_logging(use_colored=False, debug=True, log_dir=str(tmp_path))

        assert [lg.name for lg in loggers] == LoggingConfig.MARKET_MAKER_MODULES
        for lg in loggers:
            assert lg.level == logging.DEBUG
            assert not lg.propagate
            assert len(lg.handlers) == 2
        assert (tmp_path / "market_maker.log").exists()
