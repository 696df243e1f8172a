"""
Tests for dependency wiring and the terminal cycle report.
"""

from io import StringIO

import pytest
from rich.console import Console
from rich.table import Table

from mmbot.di import DIContainer, MarketMakerModule
from mmbot.services.market_maker import (
    CycleReport,
    CycleReportRenderer,
    IGridOrderBuilder,
    IOrderReconciler,
    IStrategyRunner,
    MarketMakerRunner,
    PairCycleResult,
    PairCycleStatus,
)


class TestMarketMakerModule:

    def test_runner_is_wired_with_shared_components(self, make_config, paper_exchange):
        config = make_config(grid_levels=2)
        container = DIContainer([MarketMakerModule(config, paper_exchange)])

        runner = container.get(MarketMakerRunner)

        assert runner.config is config
        assert runner.market_data.exchange is paper_exchange
        assert runner.submitter.exchange is paper_exchange
        assert runner.reconciler is container.get(IOrderReconciler)
        assert runner.reconciler.builder is container.get(IGridOrderBuilder)
        assert container.get(IStrategyRunner) is runner
        assert container.get(MarketMakerRunner) is runner

    @pytest.mark.asyncio
    async def test_wired_runner_completes_a_cycle(self, make_config, paper_exchange):
        container = DIContainer()
        container.register_module(MarketMakerModule(make_config(grid_levels=1), paper_exchange))

        report = await container.get(IStrategyRunner).run_cycle()

        assert report.get("XPR_XMD").orders_placed == 2


class TestCycleReportRenderer:

    @pytest.fixture
    def report(self):
        report = CycleReport()
        report.add(PairCycleResult("XPR_XMD", PairCycleStatus.PLACED, orders_prepared=4, orders_placed=4))
        report.add(PairCycleResult("XBTC_XMD", PairCycleStatus.SKIPPED))
        report.add(PairCycleResult("NOPE_XMD", PairCycleStatus.FAILED, error="Market NOPE_XMD does not exist"))
        return report

    def test_one_row_per_pair(self, report):
        table = CycleReportRenderer().render(report)

        assert isinstance(table, Table)
        assert table.row_count == 3
        assert len(table.columns) == 6

    def test_empty_report_has_placeholder_row(self):
        assert CycleReportRenderer().render(CycleReport()).row_count == 1

    def test_print_includes_errors(self, report):
        buffer = StringIO()
        renderer = CycleReportRenderer(Console(file=buffer, width=160, color_system=None))

        renderer.print(report)

        output = buffer.getvalue()
        assert "XPR_XMD" in output
        assert "SKIPPED" in output
        assert "Market NOPE_XMD does not exist" in output

    def test_error_text_is_printed_literally(self):
        report = CycleReport()
        report.add(PairCycleResult("XPR_XMD", PairCycleStatus.FAILED, error="bad [/x] close [bold]gateway[/bold]"))
        buffer = StringIO()
        renderer = CycleReportRenderer(Console(file=buffer, width=160, color_system=None))

        renderer.print(report)

        assert "bad [/x] close [bold]gateway[/bold]" in buffer.getvalue()

    def test_report_summary(self, report):
        assert report.total_placed == 4
        assert [r.symbol for r in report.failed] == ["NOPE_XMD"]
        assert not report.all_ok
        assert report.get("missing") is None
