"""
做市系统终端输出

使用 Rich 库把每轮循环结果渲染为表格
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import CycleReport, PairCycleStatus


class CycleReportRenderer:
    """循环结果渲染器"""

    STATUS_STYLES = {
        PairCycleStatus.PLACED: "green",
        PairCycleStatus.SKIPPED: "dim",
        PairCycleStatus.FAILED: "bold red",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: CycleReport) -> Table:
        """创建结果表格（每个交易对一行）"""
        table = Table(show_header=True, header_style="bold magenta", box=None)

        table.add_column("交易对", style="cyan", no_wrap=True)
        table.add_column("状态", width=8)
        table.add_column("待补", style="yellow", justify="right")
        table.add_column("成功", style="green", justify="right")
        table.add_column("失败", style="red", justify="right")
        table.add_column("错误", style="white")

        for result in report.results:
            style = self.STATUS_STYLES.get(result.status, "white")
            table.add_row(
                result.symbol,
                f"[{style}]{result.status.value.upper()}[/{style}]",
                str(result.orders_prepared),
                str(result.orders_placed),
                str(result.orders_failed),
                escape(result.error or "")
            )

        if not report.results:
            table.add_row("--", "--", "--", "--", "--", "")

        return table

    def render_panel(self, report: CycleReport) -> Panel:
        """带标题的结果面板"""
        finished = report.finished_at or report.started_at
        title = (
            f"📊 做市循环 {finished.strftime('%H:%M:%S')} "
            f"(新挂单 {report.total_placed}, 失败交易对 {len(report.failed)})"
        )
        border = "green" if report.all_ok else "red"
        return Panel(self.render(report), title=title, border_style=border)

    def print(self, report: CycleReport) -> None:
        self.console.print(self.render_panel(report))
