#!/usr/bin/env python3
"""
阶梯做市系统启动脚本

在每个配置的交易对上维持买卖两侧各 grid_levels 个限价单。
每轮循环只补缺失的挂单，不撤单、不改单。
"""

import sys
import asyncio
import argparse
import logging
from pathlib import Path

from rich.console import Console

from mmbot import __version__
from mmbot.adapters.exchanges import ExchangeConfig, get_exchange_factory
from mmbot.adapters.exchanges.utils import setup_optimized_logging
from mmbot.di import DIContainer, MarketMakerModule
from mmbot.infrastructure import ConfigError, ConfigManager
from mmbot.logging import get_error_logger, get_system_logger, initialize_logging, shutdown_logging
from mmbot.services.market_maker import CycleReportRenderer, MarketMakerRunner


async def main(config_path: str, once: bool = False, debug: bool = False) -> int:
    """
    主函数

    Args:
        config_path: 配置文件路径
        once: 只执行一轮循环
        debug: 是否启用DEBUG模式

    Returns:
        进程退出码
    """
    console = Console()

    # 1. 加载配置
    try:
        app_config = ConfigManager().load_market_maker_config(config_path)
    except ConfigError as e:
        console.print(f"[bold red]❌ 配置错误: {e}[/bold red]")
        return 2

    level = "DEBUG" if debug else app_config.logging.level
    initialize_logging(log_dir=app_config.logging.log_dir, level=level)
    logger = get_system_logger()

    strategy = app_config.strategy
    console.print("=" * 70)
    console.print(f"🎯 阶梯做市系统启动 v{__version__}" + (" - DEBUG 模式" if debug else ""))
    console.print("=" * 70)
    console.print(f"   - 交易所: {app_config.exchange.name}")
    console.print(f"   - 账户: {strategy.username}")
    console.print(f"   - 交易对: {', '.join(strategy.symbols)}")
    console.print(f"   - 每侧挂单: {strategy.grid_levels}")

    # 2. 创建交易所适配器
    try:
        exchange_adapter = get_exchange_factory().create_adapter(
            app_config.exchange.name,
            ExchangeConfig(
                exchange_id=app_config.exchange.name,
                name=app_config.exchange.name,
                extra_params=app_config.exchange.params
            )
        )
    except ValueError as e:
        console.print(f"[bold red]❌ 创建交易所适配器失败: {e}[/bold red]")
        return 2

    renderer = CycleReportRenderer(console)
    exit_code = 0
    runner = None

    try:
        if not await exchange_adapter.connect():
            console.print("[bold red]❌ 交易所连接失败[/bold red]")
            return 1

        # 3. 组装做市组件
        container = DIContainer([MarketMakerModule(strategy, exchange_adapter)])
        runner = container.get(MarketMakerRunner)

        # 组件创建之后再安装优化的格式化器
        setup_optimized_logging(use_colored=True, debug=debug, log_dir=app_config.logging.log_dir)

        # 4. 运行
        if once:
            report = await runner.run_cycle()
            renderer.print(report)
            exit_code = 0 if report.all_ok else 1
        else:
            console.print(f"🚀 每 {strategy.trade_interval} 秒执行一轮，Ctrl+C 退出")
            await runner.run_forever(on_report=renderer.print)

    except (KeyboardInterrupt, asyncio.CancelledError):
        console.print("\n⚠️  收到退出信号，正在停止系统...")

    except Exception as e:
        get_error_logger().exception(e, "做市主循环")
        console.print(f"\n[bold red]❌ 系统错误: {e}[/bold red]")
        exit_code = 1

    finally:
        if runner is not None:
            runner.stop()
        await exchange_adapter.disconnect()
        logger.info("✓ 交易所已断开")
        shutdown_logging()

    return exit_code


def parse_arguments():
    """
    解析命令行参数

    Returns:
        argparse.Namespace: 解析后的参数
    """
    parser = argparse.ArgumentParser(
        description='阶梯做市系统 - 在买卖两侧维持固定数量的限价单',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  # 持续运行（间隔为配置中的 trade_interval）
  python3 run_market_maker.py config/market_maker/default_market_maker.yaml

  # 只执行一轮
  python3 run_market_maker.py config/market_maker/default_market_maker.yaml --once

  # DEBUG 模式
  python3 run_market_maker.py config/market_maker/default_market_maker.yaml --debug
        """
    )

    parser.add_argument(
        'config',
        type=str,
        help='做市配置文件路径 (例如: config/market_maker/default_market_maker.yaml)'
    )

    parser.add_argument(
        '--once',
        action='store_true',
        help='只执行一轮循环后退出'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='启用DEBUG模式，输出详细的调试日志'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'阶梯做市系统 v{__version__}'
    )

    return parser.parse_args()


if __name__ == "__main__":
    args = parse_arguments()

    if not Path(args.config).exists():
        print(f"❌ 配置文件不存在: {args.config}")
        print("\n使用 -h 或 --help 查看使用说明")
        sys.exit(1)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        sys.exit(asyncio.run(main(args.config, once=args.once, debug=args.debug)))
    except KeyboardInterrupt:
        print("\n👋 程序已退出")
