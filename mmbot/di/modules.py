"""
依赖注入模块配置

做市组件的绑定规则：
配置和交易所适配器由启动脚本创建后以实例绑定，其余组件均为单例。
"""

from injector import Module, singleton, provider

from ..adapters.exchanges import ExchangeInterface
from ..services.market_maker.models import StrategyConfig
from ..services.market_maker.interfaces import IGridOrderBuilder, IOrderReconciler, IStrategyRunner
from ..services.market_maker.implementations import (
    GridOrderBuilderImpl,
    OpenOrderReconcilerImpl,
    MarketDataService,
    OrderSubmitter
)
from ..services.market_maker.coordinator import MarketMakerRunner


class MarketMakerModule(Module):
    """做市模块"""

    def __init__(self, strategy_config: StrategyConfig, exchange: ExchangeInterface):
        self.strategy_config = strategy_config
        self.exchange = exchange

    def configure(self, binder):
        binder.bind(StrategyConfig, to=self.strategy_config)
        binder.bind(ExchangeInterface, to=self.exchange)
        binder.bind(IGridOrderBuilder, to=GridOrderBuilderImpl, scope=singleton)
        binder.bind(IOrderReconciler, to=OpenOrderReconcilerImpl, scope=singleton)
        binder.bind(MarketDataService, to=MarketDataService, scope=singleton)
        binder.bind(OrderSubmitter, to=OrderSubmitter, scope=singleton)

    @singleton
    @provider
    def provide_runner(self,
                       config: StrategyConfig,
                       market_data: MarketDataService,
                       reconciler: IOrderReconciler,
                       submitter: OrderSubmitter) -> MarketMakerRunner:
        """提供策略运行器实例"""
        return MarketMakerRunner(config, market_data, reconciler, submitter)

    @singleton
    @provider
    def provide_strategy_runner(self, runner: MarketMakerRunner) -> IStrategyRunner:
        return runner
