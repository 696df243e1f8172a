"""
交易所适配器工厂

按交易所ID注册和创建适配器实例
"""

from typing import Dict, List, Optional, Type

from .interface import ExchangeInterface, ExchangeConfig


class ExchangeFactory:
    """交易所适配器工厂"""

    def __init__(self):
        self._adapters: Dict[str, Type[ExchangeInterface]] = {}
        self._register_builtin_adapters()

    def _register_builtin_adapters(self):
        """注册内置适配器"""
        from .adapters.paper import PaperExchange
        self.register_adapter("paper", PaperExchange)

    def register_adapter(self, exchange_id: str, adapter_class: Type[ExchangeInterface]) -> None:
        """
        注册适配器

        Args:
            exchange_id: 交易所ID（大小写不敏感）
            adapter_class: 适配器类
        """
        if not issubclass(adapter_class, ExchangeInterface):
            raise TypeError(f"{adapter_class.__name__} 必须实现 ExchangeInterface")
        self._adapters[exchange_id.lower()] = adapter_class

    def create_adapter(self, exchange_id: str, config: ExchangeConfig) -> ExchangeInterface:
        """
        创建适配器实例

        Raises:
            ValueError: 未注册的交易所ID
        """
        adapter_class = self._adapters.get(exchange_id.lower())
        if adapter_class is None:
            raise ValueError(
                f"不支持的交易所: {exchange_id}，可用: {', '.join(self.list_adapters())}"
            )
        return adapter_class(config)

    def list_adapters(self) -> List[str]:
        """已注册的交易所ID列表"""
        return sorted(self._adapters)


_factory: Optional[ExchangeFactory] = None


def get_exchange_factory() -> ExchangeFactory:
    """获取全局工厂实例"""
    global _factory
    if _factory is None:
        _factory = ExchangeFactory()
    return _factory
