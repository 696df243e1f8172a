"""
依赖注入容器

对 injector.Injector 的薄封装：注册模块后重建注入器
"""

from injector import Injector, Module
from typing import List, Optional, Type, TypeVar

from ..logging import get_system_logger

T = TypeVar('T')


class DIContainer:
    """依赖注入容器"""

    def __init__(self, modules: Optional[List[Module]] = None):
        self.logger = get_system_logger()
        self.modules: List[Module] = []
        self.injector = Injector()
        if modules:
            self.register_modules(modules)

    def register_module(self, module: Module):
        self.register_modules([module])

    def register_modules(self, modules: List[Module]):
        """注册模块（已创建的单例会随注入器一起丢弃）"""
        self.modules.extend(modules)
        self.injector = Injector(self.modules)
        names = ', '.join(type(m).__name__ for m in modules)
        self.logger.info(f"注册模块: {names}")

    def get(self, interface: Type[T]) -> T:
        """获取实例"""
        return self.injector.get(interface)
