"""
依赖注入
"""

from .container import DIContainer
from .modules import MarketMakerModule

__all__ = [
    'DIContainer',
    'MarketMakerModule',
]
