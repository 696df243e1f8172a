"""
做市协调器模块
"""

from .strategy_runner import MarketMakerRunner

__all__ = [
    'MarketMakerRunner',
]
