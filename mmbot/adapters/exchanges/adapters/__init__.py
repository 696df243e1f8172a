"""
交易所适配器实现
"""

from .paper import PaperExchange

__all__ = ['PaperExchange']
