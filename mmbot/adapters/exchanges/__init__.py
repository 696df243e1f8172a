"""
交易所适配层

对外暴露统一接口、数据模型与适配器工厂
"""

from .models import (
    OrderSide,
    TokenInfo,
    MarketInfo,
    OrderBookLevel,
    OrderBookData,
    OpenOrderData,
    OrderResult
)
from .interface import ExchangeInterface, ExchangeConfig, ExchangeStatus
from .factory import ExchangeFactory, get_exchange_factory

__all__ = [
    'OrderSide',
    'TokenInfo',
    'MarketInfo',
    'OrderBookLevel',
    'OrderBookData',
    'OpenOrderData',
    'OrderResult',
    'ExchangeInterface',
    'ExchangeConfig',
    'ExchangeStatus',
    'ExchangeFactory',
    'get_exchange_factory',
]
