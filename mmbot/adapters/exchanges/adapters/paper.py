"""
模拟盘交易所适配器（Dry Run）

完全在内存中运行：
- 市场、最新价、订单簿来自配置文件的 exchange 段
- 提交的限价单只记录为挂单，不会撮合成交
- 下一轮策略循环会看到这些挂单，从而验证补单逻辑

配置示例：
    exchange:
      name: paper
      markets:
        - market_id: 1
          symbol: XPR_XMD
          bid_token: {code: XPR, precision: 4, multiplier: 10000}
          ask_token: {code: XMD, precision: 6, multiplier: 1000000}
          order_min: 10000000
          last_price: "0.0021"
          bids: ["0.0020"]
          asks: ["0.0022"]
      open_orders:
        - {market_id: 1, side: buy, price: "0.0019", quantity: "5000"}
"""

import itertools
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from ....logging import get_exchange_logger
from ..interface import ExchangeInterface, ExchangeConfig, ExchangeStatus
from ..models import (
    OrderSide,
    TokenInfo,
    MarketInfo,
    OrderBookLevel,
    OrderBookData,
    OpenOrderData,
    OrderResult
)


def _parse_decimal(value: Any, field_name: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"{field_name} 不是有效的数值: {value!r}") from exc


def _parse_token(raw: Any, field_name: str) -> TokenInfo:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{field_name} 必须是映射")
    precision = int(raw.get('precision', 0))
    multiplier = raw.get('multiplier', 10 ** precision)
    return TokenInfo(
        code=str(raw.get('code', '')),
        precision=precision,
        multiplier=_parse_decimal(multiplier, f"{field_name}.multiplier")
    )


class PaperExchange(ExchangeInterface):
    """模拟盘适配器"""

    def __init__(self, config: ExchangeConfig):
        super().__init__(config)
        self.logger = get_exchange_logger(config.exchange_id)

        self._markets: Dict[str, MarketInfo] = {}
        self._prices: Dict[str, Decimal] = {}
        self._books: Dict[str, OrderBookData] = {}
        self._open_orders: List[OpenOrderData] = []
        self._order_seq = itertools.count(1)

        self._load_markets(config.extra_params.get('markets') or [])
        self._load_open_orders(config.extra_params.get('open_orders') or [])

    def _load_markets(self, raw_markets: List[Any]) -> None:
        for index, raw in enumerate(raw_markets):
            prefix = f"exchange.markets[{index}]"
            if not isinstance(raw, Mapping) or not raw.get('symbol'):
                raise ValueError(f"{prefix} 必须包含 symbol")
            symbol = str(raw['symbol'])
            market = MarketInfo(
                market_id=raw.get('market_id', index + 1),
                symbol=symbol,
                bid_token=_parse_token(raw.get('bid_token'), f"{prefix}.bid_token"),
                ask_token=_parse_token(raw.get('ask_token'), f"{prefix}.ask_token"),
                order_min=_parse_decimal(raw.get('order_min', 0), f"{prefix}.order_min")
            )
            self._markets[symbol] = market

            if raw.get('last_price') is not None:
                self._prices[symbol] = _parse_decimal(raw['last_price'], f"{prefix}.last_price")
            self._books[symbol] = OrderBookData(
                symbol=symbol,
                bids=[OrderBookLevel(price=_parse_decimal(p, f"{prefix}.bids")) for p in raw.get('bids') or []],
                asks=[OrderBookLevel(price=_parse_decimal(p, f"{prefix}.asks")) for p in raw.get('asks') or []]
            )

    def _load_open_orders(self, raw_orders: List[Any]) -> None:
        for raw in raw_orders:
            if not isinstance(raw, Mapping):
                raise ValueError("exchange.open_orders 的每一项必须是映射")
            self._open_orders.append(OpenOrderData(
                order_id=str(raw.get('order_id') or f"paper-{next(self._order_seq)}"),
                market_id=raw['market_id'],
                side=OrderSide(str(raw['side']).lower()),
                price=raw.get('price'),
                quantity=raw.get('quantity')
            ))

    # === 生命周期管理 ===

    async def connect(self) -> bool:
        self.status = ExchangeStatus.CONNECTED
        self.logger.adapter_start(markets=len(self._markets))
        return True

    async def disconnect(self) -> None:
        self.status = ExchangeStatus.DISCONNECTED
        self.logger.adapter_stop("disconnect")

    # === 市场数据接口 ===

    async def get_market_by_symbol(self, symbol: str) -> Optional[MarketInfo]:
        return self._markets.get(symbol)

    async def fetch_latest_price(self, symbol: str) -> Decimal:
        if symbol not in self._prices:
            raise KeyError(f"没有 {symbol} 的最新价")
        return self._prices[symbol]

    async def fetch_order_book(self, symbol: str, depth: int = 1) -> OrderBookData:
        book = self._books.get(symbol)
        if book is None:
            raise KeyError(f"没有 {symbol} 的订单簿")
        return OrderBookData(symbol=symbol, bids=book.bids[:depth], asks=book.asks[:depth])

    # === 交易接口 ===

    async def fetch_open_orders(self, account: str) -> List[OpenOrderData]:
        # 模拟盘只有一个账户
        return list(self._open_orders)

    async def submit_limit_order(
        self,
        symbol: str,
        side: OrderSide,
        quantity: Decimal,
        price: Decimal
    ) -> OrderResult:
        market = self._markets.get(symbol)
        if market is None:
            error = f"Market {symbol} does not exist"
        elif quantity <= 0 or price <= 0:
            error = f"数量和价格必须大于0: {quantity}@{price}"
        else:
            error = None

        if error:
            self.logger.warning(f"模拟盘拒绝订单: {error}")
            return OrderResult(success=False, symbol=symbol, side=side,
                               quantity=quantity, price=price, error=error)

        order_id = f"paper-{next(self._order_seq)}"
        self._open_orders.append(OpenOrderData(
            order_id=order_id,
            market_id=market.market_id,
            side=side,
            price=price,
            quantity=quantity
        ))
        self.logger.debug(f"模拟盘挂单: {symbol} {side.value} {quantity}@{price}", order_id=order_id)
        return OrderResult(success=True, symbol=symbol, side=side,
                           quantity=quantity, price=price, order_id=order_id)

    def set_latest_price(self, symbol: str, price: Decimal) -> None:
        """更新最新价（模拟行情变化）"""
        self._prices[symbol] = price

    def set_order_book(self, symbol: str, bids: List[Decimal], asks: List[Decimal]) -> None:
        """更新订单簿（模拟行情变化）"""
        self._books[symbol] = OrderBookData(
            symbol=symbol,
            bids=[OrderBookLevel(price=p) for p in bids],
            asks=[OrderBookLevel(price=p) for p in asks]
        )
