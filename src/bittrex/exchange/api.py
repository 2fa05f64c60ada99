"""Bittrex v3 REST API facade.

Maps each exchange operation to a path, an HTTP method and an
authentication requirement, delegates the call to an ExchangeClient, and
decodes the body into typed models.

Exchange-side rejections (unknown market, insufficient balance, order already
closed, ...) are NOT raised. Bittrex answers ``{"code": "..."}`` and the
single-resource results (Currency, Market, MarketSummary, MarketTicker and
Order) decode it with ``code`` set; callers check ``is_error``. List endpoints
have no such shape, so a code body there raises DecodeError.

Path parameters are percent-encoded as one segment each, so a symbol or order
ID can never change which endpoint is addressed.
"""

from typing import TypeVar
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from bittrex.exceptions import DecodeError
from bittrex.exchange.client import ExchangeClient
from bittrex.logging import get_logger
from bittrex.models import (
    Balance,
    Currency,
    Market,
    MarketSummary,
    MarketTicker,
    Order,
    OrderStatusFilter,
)

logger = get_logger(__name__)

T = TypeVar("T")

_CURRENCIES = TypeAdapter(list[Currency])
_MARKETS = TypeAdapter(list[Market])
_SUMMARIES = TypeAdapter(list[MarketSummary])
_TICKERS = TypeAdapter(list[MarketTicker])
_BALANCES = TypeAdapter(list[Balance])
_ORDERS = TypeAdapter(list[Order])
_CURRENCY = TypeAdapter(Currency)
_MARKET = TypeAdapter(Market)
_SUMMARY = TypeAdapter(MarketSummary)
_TICKER = TypeAdapter(MarketTicker)
_ORDER = TypeAdapter(Order)


def _segment(value: str) -> str:
    """Encode one path segment, including any "/", "?" or "#"."""
    if not value:
        raise ValueError("path parameter must not be empty")
    return quote(value, safe="")


def _order_segment(order_id: str) -> str:
    # "/orders/open" and "/orders/closed" are the listing endpoints
    if order_id.lower() in {s.value for s in OrderStatusFilter}:
        raise ValueError(f"{order_id!r} is not an order ID, use get_orders()")
    return _segment(order_id)


class BittrexAPI:
    """Typed access to the Bittrex v3 REST endpoints.

    Holds only the base URI and the transport; every method performs exactly
    one request.
    """

    def __init__(self, client: ExchangeClient, uri: str) -> None:
        self._client = client
        self._uri = uri.rstrip("/")

    @property
    def uri(self) -> str:
        return self._uri

    async def _call(
        self,
        method: str,
        path: str,
        adapter: TypeAdapter[T],
        payload: str = "",
        authenticate: bool = False,
    ) -> T:
        """Perform one request and decode its body.

        Transport exceptions propagate unchanged. Decoding failures raise
        DecodeError with the raw body attached.
        """
        logger.debug(
            "bittrex_request", method=method, path=path, authenticate=authenticate
        )
        body = await self._client.do(method, self._uri + path, payload, authenticate)
        try:
            return adapter.validate_json(body)
        except ValidationError as exc:
            text = body.decode("utf-8", errors="replace")
            logger.warning("bittrex_decode_failed", method=method, path=path, body=text)
            raise DecodeError(path, text, exc) from exc

    # -- currencies ---------------------------------------------------------

    async def get_currencies(self) -> list[Currency]:
        return await self._call("GET", "/currencies", _CURRENCIES)

    async def get_currency(self, symbol: str) -> Currency:
        return await self._call("GET", f"/currencies/{_segment(symbol)}", _CURRENCY)

    # -- markets ------------------------------------------------------------

    async def get_markets(self) -> list[Market]:
        return await self._call("GET", "/markets", _MARKETS)

    async def get_market(self, symbol: str) -> Market:
        return await self._call("GET", f"/markets/{_segment(symbol)}", _MARKET)

    async def get_market_summaries(self) -> list[MarketSummary]:
        return await self._call("GET", "/markets/summaries", _SUMMARIES)

    async def get_market_summary(self, symbol: str) -> MarketSummary:
        return await self._call("GET", f"/markets/{_segment(symbol)}/summary", _SUMMARY)

    async def get_market_tickers(self) -> list[MarketTicker]:
        return await self._call("GET", "/markets/tickers", _TICKERS)

    async def get_market_ticker(self, symbol: str) -> MarketTicker:
        return await self._call("GET", f"/markets/{_segment(symbol)}/ticker", _TICKER)

    # -- account ------------------------------------------------------------

    async def get_balances(self) -> list[Balance]:
        return await self._call("GET", "/balances", _BALANCES, authenticate=True)

    async def get_order(self, order_id: str) -> Order:
        return await self._call(
            "GET", f"/orders/{_order_segment(order_id)}", _ORDER, authenticate=True
        )

    async def get_orders(self, open_or_closed: OrderStatusFilter | str) -> list[Order]:
        """List open or closed orders.

        Accepts "open"/"closed" in any case. Anything else raises ValueError
        without contacting the exchange.
        """
        if isinstance(open_or_closed, OrderStatusFilter):
            status = open_or_closed
        elif isinstance(open_or_closed, str):
            status = OrderStatusFilter(open_or_closed.lower())
        else:
            raise ValueError(f"unknown order filter {open_or_closed!r}")
        return await self._call(
            "GET", f"/orders/{status.value}", _ORDERS, authenticate=True
        )

    async def create_order(self, order: Order) -> Order:
        """Place an order.

        market_symbol, direction, order_type and time_in_force are required by
        the exchange; this method does not check them and a rejected request
        comes back as an Order with ``code`` set.
        """
        payload = order.to_payload()
        logger.info(
            "creating_order",
            market=order.market_symbol,
            direction=order.direction,
            order_type=order.order_type,
            quantity=str(order.quantity) if order.quantity is not None else None,
        )
        result = await self._call(
            "POST", "/orders", _ORDER, payload=payload, authenticate=True
        )
        if result.is_error:
            logger.info("order_rejected", market=order.market_symbol, code=result.code)
        return result

    async def cancel_order(self, order_id: str) -> Order:
        path = f"/orders/{_order_segment(order_id)}"
        logger.info("cancelling_order", order_id=order_id)
        result = await self._call("DELETE", path, _ORDER, authenticate=True)
        if result.is_error:
            logger.info("cancel_rejected", order_id=order_id, code=result.code)
        return result
