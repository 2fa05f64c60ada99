"""Async client for the Bittrex v3 REST API."""

from bittrex.exchange import BittrexAPI, BittrexHttpClient, ExchangeClient
from bittrex.models import (
    Balance,
    Currency,
    ExchangeResult,
    Market,
    MarketSummary,
    MarketTicker,
    Order,
    OrderCancel,
    OrderSide,
    OrderStatusFilter,
    OrderType,
    TimeInForce,
)

__all__ = [
    "Balance",
    "BittrexAPI",
    "BittrexHttpClient",
    "Currency",
    "ExchangeClient",
    "ExchangeResult",
    "Market",
    "MarketSummary",
    "MarketTicker",
    "Order",
    "OrderCancel",
    "OrderSide",
    "OrderStatusFilter",
    "OrderType",
    "TimeInForce",
]
