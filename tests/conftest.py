"""Shared test fixtures for the Bittrex client."""

import pytest

from bittrex.config import AppSettings, BittrexSettings
from bittrex.exceptions import NotFoundError
from bittrex.exchange.client import ExchangeClient


# ---------------------------------------------------------------------------
# Canned Bittrex v3 responses, keyed by request path
# ---------------------------------------------------------------------------

ORDER_CLOSED = (
    '{"id": "55eb2c82-4184-4a24-8b6e-ee154b2f7eaf", "marketSymbol": "XRP-BTC",'
    ' "direction": "BUY", "type": "LIMIT", "quantity": "77.53046131",'
    ' "limit": "0.00003528", "timeInForce": "GOOD_TIL_CANCELLED",'
    ' "fillQuantity": "77.53046131", "commission": "0.00000682",'
    ' "proceeds": "0.00272829", "status": "CLOSED",'
    ' "createdAt": "2017-10-20T18:27:20.747Z",'
    ' "updatedAt": "2017-10-20T18:27:20.763Z",'
    ' "closedAt": "2017-10-20T18:27:20.763Z"}'
)

ORDER_NEW = (
    '{"id": "fab677a0-510e-456e-b450-8a75cea69f5d", "marketSymbol": "ETH-BTC",'
    ' "direction": "BUY", "type": "LIMIT", "quantity": "5",'
    ' "limit": "0.00039561", "timeInForce": "GOOD_TIL_CANCELLED",'
    ' "status": "OPEN", "createdAt": "2020-09-08T05:08:40.84Z",'
    ' "updatedAt": "2020-09-08T05:08:40.84Z"}'
)

CANNED_RESPONSES = {
    "/currencies": (
        '[{"symbol": "BTC", "name": "Bitcoin", "coinType": "BITCOIN",'
        ' "status": "ONLINE", "minConfirmations": 2, "notice": "",'
        ' "txFee": "0.00030000", "logoUrl": "https://example.com/btc.png",'
        ' "prohibitedIn": [], "baseAddress": "1N52wHoVR79PMDishab2XmRHsbekCdGquK"}]'
    ),
    "/currencies/fakesymbol": "{}",
    "/balances": (
        '[{"currencySymbol": "BTC", "total": "0.00000000", "available": "0.00000000",'
        ' "updatedAt": "2019-10-29T20:25:10.16Z"},'
        ' {"currencySymbol": "LTC", "total": "0", "available": "0",'
        ' "updatedAt": "2020-09-03T21:27:53.8210894Z"}]'
    ),
    "/markets/fakesymbol": (
        '{"symbol": "ETH-BTC", "baseCurrencySymbol": "ETH", "quoteCurrencySymbol": "BTC",'
        ' "minTradeSize": "0.01000000", "precision": 8, "status": "ONLINE",'
        ' "createdAt": "2015-08-14T09:02:24.817Z", "notice": "", "prohibitedIn": [],'
        ' "associatedTermsOfService": []}'
    ),
    "/markets": (
        '[{"symbol": "4ART-BTC", "baseCurrencySymbol": "4ART", "quoteCurrencySymbol": "BTC",'
        ' "minTradeSize": "10.00000000", "precision": 8, "status": "ONLINE",'
        ' "createdAt": "2020-06-10T15:05:29.833Z", "notice": "", "prohibitedIn": ["US"]},'
        ' {"symbol": "4ART-USDT", "baseCurrencySymbol": "4ART", "quoteCurrencySymbol": "USDT",'
        ' "minTradeSize": "10.00000000", "precision": 5, "status": "ONLINE",'
        ' "createdAt": "2020-06-10T15:05:40.98Z", "notice": "", "prohibitedIn": ["US"]}]'
    ),
    "/markets/ETH-BTC/summary": (
        '{"symbol": "ETH-BTC", "high": "0.03894964", "low": "0.03650000",'
        ' "volume": "18494.04035144", "quoteVolume": "696.42899671",'
        ' "percentChange": "-3.33", "updatedAt": "2020-09-04T04:37:45.107Z"}'
    ),
    "/markets/summaries": (
        '[{"symbol": "4ART-BTC", "high": "0.00000275", "low": "0.00000249",'
        ' "volume": "54499.59344453", "quoteVolume": "0.13917073",'
        ' "percentChange": "10.44", "updatedAt": "2020-09-04T04:58:55.447Z"},'
        ' {"symbol": "4ART-USDT", "high": "0.02880000", "low": "0.02667000",'
        ' "volume": "48259.53706735", "quoteVolume": "1320.75839607",'
        ' "percentChange": "-6.11", "updatedAt": "2020-09-04T04:33:20.01Z"}]'
    ),
    "/markets/ETH-BTC/ticker": (
        '{"symbol": "ETH-BTC", "lastTradeRate": "0.03760069",'
        ' "bidRate": "0.03760103", "askRate": "0.03762798"}'
    ),
    "/markets/tickers": (
        '[{"symbol": "ETH-BTC", "lastTradeRate": "0.03760069",'
        ' "bidRate": "0.03760103", "askRate": "0.03762798"},'
        ' {"symbol": "ETH-FAKE", "lastTradeRate": "1.03760069",'
        ' "bidRate": "1.03760103", "askRate": "1.03762798"}]'
    ),
    "/orders/fakeOrder": ORDER_CLOSED,
    "/orders/open": "[" + ORDER_CLOSED.replace('"CLOSED"', '"OPEN"') + "]",
    "/orders/closed": "[" + ORDER_CLOSED + "]",
    "/orders": ORDER_NEW,
    "/orders/fab677a0-510e-456e-b450-8a75cea69f5d": ORDER_NEW,
}

ERROR_RESPONSES = {
    "/orders": '{"code": "MIN_TRADE_REQUIREMENT_NOT_MET"}',
    "/orders/fab677a0-510e-456e-b450-8a75cea69f5d": '{"code": "ORDER_NOT_OPEN"}',
}


class FakeBittrexClient(ExchangeClient):
    """In-memory transport serving canned bodies by URI.

    Records every call as (method, uri, payload, authenticate). Unknown URIs
    raise NotFoundError, like a 404 from the real transport.
    """

    def __init__(
        self,
        responses: dict[str, str] | None = None,
        enable_errors: bool = False,
    ) -> None:
        self.responses = dict(CANNED_RESPONSES if responses is None else responses)
        if enable_errors:
            self.responses.update(ERROR_RESPONSES)
        self.calls: list[tuple[str, str, str, bool]] = []
        self.closed = False

    async def do(
        self, method: str, uri: str, payload: str, authenticate: bool
    ) -> bytes:
        self.calls.append((method, uri, payload, authenticate))
        if uri not in self.responses:
            raise NotFoundError("test resource not found", status_code=404)
        return self.responses[uri].encode()

    async def close(self) -> None:
        self.closed = True


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_client() -> FakeBittrexClient:
    return FakeBittrexClient()


@pytest.fixture
def bittrex_settings() -> BittrexSettings:
    """Settings with dummy credentials."""
    return BittrexSettings(
        api_key="test-api-key",  # type: ignore[arg-type]
        secret_key="test-secret-key",  # type: ignore[arg-type]
        base_uri="https://api.bittrex.test/v3",
        timeout_seconds=5.0,
    )


@pytest.fixture
def mock_settings(bittrex_settings: BittrexSettings) -> AppSettings:
    """AppSettings with test defaults and an empty base URI for canned paths."""
    return AppSettings(
        log_level="DEBUG",
        log_format="console",
        bittrex=bittrex_settings.model_copy(update={"base_uri": ""}),
    )


@pytest.fixture
def error_client() -> FakeBittrexClient:
    """Transport answering order endpoints with exchange error codes."""
    return FakeBittrexClient(enable_errors=True)


@pytest.fixture
def make_client():
    """Factory for fake transports with custom canned responses."""
    return FakeBittrexClient
