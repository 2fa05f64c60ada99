"""Example program for the Bittrex client.

Wires settings, logging, transport and API together, then prints market data
for one symbol. When BITTREX_API_KEY and BITTREX_SECRET_KEY are set it also
prints balances and open orders.

Usage:
    bittrex-example [SYMBOL]     (default: ETH-BTC)
"""

import asyncio
import sys

from bittrex.config import AppSettings
from bittrex.exchange.api import BittrexAPI
from bittrex.exchange.http_client import BittrexHttpClient
from bittrex.logging import get_logger, setup_logging
from bittrex.models import OrderStatusFilter

DEFAULT_SYMBOL = "ETH-BTC"


async def run(symbol: str = DEFAULT_SYMBOL, settings: AppSettings | None = None) -> None:
    """Fetch and print market data (and account data when keys are present)."""
    settings = settings or AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("bittrex.main")

    client = BittrexHttpClient(settings.bittrex)
    api = BittrexAPI(client, settings.bittrex.base_uri)
    logger.info("example_started", symbol=symbol, base_uri=api.uri)

    try:
        summary = await api.get_market_summary(symbol)
        if summary.is_error:
            logger.error("market_unavailable", symbol=symbol, code=summary.code)
            return
        ticker = await api.get_market_ticker(symbol)
        print(f"{summary.symbol}: high={summary.high} low={summary.low} volume={summary.volume}")
        print(f"{ticker.symbol}: last={ticker.last_trade_rate} bid={ticker.bid_rate} ask={ticker.ask_rate}")

        if not settings.bittrex.has_credentials:
            logger.warning(
                "no_api_keys_configured",
                note="Set BITTREX_API_KEY and BITTREX_SECRET_KEY for account data.",
            )
            return

        for balance in await api.get_balances():
            print(f"{balance.currency_symbol}: total={balance.total:f} available={balance.available:f}")
        for order in await api.get_orders(OrderStatusFilter.OPEN):
            print(order.model_dump_json(by_alias=True, exclude_none=True))
    finally:
        await client.close()
        logger.info("example_finished")


def main() -> None:
    """Synchronous entry point."""
    symbol = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SYMBOL
    asyncio.run(run(symbol))


if __name__ == "__main__":
    main()
