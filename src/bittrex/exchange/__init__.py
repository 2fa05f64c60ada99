"""Exchange layer -- Bittrex v3 REST transport and API facade."""

from bittrex.exchange.api import BittrexAPI
from bittrex.exchange.client import ExchangeClient
from bittrex.exchange.http_client import BittrexHttpClient

__all__ = ["BittrexAPI", "BittrexHttpClient", "ExchangeClient"]
