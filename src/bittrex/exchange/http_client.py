"""Bittrex v3 HTTP transport via httpx async.

Performs requests against the REST API and signs private ones with the
API-key scheme Bittrex documents for v3:

    Api-Key           the API key
    Api-Timestamp     epoch milliseconds
    Api-Content-Hash  hex SHA-512 of the request body ("" for reads)
    Api-Signature     hex HMAC-SHA512(secret, timestamp + uri + method
                      + content hash + subaccount id)
    Api-Subaccount-Id only when trading on behalf of a subaccount

Error bodies with a 4xx status are returned as-is: Bittrex puts the reason in
a ``{"code": ...}`` body and callers decide what to do with it.
"""

import hashlib
import hmac
import time

import httpx

from bittrex.config import BittrexSettings
from bittrex.exceptions import AuthenticationError, NotFoundError, TransportError
from bittrex.exchange.client import ExchangeClient
from bittrex.logging import get_logger

logger = get_logger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def content_hash(payload: str) -> str:
    """Hex SHA-512 digest of a request body."""
    return hashlib.sha512(payload.encode()).hexdigest()


def sign(
    secret: str,
    timestamp: str,
    uri: str,
    method: str,
    payload_hash: str,
    subaccount_id: str = "",
) -> str:
    """Compute the Api-Signature header value."""
    pre_sign = "".join([timestamp, uri, method.upper(), payload_hash, subaccount_id])
    return hmac.new(secret.encode(), pre_sign.encode(), hashlib.sha512).hexdigest()


class BittrexHttpClient(ExchangeClient):
    """Concrete Bittrex transport using httpx.AsyncClient."""

    def __init__(
        self,
        settings: BittrexSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=settings.timeout_seconds)
        self._client = http_client

    @property
    def http(self) -> httpx.AsyncClient:
        """Access the underlying httpx client."""
        return self._client

    async def __aenter__(self) -> "BittrexHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
            logger.debug("bittrex_http_client_closed")

    def auth_headers(self, method: str, uri: str, payload: str) -> dict[str, str]:
        """Build the signed header set for one request."""
        api_key = self._settings.api_key.get_secret_value()
        secret = self._settings.secret_key.get_secret_value()
        if not api_key or not secret:
            raise AuthenticationError(
                f"{method} {uri} requires BITTREX_API_KEY and BITTREX_SECRET_KEY"
            )

        timestamp = str(now_ms())
        payload_hash = content_hash(payload)
        subaccount_id = self._settings.subaccount_id
        headers = {
            "Api-Key": api_key,
            "Api-Timestamp": timestamp,
            "Api-Content-Hash": payload_hash,
            "Api-Signature": sign(
                secret, timestamp, uri, method, payload_hash, subaccount_id
            ),
        }
        if subaccount_id:
            headers["Api-Subaccount-Id"] = subaccount_id
        return headers

    async def do(
        self, method: str, uri: str, payload: str, authenticate: bool
    ) -> bytes:
        """Send the request and return the raw body.

        Raises:
            AuthenticationError: Signing requested without credentials.
            NotFoundError: HTTP 404.
            TransportError: Network failure, timeout, or HTTP 5xx.
        """
        headers = {"Content-Type": "application/json"}
        if authenticate:
            headers.update(self.auth_headers(method, uri, payload))

        logger.debug(
            "bittrex_http_request",
            method=method,
            uri=uri,
            authenticate=authenticate,
        )
        try:
            response = await self._client.request(
                method,
                uri,
                content=payload.encode() if payload else None,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "bittrex_http_error",
                method=method,
                uri=uri,
                error=exc.__class__.__name__,
            )
            raise TransportError(f"{method} {uri} failed: {exc}") from exc

        status = response.status_code
        if status == 404:
            raise NotFoundError(
                f"{method} {uri}: not found", status_code=status, body=response.text
            )
        if status >= 500:
            logger.warning(
                "bittrex_server_error", method=method, uri=uri, status=status
            )
            raise TransportError(
                f"{method} {uri}: HTTP {status}", status_code=status, body=response.text
            )
        if status >= 400:
            logger.info("bittrex_client_error", method=method, uri=uri, status=status)

        return response.content
