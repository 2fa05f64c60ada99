"""Abstract exchange transport interface.

Defines the contract between the API facade and whatever performs the HTTP
call. The facade only builds URIs and decodes bodies; signing, connection
handling and timeouts belong to the implementation.
"""

from abc import ABC, abstractmethod


class ExchangeClient(ABC):
    """Abstract base class for Bittrex transports."""

    @abstractmethod
    async def do(
        self, method: str, uri: str, payload: str, authenticate: bool
    ) -> bytes:
        """Perform one HTTP request and return the raw response body.

        Args:
            method: HTTP method ("GET", "POST", "DELETE").
            uri: Absolute request URI.
            payload: Serialized JSON body, empty string for reads.
            authenticate: Whether the request must be signed.

        Raises:
            TransportError: When the request could not be completed.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release connection resources."""
        ...
