"""Custom exceptions for the Bittrex client.

Transport and decoding failures live here so the API facade and the HTTP
client can share them without importing each other.
"""


class BittrexError(Exception):
    """Base exception for all client errors."""


class TransportError(BittrexError):
    """Raised when the HTTP exchange with Bittrex fails.

    Covers connection problems, timeouts and server-side (5xx) responses.
    ``status_code`` and ``body`` are set when a response was received.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NotFoundError(TransportError):
    """Raised when the requested endpoint or resource does not exist."""


class AuthenticationError(BittrexError):
    """Raised when a signed request is attempted without credentials."""


class DecodeError(BittrexError):
    """Raised when a response body cannot be decoded into the expected type.

    The raw body is appended to the message: Bittrex reports failures such as
    ``{"code": "INVALID_SIGNATURE"}`` in shapes that do not match the result
    type, and that text is the only useful diagnostic.
    """

    def __init__(self, path: str, body: str, cause: Exception) -> None:
        super().__init__(f"failed to decode response from {path}: {cause} {body}")
        self.path = path
        self.body = body
