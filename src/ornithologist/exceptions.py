"""Custom exceptions for the ornithologist client and CLI."""

from __future__ import annotations


class OrnithologistError(Exception):
    """Base exception for all ornithologist errors."""


class InputError(OrnithologistError):
    """Raised when a line cannot be read from standard input."""


class TransportError(OrnithologistError):
    """Raised when a request to the weather provider cannot complete."""


class ProviderConnectionError(TransportError):
    """Raised when the client cannot connect to the provider."""


class ProviderTimeoutError(TransportError):
    """Raised when a request to the provider times out."""


class ProviderAPIError(TransportError):
    """Raised when the provider returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class MalformedResponse(OrnithologistError):
    """Raised when a provider response does not fit the expected shape."""
