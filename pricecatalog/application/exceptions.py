from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNCONFIGURED = "unconfigured"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class FetchError(RuntimeError):
    """Raised when the price API cannot deliver a usable response."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnconfiguredError(FetchError):
    """Raised before any network call when the base URL or API key is missing."""

    kind = ErrorKind.UNCONFIGURED


class TransportError(FetchError):
    """Raised on network failures and timeouts."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, detail: str) -> None:
        super().__init__(f"Transport failure: {detail}")
        self.detail = detail


class HttpStatusError(FetchError):
    """Raised when the API answers outside the 2xx range."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API returned status {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(FetchError):
    """Raised when the response body is not the JSON shape we expect."""

    kind = ErrorKind.DECODE
