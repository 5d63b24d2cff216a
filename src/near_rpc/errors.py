"""Exception taxonomy raised by the transport and the client.

Every failure a call can end in is one of these, all rooted at
`NearClientError` so callers can catch the whole family at once:

* `InvalidURLError`: the base URL given at construction is unusable.
* `TransportError`: the HTTP exchange failed, or its body was not a JSON-RPC
  envelope (`RequestTimeoutError`, `HttpError`, `InvalidResponseError`).
* `NearRpcError`: the node answered with a JSON-RPC `error` object.
* `EmptyResultError`: the envelope carried neither `result` nor `error`.
* `ResultDecodeError`: `result` did not match the expected view.
"""

from enum import IntEnum
from typing import Any, Optional

from .models.errors import ErrorData


class NearErrorCode(IntEnum):
    """Known JSON-RPC and NEAR-specific error codes."""

    # Standard JSON-RPC errors
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # NEAR server errors
    HANDLER_ERROR = -32000
    REQUEST_VALIDATION_ERROR = -32001
    INTERNAL_SERVER_ERROR = -32002
    TIMEOUT = -32003

    # Block/Chunk errors
    UNKNOWN_BLOCK = -32100
    UNKNOWN_CHUNK = -32101

    # Account errors
    UNKNOWN_ACCOUNT = -32200
    UNKNOWN_ACCESS_KEY = -32201
    INVALID_ACCOUNT = -32202

    # Transaction errors
    UNKNOWN_TRANSACTION = -32300
    INVALID_TRANSACTION = -32301
    TIMEOUT_ERROR = -32302

    # Contract errors
    CONTRACT_EXECUTION_ERROR = -32400
    COMPILATION_ERROR = -32401

    # State/Storage errors
    STORAGE_ERROR = -32500

    UNKNOWN = 0

    @classmethod
    def classify(cls, code: int) -> "NearErrorCode":
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


class NearClientError(Exception):
    """Base class for every error raised by this package."""


class InvalidURLError(NearClientError, ValueError):
    def __init__(self, url: str):
        super().__init__(f"Invalid RPC URL provided: {url!r}")
        self.url = url


class TransportError(NearClientError):
    """The HTTP exchange failed or did not yield a JSON-RPC envelope."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestTimeoutError(TransportError):
    pass


class HttpError(TransportError):
    """Non-200 status whose body is not a JSON-RPC envelope."""

    def __init__(self, status_code: int, body: Optional[bytes] = None):
        super().__init__(f"HTTP error: {status_code}", status_code=status_code, body=body)


class InvalidResponseError(TransportError):
    """200 status whose body is not a JSON-RPC envelope."""


class NearRpcError(NearClientError):
    """The node returned a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Optional[ErrorData] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    @property
    def error_code(self) -> NearErrorCode:
        return NearErrorCode.classify(self.code)

    def __str__(self) -> str:
        text = f"{self.message} (code: {self.code})"
        if self.data is not None:
            text += f"\nDetails: {self.data.description}"
        return text

    def __repr__(self) -> str:
        return f"NearRpcError(code={self.code}, message={self.message!r}, data={self.data!r})"


class EmptyResultError(NearClientError):
    def __init__(self, message: str = "Empty result in JSON-RPC response"):
        super().__init__(message)


class ResultDecodeError(NearClientError):
    """`result` was present but did not match the expected shape."""

    def __init__(self, result_type: Any, cause: Exception):
        name = getattr(result_type, "__name__", repr(result_type))
        super().__init__(f"Failed to decode result as {name}: {cause}")
        self.result_type = result_type
        self.cause = cause


__all__ = [
    "EmptyResultError",
    "HttpError",
    "InvalidResponseError",
    "InvalidURLError",
    "NearClientError",
    "NearErrorCode",
    "NearRpcError",
    "RequestTimeoutError",
    "ResultDecodeError",
    "TransportError",
]
