"""Typed async client for the NEAR Protocol JSON-RPC API."""

from .blocking import BlockingNearClient
from .client import NearClient
from .errors import (
    EmptyResultError,
    HttpError,
    InvalidResponseError,
    InvalidURLError,
    NearClientError,
    NearErrorCode,
    NearRpcError,
    RequestTimeoutError,
    ResultDecodeError,
    TransportError,
)
from .models import (
    FULL_ACCESS,
    AccessKeyList,
    AccessKeyPermission,
    AccessKeyView,
    AccountView,
    BlockReference,
    BlockView,
    ErrorData,
    Finality,
    FullAccessPermission,
    FunctionCallPermission,
    FunctionCallResult,
    GasPrice,
    StateResult,
    StatusView,
    ValidatorStakeView,
)
from .naming import IDENTITY, SNAKE_CASE, NamingStrategy
from .transport import JsonRpcTransport

__version__ = "0.1.0"

__all__ = [
    "FULL_ACCESS",
    "IDENTITY",
    "SNAKE_CASE",
    "AccessKeyList",
    "AccessKeyPermission",
    "AccessKeyView",
    "AccountView",
    "BlockReference",
    "BlockView",
    "BlockingNearClient",
    "EmptyResultError",
    "ErrorData",
    "Finality",
    "FullAccessPermission",
    "FunctionCallPermission",
    "FunctionCallResult",
    "GasPrice",
    "HttpError",
    "InvalidResponseError",
    "InvalidURLError",
    "JsonRpcTransport",
    "NamingStrategy",
    "NearClient",
    "NearClientError",
    "NearErrorCode",
    "NearRpcError",
    "RequestTimeoutError",
    "ResultDecodeError",
    "StateResult",
    "StatusView",
    "TransportError",
    "ValidatorStakeView",
]
