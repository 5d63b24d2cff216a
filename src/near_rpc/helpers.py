import asyncio
import base64
import json
import os

from decimal import Decimal
from datetime import datetime, timezone
from typing import Any, Awaitable, Mapping, Optional, TypeVar, Union

from .constants import (
    BASE58_HASH_LENGTH,
    DEFAULT_RPC,
    NANOSECONDS_PER_SECOND,
    YOCTO_FACTOR,
)

# Type‐var for our coroutine runner
T = TypeVar("T")

_BASE58_ALPHABET = frozenset(
    "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
)

_loop: Optional[asyncio.AbstractEventLoop] = None


def _resolve_network(network: Optional[str]) -> str:
    net = network or os.getenv("NEAR_NETWORK")
    if net not in DEFAULT_RPC:
        raise RuntimeError(
            "NEAR_NETWORK must be set to 'mainnet' or 'testnet' (got: "
            f"{net or 'unset'})"
        )
    return net


def get_rpc_addr(network: Optional[str] = None) -> str:
    """Return the NEAR RPC endpoint for the active network.

    If ``network`` is None, reads ``NEAR_NETWORK`` from the environment.
    Raises a RuntimeError when the value is missing or invalid.
    """
    return DEFAULT_RPC[_resolve_network(network)]


def ensure_loop() -> asyncio.AbstractEventLoop:
    """Return a long-lived event loop, creating it once if necessary."""

    global _loop

    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
        asyncio.set_event_loop(_loop)
    return _loop


def run_coroutine(coroutine: Awaitable[T]) -> T:
    """
    Helper to run an async coroutine on the shared event loop.
    """
    return ensure_loop().run_until_complete(coroutine)


def encode_base64(data: Union[bytes, str, Mapping[str, Any]]) -> str:
    """
    Base64-encode binary call arguments for the wire.

    Strings are UTF-8 encoded first; mappings are serialized as compact JSON,
    which is what contract view methods expect as their argument blob.
    """
    if isinstance(data, Mapping):
        data = json.dumps(data, separators=(",", ":"))
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(bytes(data)).decode("ascii")


def is_base58_hash(value: str) -> bool:
    """Return True if `value` looks like a base58-encoded 32-byte hash."""
    return len(value) == BASE58_HASH_LENGTH and all(c in _BASE58_ALPHABET for c in value)


def yocto_to_near(amount: Union[str, int]) -> Decimal:
    """Convert a yoctoNEAR amount (decimal-digit string) into NEAR."""
    return Decimal(amount) / YOCTO_FACTOR


def format_near_timestamp(ns: int) -> str:
    """Convert NEAR block timestamp (ns since epoch) to a readable UTC datetime."""
    ts = ns / NANOSECONDS_PER_SECOND
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
