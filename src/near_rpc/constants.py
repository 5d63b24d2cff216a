"""Network endpoints and unit constants shared across the client."""

from decimal import Decimal
from typing import Dict

DEFAULT_RPC: Dict[str, str] = {
    "mainnet": "https://rpc.mainnet.near.org",
    "testnet": "https://rpc.testnet.near.org",
}

DEFAULT_NETWORK: str = "testnet"
DEFAULT_RPC_URL: str = DEFAULT_RPC[DEFAULT_NETWORK]

JSONRPC_VERSION: str = "2.0"

# NEAR uses 10^24 yoctoNEAR per 1 NEAR
YOCTO_FACTOR: Decimal = Decimal("1e24")

# 1 second = 1_000_000_000 nanoseconds
NANOSECONDS_PER_SECOND: int = 1_000_000_000

# base58 encoding of a 32-byte hash
BASE58_HASH_LENGTH: int = 44
