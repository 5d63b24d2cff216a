import logging
import sys
import pytest

from decimal import Decimal

from near_rpc.helpers import (
    encode_base64,
    format_near_timestamp,
    get_rpc_addr,
    is_base58_hash,
    yocto_to_near,
)
from near_rpc.log import get_logger
from test_utils import BLOCK_HASH


# ───────────────── network selection ─────────────────
@pytest.mark.parametrize(
    "network, rpc",
    [("mainnet", "https://rpc.mainnet.near.org"), ("testnet", "https://rpc.testnet.near.org")],
)
def test_get_rpc_addr_from_env(monkeypatch, network, rpc):
    monkeypatch.setenv("NEAR_NETWORK", network)

    assert get_rpc_addr() == rpc


def test_explicit_network_wins_over_env(monkeypatch):
    monkeypatch.setenv("NEAR_NETWORK", "mainnet")

    assert get_rpc_addr("testnet") == "https://rpc.testnet.near.org"


@pytest.mark.parametrize("value", [None, "", "betanet"])
def test_get_rpc_addr_rejects_unknown_network(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("NEAR_NETWORK", raising=False)
    else:
        monkeypatch.setenv("NEAR_NETWORK", value)

    with pytest.raises(RuntimeError, match="NEAR_NETWORK"):
        get_rpc_addr()


# ───────────────── encoding ─────────────────
@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", ""),
        ({}, "e30="),
        (b"{}", "e30="),
        ("{}", "e30="),
        ({"a": 1, "b": [1, 2]}, "eyJhIjoxLCJiIjpbMSwyXX0="),
    ],
)
def test_encode_base64(data, expected):
    assert encode_base64(data) == expected


def test_is_base58_hash():
    assert is_base58_hash(BLOCK_HASH)
    assert not is_base58_hash(BLOCK_HASH[:-1])
    # 0, O, I and l are not in the base58 alphabet
    assert not is_base58_hash("0" + BLOCK_HASH[1:])


# ───────────────── units ─────────────────
def test_yocto_to_near():
    assert yocto_to_near("1000000000000000000000000") == Decimal(1)
    assert yocto_to_near(25 * 10**23) == Decimal("2.5")
    assert yocto_to_near("9" * 100) > 0


def test_format_near_timestamp():
    assert format_near_timestamp(1700000000000000000) == "2023-11-14 22:13 UTC"


# ───────────────── logging ─────────────────
def console_handlers(logger):
    """The package's own stdout handlers, ignoring any pytest attaches."""
    return [
        h
        for h in logger.handlers
        if type(h) is logging.StreamHandler and h.stream is sys.stdout
    ]


def test_loggers_hang_off_the_package_logger():
    root = get_logger()
    child = get_logger("near_rpc.transport")

    assert root.name == "near_rpc"
    assert child.name == "near_rpc.transport"
    assert get_logger("near_rpc") is root


def test_library_is_silent_by_default(monkeypatch):
    monkeypatch.delenv("NEAR_RPC_LOG_LEVEL", raising=False)

    logger = get_logger()

    assert console_handlers(logger) == []
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.propagate is True


def test_console_logging_is_opt_in(monkeypatch):
    monkeypatch.setenv("NEAR_RPC_LOG_LEVEL", "debug")
    try:
        get_logger()
        logger = get_logger("near_rpc.client")

        root = logger.parent
        assert root.level == logging.DEBUG
        assert len(console_handlers(root)) == 1
        assert root.propagate is False
    finally:
        monkeypatch.delenv("NEAR_RPC_LOG_LEVEL")
        get_logger()

    assert console_handlers(get_logger()) == []
    assert get_logger().propagate is True
