"""High-level NEAR RPC client: one coroutine per supported call."""

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from .constants import DEFAULT_RPC_URL
from .helpers import encode_base64, get_rpc_addr
from .log import get_logger
from .models import (
    AccessKeyList,
    AccessKeyView,
    AccountView,
    BlockParams,
    BlockReference,
    BlockView,
    CallFunctionRequest,
    Finality,
    FunctionCallResult,
    GasPrice,
    StateResult,
    StatusView,
    ValidatorStakeView,
    ViewAccessKeyListRequest,
    ViewAccessKeyRequest,
    ViewAccountRequest,
    ViewStateRequest,
)
from .near_types import HttpSender
from .naming import SNAKE_CASE, NamingStrategy
from .transport import JsonRpcTransport

T = TypeVar("T")

BlockReferenceLike = Union[BlockReference, Finality, int, str]

logger = get_logger(__name__)


def _block_id_param(block_reference: Optional[BlockReferenceLike]) -> list:
    """Positional `[block_id]` params; `[null]` means the latest block."""
    if block_reference is None:
        return [None]
    return [BlockReference.coerce(block_reference).to_wire_value()]


class NearClient:
    """
    Typed async client for a NEAR RPC node.

    Every method is a stateless one-shot request; calls may be awaited
    concurrently on the same instance.

    Args:
      url: RPC endpoint. Defaults to the public testnet node.
      http_client: optional pre-configured `httpx.AsyncClient` to send through.
      naming: key-naming strategy between the wire and the models.
      transport: a ready transport; overrides `url`, `http_client` and `naming`.
    """

    def __init__(
        self,
        url: str = DEFAULT_RPC_URL,
        http_client: Optional[HttpSender] = None,
        naming: NamingStrategy = SNAKE_CASE,
        transport: Optional[JsonRpcTransport] = None,
    ):
        if transport is None:
            transport = JsonRpcTransport(url, http_client=http_client, naming=naming)
        self._transport = transport

    @classmethod
    def for_network(
        cls,
        network: Optional[str] = None,
        http_client: Optional[HttpSender] = None,
    ) -> "NearClient":
        """Client for `network`, or for `$NEAR_NETWORK` when not given."""
        return cls(get_rpc_addr(network), http_client=http_client)

    @property
    def url(self) -> str:
        return self._transport.base_url

    async def call(self, method: str, params: Any, result_type: Type[T]) -> T:
        """Raw access to any RPC method not wrapped below."""
        return await self._transport.call(method, params, result_type)

    # ──────────────────────────────────────────────────────────────
    # Network
    # ──────────────────────────────────────────────────────────────
    async def status(self) -> StatusView:
        """Current status of the node and the chain it follows."""
        return await self.call("status", [], StatusView)

    async def gas_price(self, block_reference: Optional[BlockReferenceLike] = None) -> GasPrice:
        """Gas price at a given block, or at the latest one."""
        return await self.call("gas_price", _block_id_param(block_reference), GasPrice)

    async def validators(
        self, block_reference: Optional[BlockReferenceLike] = None
    ) -> ValidatorStakeView:
        """Validator set, proposals and kickouts for the epoch of a block."""
        return await self.call("validators", _block_id_param(block_reference), ValidatorStakeView)

    # ──────────────────────────────────────────────────────────────
    # Blocks
    # ──────────────────────────────────────────────────────────────
    async def block(self, finality: Finality = Finality.FINAL) -> BlockView:
        return await self.call("block", BlockParams(finality=finality), BlockView)

    async def block_by_height(self, height: int) -> BlockView:
        return await self.call("block", BlockParams(block_id=height), BlockView)

    async def block_by_hash(self, block_hash: str) -> BlockView:
        return await self.call("block", BlockParams(block_id=block_hash), BlockView)

    # ──────────────────────────────────────────────────────────────
    # Accounts & contracts (all through `query`)
    # ──────────────────────────────────────────────────────────────
    async def view_account(
        self, account_id: str, finality: Finality = Finality.FINAL
    ) -> AccountView:
        params = ViewAccountRequest(account_id=account_id, finality=finality)
        return await self.call("query", params, AccountView)

    async def view_access_key(
        self,
        account_id: str,
        public_key: str,
        finality: Finality = Finality.FINAL,
    ) -> AccessKeyView:
        params = ViewAccessKeyRequest(
            account_id=account_id,
            public_key=public_key,
            finality=finality,
        )
        return await self.call("query", params, AccessKeyView)

    async def view_access_key_list(
        self, account_id: str, finality: Finality = Finality.FINAL
    ) -> AccessKeyList:
        params = ViewAccessKeyListRequest(account_id=account_id, finality=finality)
        return await self.call("query", params, AccessKeyList)

    async def view_state(
        self,
        account_id: str,
        prefix: Union[bytes, str] = b"",
        finality: Finality = Finality.FINAL,
    ) -> StateResult:
        """Contract storage entries whose key starts with `prefix`."""
        params = ViewStateRequest(
            account_id=account_id,
            prefix_base64=encode_base64(prefix),
            finality=finality,
        )
        return await self.call("query", params, StateResult)

    async def call_view_function(
        self,
        account_id: str,
        method_name: str,
        args: Union[bytes, Mapping[str, Any]] = b"",
        finality: Finality = Finality.FINAL,
    ) -> FunctionCallResult:
        """
        Run a read-only contract method.

        `args` is sent as-is when bytes; a mapping is JSON-encoded first, so
        ``args={}`` and ``args=b"{}"`` are the same call.
        """
        params = CallFunctionRequest(
            account_id=account_id,
            method_name=method_name,
            args_base64=encode_base64(args),
            finality=finality,
        )
        logger.debug("call_view_function %s.%s", account_id, method_name)
        return await self.call("query", params, FunctionCallResult)

    # ──────────────────────────────────────────────────────────────
    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "NearClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
