"""Blocking facade over `NearClient` for scripts that are not async."""

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from .client import BlockReferenceLike, NearClient
from .constants import DEFAULT_RPC_URL
from .helpers import run_coroutine
from .models import (
    AccessKeyList,
    AccessKeyView,
    AccountView,
    BlockView,
    Finality,
    FunctionCallResult,
    GasPrice,
    StateResult,
    StatusView,
    ValidatorStakeView,
)

T = TypeVar("T")


class BlockingNearClient:
    """
    Same calls as `NearClient`, each run to completion on the shared event
    loop from `helpers.ensure_loop`. Not usable from inside a running loop.
    """

    def __init__(self, url: str = DEFAULT_RPC_URL, client: Optional[NearClient] = None):
        self._client = client if client is not None else NearClient(url)

    @property
    def url(self) -> str:
        return self._client.url

    def call(self, method: str, params: Any, result_type: Type[T]) -> T:
        return run_coroutine(self._client.call(method, params, result_type))

    def status(self) -> StatusView:
        return run_coroutine(self._client.status())

    def gas_price(self, block_reference: Optional[BlockReferenceLike] = None) -> GasPrice:
        return run_coroutine(self._client.gas_price(block_reference))

    def validators(self, block_reference: Optional[BlockReferenceLike] = None) -> ValidatorStakeView:
        return run_coroutine(self._client.validators(block_reference))

    def block(self, finality: Finality = Finality.FINAL) -> BlockView:
        return run_coroutine(self._client.block(finality))

    def block_by_height(self, height: int) -> BlockView:
        return run_coroutine(self._client.block_by_height(height))

    def block_by_hash(self, block_hash: str) -> BlockView:
        return run_coroutine(self._client.block_by_hash(block_hash))

    def view_account(self, account_id: str, finality: Finality = Finality.FINAL) -> AccountView:
        return run_coroutine(self._client.view_account(account_id, finality))

    def view_access_key(
        self, account_id: str, public_key: str, finality: Finality = Finality.FINAL
    ) -> AccessKeyView:
        return run_coroutine(self._client.view_access_key(account_id, public_key, finality))

    def view_access_key_list(
        self, account_id: str, finality: Finality = Finality.FINAL
    ) -> AccessKeyList:
        return run_coroutine(self._client.view_access_key_list(account_id, finality))

    def view_state(
        self,
        account_id: str,
        prefix: Union[bytes, str] = b"",
        finality: Finality = Finality.FINAL,
    ) -> StateResult:
        return run_coroutine(self._client.view_state(account_id, prefix, finality))

    def call_view_function(
        self,
        account_id: str,
        method_name: str,
        args: Union[bytes, Mapping[str, Any]] = b"",
        finality: Finality = Finality.FINAL,
    ) -> FunctionCallResult:
        return run_coroutine(
            self._client.call_view_function(account_id, method_name, args, finality)
        )

    def close(self) -> None:
        run_coroutine(self._client.aclose())
