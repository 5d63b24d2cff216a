"""Parameter shapes sent with each RPC method.

Every account-scoped read goes through the single `query` method; what it
reads is chosen by the `request_type` field carried inside the parameters.
"""

from typing import Literal, Optional, Union

from .base import WireModel
from .common import BlockId, Finality


class BlockParams(WireModel):
    """`block` takes either a finality or a block id, never both."""

    finality: Optional[Finality] = None
    block_id: Optional[BlockId] = None


class QueryRequest(WireModel):
    request_type: str
    finality: Finality = Finality.FINAL
    account_id: str


class ViewAccountRequest(QueryRequest):
    request_type: Literal["view_account"] = "view_account"


class ViewAccessKeyRequest(QueryRequest):
    request_type: Literal["view_access_key"] = "view_access_key"
    public_key: str


class ViewAccessKeyListRequest(QueryRequest):
    request_type: Literal["view_access_key_list"] = "view_access_key_list"


class ViewStateRequest(QueryRequest):
    request_type: Literal["view_state"] = "view_state"
    prefix_base64: str = ""


class CallFunctionRequest(QueryRequest):
    request_type: Literal["call_function"] = "call_function"
    method_name: str
    args_base64: str = ""


AnyQueryRequest = Union[
    ViewAccountRequest,
    ViewAccessKeyRequest,
    ViewAccessKeyListRequest,
    ViewStateRequest,
    CallFunctionRequest,
]
