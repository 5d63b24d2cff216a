from .base import WireModel, decode_by_trial
from .common import BlockId, BlockReference, Finality
from .params import (
    AnyQueryRequest,
    BlockParams,
    CallFunctionRequest,
    QueryRequest,
    ViewAccessKeyListRequest,
    ViewAccessKeyRequest,
    ViewAccountRequest,
    ViewStateRequest,
)
from .account import (
    FULL_ACCESS,
    AccessKeyInfo,
    AccessKeyList,
    AccessKeyPermission,
    AccessKeyView,
    AccountView,
    FullAccessPermission,
    FunctionCallPermission,
    QueryMetadata,
)
from .block import BlockHeader, BlockView, ChallengeResult, ChunkHeader
from .contract import FunctionCallResult, StateItem, StateResult
from .network import GasPrice, StatusView, SyncInfo, ValidatorInfo, Version
from .validators import (
    CurrentValidatorInfo,
    KickoutReason,
    NextValidatorInfo,
    ValidatorKickout,
    ValidatorProposal,
    ValidatorStakeView,
)
from .errors import ErrorCause, ErrorData
from .envelope import ErrorEnvelope, RequestEnvelope, ResponseEnvelope

__all__ = [
    "FULL_ACCESS",
    "AccessKeyInfo",
    "AccessKeyList",
    "AccessKeyPermission",
    "AccessKeyView",
    "AccountView",
    "AnyQueryRequest",
    "BlockHeader",
    "BlockId",
    "BlockParams",
    "BlockReference",
    "BlockView",
    "CallFunctionRequest",
    "ChallengeResult",
    "ChunkHeader",
    "CurrentValidatorInfo",
    "ErrorCause",
    "ErrorData",
    "ErrorEnvelope",
    "Finality",
    "FullAccessPermission",
    "FunctionCallPermission",
    "FunctionCallResult",
    "GasPrice",
    "KickoutReason",
    "NextValidatorInfo",
    "QueryMetadata",
    "QueryRequest",
    "RequestEnvelope",
    "ResponseEnvelope",
    "StateItem",
    "StateResult",
    "StatusView",
    "SyncInfo",
    "ValidatorInfo",
    "ValidatorKickout",
    "ValidatorProposal",
    "ValidatorStakeView",
    "Version",
    "ViewAccessKeyListRequest",
    "ViewAccessKeyRequest",
    "ViewAccountRequest",
    "ViewStateRequest",
    "WireModel",
    "decode_by_trial",
]
