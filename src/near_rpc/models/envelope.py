from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..constants import JSONRPC_VERSION


class _Envelope(BaseModel):
    # Envelope keys are fixed by JSON-RPC 2.0 and never renamed.
    model_config = ConfigDict(frozen=True)


class RequestEnvelope(_Envelope):
    jsonrpc: str = JSONRPC_VERSION
    id: str
    method: str
    params: Any = None


class ErrorEnvelope(_Envelope):
    code: int
    message: str
    data: Any = None
    # Current nodes also put the structured descriptor beside `data`.
    name: Optional[str] = None
    cause: Any = None


class ResponseEnvelope(_Envelope):
    jsonrpc: str
    id: Union[str, int, None] = None
    result: Any = None
    error: Optional[ErrorEnvelope] = None
