"""
JSON-RPC 2.0 envelope codec.

Pure functions: nothing here holds state between calls, and the naming
strategy is always passed in explicitly. Only `params` and `result` go
through the strategy; envelope keys and error `data` are left as sent.
"""

import json
import uuid

from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .constants import JSONRPC_VERSION
from .errors import NearRpcError, ResultDecodeError
from .log import get_logger
from .models.envelope import ErrorEnvelope, RequestEnvelope, ResponseEnvelope
from .models.errors import ErrorData
from .naming import SNAKE_CASE, NamingStrategy

T = TypeVar("T")

logger = get_logger(__name__)


def new_request_id() -> str:
    return str(uuid.uuid4())


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    return value


def encode_request(
    method: str,
    params: Any,
    request_id: Optional[str] = None,
    naming: NamingStrategy = SNAKE_CASE,
) -> bytes:
    """Serialize one call into the bytes of a JSON-RPC request body."""
    envelope = {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id or new_request_id(),
        "method": method,
        "params": naming.to_wire(_jsonable(params)),
    }
    return json.dumps(envelope, separators=(",", ":")).encode("utf-8")


def decode_request(
    body: bytes,
    params_type: Optional[Type[T]] = None,
    naming: NamingStrategy = SNAKE_CASE,
) -> RequestEnvelope:
    """Inverse of `encode_request`.

    `params` comes back with in-memory key names; when `params_type` is given
    it is validated into that type.
    """
    payload = json.loads(body)
    params = naming.from_wire(payload.get("params"))
    if params_type is not None:
        params = _adapter(params_type).validate_python(params)
    return RequestEnvelope(
        jsonrpc=payload.get("jsonrpc", JSONRPC_VERSION),
        id=payload["id"],
        method=payload["method"],
        params=params,
    )


def parse_response(body: bytes) -> ResponseEnvelope:
    """Parse a response body into its envelope.

    Raises:
        ValueError: if the body is not JSON, or not a JSON-RPC response object.
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise ValueError(f"response body is not JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    return ResponseEnvelope.model_validate(payload)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_result(
    payload: Any,
    result_type: Type[T],
    naming: NamingStrategy = SNAKE_CASE,
) -> T:
    """Decode a `result` payload into `result_type`.

    Raises:
        ResultDecodeError: if the payload does not match the expected shape.
    """
    try:
        return _adapter(result_type).validate_python(naming.from_wire(payload))
    except ValidationError as e:
        raise ResultDecodeError(result_type, e) from e


def _descriptor_from(value: Any) -> ErrorData:
    if not isinstance(value, dict) or not ({"name", "cause"} & value.keys()):
        raise ValueError("no name/cause descriptor")
    return ErrorData.model_validate(value)


def error_data_from(error: ErrorEnvelope) -> Optional[ErrorData]:
    """Best-effort structured descriptor for an error; never raises.

    Looks in `data` first, then at the `name`/`cause` pair current nodes put
    on the error object itself.
    """
    candidates: Dict[str, Any] = {
        "data": error.data,
        "error": {"name": error.name, "cause": error.cause}
        if error.name is not None or error.cause is not None
        else None,
    }
    for source, candidate in candidates.items():
        if candidate is None:
            continue
        try:
            return _descriptor_from(candidate)
        except ValueError as e:
            logger.debug("No structured error data in %s: %s", source, e)
    return None


def to_rpc_error(error: ErrorEnvelope) -> NearRpcError:
    return NearRpcError(code=error.code, message=error.message, data=error_data_from(error))


__all__ = [
    "decode_request",
    "decode_result",
    "encode_request",
    "error_data_from",
    "new_request_id",
    "parse_response",
    "to_rpc_error",
]
