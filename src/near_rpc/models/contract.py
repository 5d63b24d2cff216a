import base64
import json

from typing import Any, List, Optional

from .account import QueryMetadata
from .base import WireModel


class StateItem(WireModel):
    """One contract storage entry; `key` and `value` are base64 on the wire."""

    key: str
    value: str
    proof: List[str] = []

    @property
    def key_bytes(self) -> bytes:
        return base64.b64decode(self.key)

    @property
    def value_bytes(self) -> bytes:
        return base64.b64decode(self.value)


class StateResult(QueryMetadata):
    values: List[StateItem]
    proof: List[str] = []


class FunctionCallResult(QueryMetadata):
    """Output of a view call: the raw return bytes plus the logs it emitted."""

    result: List[int]
    logs: List[str] = []

    @property
    def result_bytes(self) -> bytes:
        return bytes(self.result)

    def decode_result_as_string(self) -> Optional[str]:
        """Return the result bytes as UTF-8 text, or None when they are not."""
        try:
            return self.result_bytes.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def decode_result_json(self) -> Any:
        """Parse the result bytes as JSON (most contracts return JSON)."""
        return json.loads(self.result_bytes)
