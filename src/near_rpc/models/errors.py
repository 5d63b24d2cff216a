import json

from typing import Any, Dict, Optional, Union

from .base import WireModel


class ErrorCause(WireModel):
    name: Optional[str] = None
    # Nodes send either a message or an object such as
    # {"requested_account_id": "...", "block_height": 1}
    info: Union[str, Dict[str, Any], None] = None


class ErrorData(WireModel):
    """NEAR's structured descriptor nested inside a JSON-RPC error."""

    name: Optional[str] = None
    cause: Optional[ErrorCause] = None

    @property
    def description(self) -> str:
        desc = self.name or "Unknown error"
        if self.cause is not None:
            desc += f" - Cause: {self.cause.name or 'Unknown'}"
            if self.cause.info is not None:
                info = self.cause.info
                if not isinstance(info, str):
                    info = json.dumps(info, sort_keys=True)
                desc += f" ({info})"
        return desc
