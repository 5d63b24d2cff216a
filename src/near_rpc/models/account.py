"""Account and access-key views returned by `query`.

The permission attached to an access key is the one union on this side of
the API whose two variants look nothing alike on the wire::

    "permission": "FullAccess"
    "permission": {"FunctionCall": {"allowance": null, "receiver_id": "...", "method_names": []}}

It is decoded by structural trial (bare string first, then the tagged object)
and encoded back into exactly the shape it came from.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import PlainSerializer, PlainValidator, SerializationInfo

from .base import WireModel, decode_by_trial, single_key_object

FULL_ACCESS_TAG = "FullAccess"
FUNCTION_CALL_TAG = "FunctionCall"


class QueryMetadata(WireModel):
    """Block coordinates the node embeds next to every query result."""

    block_hash: Optional[str] = None
    block_height: Optional[int] = None


class AccountView(QueryMetadata):
    amount: str
    locked: str
    code_hash: str
    storage_usage: int
    storage_paid_at: int = 0
    global_contract_hash: Optional[str] = None
    global_contract_account_id: Optional[str] = None


class FullAccessPermission(WireModel):
    kind: Literal["FullAccess"] = FULL_ACCESS_TAG


class FunctionCallPermission(WireModel):
    allowance: Optional[str] = None
    receiver_id: str
    method_names: List[str] = []


FULL_ACCESS = FullAccessPermission()


def _existing_permission(value: Any) -> Union[FullAccessPermission, FunctionCallPermission]:
    if isinstance(value, (FullAccessPermission, FunctionCallPermission)):
        return value
    raise TypeError("not a permission instance")


def _full_access_string(value: Any) -> FullAccessPermission:
    if value != FULL_ACCESS_TAG:
        raise ValueError(f"expected the string {FULL_ACCESS_TAG!r}")
    return FULL_ACCESS


def _function_call_object(value: Any) -> FunctionCallPermission:
    tag, payload = single_key_object(value)
    if tag != FUNCTION_CALL_TAG:
        raise ValueError(f"unexpected permission tag {tag!r}")
    return FunctionCallPermission.model_validate(payload)


def decode_permission(value: Any) -> Union[FullAccessPermission, FunctionCallPermission]:
    return decode_by_trial(
        value,
        (_existing_permission, _full_access_string, _function_call_object),
        "access key permission",
    )


def encode_permission(
    permission: Union[FullAccessPermission, FunctionCallPermission],
    info: SerializationInfo,
) -> Any:
    if isinstance(permission, FullAccessPermission):
        return FULL_ACCESS_TAG
    return {
        FUNCTION_CALL_TAG: permission.model_dump(
            mode="json",
            by_alias=bool(info.by_alias),
        )
    }


AccessKeyPermission = Annotated[
    Union[FullAccessPermission, FunctionCallPermission],
    PlainValidator(decode_permission),
    PlainSerializer(encode_permission),
]


class AccessKeyView(QueryMetadata):
    nonce: int
    permission: AccessKeyPermission

    @property
    def is_full_access(self) -> bool:
        return isinstance(self.permission, FullAccessPermission)


class AccessKeyInfo(WireModel):
    public_key: str
    access_key: AccessKeyView


class AccessKeyList(QueryMetadata):
    keys: List[AccessKeyInfo]
