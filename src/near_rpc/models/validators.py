from typing import Annotated, Any, Dict, List, Optional

from pydantic import PlainSerializer, PlainValidator

from .base import WireModel, decode_by_trial, single_key_object


class ValidatorProposal(WireModel):
    account_id: str
    public_key: str
    stake: str
    validator_stake_struct_version: Optional[str] = None


class KickoutReason(WireModel):
    """Why a validator was kicked out of the previous epoch.

    Payload-free reasons (``Unstaked``, ``Slashed``, ...) arrive as bare
    strings, the others as ``{"NotEnoughBlocks": {"produced": 1, "expected": 9}}``.
    Tags this client does not know are kept as they came.
    """

    kind: str
    details: Dict[str, Any] = {}


def _existing_reason(value: Any) -> KickoutReason:
    if isinstance(value, KickoutReason):
        return value
    raise TypeError("not a KickoutReason instance")


def _bare_reason(value: Any) -> KickoutReason:
    if not isinstance(value, str):
        raise TypeError("expected a string")
    return KickoutReason(kind=value)


def _tagged_reason(value: Any) -> KickoutReason:
    tag, payload = single_key_object(value)
    if not isinstance(payload, dict):
        raise ValueError(f"payload of {tag!r} is not an object")
    return KickoutReason(kind=tag, details=payload)


def decode_kickout_reason(value: Any) -> KickoutReason:
    return decode_by_trial(
        value,
        (_existing_reason, _bare_reason, _tagged_reason),
        "kickout reason",
    )


def encode_kickout_reason(reason: KickoutReason) -> Any:
    if not reason.details:
        return reason.kind
    return {reason.kind: dict(reason.details)}


WireKickoutReason = Annotated[
    KickoutReason,
    PlainValidator(decode_kickout_reason),
    PlainSerializer(encode_kickout_reason),
]


class CurrentValidatorInfo(WireModel):
    account_id: str
    public_key: str
    stake: str
    shards: List[int] = []
    is_slashed: Optional[bool] = None
    num_produced_blocks: int
    num_expected_blocks: int
    num_produced_chunks: Optional[int] = None
    num_expected_chunks: Optional[int] = None


class NextValidatorInfo(WireModel):
    account_id: str
    public_key: str
    stake: str
    shards: List[int] = []


class ValidatorKickout(WireModel):
    account_id: str
    reason: WireKickoutReason


class ValidatorStakeView(WireModel):
    current_validators: List[CurrentValidatorInfo]
    next_validators: List[NextValidatorInfo]
    current_proposals: List[ValidatorProposal] = []
    epoch_start_height: int
    epoch_height: Optional[int] = None
    prev_epoch_kickout: List[ValidatorKickout] = []
