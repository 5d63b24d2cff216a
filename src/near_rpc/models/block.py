from typing import List, Optional

from ..helpers import format_near_timestamp
from .base import WireModel
from .validators import ValidatorProposal


class ChallengeResult(WireModel):
    account_id: str
    is_double_sign: bool


class BlockHeader(WireModel):
    height: int
    prev_height: Optional[int] = None
    epoch_id: str
    next_epoch_id: str
    hash: str
    prev_hash: str
    prev_state_root: str
    chunk_receipts_root: str
    chunk_headers_root: str
    chunk_tx_root: str
    outcome_root: str
    chunks_included: int
    challenges_root: Optional[str] = None
    timestamp: int
    timestamp_nanosec: str
    random_value: str
    validator_proposals: List[ValidatorProposal] = []
    chunk_mask: List[bool]
    gas_price: str
    block_ordinal: Optional[int] = None
    # Still emitted by nodes, always "0" since protocol 41
    rent_paid: Optional[str] = None
    validator_reward: Optional[str] = None
    total_supply: str
    challenges_result: List[ChallengeResult] = []
    last_final_block: str
    last_ds_final_block: str
    next_bp_hash: str
    block_merkle_root: str
    epoch_sync_data_hash: Optional[str] = None
    approvals: List[Optional[str]]
    signature: str
    latest_protocol_version: int

    @property
    def time_utc(self) -> str:
        return format_near_timestamp(self.timestamp)


class ChunkHeader(WireModel):
    chunk_hash: str
    prev_block_hash: str
    outcome_root: str
    prev_state_root: str
    encoded_merkle_root: str
    encoded_length: int
    height_created: int
    height_included: int
    shard_id: int
    gas_used: int
    gas_limit: int
    rent_paid: Optional[str] = None
    validator_reward: Optional[str] = None
    balance_burnt: str
    outgoing_receipts_root: str
    tx_root: str
    validator_proposals: List[ValidatorProposal] = []
    signature: str


class BlockView(WireModel):
    author: str
    header: BlockHeader
    chunks: List[ChunkHeader]
