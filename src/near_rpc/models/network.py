from typing import List, Optional

from .base import WireModel


class Version(WireModel):
    version: str
    build: str
    rustc_version: Optional[str] = None


class ValidatorInfo(WireModel):
    account_id: str
    is_slashed: Optional[bool] = None


class SyncInfo(WireModel):
    latest_block_hash: str
    latest_block_height: int
    latest_state_root: str
    latest_block_time: str
    syncing: bool
    earliest_block_hash: Optional[str] = None
    earliest_block_height: Optional[int] = None
    earliest_block_time: Optional[str] = None
    epoch_id: Optional[str] = None
    epoch_start_height: Optional[int] = None


class StatusView(WireModel):
    version: Version
    chain_id: str
    protocol_version: int
    latest_protocol_version: int
    rpc_addr: Optional[str] = None
    validators: List[ValidatorInfo] = []
    sync_info: SyncInfo
    validator_account_id: Optional[str] = None
    validator_public_key: Optional[str] = None
    node_public_key: Optional[str] = None
    genesis_hash: Optional[str] = None
    uptime_sec: Optional[int] = None


class GasPrice(WireModel):
    gas_price: str
