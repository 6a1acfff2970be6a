"""Page data for the clients, epoch, epochs and index pages, with their JSON form."""

from __future__ import annotations

import base64
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _j(key: str, default: Any = MISSING, factory: Any = MISSING) -> Any:
    return field(default=default, default_factory=factory, metadata={"json": key})


def _format_time(ts: datetime) -> str:
    text = (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    if ts.microsecond:
        text += "." + f"{ts.microsecond:06d}".rstrip("0")
    offset = ts.utcoffset()
    if offset is None or not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    minutes = abs(minutes)
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def as_json(obj: Any) -> Any:
    """Convert page data to JSON-ready values: bytes as base64, times as RFC 3339."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.metadata.get("json", f.name): as_json(getattr(obj, f.name)) for f in fields(obj)}
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, datetime):
        return _format_time(obj)
    if isinstance(obj, Mapping):
        return {str(key): as_json(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [as_json(item) for item in obj]
    raise TypeError(f"cannot convert {type(obj).__name__} to JSON")


@dataclass
class ClientsPageDataClient:
    index: int = _j("index", 0)
    name: str = _j("name", "")
    version: str = _j("version", "")
    head_slot: int = _j("head_slot", 0)
    head_root: bytes = _j("head_root", b"")
    status: str = _j("status", "")


@dataclass
class ClientsPageData:
    clients: list[ClientsPageDataClient] = _j("clients", factory=list)
    client_count: int = _j("client_count", 0)


@dataclass
class EpochPageDataSlot:
    slot: int = _j("slot", 0)
    epoch: int = _j("epoch", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    scheduled: bool = _j("scheduled", False)
    status: int = _j("status", 0)
    proposer: int = _j("proposer", 0)
    proposer_name: str = _j("proposer_name", "")
    attestation_count: int = _j("attestation_count", 0)
    deposit_count: int = _j("deposit_count", 0)
    exit_count: int = _j("exit_count", 0)
    proposer_slashing_count: int = _j("proposer_slashing_count", 0)
    attester_slashing_count: int = _j("attester_slashing_count", 0)
    sync_participation: float = _j("sync_participation", 0.0)
    eth_transaction_count: int = _j("eth_transaction_count", 0)
    eth_block_number: int = _j("eth_block_number", 0)
    graffiti: bytes = _j("graffiti", b"")
    block_root: bytes = _j("block_root", b"")


@dataclass
class EpochPageData:
    epoch: int = _j("epoch", 0)
    previous_epoch: int = _j("prev_epoch", 0)
    next_epoch: int = _j("next_epoch", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    synchronized: bool = _j("synchronized", False)
    finalized: bool = _j("finalized", False)
    attestation_count: int = _j("attestation_count", 0)
    deposit_count: int = _j("deposit_count", 0)
    exit_count: int = _j("exit_count", 0)
    withdrawal_count: int = _j("withdrawal_count", 0)
    withdrawal_amount: int = _j("withdrawal_amount", 0)
    proposer_slashing_count: int = _j("proposer_slashing_count", 0)
    attester_slashing_count: int = _j("attester_slashing_count", 0)
    eligible_ether: int = _j("eligibleether", 0)
    target_voted: int = _j("target_voted", 0)
    head_voted: int = _j("head_voted", 0)
    total_voted: int = _j("total_voted", 0)
    target_vote_participation: float = _j("target_vote_participation", 0.0)
    head_vote_participation: float = _j("head_vote_participation", 0.0)
    total_vote_participation: float = _j("total_vote_participation", 0.0)
    sync_participation: float = _j("sync_participation", 0.0)
    validator_count: int = _j("validator_count", 0)
    average_validator_balance: int = _j("avg_validator_balance", 0)
    block_count: int = _j("block_count", 0)
    canonical_count: int = _j("canonical_count", 0)
    missed_count: int = _j("missed_count", 0)
    scheduled_count: int = _j("scheduled_count", 0)
    orphaned_count: int = _j("orphaned_count", 0)
    eth_transaction_count: int = _j("eth_transaction_count", 0)
    slots: list[EpochPageDataSlot] = _j("slots", factory=list)


@dataclass
class EpochsPageDataEpoch:
    epoch: int = _j("epoch", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    finalized: bool = _j("finalized", False)
    synchronized: bool = _j("synchronized", False)
    canonical_block_count: int = _j("canonical_block_count", 0)
    orphaned_block_count: int = _j("orphaned_block_count", 0)
    attestation_count: int = _j("attestation_count", 0)
    deposit_count: int = _j("deposit_count", 0)
    exit_count: int = _j("exit_count", 0)
    proposer_slashing_count: int = _j("proposer_slashing_count", 0)
    attester_slashing_count: int = _j("attester_slashing_count", 0)
    eligible_ether: int = _j("eligibleether", 0)
    target_voted: int = _j("target_voted", 0)
    head_voted: int = _j("head_voted", 0)
    total_voted: int = _j("total_voted", 0)
    target_vote_participation: float = _j("target_vote_participation", 0.0)
    head_vote_participation: float = _j("head_vote_participation", 0.0)
    total_vote_participation: float = _j("total_vote_participation", 0.0)
    eth_transaction_count: int = _j("eth_transaction_count", 0)


@dataclass
class EpochsPageData:
    epochs: list[EpochsPageDataEpoch] = _j("epochs", factory=list)
    epoch_count: int = _j("EpochCount", 0)
    first_epoch: int = _j("FirstEpoch", 0)
    last_epoch: int = _j("LastEpoch", 0)

    is_default_page: bool = _j("default_page", False)
    total_pages: int = _j("total_pages", 0)
    page_size: int = _j("page_size", 0)
    current_page_index: int = _j("page_index", 0)
    current_page_epoch: int = _j("page_epoch", 0)
    prev_page_index: int = _j("prev_page_index", 0)
    prev_page_epoch: int = _j("prev_page_epoch", 0)
    next_page_index: int = _j("next_page_index", 0)
    next_page_epoch: int = _j("next_page_epoch", 0)
    last_page_epoch: int = _j("last_page_epoch", 0)


@dataclass
class IndexPageDataForks:
    name: str = _j("name", "")
    epoch: int = _j("epoch", 0)
    version: bytes = _j("version", b"")
    active: bool = _j("active", False)


@dataclass
class IndexPageDataEpochs:
    epoch: int = _j("epoch", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    finalized: bool = _j("finalized", False)
    eligible_ether: int = _j("eligibleether", 0)
    target_voted: int = _j("target_voted", 0)
    head_voted: int = _j("head_voted", 0)
    total_voted: int = _j("total_voted", 0)
    vote_participation: float = _j("vote_participation", 0.0)


@dataclass
class IndexPageDataBlocks:
    epoch: int = _j("epoch", 0)
    slot: int = _j("slot", 0)
    eth_block: int = _j("eth_block", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    proposer: int = _j("proposer", 0)
    proposer_name: str = _j("proposer_name", "")
    status: int = _j("status", 0)
    block_root: bytes = _j("block_root", b"")


@dataclass
class IndexPageDataForkGraph:
    index: int = _j("index", 0)
    left: int = _j("left", 0)
    tiles: dict[str, bool] = _j("tiles", factory=dict)
    block: bool = _j("block", False)


@dataclass
class IndexPageDataSlots:
    epoch: int = _j("epoch", 0)
    slot: int = _j("slot", 0)
    eth_block: int = _j("eth_block", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    proposer: int = _j("proposer", 0)
    proposer_name: str = _j("proposer_name", "")
    status: int = _j("status", 0)
    block_root: bytes = _j("block_root", b"")
    parent_root: bytes = _j("parent_root", b"")
    fork_graph: list[IndexPageDataForkGraph] = _j("fork_graph", factory=list)


@dataclass
class IndexPageData:
    network_name: str = _j("networkName", "")
    deposit_contract: str = _j("depositContract", "")
    show_syncing_message: bool = _j("show_sync_message", False)
    current_epoch: int = _j("current_epoch", 0)
    current_finalized_epoch: int = _j("current_finalized_epoch", 0)
    current_slot: int = _j("current_slot", 0)
    current_slot_index: int = _j("current_slot_index", 0)
    current_scheduled_count: int = _j("current_scheduled_count", 0)
    current_epoch_progress: float = _j("current_epoch_progress", 0.0)
    active_validator_count: int = _j("active_validator_count", 0)
    entering_validator_count: int = _j("entering_validator_count", 0)
    exiting_validator_count: int = _j("exiting_validator_count", 0)
    validators_per_epoch: int = _j("validators_per_epoch", 0)
    validators_per_day: int = _j("validators_per_day", 0)
    total_eligible_ether: int = _j("total_eligible_ether", 0)
    average_validator_balance: int = _j("avg_validator_balance", 0)
    new_deposit_process_after: str = _j("deposit_queue_delay", "")
    genesis_time: datetime = _j("genesis_time", _ZERO_TIME)
    genesis_fork_version: bytes = _j("genesis_version", b"")
    genesis_validators_root: bytes = _j("genesis_valroot", b"")

    network_forks: list[IndexPageDataForks] = _j("network_forks", factory=list)
    recent_blocks: list[IndexPageDataBlocks] = _j("recent_blocks", factory=list)
    recent_block_count: int = _j("recent_block_count", 0)
    recent_epochs: list[IndexPageDataEpochs] = _j("recent_epochs", factory=list)
    recent_epoch_count: int = _j("recent_epoch_count", 0)
    recent_slots: list[IndexPageDataSlots] = _j("recent_slots", factory=list)
    recent_slot_count: int = _j("recent_slot_count", 0)
    fork_tree_width: int = _j("forktree_width", 0)