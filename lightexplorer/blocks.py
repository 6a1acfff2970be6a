"""Beacon block contents in the explorer's own shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SyncAggregate:
    sync_committee_validators: list[int] = field(default_factory=list)
    sync_committee_bits: bytes = b""
    sync_committee_signature: bytes = b""
    sync_aggregate_participation: float = 0.0


@dataclass
class BLSToExecutionChange:
    validator_index: int = 0
    bls_pubkey: bytes = b""
    address: bytes = b""


@dataclass
class SignedBLSToExecutionChange:
    message: BLSToExecutionChange = field(default_factory=BLSToExecutionChange)
    signature: bytes = b""


@dataclass
class Transaction:
    """An execution transaction; decoded fields stay empty if ``raw`` does not decode."""

    raw: bytes = b""
    tx_hash: bytes = b""
    account_nonce: int = 0
    price: bytes = b""  # big endian
    gas_limit: int = 0
    sender: bytes = b""
    recipient: bytes = b""
    amount: bytes = b""  # big endian
    payload: bytes = b""
    max_priority_fee_per_gas: int = 0
    max_fee_per_gas: int = 0


@dataclass
class Withdrawals:
    slot: int = 0
    block_root: bytes = b""
    index: int = 0
    validator_index: int = 0
    address: bytes = b""
    amount: int = 0


@dataclass
class WithdrawalsByEpoch:
    epoch: int = 0
    validator_index: int = 0
    amount: int = 0


@dataclass
class WithdrawalsNotification:
    slot: int = 0
    index: int = 0
    validator_index: int = 0
    address: bytes = b""
    amount: int = 0
    pubkey: bytes = b""


@dataclass
class ExecutionPayload:
    parent_hash: bytes = b""
    fee_recipient: bytes = b""
    state_root: bytes = b""
    receipts_root: bytes = b""
    logs_bloom: bytes = b""
    random: bytes = b""
    block_number: int = 0
    gas_limit: int = 0
    gas_used: int = 0
    timestamp: int = 0
    extra_data: bytes = b""
    base_fee_per_gas: int = 0
    block_hash: bytes = b""
    transactions: list[Transaction] = field(default_factory=list)
    withdrawals: list[Withdrawals] = field(default_factory=list)


@dataclass
class Eth1Data:
    deposit_root: bytes = b""
    deposit_count: int = 0
    block_hash: bytes = b""


@dataclass
class Checkpoint:
    epoch: int = 0
    root: bytes = b""


@dataclass
class AttestationData:
    slot: int = 0
    committee_index: int = 0
    beacon_block_root: bytes = b""
    source: Optional[Checkpoint] = None
    target: Optional[Checkpoint] = None


@dataclass
class IndexedAttestation:
    data: Optional[AttestationData] = None
    attesting_indices: list[int] = field(default_factory=list)
    signature: bytes = b""


@dataclass
class Attestation:
    aggregation_bits: bytes = b""
    attesters: list[int] = field(default_factory=list)
    data: Optional[AttestationData] = None
    signature: bytes = b""


@dataclass
class AttesterSlashing:
    attestation1: Optional[IndexedAttestation] = None
    attestation2: Optional[IndexedAttestation] = None


@dataclass
class Deposit:
    proof: list[bytes] = field(default_factory=list)
    public_key: bytes = b""
    withdrawal_credentials: bytes = b""
    amount: int = 0
    signature: bytes = b""


@dataclass
class VoluntaryExit:
    epoch: int = 0
    validator_index: int = 0
    signature: bytes = b""


@dataclass
class Block:
    """A beacon block; ``sync_aggregate`` and ``execution_payload`` are None before their forks."""

    status: int = 0
    proposer: int = 0
    block_root: bytes = b""
    slot: int = 0
    parent_root: bytes = b""
    state_root: bytes = b""
    signature: bytes = b""
    randao_reveal: bytes = b""
    graffiti: bytes = b""
    eth1_data: Optional[Eth1Data] = None
    body_root: bytes = b""
    proposer_slashings: list["ProposerSlashing"] = field(default_factory=list)
    attester_slashings: list[AttesterSlashing] = field(default_factory=list)
    attestations: list[Attestation] = field(default_factory=list)
    deposits: list[Deposit] = field(default_factory=list)
    voluntary_exits: list[VoluntaryExit] = field(default_factory=list)
    sync_aggregate: Optional[SyncAggregate] = None
    execution_payload: Optional[ExecutionPayload] = None
    canonical: bool = False
    signed_bls_to_execution_change: list[SignedBLSToExecutionChange] = field(default_factory=list)


@dataclass
class ProposerSlashing:
    proposer_index: int = 0
    header1: Optional[Block] = None
    header2: Optional[Block] = None