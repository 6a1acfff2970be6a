"""Consensus-layer chain configuration as published in chain and preset YAML files."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

import yaml


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _to_uint(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"cannot use boolean {value!r} as an integer")
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip().replace("_", "")
        try:
            number = int(text, 10)
        except ValueError:
            number = int(text, 0)
    if number < 0:
        raise ValueError(f"negative value {value!r} for an unsigned field")
    return number


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"cannot use boolean {value!r} as an integer")
    if isinstance(value, int):
        return value
    text = str(value).strip().replace("_", "")
    try:
        return int(text, 10)
    except ValueError:
        return int(text, 0)


def _s(key: str) -> Any:
    return field(default="", metadata={"yaml": key, "conv": _to_str})


def _u(key: str) -> Any:
    return field(default=0, metadata={"yaml": key, "conv": _to_uint})


def _i(key: str) -> Any:
    return field(default=0, metadata={"yaml": key, "conv": _to_int})


@dataclass
class ForkVersion:
    """A fork's activation epoch and its version bytes."""

    epoch: int = 0
    current_version: bytes = b""
    previous_version: bytes = b""


@dataclass
class ChainConfig:
    """Chain specification values, keyed in YAML by their upper-case spec names."""

    preset_base: str = _s("PRESET_BASE")
    config_name: str = _s("CONFIG_NAME")
    terminal_total_difficulty: str = _s("TERMINAL_TOTAL_DIFFICULTY")
    terminal_block_hash: str = _s("TERMINAL_BLOCK_HASH")
    terminal_block_hash_activation_epoch: int = _u("TERMINAL_BLOCK_HASH_ACTIVATION_EPOCH")
    min_genesis_active_validator_count: int = _u("MIN_GENESIS_ACTIVE_VALIDATOR_COUNT")
    min_genesis_time: int = _i("MIN_GENESIS_TIME")
    genesis_fork_version: str = _s("GENESIS_FORK_VERSION")
    genesis_delay: int = _u("GENESIS_DELAY")
    altair_fork_version: str = _s("ALTAIR_FORK_VERSION")
    altair_fork_epoch: int = _u("ALTAIR_FORK_EPOCH")
    bellatrix_fork_version: str = _s("BELLATRIX_FORK_VERSION")
    bellatrix_fork_epoch: int = _u("BELLATRIX_FORK_EPOCH")
    capella_fork_version: str = _s("CAPELLA_FORK_VERSION")
    capella_fork_epoch: int = _u("CAPELLA_FORK_EPOCH")
    deneb_fork_version: str = _s("DENEB_FORK_VERSION")
    deneb_fork_epoch: int = _u("DENEB_FORK_EPOCH")
    sharding_fork_version: str = _s("SHARDING_FORK_VERSION")
    sharding_fork_epoch: int = _u("SHARDING_FORK_EPOCH")
    seconds_per_slot: int = _u("SECONDS_PER_SLOT")
    seconds_per_eth1_block: int = _u("SECONDS_PER_ETH1_BLOCK")
    min_validator_withdrawability_delay: int = _u("MIN_VALIDATOR_WITHDRAWABILITY_DELAY")
    shard_committee_period: int = _u("SHARD_COMMITTEE_PERIOD")
    eth1_follow_distance: int = _u("ETH1_FOLLOW_DISTANCE")
    inactivity_score_bias: int = _u("INACTIVITY_SCORE_BIAS")
    inactivity_score_recovery_rate: int = _u("INACTIVITY_SCORE_RECOVERY_RATE")
    ejection_balance: int = _u("EJECTION_BALANCE")
    min_per_epoch_churn_limit: int = _u("MIN_PER_EPOCH_CHURN_LIMIT")
    churn_limit_quotient: int = _u("CHURN_LIMIT_QUOTIENT")
    proposer_score_boost: int = _u("PROPOSER_SCORE_BOOST")
    deposit_chain_id: int = _u("DEPOSIT_CHAIN_ID")
    deposit_network_id: int = _u("DEPOSIT_NETWORK_ID")
    deposit_contract_address: str = _s("DEPOSIT_CONTRACT_ADDRESS")

    # phase0
    max_committees_per_slot: int = _u("MAX_COMMITTEES_PER_SLOT")
    target_committee_size: int = _u("TARGET_COMMITTEE_SIZE")
    max_validators_per_committee: int = _u("MAX_VALIDATORS_PER_COMMITTEE")
    shuffle_round_count: int = _u("SHUFFLE_ROUND_COUNT")
    hysteresis_quotient: int = _u("HYSTERESIS_QUOTIENT")
    hysteresis_downward_multiplier: int = _u("HYSTERESIS_DOWNWARD_MULTIPLIER")
    hysteresis_upward_multiplier: int = _u("HYSTERESIS_UPWARD_MULTIPLIER")
    safe_slots_to_update_justified: int = _u("SAFE_SLOTS_TO_UPDATE_JUSTIFIED")
    min_deposit_amount: int = _u("MIN_DEPOSIT_AMOUNT")
    max_effective_balance: int = _u("MAX_EFFECTIVE_BALANCE")
    effective_balance_increment: int = _u("EFFECTIVE_BALANCE_INCREMENT")
    min_attestation_inclusion_delay: int = _u("MIN_ATTESTATION_INCLUSION_DELAY")
    slots_per_epoch: int = _u("SLOTS_PER_EPOCH")
    min_seed_lookahead: int = _u("MIN_SEED_LOOKAHEAD")
    max_seed_lookahead: int = _u("MAX_SEED_LOOKAHEAD")
    epochs_per_eth1_voting_period: int = _u("EPOCHS_PER_ETH1_VOTING_PERIOD")
    slots_per_historical_root: int = _u("SLOTS_PER_HISTORICAL_ROOT")
    min_epochs_to_inactivity_penalty: int = _u("MIN_EPOCHS_TO_INACTIVITY_PENALTY")
    epochs_per_historical_vector: int = _u("EPOCHS_PER_HISTORICAL_VECTOR")
    epochs_per_slashings_vector: int = _u("EPOCHS_PER_SLASHINGS_VECTOR")
    historical_roots_limit: int = _u("HISTORICAL_ROOTS_LIMIT")
    validator_registry_limit: int = _u("VALIDATOR_REGISTRY_LIMIT")
    base_reward_factor: int = _u("BASE_REWARD_FACTOR")
    whistleblower_reward_quotient: int = _u("WHISTLEBLOWER_REWARD_QUOTIENT")
    proposer_reward_quotient: int = _u("PROPOSER_REWARD_QUOTIENT")
    inactivity_penalty_quotient: int = _u("INACTIVITY_PENALTY_QUOTIENT")
    min_slashing_penalty_quotient: int = _u("MIN_SLASHING_PENALTY_QUOTIENT")
    proportional_slashing_multiplier: int = _u("PROPORTIONAL_SLASHING_MULTIPLIER")
    max_proposer_slashings: int = _u("MAX_PROPOSER_SLASHINGS")
    max_attester_slashings: int = _u("MAX_ATTESTER_SLASHINGS")
    max_attestations: int = _u("MAX_ATTESTATIONS")
    max_deposits: int = _u("MAX_DEPOSITS")
    max_voluntary_exits: int = _u("MAX_VOLUNTARY_EXITS")

    # altair
    inactivity_penalty_quotient_altair: int = _u("INACTIVITY_PENALTY_QUOTIENT_ALTAIR")
    min_slashing_penalty_quotient_altair: int = _u("MIN_SLASHING_PENALTY_QUOTIENT_ALTAIR")
    proportional_slashing_multiplier_altair: int = _u("PROPORTIONAL_SLASHING_MULTIPLIER_ALTAIR")
    sync_committee_size: int = _u("SYNC_COMMITTEE_SIZE")
    epochs_per_sync_committee_period: int = _u("EPOCHS_PER_SYNC_COMMITTEE_PERIOD")
    min_sync_committee_participants: int = _u("MIN_SYNC_COMMITTEE_PARTICIPANTS")

    # bellatrix
    inactivity_penalty_quotient_bellatrix: int = _u("INACTIVITY_PENALTY_QUOTIENT_BELLATRIX")
    min_slashing_penalty_quotient_bellatrix: int = _u("MIN_SLASHING_PENALTY_QUOTIENT_BELLATRIX")
    proportional_slashing_multiplier_bellatrix: int = _u("PROPORTIONAL_SLASHING_MULTIPLIER_BELLATRIX")
    max_bytes_per_transaction: int = _u("MAX_BYTES_PER_TRANSACTION")
    max_transactions_per_payload: int = _u("MAX_TRANSACTIONS_PER_PAYLOAD")
    bytes_per_logs_bloom: int = _u("BYTES_PER_LOGS_BLOOM")
    max_extra_data_bytes: int = _u("MAX_EXTRA_DATA_BYTES")

    # capella
    max_withdrawals_per_payload: int = _u("MAX_WITHDRAWALS_PER_PAYLOAD")
    max_validators_per_withdrawal_sweep: int = _u("MAX_VALIDATORS_PER_WITHDRAWALS_SWEEP")
    max_bls_to_execution_change: int = _u("MAX_BLS_TO_EXECUTION_CHANGES")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ChainConfig":
        """Build a config from a mapping of spec keys; unknown keys are ignored."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("chain config must be a mapping")
        values = {}
        for f in fields(cls):
            key = f.metadata["yaml"]
            if key in data and data[key] is not None:
                try:
                    values[f.name] = f.metadata["conv"](data[key])
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"invalid value for {key}: {data[key]!r}") from exc
        return cls(**values)

    def merged(self, override: "ChainConfig") -> "ChainConfig":
        """Return a copy where every non-empty value of ``override`` replaces ours."""
        changes = {
            f.name: getattr(override, f.name)
            for f in fields(self)
            if getattr(override, f.name) not in ("", 0)
        }
        return replace(self, **changes)


def load_chain_config(text: str) -> ChainConfig:
    """Parse chain config YAML, keeping every scalar's literal text (hex versions stay strings)."""
    data = yaml.load(text, Loader=yaml.BaseLoader)
    return ChainConfig.from_dict(data)