"""Page data for the validator pages and search results."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field
from datetime import datetime, timezone
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _j(key: str, default: Any = MISSING, factory: Any = MISSING) -> Any:
    return field(default=default, default_factory=factory, metadata={"json": key})


def _hex(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def _drop_empty(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value not in ("", 0, False, None)}


@dataclass
class ValidatorPageDataBlocks:
    epoch: int = _j("epoch", 0)
    slot: int = _j("slot", 0)
    eth_block: int = _j("eth_block", 0)
    ts: datetime = _j("ts", _ZERO_TIME)
    status: int = _j("status", 0)
    block_root: str = _j("block_root", "")
    graffiti: bytes = _j("graffiti", b"")


@dataclass
class ValidatorPageData:
    """Data for a single validator's page."""

    current_epoch: int = _j("current_epoch", 0)
    index: int = _j("index", 0)
    name: str = _j("name", "")
    public_key: bytes = _j("pubkey", b"")
    balance: int = _j("balance", 0)
    effective_balance: int = _j("eff_balance", 0)
    state: str = _j("state", "")
    beacon_state: str = _j("beacon_state", "")
    show_eligible: bool = _j("show_eligible", False)
    eligible_ts: datetime = _j("eligible_ts", _ZERO_TIME)
    eligible_epoch: int = _j("eligible_epoch", 0)
    show_activation: bool = _j("show_activation", False)
    activation_ts: datetime = _j("activation_ts", _ZERO_TIME)
    activation_epoch: int = _j("activation_epoch", 0)
    is_active: bool = _j("is_active", False)
    was_active: bool = _j("was_active", False)
    upcheck_activity: int = _j("upcheck_act", 0)
    upcheck_maximum: int = _j("upcheck_max", 0)
    show_exit: bool = _j("show_exit", False)
    exit_ts: datetime = _j("exit_ts", _ZERO_TIME)
    exit_epoch: int = _j("exit_epoch", 0)
    withdraw_credentials: bytes = _j("withdraw_credentials", b"")
    show_withdraw_address: bool = _j("show_withdraw_address", False)
    withdraw_address: bytes = _j("withdraw_address", b"")

    recent_blocks: list[ValidatorPageDataBlocks] = _j("recent_blocks", factory=list)
    recent_block_count: int = _j("recent_block_count", 0)


@dataclass
class ValidatorsPageDataValidator:
    index: int = _j("index", 0)
    name: str = _j("name", "")
    public_key: bytes = _j("pubkey", b"")
    balance: int = _j("balance", 0)
    effective_balance: int = _j("eff_balance", 0)
    state: str = _j("state", "")
    show_upcheck: bool = _j("show_upcheck", False)
    upcheck_activity: int = _j("upcheck_act", 0)
    upcheck_maximum: int = _j("upcheck_max", 0)
    show_activation: bool = _j("show_activation", False)
    activation_ts: datetime = _j("activation_ts", _ZERO_TIME)
    activation_epoch: int = _j("activation_epoch", 0)
    show_exit: bool = _j("show_exit", False)
    exit_ts: datetime = _j("exit_ts", _ZERO_TIME)
    exit_epoch: int = _j("exit_epoch", 0)
    show_withdraw_address: bool = _j("show_withdraw_address", False)
    withdraw_address: bytes = _j("withdraw_address", b"")


@dataclass
class ValidatorsPageData:
    """Data for the validators list page."""

    validators: list[ValidatorsPageDataValidator] = _j("validators", factory=list)
    validator_count: int = _j("validator_count", 0)
    first_validator: int = _j("first_validx", 0)
    last_validator: int = _j("last_validx", 0)
    state_filter: str = _j("state_filter", "")

    is_default_page: bool = _j("default_page", False)
    total_pages: int = _j("total_pages", 0)
    page_size: int = _j("page_size", 0)
    current_page_index: int = _j("page_index", 0)
    current_page_val_idx: int = _j("page_validx", 0)
    prev_page_index: int = _j("prev_page_index", 0)
    prev_page_val_idx: int = _j("prev_page_validx", 0)
    next_page_index: int = _j("next_page_index", 0)
    next_page_val_idx: int = _j("next_page_validx", 0)
    last_page_val_idx: int = _j("last_page_validx", 0)


@dataclass
class SearchBlockResult:
    """A block found by search."""

    slot: int = 0
    root: bytes = b""
    orphaned: bool = False

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields; the root is 0x-prefixed hex."""
        return _drop_empty(
            {"slot": self.slot, "root": _hex(self.root) if self.root else "", "orphaned": self.orphaned}
        )


@dataclass
class SearchGraffitiResult:
    graffiti: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        return _drop_empty({"graffiti": self.graffiti})


@dataclass
class SearchAheadEpochsResult:
    epoch: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        return _drop_empty({"epoch": self.epoch})


@dataclass
class SearchAheadSlotsResult:
    slot: str = ""
    root: bytes = b""
    orphaned: bool = False

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields; the root is 0x-prefixed hex."""
        return _drop_empty(
            {"slot": self.slot, "root": _hex(self.root) if self.root else "", "orphaned": self.orphaned}
        )


@dataclass
class SearchAheadGraffitiResult:
    graffiti: str = ""
    count: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        return _drop_empty({"graffiti": self.graffiti, "count": self.count})