"""Conversions between slots, epochs, days and wall-clock time, and between currency units."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Context, Decimal

_DAY_SECONDS = 24 * 3600
_WEEK_SECONDS = 7 * _DAY_SECONDS


@dataclass(frozen=True)
class ChainTime:
    """Slot and epoch arithmetic for one chain."""

    genesis_timestamp: int
    seconds_per_slot: int
    slots_per_epoch: int

    def epoch_of_slot(self, slot: int) -> int:
        """Return the epoch a slot belongs to."""
        return slot // self.slots_per_epoch

    def day_of_slot(self, slot: int) -> int:
        """Return the day since genesis a slot falls on."""
        return self.seconds_per_slot * slot // _DAY_SECONDS

    def week_of_slot(self, slot: int) -> int:
        """Return the week since genesis a slot falls in."""
        return self.seconds_per_slot * slot // _WEEK_SECONDS

    def slot_to_time(self, slot: int) -> datetime:
        """Return the start time of a slot."""
        return datetime.fromtimestamp(
            self.genesis_timestamp + slot * self.seconds_per_slot, tz=timezone.utc
        )

    def time_to_slot(self, timestamp: int) -> int:
        """Return the slot running at a Unix timestamp; 0 before genesis."""
        timestamp = int(timestamp)
        if self.genesis_timestamp > timestamp:
            return 0
        return (timestamp - self.genesis_timestamp) // self.seconds_per_slot

    def time_to_first_slot_of_epoch(self, timestamp: int) -> int:
        """Return the first slot of the epoch running at a Unix timestamp."""
        slot = self.time_to_slot(timestamp)
        return slot - slot % self.slots_per_epoch

    def epoch_to_time(self, epoch: int) -> datetime:
        """Return the start time of an epoch."""
        return datetime.fromtimestamp(
            self.genesis_timestamp + epoch * self.seconds_per_slot * self.slots_per_epoch,
            tz=timezone.utc,
        )

    def time_to_day(self, timestamp: int) -> int:
        """Return the number of whole days between genesis and a Unix timestamp."""
        days = int((int(timestamp) - self.genesis_timestamp) / _DAY_SECONDS)
        return max(days, 0)

    def day_to_time(self, day: int) -> datetime:
        """Return the start time of a day counted from genesis."""
        genesis = datetime.fromtimestamp(self.genesis_timestamp, tz=timezone.utc)
        return genesis + timedelta(days=day)

    def time_to_epoch(self, ts: datetime) -> int:
        """Return the epoch running at a point in time; 0 before genesis."""
        unix = math.floor(ts.timestamp())
        if self.genesis_timestamp > unix:
            return 0
        return (unix - self.genesis_timestamp) // self.seconds_per_slot // self.slots_per_epoch


def _scaled(value: int, exponent: int) -> Decimal:
    value = int(value)
    context = Context(prec=max(len(str(abs(value))) + 2, 28))
    return Decimal(value).scaleb(exponent, context)


def wei_to_ether(wei: int) -> Decimal:
    """Convert an amount in wei to ether, exactly."""
    return _scaled(wei, -18)


def wei_bytes_to_ether(data: bytes) -> Decimal:
    """Convert a big-endian wei amount to ether."""
    return wei_to_ether(int.from_bytes(data, "big"))


def gwei_to_ether(gwei: int) -> Decimal:
    """Convert an amount in gwei to ether, exactly."""
    return _scaled(gwei, -9)


def gwei_bytes_to_ether(data: bytes) -> Decimal:
    """Convert a big-endian gwei amount to ether."""
    return gwei_to_ether(int.from_bytes(data, "big"))