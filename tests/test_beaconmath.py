from datetime import datetime, timezone
from decimal import Decimal

import pytest

from lightexplorer.beaconmath import (
    ChainTime,
    gwei_bytes_to_ether,
    gwei_to_ether,
    wei_bytes_to_ether,
    wei_to_ether,
)

GENESIS = 1606824023


@pytest.fixture
def ct():
    return ChainTime(genesis_timestamp=GENESIS, seconds_per_slot=12, slots_per_epoch=32)


@pytest.mark.parametrize("slot", [0, 1, 31, 32, 1000, 7_000_000])
def test_slot_time_round_trip(ct, slot):
    assert ct.time_to_slot(int(ct.slot_to_time(slot).timestamp())) == slot


def test_genesis_is_slot_zero(ct):
    assert ct.slot_to_time(0) == datetime.fromtimestamp(GENESIS, tz=timezone.utc)


def test_time_before_genesis_is_slot_zero(ct):
    assert ct.time_to_slot(GENESIS - 1000) == 0
    assert ct.time_to_epoch(datetime.fromtimestamp(GENESIS - 1000, tz=timezone.utc)) == 0


@pytest.mark.parametrize("epoch", [0, 1, 5, 250_000])
def test_epoch_of_slot_covers_whole_epoch(ct, epoch):
    assert {ct.epoch_of_slot(epoch * 32 + k) for k in range(32)} == {epoch}


def test_first_slot_of_epoch(ct):
    ts = GENESIS + 12 * 1000 + 5
    first = ct.time_to_first_slot_of_epoch(ts)
    assert first % 32 == 0
    assert first <= ct.time_to_slot(ts) < first + 32


@pytest.mark.parametrize("epoch", [0, 3, 10_000])
def test_epoch_time_round_trip(ct, epoch):
    assert ct.epoch_to_time(epoch) == ct.slot_to_time(epoch * 32)
    assert ct.time_to_epoch(ct.epoch_to_time(epoch)) == epoch


@pytest.mark.parametrize("day", [0, 1, 400])
def test_day_round_trip(ct, day):
    assert ct.time_to_day(int(ct.day_to_time(day).timestamp())) == day


def test_day_and_week_of_slot(ct):
    slots_per_day = 86400 // 12
    assert ct.day_of_slot(slots_per_day * 9) == 9
    assert ct.day_of_slot(slots_per_day * 9 - 1) == 8
    assert ct.week_of_slot(slots_per_day * 7 * 4) == 4


def test_wei_to_ether():
    assert wei_to_ether(10**18) == Decimal(1)
    assert wei_bytes_to_ether((10**18).to_bytes(8, "big")) == Decimal(1)


def test_wei_to_ether_is_exact_for_large_values():
    wei = 123456789012345678901234567890123
    assert wei_to_ether(wei) * 10**18 == Decimal(wei)


def test_gwei_to_ether():
    assert gwei_to_ether(32 * 10**9) == Decimal(32)
    assert gwei_bytes_to_ether((10**9).to_bytes(8, "big")) == Decimal(1)
    assert gwei_to_ether(1) * 10**9 == Decimal(1)