import base64
import json
from datetime import datetime, timedelta, timezone

import pytest

from lightexplorer.pages import (
    ClientsPageData,
    ClientsPageDataClient,
    EpochPageData,
    EpochPageDataSlot,
    EpochsPageData,
    IndexPageData,
    IndexPageDataForkGraph,
    IndexPageDataSlots,
    as_json,
)


def test_epoch_page_uses_tagged_keys():
    data = as_json(EpochPageData(epoch=4, previous_epoch=3, eligible_ether=9))
    assert data["epoch"] == 4
    assert data["prev_epoch"] == 3
    assert data["eligibleether"] == 9
    assert "previous_epoch" not in data


def test_epochs_page_untagged_fields_keep_their_names():
    data = as_json(EpochsPageData(epoch_count=2, first_epoch=10, last_epoch=9))
    assert data["EpochCount"] == 2
    assert data["FirstEpoch"] == 10
    assert data["LastEpoch"] == 9
    assert data["default_page"] is False


def test_bytes_are_base64_and_round_trip():
    root = bytes(range(32))
    data = as_json(ClientsPageDataClient(head_root=root))
    assert base64.b64decode(data["head_root"]) == root


def test_zero_time_default():
    data = as_json(EpochPageDataSlot())
    assert data["ts"] == "0001-01-01T00:00:00Z"


def test_time_formatting_utc_and_offset():
    utc = as_json(IndexPageData(genesis_time=datetime(2020, 12, 1, 12, 0, 23, tzinfo=timezone.utc)))
    assert utc["genesis_time"] == "2020-12-01T12:00:23Z"
    shifted = datetime(2020, 12, 1, 12, 0, 23, 500000, tzinfo=timezone(timedelta(hours=2)))
    assert as_json(shifted) == "2020-12-01T12:00:23.5+02:00"


def test_nested_lists_and_tile_maps():
    page = IndexPageData(
        recent_slots=[
            IndexPageDataSlots(
                slot=7, fork_graph=[IndexPageDataForkGraph(index=1, tiles={"vline": True})]
            )
        ],
        recent_slot_count=1,
    )
    data = as_json(page)
    assert data["recent_slots"][0]["slot"] == 7
    assert data["recent_slots"][0]["fork_graph"][0]["tiles"] == {"vline": True}
    assert data["forktree_width"] == 0


def test_output_is_json_serialisable():
    page = ClientsPageData(
        clients=[ClientsPageDataClient(index=0, name="node", head_root=b"\xff")],
        client_count=1,
    )
    data = as_json(page)
    assert json.loads(json.dumps(data)) == data
    assert data["client_count"] == len(data["clients"])


def test_default_lists_are_independent():
    first = EpochPageData()
    first.slots.append(EpochPageDataSlot(slot=1))
    assert EpochPageData().slots == []
    assert len(as_json(first)["slots"]) == 1


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        as_json(object())