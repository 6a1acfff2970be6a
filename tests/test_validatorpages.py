import base64

from lightexplorer.pages import as_json
from lightexplorer.validatorpages import (
    SearchAheadEpochsResult,
    SearchAheadGraffitiResult,
    SearchAheadSlotsResult,
    SearchBlockResult,
    SearchGraffitiResult,
    ValidatorPageData,
    ValidatorPageDataBlocks,
    ValidatorsPageData,
    ValidatorsPageDataValidator,
)


def test_validator_page_json_keys():
    page = ValidatorPageData(index=12, effective_balance=32, upcheck_activity=2, upcheck_maximum=3)
    data = as_json(page)
    assert data["index"] == 12
    assert data["eff_balance"] == 32
    assert data["upcheck_act"] == 2
    assert data["upcheck_max"] == 3


def test_validator_page_pubkey_round_trip():
    key = bytes(range(48))
    data = as_json(ValidatorPageData(public_key=key))
    assert base64.b64decode(data["pubkey"]) == key


def test_validator_page_recent_blocks():
    page = ValidatorPageData(recent_blocks=[ValidatorPageDataBlocks(slot=5, block_root="0xaa")])
    data = as_json(page)
    assert data["recent_blocks"][0]["slot"] == 5
    assert data["recent_blocks"][0]["block_root"] == "0xaa"


def test_validators_page_keys():
    page = ValidatorsPageData(
        validators=[ValidatorsPageDataValidator(index=3, show_upcheck=True)],
        first_validator=1,
        last_page_val_idx=9,
    )
    data = as_json(page)
    assert data["first_validx"] == 1
    assert data["last_page_validx"] == 9
    assert data["validators"][0]["show_upcheck"] is True


def test_validators_list_default_independent():
    first = ValidatorsPageData()
    first.validators.append(ValidatorsPageDataValidator())
    assert ValidatorsPageData().validators == []


def test_search_block_result_hex_root():
    root = bytes(range(4))
    result = SearchBlockResult(slot=7, root=root, orphaned=True).to_json()
    assert result["slot"] == 7
    assert result["orphaned"] is True
    assert bytes.fromhex(result["root"][2:]) == root
    assert result["root"].startswith("0x")


def test_search_block_result_omits_empty():
    assert SearchBlockResult().to_json() == {}


def test_search_ahead_slots_omits_empty_fields():
    result = SearchAheadSlotsResult(slot="42").to_json()
    assert result == {"slot": "42"}


def test_search_graffiti_results():
    assert SearchGraffitiResult(graffiti="hi").to_json() == {"graffiti": "hi"}
    assert SearchAheadGraffitiResult(graffiti="hi", count="3").to_json() == {
        "graffiti": "hi",
        "count": "3",
    }
    assert SearchAheadGraffitiResult().to_json() == {}


def test_search_ahead_epochs():
    assert SearchAheadEpochsResult(epoch="8").to_json() == {"epoch": "8"}
    assert SearchAheadEpochsResult().to_json() == {}