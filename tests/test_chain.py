import pytest

from lightexplorer.chain import ChainConfig, ForkVersion, load_chain_config

SAMPLE = """
PRESET_BASE: 'mainnet'
CONFIG_NAME: 'mainnet'
GENESIS_FORK_VERSION: 0x00000000
MIN_GENESIS_TIME: 1606824000
GENESIS_DELAY: 604800
SECONDS_PER_SLOT: 12
DEPOSIT_CONTRACT_ADDRESS: 0x00000000219ab540356cBB839Cbe05303d7705Fa
UNKNOWN_KEY: whatever
"""


def test_load_keeps_hex_strings():
    cfg = load_chain_config(SAMPLE)
    assert cfg.genesis_fork_version == "0x00000000"
    assert cfg.deposit_contract_address == "0x00000000219ab540356cBB839Cbe05303d7705Fa"
    assert cfg.config_name == "mainnet"


def test_load_parses_integers():
    cfg = load_chain_config(SAMPLE)
    assert cfg.seconds_per_slot == 12
    assert cfg.genesis_delay == 604800
    assert cfg.min_genesis_time == 1606824000


def test_missing_keys_stay_zero():
    cfg = load_chain_config(SAMPLE)
    assert cfg.slots_per_epoch == 0
    assert cfg.deneb_fork_version == ""


def test_from_dict_rejects_bad_integer():
    with pytest.raises(ValueError):
        ChainConfig.from_dict({"SLOTS_PER_EPOCH": "many"})


def test_from_dict_rejects_negative_unsigned():
    with pytest.raises(ValueError):
        ChainConfig.from_dict({"SLOTS_PER_EPOCH": -1})


def test_merged_overrides_non_zero_only():
    preset = ChainConfig.from_dict({"SLOTS_PER_EPOCH": 32, "SECONDS_PER_SLOT": 12, "CONFIG_NAME": "base"})
    chain = ChainConfig.from_dict({"SECONDS_PER_SLOT": 5, "CONFIG_NAME": "net"})
    merged = preset.merged(chain)
    assert merged.slots_per_epoch == 32
    assert merged.seconds_per_slot == 5
    assert merged.config_name == "net"
    assert preset.seconds_per_slot == 12


def test_empty_document_gives_defaults():
    assert load_chain_config("") == ChainConfig()


def test_fork_version_holds_values():
    fv = ForkVersion(epoch=7, current_version=b"\x01", previous_version=b"\x00")
    assert (fv.epoch, fv.current_version, fv.previous_version) == (7, b"\x01", b"\x00")