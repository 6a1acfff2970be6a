# lightexplorer

A library of building blocks for a lightweight beacon chain explorer. It holds the chain
specification, slot and epoch arithmetic, HTML formatting helpers for templates, validator
name lookup, and dataclasses for the explorer's pages.

## Modules

- `lightexplorer.chain`: `ChainConfig` holds the consensus-spec parameters.
  `load_chain_config(text)` parses chain config YAML, and every scalar keeps its literal
  text, so fork versions stay strings. `ChainConfig.from_dict` builds a config from a
  mapping of upper-case spec keys and ignores keys it does not know.
  `ChainConfig.merged(override)` returns a copy in which every non-empty value of
  `override` replaces the existing one, for laying a chain config over a preset.
  `ForkVersion` holds a fork's epoch and version bytes.
- `lightexplorer.beaconmath`: `ChainTime(genesis_timestamp, seconds_per_slot,
  slots_per_epoch)` converts between slots, epochs, days, weeks and UTC datetimes.
  `wei_to_ether`, `gwei_to_ether` and their `*_bytes_*` variants return exact `Decimal`
  values. The byte variants read big-endian integers.
- `lightexplorer.bits`: `must_parse_hex` decodes hex after removing every `0x` and raises
  `ValueError` on bad input. The module also has `bit_at_vector`,
  `bit_at_vector_reversed`, `sync_committee_participation` and `validator_churn_limit`.
- `lightexplorer.format`: helpers that return `markupsafe.Markup`:
  - amounts: `format_amount` and `trim_amount` handle units `GRAM`/`Engram` (18 decimals)
    and `GWei` (9 decimals). There are also `format_eth*` and `format_add_commas*`.
  - bitfields: `format_bitlist` (SSZ bitlist), `format_bits` and
    `format_bitvector_validators`.
  - validators: `format_validator`, `format_slashed_validator` and
    `format_validator_with_index`.
  - execution-layer links: `format_eth_block_link`, `format_eth_block_hash_link` and
    `format_eth_address_link`. Each takes an optional explorer base URL.
    `checksum_address` gives the mixed-case checksummed form of an address.
  - other: `format_participation`, `format_recent_time_short` (for example `5 min. ago` or
    `in 2 hr.`) and `format_graffiti`.
- `lightexplorer.templatefuncs`: `template_funcs()` returns a name-to-function table of the
  helpers above, plus small arithmetic and comparison helpers, for use with a template
  engine. The module also has `include_html`, `graffiti_to_string` and
  `format_graffiti_string`.
- `lightexplorer.validatornames`: `ValidatorNames` is a thread-safe lookup of validator
  names.
  - `load_from_yaml(file_name)` reads a mapping of `"min-max"` or `"index"` keys to names.
  - `load_from_ranges_api(url)` fetches a JSON object with a `ranges` member. A 404
    response loads nothing.
  - Both return the number of names assigned.
  - `parse_ranges` expands such a mapping into one name per index. A single index also
    names the index after it.
- `lightexplorer.blocks`: dataclasses for beacon block contents: `Block`, `Attestation`,
  `Deposit`, `ExecutionPayload`, `Withdrawals` and related types.
- `lightexplorer.models`: `PageData`, `Meta`, navigation menu types and `NamedValidator`.
- `lightexplorer.pages`: page data for the clients, epoch, epochs and index pages.
  `as_json(obj)` converts any of these dataclasses to JSON-ready values under their API
  key names. Bytes become base64 and datetimes become RFC 3339 strings.
- `lightexplorer.validatorpages`: page data for the validator and validators pages, and
  search result types whose `to_json()` leaves out empty fields and writes roots as
  `0x`-prefixed hex.

## Installation

```
pip install .
```

## Example

```python
from lightexplorer.beaconmath import ChainTime
from lightexplorer.chain import load_chain_config
from lightexplorer.format import format_eth_from_gwei

chain = load_chain_config("SLOTS_PER_EPOCH: 32\nSECONDS_PER_SLOT: 12\n")
clock = ChainTime(
    genesis_timestamp=1606824023,
    seconds_per_slot=chain.seconds_per_slot,
    slots_per_epoch=chain.slots_per_epoch,
)
print(clock.epoch_of_slot(6_400_000))          # 200000
print(format_eth_from_gwei(32_000_000_000))   # "32.0000 GRAM"
```

## What it does not do

This is a library only:

- It has no command to run and no web server.
- It does not read an explorer configuration file or environment variables, and it does
  not set up logging.
- It does not talk to beacon nodes.
- It has no database or indexer.
- It has no page models for the slot and slots pages.

To build a working explorer, combine these pieces with your own server, data sources and
templates.

## Running the tests

```
pip install ".[test]"
pytest
```