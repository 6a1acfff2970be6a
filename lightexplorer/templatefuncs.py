"""Functions made available to page templates, and graffiti text helpers."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from markupsafe import Markup

from . import format as fmt

logger = logging.getLogger(__name__)


def include_html(path: str) -> Markup:
    """Return a file's content as trusted HTML, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8") as fh:
            return Markup(fh.read())
    except OSError as exc:
        logger.info("includeHTML - error reading file: %s", exc)
        return Markup("")


def graffiti_to_string(graffiti: bytes) -> str:
    """Decode graffiti bytes, dropping padding zeros and invalid UTF-8."""
    text = bytes(graffiti).strip(b"\x00").decode("utf-8", errors="replace")
    return text.replace("\ufffd", "").replace("\x00", "")


def format_graffiti_string(graffiti: str) -> str:
    """HTML-escape graffiti text, dropping NUL and replacement characters."""
    return fmt._escape(graffiti).replace("\x00", "").replace("\ufffd", "")


def _round(value: float, places: int) -> float:
    scale = 10.0 ** places
    scaled = value * scale
    if not math.isfinite(scaled):
        return scaled / scale
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale


def template_funcs() -> dict[str, Callable[..., Any]]:
    """Return the name-to-function table used when rendering templates."""
    return {
        "includeHTML": include_html,
        "bigIntCmp": lambda i, j: (i > j) - (i < j),
        "mod": lambda i, j: i % j == 0,
        "sub": lambda i, j: i - j,
        "subUI64": lambda i, j: i - j,
        "add": lambda i, j: i + j,
        "addI64": lambda i, j: i + j,
        "addUI64": lambda i, j: i + j,
        "addFloat64": lambda i, j: i + j,
        "mul": lambda i, j: i * j,
        "div": lambda i, j: i / j,
        "divInt": lambda i, j: float(i) / float(j),
        "nef": lambda i, j: i != j,
        "gtf": lambda i, j: i > j,
        "ltf": lambda i, j: i < j,
        "round": _round,
        "percent": lambda i: i * 100,
        "contains": lambda s, sub: sub in s,
        "formatAddCommas": fmt.format_add_commas,
        "formatFloat": fmt.format_float,
        "formatBitlist": fmt.format_bitlist,
        "formatBitvectorValidators": fmt.format_bitvector_validators,
        "formatParticipation": fmt.format_participation,
        "formatEthFromGwei": fmt.format_eth_from_gwei,
        "formatEthFromGweiShort": fmt.format_eth_from_gwei_short,
        "formatFullEthFromGwei": fmt.format_full_eth_from_gwei,
        "formatEthAddCommasFromGwei": fmt.format_eth_add_commas_from_gwei,
        "formatAmount": fmt.format_amount,
        "ethBlockLink": fmt.format_eth_block_link,
        "ethBlockHashLink": fmt.format_eth_block_hash_link,
        "ethAddressLink": fmt.format_eth_address_link,
        "formatValidator": fmt.format_validator,
        "formatValidatorWithIndex": fmt.format_validator_with_index,
        "formatSlashedValidator": fmt.format_slashed_validator,
        "formatRecentTimeShort": fmt.format_recent_time_short,
        "formatGraffiti": fmt.format_graffiti,
    }