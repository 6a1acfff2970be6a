"""Hex decoding, bit vectors and small validator calculations."""

from __future__ import annotations

import binascii


def must_parse_hex(text: str) -> bytes:
    """Decode hex text, ignoring every ``0x``; raise ``ValueError`` on bad input."""
    cleaned = text.replace("0x", "")
    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex string {text!r}: {exc}") from exc


def bit_at_vector(data: bytes, index: int) -> bool:
    """Return bit ``index`` counting from the least significant bit of each byte."""
    return data[index // 8] & (1 << (index % 8)) > 0


def bit_at_vector_reversed(data: bytes, index: int) -> bool:
    """Return bit ``index`` counting from the most significant bit of each byte."""
    return data[index // 8] & (1 << (7 - index % 8)) > 0


def sync_committee_participation(bits: bytes, committee_size: int) -> float:
    """Return the share of the sync committee whose bit is set."""
    if committee_size == 0:
        return float("nan")
    participating = sum(1 for i in range(committee_size) if bit_at_vector(bits, i))
    return participating / committee_size


def validator_churn_limit(
    validator_count: int, min_per_epoch_churn_limit: int, churn_limit_quotient: int
) -> int:
    """Return how many validators may enter or leave per epoch."""
    adaptable = validator_count // churn_limit_quotient if validator_count > 0 else 0
    return max(min_per_epoch_churn_limit, adaptable)