"""HTML and text formatting helpers for explorer pages."""

from __future__ import annotations

import posixpath
from datetime import datetime, timezone
from typing import Optional, Sequence, Union
from urllib.parse import urlsplit, urlunsplit

from Crypto.Hash import keccak
from markupsafe import Markup

from .bits import bit_at_vector
from .models import NamedValidator

_THOUSANDS = '<span class="thousands-separator"></span>'
_MAX_INT64 = 2**63 - 1

Amount = Union[int, bytes, None]


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("'", "&#39;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&#34;")
    )


def format_eth(num: str) -> str:
    """Format a wei amount given as text in whole units with four decimals."""
    try:
        value = float(num)
    except (TypeError, ValueError):
        value = 0.0
    return f"{value / 1e18:.4f} GRAM"


def format_eth_from_gwei(gwei: int) -> str:
    return f"{gwei / 1e9:.4f} GRAM"


def format_eth_from_gwei_short(gwei: int) -> str:
    return f"{gwei / 1e9:.4f}"


def format_full_eth_from_gwei(gwei: int) -> str:
    return f"{int(gwei / 1e9)} GRAM"


def format_eth_add_commas_from_gwei(gwei: int) -> Markup:
    return format_add_commas(int(gwei / 1e9))


def format_float(num: float, precision: int) -> str:
    """Format with thousands separators, dropping trailing zeros and a bare point."""
    return f"{num:,.{precision}f}".rstrip("0").rstrip(".")


def format_add_commas_formatted(num: float, precision: int) -> Markup:
    text = f"{num:,.{precision}f}"
    if precision > 0:
        text = text.rstrip("0").rstrip(".")
    return Markup(text.replace(",", _THOUSANDS))


def format_add_commas(n: int) -> Markup:
    return Markup(format_float(float(n), 2).replace(",", _THOUSANDS))


def _bitlist_parts(data: bytes) -> tuple[bytes, int]:
    if not data:
        return b"", 0
    last = data[-1]
    msb = last.bit_length()
    length = 8 * (len(data) - 1) + msb - 1 if last else 0
    cleared = bytearray(data)
    if msb:
        cleared[-1] &= ~(1 << (msb - 1)) & 0xFF
    return bytes(cleared), length


def format_bitlist(data: bytes, validators: Optional[Sequence[NamedValidator]]) -> Markup:
    """Render an SSZ bitlist (length marked by its highest set bit)."""
    bits, length = _bitlist_parts(data)
    return format_bits(bits, length, validators)


def _validator_span(val: NamedValidator) -> str:
    if val.name:
        title = f"{val.name} ({val.index})"
    else:
        title = f"{val.index}"
    return f'<span data-bs-toggle="tooltip" data-bs-placement="top" title="{title}">'


def format_bits(
    data: bytes, length: int, validators: Optional[Sequence[NamedValidator]]
) -> Markup:
    """Render bits in groups of eight, 64 per line, with optional validator tooltips."""
    parts = ['<div class="text-bitfield text-monospace">']
    per_line = 8
    for y in range(0, len(data), per_line):
        start, end = y * 8, (y + per_line) * 8
        if end >= length:
            end = length
        for x in range(start, end):
            if x % 8 == 0:
                if x != 0:
                    parts.append("</span> ")
                parts.append("<span>")
            tagged = validators is not None and x < len(validators)
            if tagged:
                parts.append(_validator_span(validators[x]))
            parts.append("1" if bit_at_vector(data, x) else "0")
            if tagged:
                parts.append("</span>")
        parts.append("</span><br/>")
    parts.append("</div>")
    return Markup("".join(parts))


def format_bitvector_validators(
    bits: bytes, validators: Sequence[NamedValidator]
) -> Markup:
    """Render a bitvector; validators are shown only if there is one per bit."""
    invalid_len = len(bits) * 8 != len(validators)
    parts = ['<pre class="text-monospace" style="font-size:1rem;">']
    for i in range(len(bits) * 8):
        bit = "1" if bit_at_vector(bits, i) else "0"
        if invalid_len:
            parts.append(bit)
        else:
            parts.append(_validator_span(validators[i]))
            parts.append(bit)
            parts.append("</span>")
        if (i + 1) % 64 == 0:
            parts.append("\n")
        elif (i + 1) % 8 == 0:
            parts.append(" ")
    parts.append("</pre>")
    return Markup("".join(parts))


def format_participation(value: float) -> Markup:
    return Markup(f"<span>{value * 100.0:.2f} %</span>")


def _as_int(amount: Amount) -> Optional[int]:
    if amount is None:
        return None
    if isinstance(amount, (bytes, bytearray)):
        return int.from_bytes(amount, "big")
    return int(amount)


def format_amount(
    amount: Amount,
    unit: str,
    digits: int,
    max_pre_comma_digits: int = 0,
    full_amount_tooltip: bool = True,
    small_unit: bool = False,
    new_line_for_unit: bool = False,
) -> Markup:
    """Render an amount of the given unit (GRAM, Engram or GWei) with limited decimals."""
    if unit in ("GRAM", "Engram"):
        unit_label, unit_digits = " " + unit, 18
    elif unit == "GWei":
        unit_label, unit_digits = " " + unit, 9
    else:
        unit_label, unit_digits = " ?", 0

    display_unit = "<BR />" if new_line_for_unit else ""
    if small_unit:
        display_unit += '<span style="font-size: .63rem;'
        if new_line_for_unit:
            display_unit += "color: grey;"
        display_unit += '">' + unit_label + "</span>"
    else:
        display_unit += unit_label

    trimmed, full = trim_amount(
        _as_int(amount), unit_digits, max_pre_comma_digits, digits, False
    )
    tooltip = ""
    if full_amount_tooltip:
        tooltip = f' data-bs-toggle="tooltip" data-bs-placement="top" title="{full}"'
    return Markup(f"<span{tooltip}>{trimmed}{display_unit}</span>")


def trim_amount(
    amount: Optional[int],
    unit_digits: int,
    max_pre_comma_digits: int,
    digits: int,
    add_positive_sign: bool,
) -> tuple[str, str]:
    """Return the amount shown with at most ``digits`` decimals, and in full."""
    trimmed = "0"
    post_comma = "0"
    prefix = ""
    full = ""

    if amount is not None:
        if amount > 0 and add_positive_sign:
            prefix = "+"
        elif amount < 0:
            prefix = "-"
        s = str(abs(amount))
        length = len(s)

        if length > unit_digits:
            length -= unit_digits
            trimmed = s[:length]
            post_comma = s[length:].rstrip("0")
            if max_pre_comma_digits > 0 and length > max_pre_comma_digits:
                excess = length - max_pre_comma_digits
                digits = 0 if digits < excess else digits - excess
        elif length == unit_digits:
            post_comma = s.rstrip("0")
        elif length != 0:
            post_comma = ("0" * (unit_digits - length) + s).rstrip("0")

        full = trimmed
        if post_comma:
            full += "." + post_comma

        if len(post_comma) > digits:
            if digits < 0:
                raise ValueError(f"negative digit count: {digits}")
            post_comma = post_comma[:digits]

        if post_comma:
            trimmed += "." + post_comma
    return prefix + trimmed, prefix + full


def checksum_address(address: bytes) -> str:
    """Return the mixed-case checksummed hex form of a 20-byte address."""
    raw = bytes(address)[-20:].rjust(20, b"\x00")
    hex_addr = raw.hex()
    digest = keccak.new(digest_bits=256, data=hex_addr.encode("ascii")).digest()
    out = []
    for i, ch in enumerate(hex_addr):
        nibble = digest[i // 2] >> 4 if i % 2 == 0 else digest[i // 2] & 0x0F
        out.append(ch.upper() if ch > "9" and nibble > 7 else ch)
    return "0x" + "".join(out)


def _join_url(base: str, *elements: str) -> Optional[str]:
    try:
        parts = urlsplit(base)
    except ValueError:
        return None
    path = posixpath.normpath(posixpath.join("/", parts.path.lstrip("/"), *elements))
    if elements and elements[-1].endswith("/") and not path.endswith("/"):
        path += "/"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def _link(explorer_link: str, kind: str, target: str, caption: str) -> Markup:
    if explorer_link:
        link = _join_url(explorer_link, kind, target)
        if link is not None:
            return Markup(f'<a href="{link}">{caption}</a>')
    return Markup(caption)


def format_eth_block_link(block_number: int, explorer_link: str = "") -> Markup:
    caption = format_add_commas(block_number)
    return _link(explorer_link, "block", str(block_number), str(caption))


def format_eth_block_hash_link(block_hash: bytes, explorer_link: str = "") -> Markup:
    caption = "0x" + bytes(block_hash).hex()
    return _link(explorer_link, "block", caption, caption)


def format_eth_address_link(address: bytes, explorer_link: str = "") -> Markup:
    caption = checksum_address(address)
    return _link(explorer_link, "address", caption, caption)


def _format_validator(index: int, name: str, icon: str) -> Markup:
    if index == _MAX_INT64:
        return Markup(
            f'<span class="validator-label validator-index"><i class="fas {icon}"></i> unknown</span>'
        )
    if name:
        return Markup(
            f'<span class="validator-label validator-name" data-bs-toggle="tooltip" '
            f'data-bs-placement="top" data-bs-title="{index}"><i class="fas {icon}"></i> '
            f'<a href="/validator/{index}">{_escape(name)}</a></span>'
        )
    return Markup(
        f'<span class="validator-label validator-index"><i class="fas {icon}"></i> '
        f'<a href="/validator/{index}">{index}</a></span>'
    )


def format_validator(index: int, name: str) -> Markup:
    return _format_validator(index, name, "fa-male mr-2")


def format_slashed_validator(index: int, name: str) -> Markup:
    return _format_validator(index, name, "fa-user-slash mr-2 text-danger")


def format_validator_with_index(index: int, name: str) -> Markup:
    if name:
        return Markup(
            f'<span class="validator-label validator-name">{_escape(name)} ({index})</span>'
        )
    return Markup(f'<span class="validator-label validator-index">{index}</span>')


def format_recent_time_short(ts: datetime, now: Optional[datetime] = None) -> Markup:
    """Render the distance to ``ts`` as e.g. ``5 min. ago`` or ``in 2 hr.``."""
    if now is None:
        now = datetime.now(timezone.utc) if ts.tzinfo is not None else datetime.now()
    seconds = (ts - now).total_seconds()
    magnitude = abs(seconds)
    if magnitude < 1:
        return Markup("now")
    if magnitude < 60:
        text = f"{int(magnitude)} sec."
    elif magnitude < 3600:
        text = f"{int(magnitude / 60)} min."
    elif magnitude < 86400:
        text = f"{int(magnitude / 3600)} hr."
    else:
        text = f"{int(magnitude / 3600 / 24)} day."
    if seconds < 0:
        return Markup(f"{text} ago")
    return Markup(f"in {text}")


def format_graffiti(graffiti: bytes) -> Markup:
    data = bytes(graffiti)
    hex_text = "0x" + data.hex() if data else ""
    text = _escape(data.decode("utf-8", errors="replace"))
    return Markup(f'<span class="graffiti-label" data-graffiti="{hex_text}">{text}</span>')