"""Display names for validator index ranges, loaded from YAML or an inventory API."""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Mapping, Optional

import requests
import yaml

logger = logging.getLogger(__name__)

_UINT = re.compile(r"[0-9]+")
_UINT_MAX = 2**64 - 1


def _parse_uint(text: str) -> Optional[int]:
    if not _UINT.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _UINT_MAX else None


def parse_ranges(ranges: Mapping[str, str]) -> dict[int, str]:
    """Expand ``"min-max"`` or ``"index"`` keys into per-index names.

    A single index also names the index after it; unparsable keys are skipped.
    """
    names: dict[int, str] = {}
    for range_text, name in ranges.items():
        parts = str(range_text).split("-")
        low = _parse_uint(parts[0])
        if low is None:
            continue
        high: Optional[int] = low + 1
        if len(parts) > 1:
            high = _parse_uint(parts[1])
            if high is None:
                continue
        for index in range(low, high + 1):
            names[index] = name
    return names


def _range_count(ranges: Mapping[str, str]) -> int:
    total = 0
    for range_text in ranges:
        parts = str(range_text).split("-")
        low = _parse_uint(parts[0])
        if low is None:
            continue
        high = low + 1 if len(parts) == 1 else _parse_uint(parts[1])
        if high is None:
            continue
        total += max(high - low + 1, 0)
    return total


def _check_string_map(data: Any, source: str) -> dict[str, str]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{source} is not a mapping of ranges to names")
    for key, value in data.items():
        if not isinstance(value, str):
            raise ValueError(f"{source}: name for {key!r} is not a string")
    return {str(key): value for key, value in data.items()}


class ValidatorNames:
    """Thread-safe lookup of validator names by index."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._names: Optional[dict[int, str]] = None

    def get_validator_name(self, index: int) -> str:
        """Return the name for ``index``, or an empty string."""
        with self._lock:
            if self._names is None:
                return ""
            return self._names.get(index, "")

    def _merge(self, ranges: Mapping[str, str]) -> int:
        if self._names is None:
            self._names = {}
        self._names.update(parse_ranges(ranges))
        return _range_count(ranges)

    def load_from_yaml(self, file_name: str) -> int:
        """Add names from a YAML file of ranges; return how many were assigned."""
        with self._lock:
            try:
                with open(file_name, encoding="utf-8") as fh:
                    data = yaml.load(fh, Loader=yaml.BaseLoader)
            except OSError as exc:
                logger.error("error opening validator names file %s: %s", file_name, exc)
                raise
            except yaml.YAMLError as exc:
                logger.error("error decoding validator names file %s: %s", file_name, exc)
                raise ValueError(f"error decoding validator names file {file_name}: {exc}") from exc
            try:
                ranges = _check_string_map(data, file_name)
            except ValueError as exc:
                logger.error("error decoding validator names file %s: %s", file_name, exc)
                raise ValueError(f"error decoding validator names file {file_name}: {exc}") from exc
            count = self._merge(ranges)
            logger.info("Loaded %d validator names from yaml (%s)", count, file_name)
            return count

    def load_from_ranges_api(self, api_url: str) -> int:
        """Add names from an inventory API's ``ranges`` object; return how many were assigned.

        A 404 response is logged and loads nothing.
        """
        with self._lock:
            logger.debug("Loading validator names from inventory: %s", api_url)
            try:
                resp = requests.get(api_url, timeout=120)
            except requests.RequestException as exc:
                logger.error("Could not fetch validator names from inventory (%s): %s", api_url, exc)
                raise
            if resp.status_code != 200:
                if resp.status_code == 404:
                    logger.error("Could not fetch validator names from inventory (%s): not found", api_url)
                    return 0
                raise requests.HTTPError(
                    f"url: {api_url}, error-response: {resp.text}", response=resp
                )
            try:
                body = resp.json()
                if not isinstance(body, Mapping):
                    raise ValueError("response is not an object")
                ranges = _check_string_map(body.get("ranges") or {}, "ranges")
            except ValueError as exc:
                raise ValueError(f"error parsing validator ranges response: {exc}") from exc
            count = self._merge(ranges)
            logger.info("Loaded %d validator names from inventory api (%s)", count, api_url)
            return count