from __future__ import annotations

import re
from typing import Optional

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

DEFAULT_NUMERIC = "0"


def is_integer_text(value: str) -> bool:
    return _INTEGER_RE.fullmatch(value) is not None


def coerce_numeric(value: Optional[str]) -> str:
    """
    Normalize raw field text into a base-10 integer string.

    Missing, blank and non-integer input all become ``"0"``. Integer text,
    padded or not, is returned as written minus surrounding whitespace
    (``" 01"`` becomes ``"01"``).
    """
    if value is None:
        return DEFAULT_NUMERIC
    candidate = value.strip()
    if not candidate or not is_integer_text(candidate):
        return DEFAULT_NUMERIC
    return candidate


def trim_text(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value.strip()


def decode_latin1(data: bytes | bytearray) -> str:
    return bytes(data).decode("latin-1")
