"""Typed value decoding for user-defined and custom document properties.

Two decision tables map a type tag and raw text to a ``TypedValue``:

- ODF ``meta:value-type`` attribute values, matched literally.
- OOXML ``vt:*`` value element names, matched by regex search in order.

Failure handling differs per type and is part of the output contract:
numbers that do not parse are dropped, timestamps that do not parse
degrade to text, and booleans cannot fail (anything other than "true"
is false).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime

from docmeta.metadata.base import TypedValue

logger = logging.getLogger(__name__)

ValueDecoder = Callable[[str], TypedValue | None]

# Numeric literal grammar of document producers: ASCII only, no "inf"/"nan"
# spellings, no digit separators, radix literals unsigned
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY = re.compile(r"([+-]?)Infinity")
_RADIX = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII)

# ISO week dates (2024-W03) and ordinal dates (2024-015) are not calendar dates here
_WEEK_OR_ORDINAL_DATE = re.compile(r"[+-]?\d{4}-?(?:W|\d{3}(?![\d-]))", re.ASCII)


def parse_number(raw: str) -> int | float | None:
    """Parse numeric text; None when the text is not a number.

    Empty or blank text is 0. Decimal and 0x/0o/0b integer literals become
    ``int``; decimals, exponents and ``Infinity`` become ``float``.
    """
    text = raw.strip()
    if not text:
        return 0
    if _INTEGER.fullmatch(text):
        return int(text)
    if _RADIX.fullmatch(text):
        return int(text, 0)
    if _DECIMAL.fullmatch(text):
        return float(text)
    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return float("-inf") if infinity.group(1) == "-" else float("inf")
    return None


def parse_timestamp(raw: str) -> datetime | None:
    """Parse ISO 8601 calendar text; None when it is not a valid date/time."""
    text = raw.strip()
    if not text or _WEEK_OR_ORDINAL_DATE.match(text):
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


# ── Per-type decoders ────────────────────────────────────────────


def _decode_text(raw: str) -> TypedValue:
    return TypedValue.text(raw)


def _decode_non_empty_text(raw: str) -> TypedValue | None:
    return TypedValue.text(raw) if raw else None


def _decode_boolean(raw: str) -> TypedValue:
    return TypedValue.boolean(raw.lower() == "true")


def _decode_number(raw: str) -> TypedValue | None:
    number = parse_number(raw)
    if number is None:
        logger.debug("Dropping non-numeric value %r", raw)
        return None
    return TypedValue.number(number)


def _decode_timestamp(raw: str) -> TypedValue:
    value = parse_timestamp(raw)
    if value is None:
        logger.debug("Keeping unparseable date %r as text", raw)
        return TypedValue.text(raw)
    return TypedValue.timestamp(value)


# ── ODF meta:value-type ──────────────────────────────────────────

DEFAULT_ODF_VALUE_TYPE = "string"

_ODF_DECODERS: dict[str, ValueDecoder] = {
    "boolean": _decode_boolean,
    "float": _decode_number,
    "date": _decode_timestamp,
    "time": _decode_timestamp,
}


def decode_odf_value(value_type: str, raw: str) -> TypedValue | None:
    """Decode an ODF user-defined value; None means drop it."""
    decoder = _ODF_DECODERS.get(value_type, _decode_text)
    return decoder(raw)


# ── OOXML vt:* elements ──────────────────────────────────────────

_VT_DECODERS: tuple[tuple[re.Pattern[str], ValueDecoder], ...] = (
    (re.compile(r"vt:lpwstr|vt:lpstr|vt:bstr"), _decode_text),
    (re.compile(r"vt:bool"), _decode_boolean),
    (re.compile(r"vt:(i[1248]|ui[1248]|int|uint|r4|r8|decimal)"), _decode_number),
    (re.compile(r"vt:filetime|vt:date"), _decode_timestamp),
)


def decode_vt_value(tag: str, raw: str) -> TypedValue | None:
    """Decode a custom property value element; None means drop it."""
    for pattern, decoder in _VT_DECODERS:
        if pattern.search(tag):
            return decoder(raw)
    return _decode_non_empty_text(raw)
