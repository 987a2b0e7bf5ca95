"""Scalar field extraction shared by the core-properties and ODF decoders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lxml import etree

from docmeta.core.config import Settings
from docmeta.metadata.base import Timestamp
from docmeta.metadata.values import parse_timestamp
from docmeta.xml.tree import find_descendants, text_content

logger = logging.getLogger(__name__)


def first_text(marker: etree._Element, tag: str) -> str | None:
    """Text of the first descendant named ``tag``, or None when absent or empty.

    Only the first match is considered; a later non-empty duplicate does not
    stand in for an empty first one.
    """
    matches = find_descendants(marker, tag)
    if not matches:
        return None
    return text_content(matches[0]) or None


def read_timestamp(marker: etree._Element, tag: str, settings: Settings) -> Timestamp | None:
    raw = first_text(marker, tag)
    if raw is None:
        return None
    timestamp = Timestamp(raw=raw, value=parse_timestamp(raw))
    if not timestamp.is_valid:
        if settings.strict_timestamps:
            logger.warning("Dropping invalid %s timestamp %r", tag, raw)
            return None
        logger.warning("Keeping invalid %s timestamp %r", tag, raw)
    return timestamp


def extract_scalar_fields(
    marker: etree._Element,
    text_fields: Mapping[str, str],
    timestamp_fields: Mapping[str, str],
    settings: Settings,
) -> dict[str, Any]:
    """Collect record keyword arguments from ``field name -> tag`` tables."""
    fields: dict[str, Any] = {}
    for name, tag in text_fields.items():
        value = first_text(marker, tag)
        if value is not None:
            fields[name] = value
    for name, tag in timestamp_fields.items():
        timestamp = read_timestamp(marker, tag, settings)
        if timestamp is not None:
            fields[name] = timestamp
    return fields
