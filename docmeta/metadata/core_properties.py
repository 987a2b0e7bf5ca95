"""Decoder for OOXML core properties (``docProps/core.xml``).

Reads Dublin Core and OOXML core elements below ``cp:coreProperties``.
This dialect carries no typed custom properties; those live in a separate
part handled by ``docmeta.metadata.custom_properties``.
"""

from __future__ import annotations

import logging

from lxml import etree

from docmeta.core.config import Settings, get_settings
from docmeta.metadata.base import MetadataRecord
from docmeta.metadata.scalars import extract_scalar_fields

logger = logging.getLogger(__name__)

CORE_PROPERTIES_MARKER = "cp:coreProperties"

CORE_TEXT_FIELDS: dict[str, str] = {
    "title": "dc:title",
    "author": "dc:creator",
    "last_modified_by": "cp:lastModifiedBy",
    "description": "dc:description",
    "subject": "dc:subject",
}

CORE_TIMESTAMP_FIELDS: dict[str, str] = {
    "created": "dcterms:created",
    "modified": "dcterms:modified",
}


def decode_core_properties(marker: etree._Element, settings: Settings | None = None) -> MetadataRecord:
    """Build a record from a ``cp:coreProperties`` element."""
    settings = settings or get_settings()
    fields = extract_scalar_fields(marker, CORE_TEXT_FIELDS, CORE_TIMESTAMP_FIELDS, settings)
    logger.debug("Decoded core properties: %s", sorted(fields))
    return MetadataRecord(**fields)
