"""Decoder for OpenDocument metadata (``meta.xml``).

Reads the standard fields below ``office:meta`` plus every
``meta:user-defined`` element as a typed custom property. ODF has no
last-modified-by field; ``dc:creator`` maps to the author.
"""

from __future__ import annotations

import logging

from lxml import etree

from docmeta.core.config import Settings, get_settings
from docmeta.metadata.base import CustomPropertiesMap, MetadataRecord
from docmeta.metadata.scalars import extract_scalar_fields
from docmeta.metadata.values import DEFAULT_ODF_VALUE_TYPE, decode_odf_value
from docmeta.xml.tree import find_descendants, get_attribute, text_content

logger = logging.getLogger(__name__)

ODF_META_MARKER = "office:meta"
USER_DEFINED_TAG = "meta:user-defined"

ODF_TEXT_FIELDS: dict[str, str] = {
    "title": "dc:title",
    "author": "dc:creator",
    "description": "dc:description",
    "subject": "dc:subject",
}

ODF_TIMESTAMP_FIELDS: dict[str, str] = {
    "created": "meta:creation-date",
    "modified": "dc:date",
}


def decode_user_defined(marker: etree._Element) -> CustomPropertiesMap:
    """Decode all ``meta:user-defined`` elements below the marker.

    Entries without a name or with empty text are skipped. An entry whose
    value fails to decode is never inserted, so an earlier good value under
    the same name survives.
    """
    properties: CustomPropertiesMap = {}
    for element in find_descendants(marker, USER_DEFINED_TAG):
        name = get_attribute(element, "meta:name")
        raw = text_content(element)
        if not name or not raw:
            continue
        value_type = get_attribute(element, "meta:value-type") or DEFAULT_ODF_VALUE_TYPE
        value = decode_odf_value(value_type, raw)
        if value is None:
            logger.debug("Skipping user-defined property %r of type %s", name, value_type)
            continue
        properties[name] = value
    return properties


def decode_odf_meta(marker: etree._Element, settings: Settings | None = None) -> MetadataRecord:
    """Build a record from an ``office:meta`` element."""
    settings = settings or get_settings()
    fields = extract_scalar_fields(marker, ODF_TEXT_FIELDS, ODF_TIMESTAMP_FIELDS, settings)

    custom = decode_user_defined(marker)
    if custom:
        fields["custom_properties"] = custom

    logger.debug("Decoded ODF meta: %s", sorted(fields))
    return MetadataRecord(**fields)
