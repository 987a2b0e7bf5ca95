"""Office document metadata decoding.

Decodes OOXML core properties, ODF meta and OOXML custom properties from
XML text that has already been extracted from its container.
"""

from __future__ import annotations

from docmeta.metadata.base import (
    CustomPropertiesMap,
    MetadataRecord,
    Timestamp,
    TypedValue,
    ValueKind,
    custom_properties_to_dict,
)
from docmeta.metadata.custom_properties import decode_custom_properties
from docmeta.metadata.detector import decode_metadata

__all__ = [
    "CustomPropertiesMap",
    "MetadataRecord",
    "Timestamp",
    "TypedValue",
    "ValueKind",
    "custom_properties_to_dict",
    "decode_custom_properties",
    "decode_metadata",
]
