"""docmeta

Metadata extraction for office documents. Given the XML of an OOXML
``docProps/core.xml``, an ODF ``meta.xml`` or an OOXML
``docProps/custom.xml``, returns typed, JSON-serializable metadata.

Usage:
    from docmeta import decode_metadata, decode_custom_properties

    record = decode_metadata(core_xml)
    record.title, record.created

    props = decode_custom_properties(custom_xml)
"""

__version__ = "0.1.0"

from docmeta.metadata import (
    CustomPropertiesMap,
    MetadataRecord,
    Timestamp,
    TypedValue,
    ValueKind,
    custom_properties_to_dict,
    decode_custom_properties,
    decode_metadata,
)

__all__ = [
    "__version__",
    "CustomPropertiesMap",
    "MetadataRecord",
    "Timestamp",
    "TypedValue",
    "ValueKind",
    "custom_properties_to_dict",
    "decode_custom_properties",
    "decode_metadata",
]
