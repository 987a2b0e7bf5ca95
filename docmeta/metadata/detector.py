"""Metadata dialect detection.

Routes a metadata document to the decoder for the first dialect marker it
contains, checked in a fixed priority order. Core properties win over ODF
meta when a document happens to contain both.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lxml import etree

from docmeta.core.config import Settings, get_settings
from docmeta.metadata.base import MetadataRecord
from docmeta.metadata.core_properties import CORE_PROPERTIES_MARKER, decode_core_properties
from docmeta.metadata.odf_meta import ODF_META_MARKER, decode_odf_meta
from docmeta.xml.tree import find_descendants, parse_xml

logger = logging.getLogger(__name__)

DialectDecoder = Callable[[etree._Element, Settings], MetadataRecord]

# Priority order matters: the first marker present selects the dialect
DIALECTS: tuple[tuple[str, DialectDecoder], ...] = (
    (CORE_PROPERTIES_MARKER, decode_core_properties),
    (ODF_META_MARKER, decode_odf_meta),
)


def decode_metadata(xml_text: str, settings: Settings | None = None) -> MetadataRecord:
    """Decode document metadata from core-properties or ODF meta XML.

    Args:
        xml_text: Raw XML text of ``docProps/core.xml`` or ``meta.xml``.
        settings: Decoding settings; defaults to ``get_settings()``.

    Returns:
        A MetadataRecord from exactly one dialect, or an empty record when
        no dialect marker is present. Never raises.
    """
    settings = settings or get_settings()
    tree = parse_xml(xml_text, settings)

    for marker_tag, decoder in DIALECTS:
        markers = find_descendants(tree, marker_tag)
        if markers:
            logger.debug("Detected metadata dialect %s", marker_tag)
            return decoder(markers[0], settings)

    logger.debug("No metadata dialect marker found")
    return MetadataRecord()
