"""Decoder for OOXML custom document properties (``docProps/custom.xml``).

Each ``property`` element names one value held in its first child element,
a ``vt:*`` variant type such as ``vt:lpwstr``, ``vt:i4`` or ``vt:filetime``.
"""

from __future__ import annotations

import logging

from docmeta.core.config import Settings
from docmeta.metadata.base import CustomPropertiesMap
from docmeta.metadata.values import decode_vt_value
from docmeta.xml.tree import (
    find_descendants,
    first_child_element,
    get_attribute,
    parse_xml,
    qualified_name,
    text_content,
)

logger = logging.getLogger(__name__)

PROPERTY_TAG = "property"


def decode_custom_properties(xml_text: str, settings: Settings | None = None) -> CustomPropertiesMap:
    """Decode a custom properties document into a name -> value map.

    Args:
        xml_text: Raw XML of the custom properties part.
        settings: Parser settings; defaults to ``get_settings()``.

    Returns:
        Typed values keyed by property name. Later properties win on a name
        collision unless their value fails to decode. Never raises; an
        unparseable document yields an empty map.
    """
    tree = parse_xml(xml_text, settings)
    result: CustomPropertiesMap = {}

    for prop in find_descendants(tree, PROPERTY_TAG):
        name = get_attribute(prop, "name")
        if not name:
            continue

        # A property carries exactly one value element; siblings are ignored
        value_element = first_child_element(prop)
        if value_element is None:
            logger.debug("Custom property %r has no value element", name)
            continue

        tag = qualified_name(value_element)
        value = decode_vt_value(tag, text_content(value_element))
        if value is None:
            logger.debug("Dropping custom property %r (%s)", name, tag)
            continue
        result[name] = value

    return result
