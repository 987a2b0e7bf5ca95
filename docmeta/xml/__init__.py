"""XML tree access helpers."""

from __future__ import annotations

from docmeta.xml.tree import (
    find_descendants,
    find_direct_children,
    first_child_element,
    get_attribute,
    parse_xml,
    qualified_name,
    text_content,
)

__all__ = [
    "find_descendants",
    "find_direct_children",
    "first_child_element",
    "get_attribute",
    "parse_xml",
    "qualified_name",
    "text_content",
]
