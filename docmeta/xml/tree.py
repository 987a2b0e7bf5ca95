"""XML tree access helpers.

Thin, stateless wrappers around lxml used by the metadata decoders.
Elements are matched by their qualified name as written in the document
(``dc:title``, ``office:meta``), never by namespace URI, so documents that
bind the usual prefixes to unusual URIs still match.

Parsing never raises: malformed input is recovered where libxml2 can, and
anything it cannot handle yields an empty tree that matches nothing.
"""

from __future__ import annotations

import logging

from lxml import etree

from docmeta.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

Node = etree._ElementTree | etree._Element


def _empty_tree() -> etree._ElementTree:
    return etree.ElementTree()


def parse_xml(text: str, settings: Settings | None = None) -> etree._ElementTree:
    """Parse XML text into a tree.

    Args:
        text: Raw XML text, already extracted from its container.
        settings: Parser settings; defaults to ``get_settings()``.

    Returns:
        The parsed tree. On empty, oversized or unparseable input the tree
        has no root element.
    """
    settings = settings or get_settings()

    if not text:
        return _empty_tree()

    if settings.max_input_chars and len(text) > settings.max_input_chars:
        logger.warning(
            "XML input of %d chars exceeds limit of %d; skipping",
            len(text),
            settings.max_input_chars,
        )
        return _empty_tree()

    parser = etree.XMLParser(
        recover=settings.recover_malformed_xml,
        resolve_entities=False,
        no_network=True,
        huge_tree=settings.huge_tree,
        # The text is already decoded; any encoding declaration in it is stale
        encoding="utf-8",
    )
    try:
        # lxml rejects str input that carries an encoding declaration
        root = etree.fromstring(text.encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning("Unparseable XML input: %s", e)
        return _empty_tree()

    if root is None:
        logger.warning("XML input produced no root element")
        return _empty_tree()

    return root.getroottree()


def qualified_name(element: etree._Element) -> str:
    """Return the element's tag as written, e.g. ``cp:coreProperties``."""
    tag = element.tag
    if tag.startswith("{"):
        local = tag.rpartition("}")[2]
        return f"{element.prefix}:{local}" if element.prefix else local
    # Undeclared prefixes survive recovery literally ("vt:i4" with no xmlns:vt)
    return tag


def _is_element(node: etree._Element) -> bool:
    # Comments, PIs and entity references carry a factory function as tag
    return isinstance(node.tag, str)


def find_descendants(node: Node, tag: str) -> list[etree._Element]:
    """All elements named ``tag`` below ``node``, in document order.

    For a tree the root element is itself a candidate; for an element only
    its descendants are.
    """
    if isinstance(node, etree._ElementTree):
        root = node.getroot()
        if root is None:
            return []
        candidates = root.iter()
    else:
        candidates = node.iterdescendants()
    return [el for el in candidates if _is_element(el) and qualified_name(el) == tag]


def find_direct_children(node: Node, tag: str) -> list[etree._Element]:
    """Direct child elements named ``tag``, in document order."""
    if isinstance(node, etree._ElementTree):
        root = node.getroot()
        return [root] if root is not None and qualified_name(root) == tag else []
    return [child for child in node if _is_element(child) and qualified_name(child) == tag]


def first_child_element(element: etree._Element) -> etree._Element | None:
    """First child node that is an element, skipping text, comments and PIs."""
    return next((child for child in element if _is_element(child)), None)


def get_attribute(element: etree._Element, name: str) -> str | None:
    """Read an attribute by its written name (``name`` or ``meta:name``)."""
    prefix, _, local = name.rpartition(":")
    if prefix:
        uri = element.nsmap.get(prefix)
        if uri is not None:
            value = element.get(f"{{{uri}}}{local}")
            if value is not None:
                return value
    return element.get(name)


def text_content(element: etree._Element) -> str:
    """Concatenated text of the element and all its descendants."""
    return str(element.xpath("string()"))
