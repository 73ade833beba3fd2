"""
Rewrites the text of XML trees without touching their markup.

lxml keeps an element's text in two places: ``element.text`` holds the text
before its first child, and each child's ``tail`` holds the text that
follows that child inside the parent. Together these are the element's own
text segments. Element names, attributes and tree shape are never modified.

Text read from lxml is already decoded (``&#8217;`` arrives as ``’``) and the
serializer escapes ``&``, ``<`` and ``>`` on output, so word filters only ever
see plain text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lxml import etree

from .exceptions import MarkupParseError
from .models import WordFilter

if TYPE_CHECKING:
    from .tranzlator import Tranzlator

XML_WHITESPACE = " \t\r\n"

# The XML declaration and the whitespace that follows it
_XML_DECLARATION = re.compile(r"<\?xml[ \t\r\n][^>]*\?>[ \t\r\n]*")


def _as_element(node: etree._Element | etree._ElementTree) -> etree._Element:
    if isinstance(node, etree._ElementTree):
        return node.getroot()
    return node


def _translate_segment(tranzlator: Tranzlator, text: str | None, word_filter: WordFilter | None) -> str | None:
    if not text:
        return text
    return tranzlator.translate_words(text, word_filter)


def translate_element(
    tranzlator: Tranzlator,
    element: etree._Element | etree._ElementTree,
    word_filter: WordFilter | None = None,
) -> None:
    """Translate the text segments of a single element in place.

    Only the element's own text is rewritten; the text inside child elements
    is left alone.

    Args:
        tranzlator: Translator to use
        element: Element (or element tree, meaning its root) to modify
        word_filter: Applied to each translated word
    """
    element = _as_element(element)
    element.text = _translate_segment(tranzlator, element.text, word_filter)
    for child in element:
        child.tail = _translate_segment(tranzlator, child.tail, word_filter)


def translate_element_recursive(
    tranzlator: Tranzlator,
    element: etree._Element | etree._ElementTree,
    word_filter: WordFilter | None = None,
) -> None:
    """Translate the text of an element and every descendant element in place.

    Comments and processing instructions keep their content.
    """
    element = _as_element(element)
    for node in element.iter(etree.Element):
        translate_element(tranzlator, node, word_filter)


def _split_whitespace(markup: str | bytes) -> tuple[str, str | bytes, str]:
    """Split markup into (leading whitespace, document, trailing whitespace)."""
    whitespace = XML_WHITESPACE if isinstance(markup, str) else XML_WHITESPACE.encode("ascii")
    body = markup.strip(whitespace)
    start = len(markup) - len(markup.lstrip(whitespace))
    leading = markup[:start]
    trailing = markup[start + len(body):]
    if isinstance(markup, bytes):
        return leading.decode("ascii"), body, trailing.decode("ascii")
    return leading, body, trailing


def parse_xml(markup: str | bytes) -> etree._Element:
    """Parse well-formed XML into a new tree and return its root.

    Entities are not resolved and no network access happens while parsing.

    Raises:
        MarkupParseError: If the markup is not well-formed
    """
    if isinstance(markup, str):
        data = markup.encode("utf-8")
        parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
    else:
        data = markup
        parser = etree.XMLParser(resolve_entities=False, no_network=True)

    if not data.strip():
        raise MarkupParseError("Empty XML document")

    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise MarkupParseError(
            f"Malformed XML: {e}",
            details={"line": e.lineno, "column": e.offset},
        ) from e


def translate_xml_string(
    tranzlator: Tranzlator,
    markup: str | bytes,
    word_filter: WordFilter | None = None,
) -> str:
    """Translate the text parts of a well-formed XML document.

    The markup is parsed into a fresh tree, so nothing the caller holds is
    modified. Attribute values are never translated.

    Example:
        >>> translate_xml_string(tranzlator, "<cat name='hi'>cat <b>hi</b></cat>")
        '<cat name="hi">kitteh <b>oh hai</b></cat>'

    Args:
        tranzlator: Translator to use
        markup: XML document text
        word_filter: Applied to each translated word

    Returns:
        The serialized, translated document. The XML declaration and the
        whitespace around the document are kept as they were.

    Raises:
        MarkupParseError: If the markup is not well-formed
    """
    leading, body, trailing = _split_whitespace(markup)
    head = body[:256] if isinstance(body, str) else body[:256].decode("latin-1")
    match = _XML_DECLARATION.match(head)
    declaration = match.group(0) if match else ""

    root = parse_xml(body)
    translate_element_recursive(tranzlator, root, word_filter)
    document = etree.tostring(root.getroottree(), encoding="unicode")
    return f"{leading}{declaration}{document}{trailing}"
