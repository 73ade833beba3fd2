"""
Builds an Apple Dictionary Services source document from a LOLspeak dictionary.

Each English word becomes one ``d:entry`` whose body shows the word as a
heading and its translation as a paragraph.
"""

import logging
from typing import Mapping

from lxml import etree

logger = logging.getLogger("lolspeak")

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
APPLE_DICTIONARY_NAMESPACE = "http://www.apple.com/DTDs/DictionaryService-1.0.rng"

_NSMAP = {None: XHTML_NAMESPACE, "d": APPLE_DICTIONARY_NAMESPACE}


def _d(tag: str) -> str:
    return f"{{{APPLE_DICTIONARY_NAMESPACE}}}{tag}"


def _xhtml(tag: str) -> str:
    return f"{{{XHTML_NAMESPACE}}}{tag}"


def build_reference_tree(dictionary: Mapping[str, str]) -> etree._Element:
    """Build the ``d:dictionary`` element with one entry per word, sorted by word."""
    root = etree.Element(_d("dictionary"), nsmap=_NSMAP)
    for key in sorted(dictionary):
        entry = etree.SubElement(root, _d("entry"), id=key)
        etree.SubElement(entry, _d("index"), {_d("value"): key, _d("title"): key})
        etree.SubElement(entry, _xhtml("h1")).text = key
        etree.SubElement(entry, _xhtml("p")).text = dictionary[key]
    return root


def build_reference(dictionary: Mapping[str, str]) -> str:
    """Render a dictionary as an Apple Dictionary Services XML document.

    Args:
        dictionary: English word to LOLspeak translation

    Returns:
        Pretty-printed XML text, starting with a UTF-8 XML declaration
    """
    root = build_reference_tree(dictionary)
    logger.debug(f"Built reference document with {len(root)} entries")
    data = etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="UTF-8")
    return data.decode("utf-8")
