"""
Process-wide default Tranzlator and convenience functions that use it.

The default instance is created lazily from the bundled dictionary on first
access. It is a plain module-level slot with no locking: one owner at a time
should call ``set_default_tranzlator`` or ``reset_default_tranzlator``, and
code that needs different settings should build and pass its own Tranzlator.
"""

from __future__ import annotations

import logging

from lxml import etree

from .models import WordFilter
from .tranzlator import BUNDLED_DICTIONARY, Tranzlator

logger = logging.getLogger("lolspeak")

_default_tranzlator: Tranzlator | None = None


def get_default_tranzlator() -> Tranzlator:
    """Return the default Tranzlator, creating it from the bundled dictionary if unset."""
    global _default_tranzlator
    if _default_tranzlator is None:
        _default_tranzlator = Tranzlator.from_file(BUNDLED_DICTIONARY)
        logger.debug(f"Created default tranzlator from {BUNDLED_DICTIONARY}")
    return _default_tranzlator


def set_default_tranzlator(tranzlator: Tranzlator | None) -> None:
    """Replace the default Tranzlator. ``None`` clears it, so the next access rebuilds it."""
    global _default_tranzlator
    _default_tranzlator = tranzlator


def reset_default_tranzlator() -> None:
    set_default_tranzlator(None)


def to_lolspeak(
    text: str,
    word_filter: WordFilter | None = None,
    tranzlator: Tranzlator | None = None,
) -> str:
    """Translate all the words in ``text``.

    Example:
        >>> to_lolspeak("Hi cat")
        'oh hai kitteh'

    Args:
        text: Text to translate
        word_filter: Applied to each translated word
        tranzlator: Translator to use instead of the default
    """
    tranzlator = tranzlator or get_default_tranzlator()
    return tranzlator.translate_words(text, word_filter)


def xml_to_lolspeak(
    markup: str | bytes,
    word_filter: WordFilter | None = None,
    tranzlator: Tranzlator | None = None,
) -> str:
    """Treat ``markup`` as XML and translate its text, returning new markup.

    Raises:
        MarkupParseError: If the markup is not well-formed
    """
    tranzlator = tranzlator or get_default_tranzlator()
    return tranzlator.translate_xml_string(markup, word_filter)


def element_to_lolspeak(
    element: etree._Element | etree._ElementTree,
    word_filter: WordFilter | None = None,
    tranzlator: Tranzlator | None = None,
) -> None:
    """Translate the text directly inside ``element``, in place."""
    tranzlator = tranzlator or get_default_tranzlator()
    tranzlator.translate_xml_element(element, word_filter)


def element_to_lolspeak_recursive(
    element: etree._Element | etree._ElementTree,
    word_filter: WordFilter | None = None,
    tranzlator: Tranzlator | None = None,
) -> None:
    """Translate the text of ``element`` and all its descendants, in place."""
    tranzlator = tranzlator or get_default_tranzlator()
    tranzlator.translate_xml_element_recursive(element, word_filter)
