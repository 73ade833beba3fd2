"""
English to LOLspeak word translator.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Mapping

from . import markup
from .dictionary import load_dictionary
from .heuristics import HEURISTIC_RULES, HeuristicRule, apply_heuristics
from .models import TranslationReport, WordFilter

if TYPE_CHECKING:
    from lxml import etree

    from .config import LolspeakConfig

logger = logging.getLogger("lolspeak")

BUNDLED_DICTIONARY = Path(__file__).parent / "data" / "tranzlator.yml"

TYPOGRAPHIC_APOSTROPHE = "’"

# A word followed by whatever whitespace trails it
_TOKEN_PATTERN = re.compile(r"(\w[\w'’]*)(\s*)")

# prefix + apostrophe (either form) + word characters, split at the last apostrophe
_SUFFIX_PATTERN = re.compile(r"(.*)(['’]\w+)")


class Tranzlator:
    """Translates English words, text and XML text into LOLspeak.

    Words are looked up case-insensitively in a dictionary of lowercase
    English words. Words that are not in the dictionary are passed through
    lowercased, or rewritten by suffix heuristics when ``try_heuristics`` is
    on.

    A Tranzlator writes to its trace and heuristic logs while translating, so
    one instance must not be shared between threads with ``trace`` or
    ``try_heuristics`` enabled unless the caller synchronizes access.

    Attributes:
        trace: Record every dictionary-resolved word in ``traced_words``
        try_heuristics: Rewrite dictionary misses with heuristic rules
        heuristic_rules: Ordered rules used when ``try_heuristics`` is on

    Example:
        >>> tranzlator = Tranzlator({"hi": "oh hai", "cat": "kitteh"})
        >>> tranzlator.translate_word("Hi")
        'oh hai'
        >>> tranzlator.translate_words("Hi, cat's toy!")
        "oh hai, kitteh's toy!"
    """

    def __init__(
        self,
        dictionary: Mapping[str, str] | None = None,
        trace: bool = False,
        try_heuristics: bool = False,
        heuristics_exclude: Iterable[str] = (),
        heuristic_rules: tuple[HeuristicRule, ...] = HEURISTIC_RULES,
    ) -> None:
        """Create a Tranzlator from an in-memory dictionary.

        Args:
            dictionary: Lowercase English word to LOLspeak translation. Copied;
                later changes to the caller's mapping have no effect.
            trace: Initial value of ``trace``
            try_heuristics: Initial value of ``try_heuristics``
            heuristics_exclude: Words never rewritten by heuristics
            heuristic_rules: Ordered heuristic rules
        """
        self._dictionary: dict[str, str] = dict(dictionary or {})
        self.trace = trace
        self.try_heuristics = try_heuristics
        self.heuristic_rules = heuristic_rules
        self._heuristics_exclude: set[str] = set()
        self.heuristics_exclude = heuristics_exclude
        self._traced_words: dict[str, str] = {}
        self._translated_heuristics: dict[str, str] = {}

    @classmethod
    def from_file(cls, path: Path | str, **options) -> Tranzlator:
        """Create a Tranzlator using a dictionary from a YAML file.

        Raises:
            DictionaryLoadError: If the file can't be loaded
        """
        return cls(load_dictionary(path), **options)

    @classmethod
    def from_config(cls, config: LolspeakConfig) -> Tranzlator:
        """Create a Tranzlator from settings, using the bundled dictionary if none is configured."""
        path = config.dictionary_path or BUNDLED_DICTIONARY
        return cls.from_file(
            path,
            trace=config.trace,
            try_heuristics=config.try_heuristics,
            heuristics_exclude=config.heuristics_exclude,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def dictionary(self) -> Mapping[str, str]:
        """A copy of the word mapping; the Tranzlator's own dictionary never changes."""
        return dict(self._dictionary)

    @property
    def traced_words(self) -> dict[str, str]:
        """Words resolved through the dictionary since the last clear."""
        return dict(self._traced_words)

    @property
    def translated_heuristics(self) -> dict[str, str]:
        """Words rewritten by heuristics since the last clear."""
        return dict(self._translated_heuristics)

    @property
    def heuristics_exclude(self) -> set[str]:
        return set(self._heuristics_exclude)

    @heuristics_exclude.setter
    def heuristics_exclude(self, words: Iterable[str] | None) -> None:
        self._heuristics_exclude = {word.lower() for word in words or ()}

    def clear_traced_words(self) -> None:
        self._traced_words = {}

    def clear_translated_heuristics(self) -> None:
        self._translated_heuristics = {}

    def report(self) -> TranslationReport:
        """Snapshot both logs as a TranslationReport."""
        return TranslationReport(
            traced_words=self.traced_words,
            translated_heuristics=self.translated_heuristics,
        )

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def _lookup(self, word: str) -> str | None:
        """Dictionary lookup with apostrophe normalization and suffix splitting."""
        lol_word = self._dictionary.get(word)
        if lol_word is None:
            lol_word = self._dictionary.get(word.replace(TYPOGRAPHIC_APOSTROPHE, "'"))

        if lol_word is None:
            match = _SUFFIX_PATTERN.fullmatch(word)
            if match:
                prefix, suffix = match.groups()
                found = self._dictionary.get(prefix)
                if found is not None:
                    # the suffix keeps its original apostrophe
                    lol_word = found + suffix
        return lol_word

    def translate_word(self, word: str, word_filter: WordFilter | None = None) -> str:
        """Translate a single word into LOLspeak.

        The result is lower case unless a filter changes it:

            >>> tranzlator.translate_word("Hi")
            'oh hai'
            >>> tranzlator.translate_word("hi", str.upper)
            'OH HAI'

        If heuristics are off, only dictionary words are translated. If they
        are on, other words may be rewritten by rules such as "*tion" ->
        "*shun". Untranslated words come back lowercased.

        Args:
            word: A single word, possibly with embedded apostrophes
            word_filter: Applied to the final result, e.g. to upper case it

        Returns:
            The translated (or passed-through) word
        """
        word = word.lower()
        lol_word = self._lookup(word)

        if lol_word is not None:
            if self.trace:
                self._traced_words[word] = lol_word
        elif self.try_heuristics and word not in self._heuristics_exclude:
            applied = apply_heuristics(word, self.heuristic_rules)
            if applied is not None:
                rule, lol_word = applied
                self._translated_heuristics[word] = lol_word
                logger.debug(f"Heuristic '{rule.name}' translated {word!r} -> {lol_word!r}")

        if lol_word is None:
            lol_word = word

        if word_filter is not None:
            lol_word = word_filter(lol_word)
        return lol_word

    def translate_words(self, words: str, word_filter: WordFilter | None = None) -> str:
        """Translate all the words in a string.

        Punctuation, symbols and whitespace are kept exactly where they were.

        Args:
            words: Arbitrary text
            word_filter: Applied to each translated word

        Returns:
            The translated text
        """
        def replace(match: re.Match) -> str:
            word, space = match.groups()
            lol_word = self.translate_word(word, word_filter)
            # Stick the space back on, as long as the word isn't empty
            if lol_word != "":
                lol_word += space
            return lol_word

        return _TOKEN_PATTERN.sub(replace, words)

    def translate_xml_element(self, element: etree._Element, word_filter: WordFilter | None = None) -> None:
        """Translate the text directly inside one XML element, in place."""
        markup.translate_element(self, element, word_filter)

    def translate_xml_element_recursive(
        self, element: etree._Element, word_filter: WordFilter | None = None
    ) -> None:
        """Translate the text of an XML element and all its descendants, in place."""
        markup.translate_element_recursive(self, element, word_filter)

    def translate_xml_string(self, xml_string: str, word_filter: WordFilter | None = None) -> str:
        """Translate the text parts of a well-formed XML string.

        Raises:
            MarkupParseError: If the string is not well-formed XML
        """
        return markup.translate_xml_string(self, xml_string, word_filter)
