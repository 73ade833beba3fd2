"""
English to LOLspeak translation.

Translates words, plain text and the text of XML documents using a
dictionary of LOLspeak spellings, with optional suffix heuristics for words
the dictionary doesn't know.
"""

from .default import (
    element_to_lolspeak,
    element_to_lolspeak_recursive,
    get_default_tranzlator,
    reset_default_tranzlator,
    set_default_tranzlator,
    to_lolspeak,
    xml_to_lolspeak,
)
from .exceptions import DictionaryLoadError, LolspeakError, MarkupParseError
from .heuristics import HEURISTIC_RULES, HeuristicRule
from .models import TranslationReport, WordFilter
from .tranzlator import Tranzlator

__version__ = "1.0.0"

__all__ = [
    "Tranzlator",
    "TranslationReport",
    "WordFilter",
    "HeuristicRule",
    "HEURISTIC_RULES",
    "LolspeakError",
    "DictionaryLoadError",
    "MarkupParseError",
    "get_default_tranzlator",
    "set_default_tranzlator",
    "reset_default_tranzlator",
    "to_lolspeak",
    "xml_to_lolspeak",
    "element_to_lolspeak",
    "element_to_lolspeak_recursive",
]
