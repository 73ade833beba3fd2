"""
Data models for dictionaries and translation reports.
"""

from typing import Callable

from pydantic import BaseModel, Field, RootModel

# Post-processing applied to each translated word
WordFilter = Callable[[str], str]


class LolDictionary(RootModel[dict[str, str]]):
    """A flat mapping from lowercase English word to its LOLspeak translation.

    Used to validate deserialized dictionary files: the top level must be a
    mapping and every key and value must be a string. YAML scalars such as
    ``yes`` or ``2`` load as booleans and integers, so they are rejected
    unless quoted in the file.
    """
    root: dict[str, str] = Field(default_factory=dict)


class TranslationReport(BaseModel):
    """Diagnostics collected by a Tranzlator during translation.

    Attributes:
        traced_words: Words resolved through the dictionary (trace mode)
        translated_heuristics: Words rewritten by heuristic rules
    """
    traced_words: dict[str, str] = Field(default_factory=dict, description="Dictionary-resolved words")
    translated_heuristics: dict[str, str] = Field(
        default_factory=dict,
        description="Heuristically translated words"
    )
