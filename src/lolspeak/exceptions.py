"""
Exception hierarchy for the lolspeak translator.

Unknown words are never an error: they pass through unchanged. Exceptions
are reserved for failures at the edges, loading a dictionary or parsing
markup.
"""

from __future__ import annotations

from typing import Any


class LolspeakError(Exception):
    """Base exception for all lolspeak errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DictionaryLoadError(LolspeakError):
    """A dictionary file is missing, unreadable, or not a flat string mapping.

    Raised at construction time, so no Tranzlator is created from a bad file.
    """
    pass


class MarkupParseError(LolspeakError):
    """Markup handed to the tree translator is not well-formed XML."""
    pass
