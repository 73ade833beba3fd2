"""
Configuration for the lolspeak command line, read from the environment.
"""

import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

_TRUE_STRINGS = {"1", "true", "yes", "on"}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LolspeakConfig(BaseModel):
    """Settings used to build a Tranzlator and configure logging."""

    dictionary_path: Path | None = Field(
        default=None,
        description="YAML dictionary to load instead of the bundled one"
    )
    try_heuristics: bool = Field(
        default=False,
        description="Rewrite words missing from the dictionary with heuristic rules"
    )
    trace: bool = Field(
        default=False,
        description="Record every dictionary-resolved word"
    )
    heuristics_exclude: set[str] = Field(
        default_factory=set,
        description="Words never rewritten by heuristics"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    @field_validator("heuristics_exclude", mode="before")
    @classmethod
    def split_heuristics_exclude(cls, v: Any) -> Any:
        """Accept a comma separated string, and lowercase every word."""
        if isinstance(v, str):
            v = [word.strip() for word in v.split(",")]
        if isinstance(v, (list, tuple, set, frozenset)):
            return {word.lower() for word in v if word}
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUE_STRINGS


def load_config(env_file: Path | None = None) -> LolspeakConfig:
    """Build a LolspeakConfig from environment variables.

    Variables from ``env_file`` (or a ``.env`` found from the current
    directory) are loaded first; variables already set in the environment
    win.

    Recognized variables:
        LOLSPEAK_DICTIONARY: path to a YAML dictionary
        LOLSPEAK_HEURISTICS: enable heuristics (1/true/yes/on)
        LOLSPEAK_TRACE: enable tracing (1/true/yes/on)
        LOLSPEAK_HEURISTICS_EXCLUDE: comma separated words
        LOLSPEAK_LOG_LEVEL: logging level name

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    dictionary = os.getenv("LOLSPEAK_DICTIONARY")
    return LolspeakConfig(
        dictionary_path=Path(dictionary) if dictionary else None,
        try_heuristics=_env_flag("LOLSPEAK_HEURISTICS"),
        trace=_env_flag("LOLSPEAK_TRACE"),
        heuristics_exclude=os.getenv("LOLSPEAK_HEURISTICS_EXCLUDE", ""),
        log_level=os.getenv("LOLSPEAK_LOG_LEVEL", "WARNING"),
    )
