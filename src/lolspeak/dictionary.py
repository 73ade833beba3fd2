"""
Loading, quoting and sorting of YAML translation dictionaries.
"""

import logging
import re
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from .exceptions import DictionaryLoadError
from .models import LolDictionary

logger = logging.getLogger("lolspeak")

# Plain scalars that YAML 1.1 would not read back as strings
_YAML_RESERVED_WORDS: set[str] = {"yes", "no", "true", "false", "on", "off", "null"}

_BARE_WORD = re.compile(r"[a-zA-Z]+")


def load_dictionary(path: Path | str) -> dict[str, str]:
    """Load a translation dictionary from a YAML file.

    Expected YAML format is a flat mapping:
        hi: oh hai
        cat: kitteh
        "i'm": me

    Args:
        path: Path to YAML file

    Returns:
        The word mapping. An empty file gives an empty mapping.

    Raises:
        DictionaryLoadError: If the file can't be read, the YAML is malformed,
            or the content is not a mapping of strings to strings
    """
    path = Path(path)
    try:
        raw_content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DictionaryLoadError(
            f"Failed to read dictionary file: {e}", details={"path": str(path)}
        ) from e

    try:
        data = yaml.safe_load(raw_content)
    except yaml.YAMLError as e:
        raise DictionaryLoadError(
            f"Invalid YAML in dictionary file: {e}", details={"path": str(path)}
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DictionaryLoadError(
            f"Dictionary must be a mapping, got {type(data).__name__}",
            details={"path": str(path)},
        )

    try:
        dictionary = LolDictionary.model_validate(data).root
    except ValidationError as e:
        raise DictionaryLoadError(
            f"Dictionary entries must be strings: {e.error_count()} invalid entries",
            details={"path": str(path), "errors": e.errors()},
        ) from e

    logger.debug(f"Loaded {len(dictionary)} words from {path}")
    return dictionary


def yaml_quote(value: str) -> str:
    """Quote a string for a hand-written YAML line, only when needed.

    Plain alphabetic words are left bare unless YAML would read them as a
    boolean or null. Everything else is double-quoted.

    Example:
        >>> yaml_quote("kitteh")
        'kitteh'
        >>> yaml_quote("oh hai")
        '"oh hai"'
        >>> yaml_quote("yes")
        '"yes"'
    """
    if _BARE_WORD.fullmatch(value) and value.lower() not in _YAML_RESERVED_WORDS:
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def dump_dictionary(dictionary: Mapping[str, str]) -> str:
    """Render a dictionary as YAML, one ``key: value`` line per entry, sorted by key."""
    lines = [f"{yaml_quote(key)}: {yaml_quote(dictionary[key])}" for key in sorted(dictionary)]
    return "".join(f"{line}\n" for line in lines)


def sort_dictionary_file(source: Path | str, destination: Path | str | None = None) -> str:
    """Rewrite a dictionary file with its entries sorted and minimally quoted.

    Args:
        source: Dictionary file to read
        destination: Where to write the sorted YAML; nothing is written if None

    Returns:
        The sorted YAML text

    Raises:
        DictionaryLoadError: If the source can't be loaded
    """
    dictionary = load_dictionary(source)
    text = dump_dictionary(dictionary)
    if destination is not None:
        Path(destination).write_text(text, encoding="utf-8")
        logger.info(f"Wrote {len(dictionary)} sorted entries to {destination}")
    return text
