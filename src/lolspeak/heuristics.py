"""
Heuristic LOLspeak spellings for words missing from the dictionary.
"""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeuristicRule:
    """A single suffix rewrite, applied only when the whole word matches.

    Attributes:
        name: Short label used in logs
        pattern: Regex that must match the entire (lowercased) word
        replacement: ``re`` replacement template applied to that match
    """
    name: str
    pattern: str
    replacement: str
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def apply(self, word: str) -> str | None:
        """Return the rewritten word, or None when the rule doesn't match."""
        match = self._compiled.fullmatch(word)
        if match is None:
            return None
        return match.expand(self.replacement)


# Evaluated in order, first match wins. "ed" -> "d" is literal: looked -> lookd.
HEURISTIC_RULES: tuple[HeuristicRule, ...] = (
    HeuristicRule("tion", r"(.*)tion(s?)", r"\1shun\2"),
    HeuristicRule("ed", r"(.*)ed", r"\1d"),
    HeuristicRule("ing", r"(.*)ing", r"\1in"),
    HeuristicRule("ss", r"(.*)ss", r"\1s"),
    HeuristicRule("er", r"(.*)er", r"\1r"),
    HeuristicRule("s", r"([0-9A-Za-z_]+)s", r"\1z"),
)


def apply_heuristics(
    word: str,
    rules: tuple[HeuristicRule, ...] = HEURISTIC_RULES,
) -> tuple[HeuristicRule, str] | None:
    """Apply the first matching rule to ``word``.

    Args:
        word: Lowercased word that missed the dictionary
        rules: Ordered rules to try

    Returns:
        (rule, translation) for the first rule that matched, None otherwise

    Example:
        >>> rule, lol_word = apply_heuristics("invention")
        >>> rule.name, lol_word
        ('tion', 'invenshun')
        >>> apply_heuristics("cat") is None
        True
    """
    for rule in rules:
        lol_word = rule.apply(word)
        if lol_word is not None:
            return rule, lol_word
    return None
