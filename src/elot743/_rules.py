"""
ELOT 743 rule table.

Each rule maps one Greek grapheme (one or two letters) to its Latin
rendering. Most rules have a fixed output; two families depend on the
surrounding letters:

- μπ (voiced stop): "b" at a word edge, "mp" inside a word
- αυ/ευ/ηυ (diphthong): second letter is "v" before a voiced sound,
  "f" otherwise

Rule order is match priority: at any position the first rule whose
pattern matches wins. All digraphs are listed before the single-letter
fallback, which is what makes first-match behave like longest-match.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from elot743._charset import GREEK_ALPHABET

__all__ = [
    "Rule",
    "SIMPLE",
    "VOICED_STOP",
    "DIPHTHONG",
    "RULES",
    "RULE_PATTERNS",
    "build_rule_table",
]

logger = logging.getLogger(__name__)

SIMPLE = "simple"
VOICED_STOP = "voiced_stop"
DIPHTHONG = "diphthong"


@dataclass(frozen=True)
class Rule:
    """A grapheme transliteration rule."""
    pattern: str  # lowercase canonical form
    kind: str  # SIMPLE, VOICED_STOP or DIPHTHONG
    output: Optional[str] = None  # only for SIMPLE

    def __post_init__(self):
        if not 1 <= len(self.pattern) <= 2:
            raise ValueError(f"Pattern must be 1 or 2 letters: {self.pattern!r}")
        if self.kind == SIMPLE and not self.output:
            raise ValueError(f"Simple rule {self.pattern!r} needs an output")
        if self.kind not in (SIMPLE, VOICED_STOP, DIPHTHONG):
            raise ValueError(f"Unknown rule kind: {self.kind}")


# Latin letters paired position-by-position with GREEK_ALPHABET.
# "." marks θ, χ, ψ, which the explicit rules below always claim first.
_FALLBACK_LATIN = "aavgdeezii.iiiiklmnxooprsstyyyyf..oo"
_PLACEHOLDER = "."


def _explicit_rules() -> List[Rule]:
    """Digraphs and multi-letter single-letter rules, in priority order."""
    return [
        # Vowel digraphs
        Rule("αι", SIMPLE, "ai"),
        Rule("αί", SIMPLE, "ai"),
        Rule("οι", SIMPLE, "oi"),
        Rule("οί", SIMPLE, "oi"),
        Rule("ου", SIMPLE, "ou"),
        Rule("ού", SIMPLE, "ou"),
        Rule("ει", SIMPLE, "ei"),
        Rule("εί", SIMPLE, "ei"),

        # av/af, ev/ef, iv/if
        Rule("αυ", DIPHTHONG),
        Rule("αύ", DIPHTHONG),
        Rule("ευ", DIPHTHONG),
        Rule("εύ", DIPHTHONG),
        Rule("ηυ", DIPHTHONG),
        Rule("ηύ", DIPHTHONG),

        Rule("ντ", SIMPLE, "nt"),

        # b/mp
        Rule("μπ", VOICED_STOP),

        # Consonant digraphs
        Rule("τσ", SIMPLE, "ts"),
        Rule("τς", SIMPLE, "ts"),
        Rule("τζ", SIMPLE, "tz"),
        Rule("γγ", SIMPLE, "ng"),
        Rule("γκ", SIMPLE, "gk"),

        # Single letters with two-letter output
        Rule("θ", SIMPLE, "th"),
        Rule("χ", SIMPLE, "ch"),
        Rule("ψ", SIMPLE, "ps"),

        Rule("γχ", SIMPLE, "nch"),
        Rule("γξ", SIMPLE, "nx"),
    ]


def build_rule_table() -> Mapping[str, Rule]:
    """
    Build the ordered, read-only rule table.

    Explicit rules come first, then one fallback rule per Greek letter not
    already covered.

    Returns:
        Read-only mapping pattern -> Rule; iteration order is priority order

    Raises:
        ValueError: if a fallback placeholder would end up in the table
    """
    if len(GREEK_ALPHABET) != len(_FALLBACK_LATIN):
        raise ValueError("Fallback alphabet and Latin letters differ in length")

    table: Dict[str, Rule] = {}
    for rule in _explicit_rules():
        if rule.pattern in table:
            raise ValueError(f"Duplicate pattern: {rule.pattern!r}")
        table[rule.pattern] = rule

    for greek, latin in zip(GREEK_ALPHABET, _FALLBACK_LATIN):
        if greek in table:
            continue
        if latin == _PLACEHOLDER:
            raise ValueError(f"No fallback output for {greek!r}")
        table[greek] = Rule(greek, SIMPLE, latin)

    logger.debug("Built ELOT 743 rule table with %d rules", len(table))
    return MappingProxyType(table)


RULES: Mapping[str, Rule] = build_rule_table()
RULE_PATTERNS: Tuple[str, ...] = tuple(RULES)
