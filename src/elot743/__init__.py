"""
elot743: Greek-to-Latin transliteration following ELOT 743.

Basic usage:
    >>> from elot743 import transliterate
    >>> transliterate("Θεσσαλονίκη")
    'Thessaloniki'

Context-sensitive digraphs:
    >>> transliterate("μπαμπάς")
    'bampas'
    >>> transliterate("αυτοκίνητο ευρώ")
    'aftokinito evro'

Detailed usage:
    >>> from elot743 import Transliterator
    >>> t = Transliterator()
    >>> t.transliterate_detailed("αύρα").changes[0].rule
    'diphthong'
"""

from elot743._charset import (
    CAPITAL_LETTERS,
    GREEK_LETTERS,
    VOICING_LETTERS,
)
from elot743._rules import RULES, RULE_PATTERNS, Rule, build_rule_table
from elot743._transliterator import (
    Change,
    EncodingError,
    Transliterator,
    TransliterationResult,
    fix_case,
    transliterate,
)

__version__ = "0.1.0"
__all__ = [
    "transliterate",
    "Transliterator",
    "TransliterationResult",
    "Change",
    "EncodingError",
    "fix_case",
    "Rule",
    "RULES",
    "RULE_PATTERNS",
    "build_rule_table",
    "CAPITAL_LETTERS",
    "GREEK_LETTERS",
    "VOICING_LETTERS",
]


# Lazy imports for optional integrations (only when their extras are installed)
def __getattr__(name: str):
    if name == "TransliteratorComponent":
        try:
            from elot743.spacy import TransliteratorComponent
            return TransliteratorComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install elot743[spacy]"
            )
    if name == "create_app":
        try:
            from elot743.http import create_app
            return create_app
        except ImportError:
            raise ImportError(
                "The HTTP adapter requires fastapi. "
                "Install with: pip install elot743[http]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
