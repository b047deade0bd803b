"""
Greek character classes used by the ELOT 743 transliterator.

Provides:
- CAPITAL_LETTERS: uppercase Greek letters, for case mirroring
- GREEK_LETTERS: lowercase Greek letters, for word-boundary tests
- VOICING_LETTERS: vowels and voiced consonants, for αυ/ευ/ηυ voicing
- Bounds-checked neighbor access into the original text
"""

__all__ = [
    "CAPITAL_LETTERS",
    "GREEK_LETTERS",
    "GREEK_ALPHABET",
    "VOICING_LETTERS",
    "get_char",
    "is_greek",
    "is_capital",
    "is_greek_letter",
    "is_voicing",
]

# Monotonic uppercase alphabet (tonos and dialytika forms included)
_CAPITALS = "ΑΆΒΓΔΕΈΖΗΉΘΙΊΪΚΛΜΝΞΟΌΠΡΣΤΥΎΫΦΧΨΩΏ"

# Monotonic lowercase alphabet in canonical order. The fallback rule table
# pairs this string positionally with its Latin counterpart, so the order
# must not change.
GREEK_ALPHABET = "αάβγδεέζηήθιίϊΐκλμνξοόπρσςτυύϋΰφχψωώ"

# Vowels + voiced consonants: a following letter from this set voices
# the second half of αυ/ευ/ηυ (v instead of f)
_VOICING = "αάβγδεέζηλιμνορυω"

CAPITAL_LETTERS = frozenset(_CAPITALS)
GREEK_LETTERS = frozenset(GREEK_ALPHABET)
VOICING_LETTERS = frozenset(_VOICING)


def get_char(text: str, idx: int) -> str:
    """Safely get character at index, or "" if out of bounds."""
    if 0 <= idx < len(text):
        return text[idx]
    return ""


def is_capital(char: str) -> bool:
    """Check if character is an uppercase Greek letter."""
    return char in CAPITAL_LETTERS


def is_greek(char: str) -> bool:
    """Check if character is literally one of the Greek letters above."""
    return char in GREEK_LETTERS or char in CAPITAL_LETTERS


def is_greek_letter(char: str) -> bool:
    """Check if character (in either case) is a Greek letter."""
    return char.lower() in GREEK_LETTERS


def is_voicing(char: str) -> bool:
    """Check if character (in either case) voices a preceding αυ/ευ/ηυ."""
    return char.lower() in VOICING_LETTERS
