"""
ELOT 743 Greek-to-Latin transliterator.

Scans the input left to right. At each position the rules are tried in
table order and the first one that matches (case-insensitively) is
applied; anything that matches no rule is copied through unchanged.
Context-dependent rules look at the neighbors of the match in the
original input, never at output already produced.

Casing is rebuilt from the original text: a capital followed by a
lowercase letter gives a title-cased rendering (Θεός → Theos), a run of
capitals gives an all-caps one (ΘΕΟΣ → THEOS).

Example:
    >>> from elot743 import transliterate
    >>> transliterate("Καλημέρα κόσμε")
    'Kalimera kosme'

    >>> from elot743 import Transliterator
    >>> t = Transliterator()
    >>> t.transliterate("αύριο")
    'avrio'
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union

from elot743._charset import get_char, is_capital, is_greek, is_greek_letter, is_voicing
from elot743._rules import DIPHTHONG, RULES, VOICED_STOP, Rule

__all__ = [
    "Change",
    "EncodingError",
    "Transliterator",
    "TransliterationResult",
    "fix_case",
    "transliterate",
]


class EncodingError(ValueError):
    """Raised when input is not valid Unicode text."""


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Change:
    """Record of a single grapheme replacement."""

    position: int
    original: str
    replacement: str
    rule: str
    context: str


@dataclass
class TransliterationResult:
    """Detailed result from transliteration."""

    original: str
    transliterated: str
    changes: list[Change] = field(default_factory=list)


# =============================================================================
# Helpers
# =============================================================================


def _coerce_text(text: Union[str, bytes]) -> str:
    """Return text as str, rejecting anything that is not valid Unicode."""
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"Input is not valid UTF-8: {e}") from e
    if not isinstance(text, str):
        raise TypeError(f"Expected str or bytes, got {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates, typically from surrogateescape decoding
        raise EncodingError(f"Input contains invalid code points: {e}") from e
    return text


def _get_context(text: str, start: int, end: int, window: int = 3) -> str:
    """Get context string around a match for debugging."""
    left = max(0, start - window)
    right = min(len(text), end + window)
    return text[left:start] + "[" + text[start:end] + "]" + text[end:right]


def fix_case(candidate: str, reference: str) -> str:
    """
    Re-capitalize a replacement to mirror the casing of the original.

    Args:
        candidate: Lowercase Latin replacement
        reference: Original Greek text the casing is read from

    Returns:
        candidate unchanged if reference does not start with a capital;
        fully upper-cased if reference is a lone capital or starts with
        two capitals; otherwise with only its first letter upper-cased

    Example:
        >>> fix_case("th", "Θε")
        'Th'
        >>> fix_case("th", "ΘΕ")
        'TH'
    """
    if not is_capital(get_char(reference, 0)):
        return candidate
    if len(reference) == 1 or is_capital(get_char(reference, 1)):
        return candidate.upper()
    return candidate[:1].upper() + candidate[1:]


# =============================================================================
# Main Transliterator Class
# =============================================================================


class Transliterator:
    """
    Rule-based ELOT 743 transliterator.

    Holds a first-letter index over the rule table so each position only
    tries the rules that can start there, still in table order.

    Example:
        >>> t = Transliterator()
        >>> t.transliterate("Αθήνα")
        'Athina'
    """

    def __init__(self, rules: Optional[Mapping[str, Rule]] = None):
        self.rules = RULES if rules is None else rules
        # lowercase first letter -> rules starting with it, in table order
        self._index: Dict[str, List[Rule]] = {}
        for rule in self.rules.values():
            self._index.setdefault(rule.pattern[0], []).append(rule)

    def _match(self, text: str, idx: int) -> Optional[Rule]:
        """Return the first rule matching text at idx, or None."""
        if not is_greek(text[idx]):
            return None
        candidates = self._index.get(text[idx].lower())
        if not candidates:
            return None
        for rule in candidates:
            segment = text[idx : idx + len(rule.pattern)]
            # Symbol variants such as ϴ and the ohm sign lowercase onto Greek letters
            if all(is_greek(c) for c in segment) and segment.lower() == rule.pattern:
                return rule
        return None

    def _replace(self, rule: Rule, text: str, start: int, end: int) -> str:
        """Compute the Latin replacement for the match text[start:end]."""
        matched = text[start:end]
        next_char = get_char(text, end)

        if rule.kind == VOICED_STOP:
            prev_char = get_char(text, start - 1)
            if is_greek_letter(prev_char) and is_greek_letter(next_char):
                return fix_case("mp", matched)
            return fix_case("b", matched)

        if rule.kind == DIPHTHONG:
            first = self.rules[matched[0].lower()].output
            second = "v" if is_voicing(next_char) else "f"
            return fix_case(first + second, matched)

        return fix_case(rule.output, matched + next_char)

    def _scan(self, text: str, changes: Optional[List[Change]] = None) -> str:
        result = []
        i = 0
        while i < len(text):
            rule = self._match(text, i)
            if rule is None:
                result.append(text[i])
                i += 1
                continue

            end = i + len(rule.pattern)
            replacement = self._replace(rule, text, i, end)
            result.append(replacement)
            if changes is not None:
                changes.append(
                    Change(
                        position=i,
                        original=text[i:end],
                        replacement=replacement,
                        rule=rule.kind,
                        context=_get_context(text, i, end),
                    )
                )
            i = end

        return "".join(result)

    def transliterate(self, text: Union[str, bytes]) -> str:
        """
        Transliterate Greek text to Latin following ELOT 743.

        Args:
            text: Any Unicode text; bytes are decoded as UTF-8

        Returns:
            Text with every Greek grapheme replaced; all other characters
            are copied through unchanged

        Raises:
            EncodingError: if text is not valid Unicode
        """
        text = _coerce_text(text)
        if not text:
            return text
        return self._scan(text)

    def transliterate_detailed(self, text: Union[str, bytes]) -> TransliterationResult:
        """
        Transliterate with a record of each replacement.

        Example:
            >>> t = Transliterator()
            >>> result = t.transliterate_detailed("μπύρα")
            >>> result.transliterated
            'byra'
            >>> result.changes[0].rule
            'voiced_stop'
        """
        text = _coerce_text(text)
        if not text:
            return TransliterationResult(original=text, transliterated=text, changes=[])

        changes: List[Change] = []
        transliterated = self._scan(text, changes)
        return TransliterationResult(
            original=text, transliterated=transliterated, changes=changes
        )


# =============================================================================
# Module-level Convenience Function
# =============================================================================

# Shared instance, built at import alongside RULES
_default_transliterator = Transliterator()


def transliterate(text: Union[str, bytes]) -> str:
    """
    Transliterate Greek text to Latin following ELOT 743.

    Convenience function that uses a shared transliterator instance.

    Example:
        >>> transliterate("Θεός")
        'Theos'
    """
    return _default_transliterator.transliterate(text)
