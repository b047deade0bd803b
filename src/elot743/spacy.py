"""
spaCy integration for elot743.

Provides a pipeline component that attaches ELOT 743 transliterations to
docs and tokens.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("el")
    >>> nlp.add_pipe("elot743_transliterator")
    >>> doc = nlp("Καλή χρονιά")
    >>> doc._.elot743
    'Kali chronia'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from elot743._transliterator import Transliterator

__all__ = [
    "TransliteratorComponent",
    "create_transliterator",
    "get_transliterator_pipe",
]


@Language.factory(
    "elot743_transliterator",
    default_config={"detailed": False},
    assigns=["doc._.elot743", "doc._.elot743_changes", "token._.elot743"],
)
def create_transliterator(
    nlp: Language,
    name: str,
    detailed: bool = False,
) -> "TransliteratorComponent":
    """Create an ELOT 743 transliterator pipeline component."""
    return TransliteratorComponent(nlp, name, detailed=detailed)


class TransliteratorComponent:
    """
    spaCy pipeline component for ELOT 743 transliteration.

    Extensions:
        - Doc._.elot743: Transliterated doc text.
        - Doc._.elot743_changes: List of Change records (detailed=True only).
        - Token._.elot743: Transliterated token text.

    Tokens are transliterated on their own, so a μπ or αυ at a token edge
    sees no neighbor from the adjacent token. Doc._.elot743 is computed on
    the full text and is the one to use for running prose.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        detailed: bool = False,
    ) -> None:
        self.name = name
        self.detailed = detailed
        self._transliterator = Transliterator()

        if not Doc.has_extension("elot743"):
            Doc.set_extension("elot743", default=None)
        if not Doc.has_extension("elot743_changes"):
            Doc.set_extension("elot743_changes", default=None)
        if not Token.has_extension("elot743"):
            Token.set_extension("elot743", default=None)

    def __call__(self, doc: Doc) -> Doc:
        if self.detailed:
            result = self._transliterator.transliterate_detailed(doc.text)
            doc._.elot743 = result.transliterated
            doc._.elot743_changes = result.changes
        else:
            doc._.elot743 = self._transliterator.transliterate(doc.text)

        for token in doc:
            token._.elot743 = self._transliterator.transliterate(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "TransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "TransliteratorComponent":
        return self


def get_transliterator_pipe(nlp: Language) -> Optional[TransliteratorComponent]:
    """Get the transliterator component from a pipeline."""
    if "elot743_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("elot743_transliterator")
    return None
