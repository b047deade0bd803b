"""Shared fixtures for elot743 tests."""

import pytest

from elot743 import Transliterator


@pytest.fixture
def transliterator() -> Transliterator:
    """Return a fresh transliterator instance."""
    return Transliterator()


@pytest.fixture
def word_pairs() -> list[tuple[str, str]]:
    """Common Greek words with their ELOT 743 rendering."""
    return [
        ("Αθήνα", "Athina"),
        ("Θεσσαλονίκη", "Thessaloniki"),
        ("Καλημέρα", "Kalimera"),
        ("ευχαριστώ", "efcharisto"),
        ("Ευρώπη", "Evropi"),
        ("οικογένεια", "oikogeneia"),
        ("ουρανός", "ouranos"),
        ("άγγελος", "angelos"),
        ("γκρεμός", "gkremos"),
        ("ντομάτα", "ntomata"),
        ("τζάμι", "tzami"),
        ("άγχος", "anchos"),
        ("σφίγξ", "sfinx"),
        ("λάμπα", "lampa"),
    ]
