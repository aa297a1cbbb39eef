"""
Word shape checks shared by the word bank and the input layer.

A word is well formed iff it is a string of exactly `length` ASCII letters.
Dictionary membership is a separate question answered by `WordBank`.
"""

from __future__ import annotations

import string

LETTERS = frozenset(string.ascii_lowercase)


def normalize(word: str) -> str:
    """Strip surrounding whitespace and lowercase."""
    return word.strip().lower()


def is_letter(key: str) -> bool:
    """True for a single a–z key press (either case)."""
    return isinstance(key, str) and len(key) == 1 and key.lower() in LETTERS


def is_well_formed(word: str, length: int) -> bool:
    if not isinstance(word, str):
        return False
    w = normalize(word)
    return len(w) == length and all(ch in LETTERS for ch in w)
