"""
Per-letter feedback for a single (guess, secret) pair.

Classifications:
  - correct : right letter in the right position          (pattern 'G')
  - present : letter is in the secret, different position  (pattern 'Y')
  - absent  : letter not in the secret, or already used up (pattern '-')

Algorithm (two-pass, the standard one for duplicate letters):
  1) First pass marks every exact match and counts the secret letters that
     were NOT matched exactly.
  2) Second pass walks the remaining guess positions left to right; a
     position becomes `present` only while its letter still has unmatched
     occurrences in the secret, and each such mark consumes one occurrence.

Because every mark consumes one secret occurrence, the number of
correct + present marks for a letter never exceeds its count in the secret.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, List


class Classification(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


# Compact pattern characters used in logs, CSV and the terminal UI
PATTERN_CHARS = {
    Classification.CORRECT: "G",
    Classification.PRESENT: "Y",
    Classification.ABSENT: "-",
}

# Keyboard precedence: a better-known status is never downgraded
RANK = {
    Classification.ABSENT: 0,
    Classification.PRESENT: 1,
    Classification.CORRECT: 2,
}


def evaluate(guess: str, secret: str) -> List[Classification]:
    """
    Classify each letter of `guess` against `secret`.

    Preconditions:
      - both words are lowercase and of equal length (the caller guarantees it)

    Examples:
      evaluate("eagle", "allee") -> [present, present, absent, present, correct]
      evaluate("lemon", "level") -> [correct, correct, absent, absent, absent]
    """
    assert len(guess) == len(secret), "Guess and secret must be the same length"

    result = [Classification.ABSENT] * len(guess)

    # Pass 1: exact matches; collect what is left of the secret.
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            result[i] = Classification.CORRECT
        else:
            remaining[s] += 1

    # Pass 2: each present mark consumes one leftover occurrence.
    for i, g in enumerate(guess):
        if result[i] is Classification.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = Classification.PRESENT
            remaining[g] -= 1

    return result


def to_pattern(result: Iterable[Classification]) -> str:
    """Render a classification row as e.g. "-GYYY"."""
    return "".join(PATTERN_CHARS[c] for c in result)


def is_solved(result: Iterable[Classification]) -> bool:
    return all(c is Classification.CORRECT for c in result)
