"""
Candidate filtering given the rows already revealed in a session.

A candidate survives iff evaluating each past guess against it reproduces
exactly the feedback that guess received. The autoplay player uses this to
keep its next guess consistent with everything it has seen.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .scoring import Classification, evaluate

History = Iterable[Tuple[str, Sequence[Classification]]]  # (guess, classifications)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep the words (order preserved) that are consistent with every
    (guess, classifications) pair in `history`.
    """
    history = [(g, list(r)) for g, r in history]
    out: List[str] = []
    for w in words:
        if all(len(g) == len(w) and evaluate(g, w) == r for g, r in history):
            out.append(w)
    return out
