"""
The word bank: allowed guesses + the curated secret list.

The allowed set is what `is_valid_guess` checks; secrets are only ever
drawn, never exposed as the validity set. Both collections are frozen
at construction so one bank can be shared by any number of sessions.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Tuple

from wordgame.engine.validation import is_well_formed, normalize
from .io import DEFAULT_ALLOWED, DEFAULT_ANSWERS, read_words
from .validator import check_wordlists

logger = logging.getLogger(__name__)


class WordBank:
    def __init__(self, answers: Iterable[str], allowed: Iterable[str], N: int = 5):
        answers = [normalize(w) for w in answers]
        allowed = [normalize(w) for w in allowed]
        report = check_wordlists(answers, allowed, N)
        if not report.passed:
            raise ValueError(f"Unusable word lists: {'; '.join(report.issues)}")
        for msg in report.issues:
            logger.warning("word lists: %s", msg)

        self.N = N
        # Dedupe but keep file order so seeded picks are reproducible
        self._secrets: Tuple[str, ...] = tuple(dict.fromkeys(answers))
        self._allowed = frozenset(allowed)

    @classmethod
    def from_files(cls, answers_path: Path | str = DEFAULT_ANSWERS,
                   allowed_path: Path | str = DEFAULT_ALLOWED, N: int = 5) -> "WordBank":
        """Load the bank from two word-per-line files (bundled lists by default)."""
        return cls(read_words(answers_path), read_words(allowed_path), N=N)

    def is_valid_guess(self, word: str) -> bool:
        if not is_well_formed(word, self.N):
            return False
        return normalize(word) in self._allowed

    def pick_secret(self, rng: random.Random | None = None) -> str:
        """Uniform pick from the secret list."""
        rng = rng or random.Random()
        secret = self._secrets[rng.randrange(len(self._secrets))]
        logger.debug("secret picked from %d candidates", len(self._secrets))
        return secret

    @property
    def secrets(self) -> Tuple[str, ...]:
        return self._secrets

    @property
    def allowed(self) -> frozenset:
        return self._allowed

    def __len__(self) -> int:
        return len(self._allowed)

    def __contains__(self, word: str) -> bool:
        return self.is_valid_guess(word)
