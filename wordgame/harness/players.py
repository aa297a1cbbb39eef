"""
Random Consistent player.

Strategy:
  - Guess uniformly at random among the secrets still consistent with
    every row revealed so far.
  - If (unexpectedly) nothing is consistent, fall back to the allowed list.

Deterministic across runs with the same seed.
"""

from __future__ import annotations

import random
from typing import List, Sequence


class RandomConsistentPlayer:
    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def reset(self, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, candidates: Sequence[str], allowed: Sequence[str]) -> str:
        pool: List[str] = list(candidates) if candidates else sorted(allowed)
        return pool[self.rng.randrange(len(pool))]
