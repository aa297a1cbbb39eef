"""
Game rules in one place.

The module constants are the single source of truth; GameConfig carries
them into a session and refuses combinations the engine does not support.
"""

from __future__ import annotations

from dataclasses import dataclass

WORD_LENGTH = 5
MAX_TURNS = 6
MAX_HINTS = 2
STATS_KEY = "wordle-stats"


@dataclass(frozen=True)
class GameConfig:
    word_length: int = WORD_LENGTH
    max_turns: int = MAX_TURNS
    max_hints: int = MAX_HINTS

    def __post_init__(self):
        # Stats buckets and the grid shape are fixed to these rules.
        if self.max_turns != MAX_TURNS:
            raise ValueError(f"max_turns must be {MAX_TURNS}; got {self.max_turns}")
        if self.word_length != WORD_LENGTH:
            raise ValueError(f"word_length must be {WORD_LENGTH}; got {self.word_length}")
        if self.max_hints < 0:
            raise ValueError(f"max_hints must be >= 0; got {self.max_hints}")
