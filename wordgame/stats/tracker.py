"""
Cross-session statistics: win rate, streaks, guess distribution.

The tracker owns one StatsRecord, loads it from the injected store when
constructed, and writes it back right after every recorded result.
Recording a finished session exactly once is the caller's job
(GameSession does it on its terminal transition).
"""

from __future__ import annotations

import logging
import math

from wordgame.config import MAX_TURNS, STATS_KEY
from .record import StatsRecord
from .store import KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)


class StatsTracker:
    def __init__(self, store: KeyValueStore | None = None, key: str = STATS_KEY):
        self.store = store if store is not None else MemoryStore()
        self.key = key
        self.record = self.load()

    def load(self) -> StatsRecord:
        """
        Read the record from the store. Missing or malformed data yields a
        zeroed record; this never raises.
        """
        try:
            raw = self.store.get(self.key)
        except Exception as e:  # store backends are external; any failure means "no data"
            logger.warning("Could not load stats %r: %s", self.key, e)
            return StatsRecord()
        if raw is None:
            return StatsRecord()
        try:
            return StatsRecord.from_json(raw)
        except ValueError as e:
            logger.warning("Discarding malformed stats %r: %s", self.key, e)
            return StatsRecord()

    def save(self) -> bool:
        try:
            ok = bool(self.store.set(self.key, self.record.to_json()))
        except Exception as e:  # non-fatal: stats simply don't persist
            logger.warning("Could not save stats %r: %s", self.key, e)
            return False
        if not ok:
            logger.warning("Stats store rejected write for %r", self.key)
        return ok

    def record_result(self, won: bool, attempts_used: int) -> StatsRecord:
        """Fold one finished session into the record and persist it."""
        if not 1 <= attempts_used <= MAX_TURNS:
            raise ValueError(f"attempts_used must be in 1..{MAX_TURNS}; got {attempts_used}")

        rec = self.record
        rec.games_played += 1
        if won:
            rec.wins += 1
            rec.current_streak += 1
            rec.max_streak = max(rec.max_streak, rec.current_streak)
            rec.guess_distribution[attempts_used] += 1
        else:
            rec.current_streak = 0

        logger.info(
            "stats: played=%d wins=%d streak=%d max=%d",
            rec.games_played, rec.wins, rec.current_streak, rec.max_streak,
        )
        self.save()
        return rec

    def win_percentage(self) -> int:
        """Whole-number win rate, half rounding up; 0 before any game."""
        if self.record.games_played == 0:
            return 0
        return int(math.floor(self.record.wins / self.record.games_played * 100 + 0.5))
