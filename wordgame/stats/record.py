"""
Aggregate outcome record kept across sessions.

Serialized form (JSON object, the same shape the browser game stored):
    {"gamesPlayed": 3, "wins": 2, "currentStreak": 0, "maxStreak": 2,
     "guessDistribution": {"1": 0, "2": 0, "3": 1, "4": 1, "5": 0, "6": 0}}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict

from wordgame.config import MAX_TURNS


def _empty_distribution() -> Dict[int, int]:
    return {n: 0 for n in range(1, MAX_TURNS + 1)}


@dataclass
class StatsRecord:
    games_played: int = 0
    wins: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: Dict[int, int] = field(default_factory=_empty_distribution)

    def check(self) -> None:
        """Raise ValueError if the record breaks its counting invariants."""
        counts = [self.games_played, self.wins, self.current_streak, self.max_streak]
        counts += list(self.guess_distribution.values())
        if any(isinstance(c, bool) or not isinstance(c, int) or c < 0 for c in counts):
            raise ValueError("stats counters must be non-negative integers")
        if set(self.guess_distribution) != set(range(1, MAX_TURNS + 1)):
            raise ValueError(f"guess distribution must cover attempts 1..{MAX_TURNS}")
        if self.wins > self.games_played:
            raise ValueError("wins exceed games played")
        if self.current_streak > self.max_streak:
            raise ValueError("current streak exceeds max streak")
        if sum(self.guess_distribution.values()) > self.wins:
            raise ValueError("guess distribution exceeds wins")

    def to_dict(self) -> Dict:
        return {
            "gamesPlayed": self.games_played,
            "wins": self.wins,
            "currentStreak": self.current_streak,
            "maxStreak": self.max_streak,
            "guessDistribution": {str(k): v for k, v in sorted(self.guess_distribution.items())},
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "StatsRecord":
        """
        Build a record from its serialized form. Missing distribution
        buckets count as 0; anything else malformed raises ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError(f"stats payload must be an object, got {type(data).__name__}")
        try:
            raw_dist = data.get("guessDistribution", {})
            if not isinstance(raw_dist, dict):
                raise ValueError("guessDistribution must be an object")
            dist = _empty_distribution()
            for k, v in raw_dist.items():
                dist[int(k)] = v
            rec = cls(
                games_played=data["gamesPlayed"],
                wins=data["wins"],
                current_streak=data["currentStreak"],
                max_streak=data["maxStreak"],
                guess_distribution=dist,
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed stats payload: {e!r}") from e
        rec.check()
        return rec

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "StatsRecord":
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ValueError(f"stats payload is not readable JSON: {e}") from e
        return cls.from_dict(data)
