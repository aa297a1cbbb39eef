"""
Display helpers for the stats screen.

These are read-only views over a StatsRecord: bar widths for the guess
distribution, which bar to highlight after a game, and average attempts.
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from .record import StatsRecord


def _counts(record: StatsRecord) -> tuple[np.ndarray, np.ndarray]:
    attempts = np.array(sorted(record.guess_distribution), dtype=int)
    counts = np.array([record.guess_distribution[a] for a in attempts], dtype=float)
    return attempts, counts


def distribution_bars(record: StatsRecord) -> Dict[int, float]:
    """
    Width of each distribution bar in percent of the largest bucket.
    An all-zero distribution gives all-zero widths.
    """
    attempts, counts = _counts(record)
    widths = counts / max(float(counts.max(initial=0.0)), 1.0) * 100.0
    return {int(a): float(w) for a, w in zip(attempts, widths)}


def mean_attempts(record: StatsRecord) -> float:
    """Average attempts over won games (0.0 with no wins)."""
    attempts, counts = _counts(record)
    if counts.sum() == 0:
        return 0.0
    return float(np.average(attempts, weights=counts))


def highlight_row(record: StatsRecord, won: bool, attempts_used: int) -> Optional[int]:
    """Bucket to highlight after a finished game: only a win on a live streak."""
    if won and record.current_streak > 0:
        return attempts_used
    return None


def render_summary(record: StatsRecord, win_percentage: int, width: int = 20) -> str:
    """Plain-text stats block used by the terminal front ends."""
    lines = [
        f"Played {record.games_played} | Win % {win_percentage} "
        f"| Current streak {record.current_streak} | Max streak {record.max_streak}",
    ]
    bars = distribution_bars(record)
    for a in sorted(bars):
        n = max(1, int(round(bars[a] / 100.0 * width))) if record.guess_distribution[a] else 0
        lines.append(f"{a} {'#' * n} {record.guess_distribution[a]}")
    return "\n".join(lines)
