"""
Autoplay harness.

- play_session: drive one GameSession to its end with a player, typing each
  guess key by key so the real input path is exercised.
- run_batch:    play many fresh sessions back-to-back against one word bank
  and one stats tracker.

UI-agnostic: the CLI wraps run_batch's iterator with its own progress display.
"""

from __future__ import annotations

import random
import time
from typing import Dict, Iterator, List, Tuple

from wordgame.datasets.wordbank import WordBank
from wordgame.engine import Classification, filter_candidates, to_pattern
from wordgame.game import GameSession
from wordgame.stats.tracker import StatsTracker
from .players import RandomConsistentPlayer


def play_session(session: GameSession, player: RandomConsistentPlayer) -> Dict:
    """
    Play until the session is won or lost.

    Returns:
        dict with keys: secret, won, attempts, time_ms,
        history (list[(guess, pattern)])
    """
    allowed = session.word_bank.allowed
    candidates = list(session.word_bank.secrets)
    seen: List[Tuple[str, List[Classification]]] = []

    t0 = time.perf_counter_ns()
    while not session.is_over:
        guess = player.next_guess(candidates, allowed)
        for ch in guess:
            session.handle_key(ch)
        result = session.submit_row()
        seen.append((guess, result))
        candidates = filter_candidates(candidates, [(guess, result)])
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "secret": session.result.secret,
        "won": session.result.won,
        "attempts": session.result.attempts_used,
        "time_ms": dt,
        "history": [(g, to_pattern(r)) for g, r in seen],
    }


def run_batch(
        word_bank: WordBank,
        stats: StatsTracker,
        *,
        games: int,
        seed: int | None = None,
) -> Iterator[Dict]:
    """
    Return an iterator with one result per game. Each game gets its own
    session and a seed derived from the base seed, so a batch is
    reproducible as a whole. A negative game count is rejected here, before
    any game is played.
    """
    if games < 0:
        raise ValueError(f"games must be >= 0; got {games}")
    return _play_games(word_bank, stats, games, seed)


def _play_games(word_bank: WordBank, stats: StatsTracker, games: int, seed: int | None) -> Iterator[Dict]:
    base = random.Random(seed)
    player = RandomConsistentPlayer()
    for _ in range(games):
        game_seed = base.randrange(2 ** 31)
        player.reset(seed=game_seed)
        session = GameSession(word_bank, stats, rng=random.Random(game_seed))
        yield play_session(session, player)
