# apps/cli/simulate.py
"""
Autoplay many games through the real session engine.

This script:
  1) Checks the word lists and prints a one-line summary.
  2) Plays --games sessions with the random-consistent player, recording
     every finished game in the stats tracker (JSON file or memory).
  3) Writes a per-game CSV and a JSON manifest, then prints the stats screen.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordgame.datasets import WordBank, check_wordlists, pretty_summary
from wordgame.datasets.io import DEFAULT_ALLOWED, DEFAULT_ANSWERS, read_words
from wordgame.harness import run_batch, timestamp_id, write_csv, write_manifest
from wordgame.logs import setup_logging
from wordgame.stats import JsonFileStore, MemoryStore, StatsTracker, mean_attempts, render_summary


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordgame — autoplay sessions and collect stats")
    ap.add_argument("--games", type=int, default=100, help="number of games to play")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS), help="secret word list")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED), help="allowed guesses list")
    ap.add_argument("--stats", default=os.getenv("WORDGAME_STATS_PATH"),
                    help="stats JSON file to accumulate into (default: memory only)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default=os.getenv("WORDGAME_LOG_LEVEL", "WARNING"),
                    help="console log level (env WORDGAME_LOG_LEVEL)")
    args = ap.parse_args(argv)
    if args.games < 0:
        ap.error(f"--games must be >= 0; got {args.games}")

    setup_logging(args.log_level)

    # 1) Word lists
    answers = read_words(args.answers)
    allowed = read_words(args.allowed)
    rep = check_wordlists(answers, allowed)
    print(pretty_summary(rep))
    if not rep.passed:
        print("Word lists failed the checks: " + "; ".join(rep.issues), file=sys.stderr)
        return 2
    bank = WordBank(answers, allowed)

    tracker = StatsTracker(JsonFileStore(args.stats) if args.stats else MemoryStore())

    # 2) Play
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    games = run_batch(bank, tracker, games=args.games, seed=args.seed)
    if mode == "bar":
        games = tqdm(games, total=args.games, ncols=80, desc="Playing", unit="game")

    results = []
    start = time.time()
    last_print = 0.0
    for idx, r in enumerate(games, 1):
        results.append(r)
        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == args.games):
                pct = 100.0 * idx / max(1, args.games)
                sys.stderr.write(f"\r[{idx}/{args.games}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 3) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, outdir / f"sim_{run_id}.csv")
    manifest = {
        "run_id": run_id,
        "config": vars(args),
        "wordlists": rep.as_dict(),
        "num_games": len(results),
        "stats": tracker.record.to_dict(),
        "win_percentage": tracker.win_percentage(),
        "mean_attempts": mean_attempts(tracker.record),
    }
    manifest_path = write_manifest(manifest, outdir / f"sim_{run_id}_manifest.json")

    print(render_summary(tracker.record, tracker.win_percentage()))
    print(f"Mean attempts (wins): {mean_attempts(tracker.record):.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
