# apps/cli/play.py
"""
Terminal front end for a single player.

Type a 5-letter word and press Enter to guess. Commands:
  :hint   reveal one letter of the current row (2 per game)
  :stats  show the statistics screen
  :new    start a new game
  :quit   leave

Stats persist to a JSON file (see --stats) between runs.
"""

from __future__ import annotations

import argparse
import os
import random
import sys
from pathlib import Path
from typing import List

from wordgame.datasets import WordBank, pretty_summary, check_wordlists
from wordgame.datasets.io import DEFAULT_ALLOWED, DEFAULT_ANSWERS
from wordgame.engine import PATTERN_CHARS, is_well_formed
from wordgame.game import EventKind, GameSession, NoHintNeeded, IllegalOperation, SessionEvent
from wordgame.logs import setup_logging
from wordgame.stats import JsonFileStore, MemoryStore, StatsTracker, highlight_row, render_summary

KEYBOARD_ROWS = ["qwertyuiop", "asdfghjkl", "zxcvbnm"]
DEFAULT_STATS_PATH = Path.home() / ".wordgame" / "stats.json"


def render_board(session: GameSession) -> str:
    """Grid rows as 'C R A N E   G - Y - G'; hinted, unsubmitted cells marked '*'."""
    lines: List[str] = []
    for r, row in enumerate(session.grid):
        letters = " ".join((ch or "_").upper() for ch in row)
        result = session.classifications(r)
        if result is not None:
            marks = " ".join(PATTERN_CHARS[c] for c in result)
        else:
            marks = " ".join("*" if session.is_locked(r, c) else " " for c in range(len(row)))
        lines.append(f"{letters}   {marks}".rstrip())
    return "\n".join(lines)


def render_keyboard(session: GameSession) -> str:
    """Known letters are shown with their best status; unknown ones with '.'."""
    known = session.keyboard_state()
    return "\n".join(
        " ".join(f"{ch}{PATTERN_CHARS[known[ch]] if ch in known else '.'}" for ch in row)
        for row in KEYBOARD_ROWS
    )


def type_word(session: GameSession, word: str) -> None:
    """
    Replace the typed part of the current row with `word`. Positions
    holding a hinted letter keep it, whatever was typed there.
    """
    while session.delete_letter():
        pass
    row = session.current_row
    for i, ch in enumerate(word):
        if i < len(session.grid[row]) and session.is_locked(row, i):
            continue
        session.enter_letter(ch)


class TerminalView:
    """Observer that prints session events as they happen."""

    def __init__(self, tracker: StatsTracker):
        self.tracker = tracker

    def __call__(self, event: SessionEvent) -> None:
        if event.kind is EventKind.INVALID_WORD:
            print("Not a valid word")
        elif event.kind is EventKind.NO_HINT_NEEDED:
            print("All letters are already correct!")
        elif event.kind is EventKind.HINT_USED:
            print(f"Hint: position {event.col + 1} is {event.data['letter'].upper()} "
                  f"({event.data['hints_remaining']} left)")
        elif event.kind is EventKind.GAME_OVER:
            if event.data["won"]:
                print("Congratulations!")
            else:
                print(f"The word was: {event.data['secret'].upper()}")
            self.show_stats(event.data["won"], event.data["attempts_used"])

    def show_stats(self, won: bool | None = None, attempts: int | None = None) -> None:
        rec = self.tracker.record
        print(render_summary(rec, self.tracker.win_percentage()))
        if won is not None:
            mark = highlight_row(rec, won, attempts)
            if mark is not None:
                print(f"(this game: {mark})")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordgame — play in the terminal")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS), help="secret word list")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED), help="allowed guesses list")
    ap.add_argument("--stats", default=os.getenv("WORDGAME_STATS_PATH", str(DEFAULT_STATS_PATH)),
                    help="stats JSON file (env WORDGAME_STATS_PATH)")
    ap.add_argument("--no-save", action="store_true", help="keep stats in memory only")
    ap.add_argument("--seed", type=int, help="RNG seed for secrets and hints")
    ap.add_argument("--log-level", default=os.getenv("WORDGAME_LOG_LEVEL", "WARNING"),
                    help="console log level (env WORDGAME_LOG_LEVEL)")
    ap.add_argument("--log-file", help="also write INFO+ logs to this file")
    args = ap.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    bank = WordBank.from_files(args.answers, args.allowed)
    store = MemoryStore() if args.no_save else JsonFileStore(args.stats)
    tracker = StatsTracker(store)
    session = GameSession(bank, tracker, rng=random.Random(args.seed))
    view = TerminalView(tracker)
    session.subscribe(view)

    print(pretty_summary(check_wordlists(bank.secrets, bank.allowed, bank.N)))
    print(f"Guess the {bank.N}-letter word. Commands: :hint :stats :new :quit")

    while True:
        print(render_board(session))
        print(render_keyboard(session))
        sys.stdout.write(f"[{session.hint_budget} hint(s)] > ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            print()
            break
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd == ":quit":
            break
        if cmd == ":stats":
            view.show_stats()
        elif cmd == ":new":
            session.restart()
        elif cmd == ":hint":
            try:
                session.use_hint()
            except NoHintNeeded:
                pass  # reported through the observer
            except IllegalOperation as e:
                print(f"Hint unavailable: {e}")
        elif session.is_over:
            print("Game over. Type :new to play again.")
        elif not is_well_formed(cmd, bank.N):
            print(f"Enter exactly {bank.N} letters")
        else:
            type_word(session, cmd)
            session.handle_key("enter")
    return 0


if __name__ == "__main__":
    sys.exit(main())
