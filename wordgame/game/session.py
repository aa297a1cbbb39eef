"""
One play-through: grid, cursor, hint budget and outcome.

State machine:
    ENTERING --submit_row()--> EVALUATING --> ENTERING (next row)
                                          --> WON  (guess == secret)
                                          --> LOST (sixth row used)
WON and LOST are terminal; nothing mutates the grid afterwards.

Everything that decides the game happens synchronously inside
submit_row(): evaluation, the win/loss decision and the stats update.
Reveal animations are the presentation layer's business.

Hinted cells:
  - use_hint() writes the secret's letter into one wrong-or-empty cell of
    the current row and locks it; the cursor does not move.
  - Locked cells count toward a full row. Typing skips over them and
    backspace never clears them.
  - submit_row() needs every cell of the row filled. That is the same as
    current_col == 5 unless the trailing cells were filled by hints.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from wordgame.config import GameConfig
from wordgame.datasets.wordbank import WordBank
from wordgame.engine.scoring import RANK, Classification, evaluate, to_pattern
from wordgame.engine.validation import is_letter, is_well_formed, normalize
from wordgame.stats.tracker import StatsTracker
from .errors import IllegalOperation, InvalidWord, NoHintNeeded
from .events import EventKind, Observer, SessionEvent

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    ENTERING = "entering"
    EVALUATING = "evaluating"
    WON = "won"
    LOST = "lost"


class Outcome(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


TERMINAL = (SessionState.WON, SessionState.LOST)


@dataclass(frozen=True)
class GameResult:
    """Final record handed to the stats tracker."""
    won: bool
    attempts_used: int
    secret: str


class GameSession:
    def __init__(
            self,
            word_bank: WordBank,
            stats: StatsTracker | None = None,
            *,
            config: GameConfig | None = None,
            rng: random.Random | None = None,
            secret: str | None = None,
    ):
        self.word_bank = word_bank
        self.stats = stats
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self._observers: List[Observer] = []
        self._start(secret)

    # ---- lifecycle ----

    def _start(self, secret: str | None) -> None:
        N, T = self.config.word_length, self.config.max_turns
        if secret is None:
            secret = self.word_bank.pick_secret(self.rng)
        elif not is_well_formed(secret, N):
            raise ValueError(f"secret must be {N} letters a-z; got {secret!r}")

        self._secret = normalize(secret)
        self.grid: List[List[str]] = [[""] * N for _ in range(T)]
        self._locked: List[List[bool]] = [[False] * N for _ in range(T)]
        self._results: List[Optional[Tuple[Classification, ...]]] = [None] * T
        self._keyboard: Dict[str, Classification] = {}
        self.current_row = 0
        self.current_col = 0
        self.hints_used = 0
        self.state = SessionState.ENTERING
        self.result: GameResult | None = None

    def restart(self, secret: str | None = None) -> None:
        """Fresh secret, empty board, full hint budget. Stats are kept."""
        self._start(secret)
        logger.info("session restarted")
        self._notify(EventKind.RESTARTED)

    # ---- observers ----

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self, kind: EventKind, col: int | None = None, **data) -> None:
        event = SessionEvent(kind=kind, row=self.current_row, col=col, data=data)
        for observer in list(self._observers):
            observer(event)

    # ---- read-only views ----

    @property
    def is_over(self) -> bool:
        return self.state in TERMINAL

    @property
    def outcome(self) -> Outcome:
        if self.state is SessionState.WON:
            return Outcome.WON
        if self.state is SessionState.LOST:
            return Outcome.LOST
        return Outcome.IN_PROGRESS

    @property
    def hint_budget(self) -> int:
        return max(0, self.config.max_hints - self.hints_used)

    @property
    def revealed_secret(self) -> Optional[str]:
        """The secret, but only once the game is lost."""
        return self._secret if self.state is SessionState.LOST else None

    @property
    def current_word(self) -> str:
        return "".join(self.grid[self.current_row])

    @property
    def row_full(self) -> bool:
        return all(self.grid[self.current_row])

    def classifications(self, row: int) -> Optional[Tuple[Classification, ...]]:
        """Feedback for a submitted row, None for rows not yet submitted."""
        return self._results[row]

    def is_locked(self, row: int, col: int) -> bool:
        return self._locked[row][col]

    def keyboard_state(self) -> Dict[str, Classification]:
        """Best-known status per letter across submitted rows."""
        return dict(self._keyboard)

    def snapshot(self) -> Dict:
        """Everything a renderer needs, as plain data."""
        return {
            "grid": [list(r) for r in self.grid],
            "classifications": [list(r) if r is not None else None for r in self._results],
            "locked": [list(r) for r in self._locked],
            "cursor": (self.current_row, self.current_col),
            "hints_remaining": self.hint_budget,
            "state": self.state.value,
            "outcome": self.outcome.value,
            "secret": self.revealed_secret,
            "keyboard": {k: v.value for k, v in sorted(self._keyboard.items())},
        }

    # ---- cursor helpers ----

    def _skip_locked(self, col: int) -> int:
        row = self._locked[self.current_row]
        while col < self.config.word_length and row[col]:
            col += 1
        return col

    # ---- operations ----

    def enter_letter(self, ch: str) -> bool:
        """Type one letter at the cursor. Returns False when the key is ignored."""
        if self.state is not SessionState.ENTERING or not is_letter(ch):
            return False
        col = self._skip_locked(self.current_col)
        if col >= self.config.word_length:
            return False
        self.grid[self.current_row][col] = ch.lower()
        self.current_col = self._skip_locked(col + 1)
        self._notify(EventKind.LETTER_ENTERED, col=col, letter=ch.lower())
        return True

    def delete_letter(self) -> bool:
        """Clear the nearest typed (unlocked) cell left of the cursor."""
        if self.state is not SessionState.ENTERING:
            return False
        col = self.current_col - 1
        while col >= 0 and self._locked[self.current_row][col]:
            col -= 1
        if col < 0:
            return False
        self.grid[self.current_row][col] = ""
        self.current_col = col
        self._notify(EventKind.LETTER_DELETED, col=col)
        return True

    def submit_row(self) -> List[Classification]:
        """
        Evaluate the current row.

        Raises:
          IllegalOperation: game over, or the row still has empty cells.
          InvalidWord:      the row is not an allowed guess; nothing changes.
        """
        if self.is_over:
            raise IllegalOperation("game is already over")
        if self.state is not SessionState.ENTERING or not self.row_full:
            raise IllegalOperation("row is not complete")

        word = self.current_word
        if not self.word_bank.is_valid_guess(word):
            logger.info("rejected guess %r on row %d", word, self.current_row + 1)
            raise InvalidWord(word)

        self.state = SessionState.EVALUATING
        result = evaluate(word, self._secret)
        self._results[self.current_row] = tuple(result)
        for letter, cls in zip(word, result):
            best = self._keyboard.get(letter)
            if best is None or RANK[cls] > RANK[best]:
                self._keyboard[letter] = cls
        logger.debug("row %d: %s -> %s", self.current_row + 1, word, to_pattern(result))
        self._notify(EventKind.ROW_EVALUATED, word=word, result=list(result))

        if word == self._secret:
            self._finish(won=True)
        elif self.current_row == self.config.max_turns - 1:
            self._finish(won=False)
        else:
            self.current_row += 1
            self.current_col = 0
            self.state = SessionState.ENTERING
        return result

    def _finish(self, won: bool) -> None:
        self.state = SessionState.WON if won else SessionState.LOST
        self.result = GameResult(won=won, attempts_used=self.current_row + 1, secret=self._secret)
        logger.info("game %s in %d attempt(s)", "won" if won else "lost", self.result.attempts_used)
        if self.stats is not None:
            self.stats.record_result(won, self.result.attempts_used)
        self._notify(
            EventKind.GAME_OVER,
            won=won,
            attempts_used=self.result.attempts_used,
            secret=self.revealed_secret,
        )

    def use_hint(self) -> int:
        """
        Reveal the secret's letter in one wrong or empty cell of the current
        row, chosen uniformly at random. Returns the hinted column.

        Raises:
          IllegalOperation: game over, or no hints left.
          NoHintNeeded:     every cell already holds the right letter.
        """
        if self.is_over:
            raise IllegalOperation("game is already over")
        if self.hint_budget <= 0:
            raise IllegalOperation("no hints left")

        row = self.grid[self.current_row]
        open_cols = [i for i, ch in enumerate(row) if ch != self._secret[i]]
        if not open_cols:
            self._notify(EventKind.NO_HINT_NEEDED)
            raise NoHintNeeded("all letters are already correct")

        col = self.rng.choice(open_cols)
        row[col] = self._secret[col]
        self._locked[self.current_row][col] = True
        self.hints_used += 1
        logger.info("hint on row %d col %d (%d left)", self.current_row + 1, col + 1, self.hint_budget)
        self._notify(EventKind.HINT_USED, col=col, letter=row[col], hints_remaining=self.hint_budget)
        return col

    def handle_key(self, key: str) -> bool:
        """
        Route one raw key: "enter", "backspace" or a letter. Rejections are
        reported to observers instead of raised. Returns True if the key
        changed the session.
        """
        if self.is_over or not isinstance(key, str):
            return False
        k = key.lower()
        if k == "enter":
            try:
                self.submit_row()
            except InvalidWord as e:
                self._notify(EventKind.INVALID_WORD, word=e.word)
                return False
            except IllegalOperation:
                return False
            return True
        if k == "backspace":
            return self.delete_letter()
        if is_letter(k):
            return self.enter_letter(k)
        return False
