"""
What a session tells its observers.

Presentation code subscribes a callable and redraws from the event (or
from `GameSession.snapshot()`); the engine never calls into a UI toolkit.
Events are emitted after the state change they describe is complete.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional


class EventKind(str, Enum):
    LETTER_ENTERED = "letter_entered"
    LETTER_DELETED = "letter_deleted"
    INVALID_WORD = "invalid_word"
    ROW_EVALUATED = "row_evaluated"
    HINT_USED = "hint_used"
    NO_HINT_NEEDED = "no_hint_needed"
    GAME_OVER = "game_over"
    RESTARTED = "restarted"


@dataclass(frozen=True)
class SessionEvent:
    kind: EventKind
    row: int
    col: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict)


Observer = Callable[[SessionEvent], None]
