from .errors import GameError, InvalidWord, NoHintNeeded, IllegalOperation
from .events import EventKind, SessionEvent
from .session import GameSession, GameResult, Outcome, SessionState

__all__ = [
    "GameError", "InvalidWord", "NoHintNeeded", "IllegalOperation",
    "EventKind", "SessionEvent",
    "GameSession", "GameResult", "Outcome", "SessionState",
]
