class GameError(Exception):
    """Base class for recoverable, user-facing session rejections."""


class InvalidWord(GameError):
    """The completed row is not in the allowed-guess set."""

    def __init__(self, word: str):
        super().__init__(f"Not a valid word: {word!r}")
        self.word = word


class NoHintNeeded(GameError):
    """Every cell of the current row already holds the right letter."""


class IllegalOperation(GameError):
    """The call is not allowed in the session's current state."""
