"""Pass the Pigs - Engine Exceptions"""


class ProtocolViolation(ValueError):
    """An event arrived that the current game state does not accept.

    Raised before any state is mutated, so catching it leaves the game
    exactly as it was.
    """

    def __init__(self, message: str, *, event: str | None = None) -> None:
        super().__init__(message)
        self.event = event


class ScoringTableError(RuntimeError):
    """The scoring table is missing or disagrees on a combination."""
