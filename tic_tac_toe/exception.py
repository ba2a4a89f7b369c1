class GameError(Exception):
    pass


class InvalidMoveError(GameError):
    pass


class SessionClosedError(GameError):
    """Raised when the input stream ends or the user interrupts a prompt."""
