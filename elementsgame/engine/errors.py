"""Engine exceptions."""

# Error codes
INVALID_MOVE = "INVALID_MOVE"
BAD_CONFIGURATION = "BAD_CONFIGURATION"
ILLEGAL_COMMAND = "ILLEGAL_COMMAND"


class GameError(Exception):
    """Base exception for game-related errors."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class InvalidMoveError(GameError):
    """A card was rejected by the move rules. Nothing changed; try another card."""

    def __init__(self, message: str):
        super().__init__(INVALID_MOVE, message)


class ConfigurationError(GameError):
    """The game cannot be set up with the requested settings."""

    def __init__(self, message: str):
        super().__init__(BAD_CONFIGURATION, message)


class IllegalCommandError(GameError):
    """A command was issued in a phase that does not accept it."""

    def __init__(self, message: str):
        super().__init__(ILLEGAL_COMMAND, message)
