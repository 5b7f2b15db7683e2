"""Scoreboard exceptions and error codes."""


class Flip7Error(Exception):
    """Base exception for scoreboard errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class InvalidCardError(Flip7Error, ValueError):
    """A card token could not be parsed."""
    def __init__(self, token):
        self.token = token
        super().__init__(INVALID_CARD, f"Not a Flip 7 card: {token!r}")


class UnknownPlayerError(Flip7Error, LookupError):
    """No player with the given name in the current game."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(UNKNOWN_PLAYER, f"No player named {name!r} in this game")


class StorageError(Flip7Error):
    """The game state could not be read from or written to the store."""
    def __init__(self, message: str):
        super().__init__(STORAGE_ERROR, message)


# Error codes
NO_PLAYERS = "NO_PLAYERS"
GAME_IN_PROGRESS = "GAME_IN_PROGRESS"
GAME_NOT_STARTED = "GAME_NOT_STARTED"
INVALID_CARD = "INVALID_CARD"
INVALID_SELECTION = "INVALID_SELECTION"
UNKNOWN_PLAYER = "UNKNOWN_PLAYER"
NO_WINNER = "NO_WINNER"
CONFIRMATION_REQUIRED = "CONFIRMATION_REQUIRED"
STORAGE_ERROR = "STORAGE_ERROR"
NO_HANDLER = "NO_HANDLER"
HANDLER_ERROR = "HANDLER_ERROR"
