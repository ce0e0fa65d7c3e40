"""Custom exception hierarchy for board generation and play."""


class PegsError(Exception):
    """Base exception for generator and game failures."""


class GenerationError(PegsError):
    """Raised when a board cannot be produced or the move catalog is inconsistent."""


class ParamsError(PegsError):
    """Raised when game parameters are out of range."""


class DescriptionError(PegsError):
    """Raised when a board description string cannot be decoded."""


class IllegalMoveError(PegsError):
    """Raised when a forward move is malformed or not legal on the board."""
