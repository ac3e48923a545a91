"""
Custom exceptions shared by all layers.

Domain errors get raised where the rule is violated and travel up through the Service unchanged,
so the API layer can decide how to present them (catching `GameError` catches all of them).
"""


class GameError(Exception):
    """Top-level exception for anything going wrong while handling an Othello game."""


class OutOfRangeError(GameError):
    """A coordinate outside of the 8x8 board (or a square name that cannot be parsed)."""


class IllegalMoveError(GameError):
    """The target cell is occupied or placing a piece there would not capture anything."""


class NotYourTurnError(GameError):
    """The player attempting to move is not the side to move."""


class GameOverError(GameError):
    """Neither player can move anymore."""


class GameStateError(GameError):
    """Request does not fit the current lifecycle of the game (full game, unknown player, invalid data)."""


class InvalidPositionError(GameError):
    """Text encoding of a board position could not be parsed."""


class InvalidRequestError(GameError):
    """Raised by the request model validators."""


class RepositoryError(GameError):
    """Persistence layer could not find (or store) the requested game."""
