"""Custom exceptions shared by all layers. Catch `GameError` to handle any of them."""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


class InvalidRequestError(GameError):
    """Input at the boundary could not be interpreted (ex. a square name like 'z9')."""


class IllegalMoveError(GameError):
    """The requested move is not allowed by the rules. The game is left unchanged."""


class NotYourTurnError(GameError):
    """A move was requested on behalf of the player that is not to move."""


class OutOfBoundsError(GameError):
    """A square outside of the board was read from / written to."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action."""
