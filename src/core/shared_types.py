"""
Type definitions used across layers
"""

from enum import StrEnum


class GameState(StrEnum):
    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


# --- Color and PieceType here are the string versions used at the boundary (requests / responses).
# --- The engine uses its own Enum versions (src/engine/pieces.py). Convert by member name.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
