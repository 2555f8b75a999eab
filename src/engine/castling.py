"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from src.core.config import BOARD_SIZE
from src.engine.square import Square


class CastlingSide(Enum):
    KING_SIDE = "king side"
    QUEEN_SIDE = "queen side"


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the squares where king/rook start from/end up in by castling, plus the path between them.

    The side is deduced from the direction the king moves in: towards a higher column means king side.
    The rook is expected on the corner of the king's row, and lands next to the king's destination on the side the
    king came from.
    NOTE: `path` holds every square strictly between king and rook. Those all need to be empty, and none may be attacked.
    """

    side: CastlingSide
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    path: tuple[Square, ...]

    @classmethod
    def for_king_move(cls, king_from: Square, king_to: Square) -> Self:
        row = king_from.row
        if king_to.col > king_from.col:
            side = CastlingSide.KING_SIDE
            rook_from = Square(row, BOARD_SIZE - 1)
            rook_to = Square(row, king_to.col - 1)
        else:
            side = CastlingSide.QUEEN_SIDE
            rook_from = Square(row, 0)
            rook_to = Square(row, king_to.col + 1)
        return cls(
            side=side,
            king_from=king_from,
            king_to=king_to,
            rook_from=rook_from,
            rook_to=rook_to,
            path=squares_between_on_row(king_from, rook_from),
        )


def squares_between_on_row(from_square: Square, to_square: Square) -> tuple[Square, ...]:
    """
    Find the squares in between the two squares specified that are on the same row (both ends excluded)

    Needed for checking if you can still castle (the Game will check which of those are empty / attacked.)
    """
    if from_square.row != to_square.row:
        raise ValueError(
            f"squares_between_on_row requires both squares to lie on the same row. \n from: {from_square}\n to:{to_square}"
        )

    low, high = sorted((from_square.col, to_square.col))
    return tuple(Square(from_square.row, col) for col in range(low + 1, high))


def is_castling_request(king_from: Square, king_to: Square) -> bool:
    """A king 'moving' two columns along its own row asks to castle."""
    return king_from.row == king_to.row and abs(king_to.col - king_from.col) == 2
