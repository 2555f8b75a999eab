"""The Game board: canonical piece placement plus raw mutation primitives. Bounds are checked, legality is not."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.core.config import BOARD_SIZE
from src.core.exceptions import OutOfBoundsError
from src.engine.moves import Vector, valid_moves
from src.engine.pieces import (
    BACK_RANK_ORDER,
    PAWN_HOME_ROW,
    Color,
    Piece,
    PieceType,
)
from src.engine.square import Square

Cell = Optional[Piece]


@dataclass
class Board:
    position: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls(
            {
                Square(row, col): None
                for row in range(BOARD_SIZE)
                for col in range(BOARD_SIZE)
            }
        )

    @classmethod
    def standard(cls) -> Self:
        """
        The standard setup:
        * White back rank on row 0, White pawns on row 1
        * Black pawns on row 6, Black back rank on row 7
        * columns read rook, knight, bishop, queen, king, bishop, knight, rook
        """
        board = cls.empty()
        for color, back_row in ((Color.WHITE, 0), (Color.BLACK, BOARD_SIZE - 1)):
            for col, piece_type in enumerate(BACK_RANK_ORDER):
                board.set_piece_at(Square(back_row, col), Piece(piece_type, color))
            for col in range(BOARD_SIZE):
                board.set_piece_at(
                    Square(PAWN_HOME_ROW[color], col), Piece(PieceType.PAWN, color)
                )
        return board

    def is_within_bounds(self, square: Square) -> bool:
        return square.is_within_bounds()

    def get_piece_at(self, square: Square) -> Optional[Piece]:
        self._assert_within_bounds(square)
        return self.position[square]

    def set_piece_at(self, square: Square, piece: Piece) -> None:
        """Overwrites whatever stood on the square"""
        self._assert_within_bounds(square)
        self.position[square] = piece

    def remove_piece_at(self, square: Square) -> None:
        self._assert_within_bounds(square)
        self.position[square] = None

    def next_square_in_direction(self, square: Square, direction: Vector) -> Optional[Square]:
        next_square = square.offset(*direction)
        return next_square if next_square.is_within_bounds() else None

    def make_move(self, from_square: Square, to_square: Square) -> None:
        """
        Unconditional relocation, used to try out hypothetical moves.
        Whatever stood on `to_square` is overwritten (even your own piece). Does NOT flag the piece as moved.
        """
        piece = self.get_piece_at(from_square)
        self._assert_within_bounds(to_square)
        self.position[from_square] = None
        self.position[to_square] = piece

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Commit a move: like `make_move`, but the piece that lands is flagged as moved. Nothing happens if `from_square` is empty."""
        piece = self.get_piece_at(from_square)
        if piece is None:
            return
        self._assert_within_bounds(to_square)
        self.position[from_square] = None
        self.position[to_square] = piece.moved()

    def pieces(self, color: Optional[Color] = None) -> list[tuple[Square, Piece]]:
        """Occupied squares (with their pieces), optionally only those of one color."""
        return [
            (square, piece)
            for square, piece in self.position.items()
            if piece is not None and (color is None or piece.color == color)
        ]

    def locate(self, piece_type: PieceType, color: Color) -> list[Square]:
        return [
            square
            for square, piece in self.pieces(color)
            if piece.type == piece_type
        ]

    def pseudo_legal_moves(self, square: Square) -> list[Square]:
        """Wraps around the movement rules in moves.py"""
        return valid_moves(square, self)

    def rows(self) -> list[list[Cell]]:
        """The grid, row 0 first. This is what gets rendered."""
        return [
            [self.position[Square(row, col)] for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def copy(self) -> Self:
        return deepcopy(self)

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(
                f"Square {square} is outside of the {BOARD_SIZE}x{BOARD_SIZE} board."
            )
