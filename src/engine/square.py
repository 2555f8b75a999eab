"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.config import BOARD_SIZE

FILES = "abcdefgh"


@dataclass(frozen=True)
class Square:
    """
    Zero-based grid coordinates. Signed on purpose: a square one step past an edge can be created and then
    rejected with `is_within_bounds()`.

    Row 0 is the back rank of White, row 7 the back rank of Black.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: file 'a'-'h' maps to column 0-7, rank '8' is row 0 and rank '1' is row 7."""
        col = ord(sq[0].lower()) - ord("a")
        row = BOARD_SIZE - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{FILES[self.col]}{BOARD_SIZE - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)
