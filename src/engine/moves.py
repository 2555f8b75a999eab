"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the pseudo-legal destinations for each piece type.

"Pseudo-legal": reachable by the movement pattern of the piece given the current occupancy of the board,
ignoring whether the move would expose your own king. The same sets are used to decide if a square is attacked.

Legality is checked later by Game
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.engine.pieces import PAWN_DIRECTION, PAWN_HOME_ROW, Piece, PieceType
from src.engine.square import Square


Vector = tuple[int, int]  # (d_row, d_col)


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def get_piece_at(self, square: Square) -> Optional[Piece]: ...
    def next_square_in_direction(
        self, square: Square, direction: Vector
    ) -> Optional[Square]: ...


STRAIGHTS: list[Vector] = [(1, 0), (0, 1), (-1, 0), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS


@dataclass(frozen=True)
class Move:
    """Record of a move that got applied to the board (a snapshot of what moved and what got taken)."""

    from_square: Square
    to_square: Square
    piece: Piece
    captured: Optional[Piece] = None
    is_castling: bool = False
    promoted_to: Optional[PieceType] = None


# --- MOVEMENT RULES ---
def raycasting_move(square: Square, board: Board, directions: list[Vector]) -> list[Square]:
    """
    Raycasting algorithm
    -----

    We define move directions and move along them until we hit another piece or the edge of the board.
    The first occupied square is included only if it holds an opponent's piece (it can be captured).
    """
    player_color = board.get_piece_at(square).color

    destinations: list[Square] = []
    for direction in directions:
        target_square = board.next_square_in_direction(square, direction)
        while target_square is not None:
            piece_found = board.get_piece_at(target_square)
            if piece_found is not None:
                if piece_found.color != player_color:
                    destinations.append(target_square)
                break

            destinations.append(target_square)
            target_square = board.next_square_in_direction(target_square, direction)
    return destinations


def single_step_move(square: Square, board: Board, deltas: list[Vector]) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step"""
    player_color = board.get_piece_at(square).color

    destinations: list[Square] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        piece_found = board.get_piece_at(target_square)
        if piece_found is None or piece_found.color != player_color:
            destinations.append(target_square)
    return destinations


def candidate_pawn_moves(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two from its home row, when both squares in front of it are empty.
    - takes diagonally forward, but only when there is an opponent's piece to take.

    NOTE: White moves towards higher rows, Black towards lower rows. No en passant.
    """
    pawn = board.get_piece_at(square)
    direction = PAWN_DIRECTION[pawn.color]

    destinations: list[Square] = []
    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.get_piece_at(one_step) is None:
        destinations.append(one_step)

        two_steps = square.offset(2 * direction, 0)
        if square.row == PAWN_HOME_ROW[pawn.color] and board.get_piece_at(two_steps) is None:
            destinations.append(two_steps)

    for d_col in (1, -1):
        target_square = square.offset(direction, d_col)
        if not target_square.is_within_bounds():
            continue
        piece_found = board.get_piece_at(target_square)
        if piece_found is not None and piece_found.color != pawn.color:
            destinations.append(target_square)
    return destinations


def candidate_knight_moves(square: Square, board: Board) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(square: Square, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_rook_moves(square, board) + candidate_bishop_moves(square, board)


def candidate_king_moves(square: Square, board: Board) -> list[Square]:
    """
    The king can move by a single square at the time.

    Castling is not generated here: it is a separate operation on the Game.
    """
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def valid_moves(square: Square, board: Board) -> list[Square]:
    """Pseudo-legal destinations of whatever piece stands on the square (none for an empty square)."""
    piece = board.get_piece_at(square)
    if piece is None:
        return []
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(square, board)
