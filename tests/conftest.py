"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.engine.board import Board
from src.engine.game import Game
from src.engine.pieces import Color, Piece, PieceType
from src.engine.square import Square

Placement = dict[tuple[int, int], Piece]


@pytest.fixture
def board_with_pieces() -> Callable[[Placement], Board]:
    """Call the inner function with {(row, col): piece} to get an otherwise empty board"""

    def _create_board(placement: Placement) -> Board:
        board = Board.empty()
        for (row, col), piece in placement.items():
            board.set_piece_at(Square(row, col), piece)
        return board

    return _create_board


@pytest.fixture
def game_with_pieces(
    board_with_pieces: Callable[[Placement], Board],
) -> Callable[..., Game]:
    """Same as `board_with_pieces`, wrapped in a Game with the given player to move (White by default)"""

    def _create_game(placement: Placement, to_move: Color = Color.WHITE) -> Game:
        return Game(board=board_with_pieces(placement), current_player=to_move)

    return _create_game


@pytest.fixture
def castling_placement() -> Placement:
    """Only the Kings and the Rooks, all on their starting squares. Ready to perform any castling move (if allowed)."""
    return {
        (0, 4): Piece(PieceType.KING, Color.WHITE),
        (0, 0): Piece(PieceType.ROOK, Color.WHITE),
        (0, 7): Piece(PieceType.ROOK, Color.WHITE),
        (7, 4): Piece(PieceType.KING, Color.BLACK),
        (7, 0): Piece(PieceType.ROOK, Color.BLACK),
        (7, 7): Piece(PieceType.ROOK, Color.BLACK),
    }
