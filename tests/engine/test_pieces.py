"""Unit tests for /src/engine/pieces.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.engine.pieces import Color, Piece, PieceType


def test_new_piece_has_not_moved() -> None:
    piece = Piece(PieceType.ROOK, Color.WHITE)
    assert not piece.has_moved


@pytest.mark.parametrize("color", [c for c in Color])
def test_moved_copy(color: Color) -> None:
    """Flagging as moved returns a new value and leaves the original alone"""
    piece = Piece(PieceType.KING, color)
    moved = piece.moved()
    assert moved == Piece(PieceType.KING, color, has_moved=True)
    assert not piece.has_moved


@pytest.mark.parametrize("color", [c for c in Color])
def test_promotion_to_queen(color: Color) -> None:
    """Promote a pawn to Queen. Does not by accident change the color, and the new piece counts as moved"""
    piece = Piece(PieceType.PAWN, color)
    promoted = piece.promote_to(PieceType.QUEEN)
    assert promoted.type == PieceType.QUEEN
    assert promoted.color == color
    assert promoted.has_moved


def test_piece_is_a_value() -> None:
    """Pieces are copied freely, so they must not be changed in place"""
    piece = Piece(PieceType.PAWN, Color.BLACK)
    with pytest.raises(FrozenInstanceError):
        piece.has_moved = True  # type: ignore[misc]


def test_opponent_color() -> None:
    assert Color.WHITE.opponent == Color.BLACK
    assert Color.BLACK.opponent == Color.WHITE
