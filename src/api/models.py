"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, GameState, PieceType
from src.engine.pieces import Piece

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def is_algebraic_notation(value: str) -> bool:
    """Two characters: a file letter a-h followed by a rank digit 1-8 (ex. 'e2')"""
    if len(value) != 2:
        return False

    file_character = value[0].lower()
    rank_character = value[1]
    return file_character in FILE_NAMES and rank_character in RANK_NAMES


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: str
    to_square: str
    color: Optional[Color] = None

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip()
        if not is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value.lower()


# --- RESPONSE MODELS ---
class PieceModel(BaseModel):
    type: PieceType
    color: Color
    has_moved: bool

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        """Engine enums -> boundary enums (same member names)"""
        return cls(
            type=PieceType[piece.type.name],
            color=Color[piece.color.name],
            has_moved=piece.has_moved,
        )


class StatusResponse(BaseModel):
    current_player: Color
    state: GameState
    in_check: bool
    checkmate: bool


class BoardResponse(BaseModel):
    """Row 0 first, each row listing columns 0-7. None for an empty square."""

    rows: list[list[Optional[PieceModel]]]
    current_player: Color


class MoveResponse(BaseModel):
    from_square: str
    to_square: str
    piece: PieceModel
    captured: Optional[PieceModel]
    castled: bool
    promoted_to: Optional[PieceType]
    status: StatusResponse
