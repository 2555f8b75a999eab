"""Orchestration of a game session: from the front-end requests to the rules in the domain layer (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    BoardResponse,
    MoveRequest,
    MoveResponse,
    PieceModel,
    StatusResponse,
    is_algebraic_notation,
)
from src.core.config import EngineConfig
from src.core.exceptions import IllegalMoveError, InvalidRequestError
from src.core.shared_types import Color, GameState, PieceType
from src.engine import pieces
from src.engine.game import Game
from src.engine.square import Square

logger = logging.getLogger(__name__)


class GameService:
    """
    Holds the one Game of a session, and plays its turns.

    Domain exceptions (IllegalMoveError, NotYourTurnError, ...) are propagated: the front-end decides how to show them.
    """

    def __init__(
        self, config: Optional[EngineConfig] = None, game: Optional[Game] = None
    ) -> None:
        self.config = config or EngineConfig()
        self.game = game or Game.new_game(self.config)

    def new_game(self) -> StatusResponse:
        """Throw away the current game and start over from the standard position."""
        self.game = Game.new_game(self.config)
        return self.status()

    def board(self) -> BoardResponse:
        return BoardResponse(
            rows=[
                [PieceModel.from_piece(piece) if piece else None for piece in row]
                for row in self.game.board.rows()
            ],
            current_player=_to_color(self.game.current_player),
        )

    def status(self) -> StatusResponse:
        """Point-in-time status of the player to move."""
        return StatusResponse(
            current_player=_to_color(self.game.current_player),
            state=GameState[self.game.state.name],
            in_check=self.game.is_in_check(),
            checkmate=self.game.is_in_checkmate(),
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt: validate, commit, resolve castling/promotion, and hand the turn over."""
        from_square = Square.from_algebraic(request.from_square)
        to_square = Square.from_algebraic(request.to_square)
        color = pieces.Color[request.color.name] if request.color else None

        try:
            move = self.game.make_move(from_square, to_square, color)
        except IllegalMoveError:
            logger.debug(
                "Rejected move %s%s", request.from_square, request.to_square
            )
            raise

        logger.info(
            "%s played %s%s",
            move.piece.color.name.lower(),
            request.from_square,
            request.to_square,
        )
        return MoveResponse(
            from_square=request.from_square,
            to_square=request.to_square,
            piece=PieceModel.from_piece(move.piece),
            captured=PieceModel.from_piece(move.captured) if move.captured else None,
            castled=move.is_castling,
            promoted_to=PieceType[move.promoted_to.name] if move.promoted_to else None,
            status=self.status(),
        )

    def legal_destinations(self, square_name: str) -> list[str]:
        """Squares the piece on the given square may move to this turn (algebraic notation)."""
        if not is_algebraic_notation(square_name):
            raise InvalidRequestError(
                f"Cannot interpret {square_name!r} as a valid square name."
            )
        square = Square.from_algebraic(square_name)
        return [
            destination.to_algebraic()
            for destination in self.game.legal_destinations(square)
        ]


def _to_color(color: pieces.Color) -> Color:
    return Color[color.name]
