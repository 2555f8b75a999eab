"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the rules required to play a turn:
legality of a move, committing it to the board, the special moves (castling / promotion), and the check(mate) queries.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.config import EngineConfig
from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.engine.board import Board
from src.engine.castling import CastlingSquares, is_castling_request
from src.engine.moves import Move
from src.engine.pieces import PROMOTION_ROW, Color, Piece, PieceType
from src.engine.square import Square

logger = logging.getLogger(__name__)


class GameState(Enum):
    """
    NOTE: Only ONGOING is ever stored. Check and checkmate are answered by `is_in_check()` / `is_in_checkmate()`,
    stalemate and draws are not detected at all.
    """

    ONGOING = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Color
    state: GameState = GameState.ONGOING
    moves: list[Move] = field(default_factory=list)
    config: EngineConfig = field(default_factory=EngineConfig)

    @classmethod
    def new_game(cls, config: Optional[EngineConfig] = None) -> Self:
        """Standard starting position, with the configured color to move first."""
        config = config or EngineConfig()
        return cls(
            board=Board.standard(),
            current_player=Color[config.first_player.name],
            config=config,
        )

    def switch_player(self) -> None:
        self.current_player = self.current_player.opponent

    def make_move(
        self, from_square: Square, to_square: Square, color: Optional[Color] = None
    ) -> Move:
        """
        Play a full turn
        -----

        1. make sure it is your turn (only if the color of the requesting player is known)
        2. a king moving two columns along its row asks to castle --> both king and rook move, or the request is refused
        3. any other move must be valid: see `is_valid_move()`
        4. commit the move to the board, and resolve a promotion
        5. update the list of moves and hand the turn to the opponent

        Raises IllegalMoveError (game unchanged) when the move is not allowed.
        """
        if self.state != GameState.ONGOING:
            raise GameStateError(f"Game is over. state: {self.state.name.lower()}")

        if color is not None and color != self.current_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.current_player.name.lower()} to make a move first."
            )

        move_name = _move_name(from_square, to_square)
        if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
            raise IllegalMoveError(f"Move not allowed: {move_name}")

        piece = self.board.get_piece_at(from_square)
        if self._is_castling_attempt(piece, from_square, to_square):
            if not self.handle_castling(from_square, to_square):
                raise IllegalMoveError(f"Castling not allowed: {move_name}")
            move = Move(from_square, to_square, piece, is_castling=True)
        else:
            if not self.is_valid_move(from_square, to_square):
                raise IllegalMoveError(f"Move not allowed: {move_name}")
            captured = self.board.get_piece_at(to_square)
            self.board.move_piece(from_square, to_square)
            self.handle_special_moves(from_square, to_square)
            move = Move(
                from_square,
                to_square,
                piece,
                captured=captured,
                promoted_to=self._promoted_type(piece, to_square),
            )

        self.moves.append(move)
        self.switch_player()
        return move

    # -- LEGALITY ---
    def is_valid_move(self, from_square: Square, to_square: Square) -> bool:
        """
        A move is valid when:
        * both squares are on the board
        * you move one of your own pieces
        * the destination is in the pseudo-legal move set of that piece

        NOTE: By default, this does NOT check whether the move leaves your own king in check. Only castling is filtered against check.
        Set `EngineConfig.allow_self_check = False` to also reject those moves.
        """
        if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
            return False

        piece = self.board.get_piece_at(from_square)
        if piece is None or piece.color != self.current_player:
            return False

        if to_square not in self.board.pseudo_legal_moves(from_square):
            return False

        if not self.config.allow_self_check:
            return not self._is_putting_yourself_in_check(from_square, to_square)
        return True

    def legal_destinations(self, square: Square) -> list[Square]:
        """
        Every square the piece on `square` may move to this turn (castling destinations of the king included).
        Nothing for an empty square or an opponent's piece.
        """
        destinations = [
            destination
            for destination in self.board.pseudo_legal_moves(square)
            if self.is_valid_move(square, destination)
        ]
        piece = self.board.get_piece_at(square)
        if piece is not None and piece.type == PieceType.KING and piece.color == self.current_player:
            for d_col in (2, -2):
                castle_to = square.offset(0, d_col)
                if castle_to.is_within_bounds() and self.can_castle(square, castle_to):
                    destinations.append(castle_to)
        return destinations

    # --- CHECK / CHECKMATE ---
    def is_in_check(self, color: Optional[Color] = None) -> bool:
        """
        Is the king of `color` (default: the player to move) in the line of sight of any opponent's piece?

        NOTE: Without a king on the board, you are never in check.
        """
        color = color or self.current_player
        king_squares = self.board.locate(PieceType.KING, color)
        if not king_squares:
            logger.warning("No %s king on the board: not in check.", color.name.lower())
            return False
        return self.is_square_under_attack(king_squares[0], by_color=color.opponent)

    def is_square_under_attack(self, square: Square, by_color: Color) -> bool:
        """Any piece of `by_color` has this square among its pseudo-legal destinations"""
        return any(
            square in self.board.pseudo_legal_moves(attacker_square)
            for attacker_square, _ in self.board.pieces(by_color)
        )

    def is_in_checkmate(self) -> bool:
        """
        You are in check, and none of your pseudo-legal moves gets you out of it.

        Every candidate move is tried out on a copy of the board. The real board is never touched.
        """
        if not self.is_in_check():
            return False

        for square, _ in self.board.pieces(self.current_player):
            for destination in self.board.pseudo_legal_moves(square):
                if not self._is_putting_yourself_in_check(square, destination):
                    return False
        return True

    def _is_putting_yourself_in_check(self, from_square: Square, to_square: Square) -> bool:
        """Return True if the move leaves (or puts) you in check

        plan:
        1. Copy the board
        2. make the candidate move
        3. determine if king is in check on the new board
        """
        board = self.board.copy()
        board.make_move(from_square, to_square)
        trial = Game(
            board=board,
            current_player=self.current_player,
            state=self.state,
            config=self.config,
        )
        return trial.is_in_check()

    # -- SPECIAL MOVES ---
    def handle_special_moves(self, from_square: Square, to_square: Square) -> None:
        """
        Resolve the side effects of the piece that just moved.

        Normally called after the move got committed: `from_square` is then empty, and the piece is found on `to_square`.
        * King: attempt castling (nothing happens if castling is not possible)
        * Pawn: promotion, if it reached the last row
        """
        piece = self.board.get_piece_at(from_square) or self.board.get_piece_at(to_square)
        if piece is None:
            return

        if piece.type == PieceType.KING:
            self.handle_castling(from_square, to_square)
        elif piece.type == PieceType.PAWN:
            self.handle_pawn_promotion(to_square)

    def can_castle(self, king_from: Square, king_to: Square) -> bool:
        """
        Castling is allowed if:
        * the king has not moved yet, and moves exactly two columns along its row (towards the rook's corner)
        * the rook of the same color has not moved yet, and stands in the corner on the side the king moves to
        * every square between the king and rook is empty
        * the king is not in check (you cannot castle out of a check)
        * none of the squares between king and rook is attacked by the opponent
        """
        if not (king_from.is_within_bounds() and king_to.is_within_bounds()):
            return False
        if not is_castling_request(king_from, king_to):
            return False

        king = self.board.get_piece_at(king_from)
        if king is None or king.type != PieceType.KING or king.has_moved:
            logger.debug("No castling from %s: no unmoved king.", king_from.to_algebraic())
            return False

        squares = CastlingSquares.for_king_move(king_from, king_to)
        rook = self.board.get_piece_at(squares.rook_from)
        if not _is_unmoved_rook(rook, king.color):
            logger.debug(
                "No castling on the %s: no unmoved rook on %s.",
                squares.side.value,
                squares.rook_from.to_algebraic(),
            )
            return False

        if king_to not in squares.path:
            return False

        if any(self.board.get_piece_at(square) is not None for square in squares.path):
            logger.debug("No castling on the %s: path is blocked.", squares.side.value)
            return False

        if self.is_in_check(king.color):
            logger.debug("No castling on the %s: king is in check.", squares.side.value)
            return False

        opponent = king.color.opponent
        if any(self.is_square_under_attack(square, opponent) for square in squares.path):
            logger.debug("No castling on the %s: path is under attack.", squares.side.value)
            return False

        return True

    def handle_castling(self, king_from: Square, king_to: Square) -> bool:
        """
        Move both the King and the Rook. Nothing happens if castling is not allowed.
        Returns True if the pieces were moved.
        """
        if not self.can_castle(king_from, king_to):
            return False

        squares = CastlingSquares.for_king_move(king_from, king_to)
        self.board.move_piece(squares.king_from, squares.king_to)
        self.board.move_piece(squares.rook_from, squares.rook_to)
        logger.info(
            "Castled on the %s: king %s-%s, rook %s-%s",
            squares.side.value,
            squares.king_from.to_algebraic(),
            squares.king_to.to_algebraic(),
            squares.rook_from.to_algebraic(),
            squares.rook_to.to_algebraic(),
        )
        return True

    def handle_pawn_promotion(self, square: Square) -> bool:
        """
        A pawn that reached the last row for its color is replaced by a queen of the same color (no other choice is offered).
        Returns True if a promotion took place.
        """
        piece = self.board.get_piece_at(square)
        if piece is None or piece.type != PieceType.PAWN:
            return False
        if square.row != PROMOTION_ROW[piece.color]:
            return False

        self.board.set_piece_at(square, piece.promote_to(PieceType.QUEEN))
        logger.info("Pawn promoted to queen on %s", square.to_algebraic())
        return True

    # -- PRIVATE HELPERS ---
    def _is_castling_attempt(
        self, piece: Optional[Piece], from_square: Square, to_square: Square
    ) -> bool:
        return (
            piece is not None
            and piece.type == PieceType.KING
            and piece.color == self.current_player
            and is_castling_request(from_square, to_square)
        )

    def _promoted_type(self, piece: Piece, square: Square) -> Optional[PieceType]:
        """The type the piece turned into on `square` (None if it stayed what it was)"""
        landed = self.board.get_piece_at(square)
        if landed is None or landed.type == piece.type:
            return None
        return landed.type


def _is_unmoved_rook(piece: Optional[Piece], color: Color) -> bool:
    return (
        piece is not None
        and piece.type == PieceType.ROOK
        and piece.color == color
        and not piece.has_moved
    )


def _move_name(from_square: Square, to_square: Square) -> str:
    if from_square.is_within_bounds() and to_square.is_within_bounds():
        return f"{from_square.to_algebraic()}{to_square.to_algebraic()}"
    return f"{from_square}-{to_square}"
