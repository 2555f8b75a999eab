"""
Terminal front-end: two players taking turns at one keyboard.

Thin glue around GameService: read squares like 'e2', print the board with glyphs, print the status messages.
"""

import argparse
import logging
from typing import Callable, Optional

from src.api.models import BoardResponse, MoveRequest, is_algebraic_notation
from src.core.config import BOARD_SIZE, EngineConfig
from src.core.exceptions import GameError
from src.core.shared_types import Color, GameState, PieceType
from src.engine.square import FILES, Square
from src.services.game_service import GameService

logger = logging.getLogger(__name__)

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

EMPTY_SQUARE = "·"
GLYPHS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.KING): "♔",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.BLACK, PieceType.KING): "♚",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.PAWN): "♟",
}


def parse_square(text: str) -> Optional[Square]:
    """'e2' -> Square. None if the text is not a square name."""
    text = text.strip()
    if not is_algebraic_notation(text):
        return None
    return Square.from_algebraic(text)


def render_board(board: BoardResponse) -> str:
    """Row 0 is printed on top, labelled with rank 8."""
    file_labels = "  " + " ".join(FILES)
    lines = [file_labels]
    for row_idx, row in enumerate(board.rows):
        rank = BOARD_SIZE - row_idx
        symbols = [
            GLYPHS[(piece.color, piece.type)] if piece else EMPTY_SQUARE
            for piece in row
        ]
        lines.append(f"{rank} {' '.join(symbols)}  {rank}")
    lines.append(file_labels)
    return "\n".join(lines)


def ask_for_square(prompt: str, read: ReadFn, write: WriteFn) -> str:
    """Keep asking until a square name is given. Raises EOFError when input runs out."""
    while True:
        answer = read(prompt).strip()
        if parse_square(answer) is not None:
            return answer
        write("Invalid input. Please try again.")


def run(service: GameService, read: ReadFn = input, write: WriteFn = print) -> None:
    """
    The turn loop
    ----

    1. print the board
    2. stop if the game is no longer ongoing
    3. report check, stop on checkmate
    4. ask for a move and let the service play it. Rejected moves: same player tries again

    Stops quietly when input runs out (ex. Ctrl-D).
    """
    while True:
        write(render_board(service.board()))

        status = service.status()
        if status.state != GameState.ONGOING:
            write("Game Over!")
            return

        player_name = status.current_player.value.capitalize()
        if status.in_check:
            write(f"{player_name} is in check!")
        if status.checkmate:
            winner = Color.BLACK if status.current_player == Color.WHITE else Color.WHITE
            write(f"Checkmate! {winner.value.capitalize()} wins!")
            return

        write(f"{player_name} Move: ")
        try:
            from_square = ask_for_square(
                "Enter the source square (e.g., 'e2'): ", read, write
            )
            to_square = ask_for_square(
                "Enter the destination square (e.g., 'e4'): ", read, write
            )
        except EOFError:
            logger.info("Input closed, leaving the game.")
            return

        try:
            service.make_move(
                MoveRequest(from_square=from_square, to_square=to_square)
            )
        except GameError as err:
            logger.debug("Move refused: %s", err)
            write("Invalid move. Please try again.")


def build_config(args: argparse.Namespace) -> EngineConfig:
    return EngineConfig(
        allow_self_check=not args.forbid_self_check,
        first_player=Color(args.first_player),
        log_level=args.log_level,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player chess in the terminal")
    parser.add_argument(
        "--first-player",
        choices=[color.value for color in Color],
        default=EngineConfig().first_player.value,
        help="Color that makes the first move",
    )
    parser.add_argument(
        "--forbid-self-check",
        action="store_true",
        help="Reject moves that leave your own king in check",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=EngineConfig().log_level,
        help="Logging level (case-insensitive)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main(argv: Optional[list[str]] = None) -> None:
    config = build_config(parse_args(argv))
    configure_logging(config.log_level)
    run(GameService(config))


if __name__ == "__main__":
    main()
