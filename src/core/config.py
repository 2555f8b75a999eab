"""
Engine configuration.

No environment variables or config files: a session is interactive and ephemeral, so the front-end
builds an `EngineConfig` from its command line flags (or just uses the defaults).
"""

import logging

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

# Chess board is always 8x8 (rows x columns).
BOARD_SIZE = 8


class EngineConfig(BaseModel):
    """
    Rule switches and ambient settings for a single game session.

    * allow_self_check: an ordinary move may leave (or put) the mover's own king in check.
      Only castling is filtered against check when this is True. Set to False to also reject ordinary moves
      that leave your king attacked.
    * first_player: the color that makes the first move. Black, the side on rows 6/7 (ranks 1 and 2), by default.
    * log_level: name of a standard logging level.
    """

    allow_self_check: bool = True
    first_player: Color = Color.BLACK
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level_name = value.upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise InvalidRequestError(f"Unknown log level: {value!r}")
        return level_name
