"""
Game configuration and shared constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# Number of cards on a 5x5 board
BOARD_SIZE = 25
GRID_WIDTH = 5

# Shared secret for the snapshot codec. It ships with the code, so tokens are
# obfuscated, not protected.
ENCRYPTION_KEY = "AGENT33"

# Durable storage keys
USED_WORDS_KEY = "codenames_board.used_words"
GAME_STATE_KEY = "codenames_board.current_game"
RULE_TURN_PASS_KEY = "codenames_board.turn_pass_rule"

# Query parameter carrying a token in a share link
SHARE_QUERY_PARAM = "key"

STORAGE_FILE_NAME = "storage.json"


@dataclass(frozen=True)
class GameConfig:
    """
    Rules fixed at game creation.

    Attributes:
        team_count: Number of playing teams (2 or 3)
        turn_pass_on_miss: Whether revealing a card of another colour
            passes the turn automatically
    """
    team_count: int = 2
    turn_pass_on_miss: bool = True

    def __post_init__(self):
        if self.team_count not in (2, 3):
            raise ValueError(f"team_count must be 2 or 3, got {self.team_count}")


class Settings(BaseSettings):
    """
    Environment overrides, read from CODENAMES_BOARD_* variables.

    Attributes:
        data_dir: Directory holding the storage file
    """
    model_config = SettingsConfigDict(env_prefix="CODENAMES_BOARD_", extra="ignore")

    data_dir: Path = Path.home() / ".codenames_board"


def default_data_dir() -> Path:
    """Directory holding the storage file ($CODENAMES_BOARD_DATA_DIR or ~/.codenames_board)."""
    return Settings().data_dir
