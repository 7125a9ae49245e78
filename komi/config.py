# config.py
"""
Construction-time settings for a game.

Values come from komi.env (next to this module, or an explicit path) via
python-dotenv, then from the process environment:

    KOMI_BOARD_SIZE=9
    KOMI_WIN_THRESHOLD=10
    KOMI_FIRST_TO_MOVE=W
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from komi.game_state import DEFAULT_WIN_THRESHOLD
from komi.goban_model import BLACK, WHITE

DEFAULT_ENV_PATH = os.path.join(os.path.dirname(__file__), "komi.env")
DEFAULT_BOARD_SIZE = 9


# Helpers to read env with defaults
def geti(name: str, default: int) -> int:
    v = os.getenv(name)
    return int(v) if v is not None else int(default)


def gets(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v is not None else default


@dataclass
class GameConfig:
    board_size: int = DEFAULT_BOARD_SIZE
    win_threshold: int = DEFAULT_WIN_THRESHOLD
    first_to_move: str = WHITE

    def __post_init__(self):
        self.first_to_move = self.first_to_move.strip().upper()[:1]
        if self.board_size <= 0:
            raise ValueError(f"board_size must be positive, got {self.board_size}")
        if self.win_threshold <= 0:
            raise ValueError(f"win_threshold must be positive, got {self.win_threshold}")
        if self.first_to_move not in (BLACK, WHITE):
            raise ValueError("first_to_move must be 'B' or 'W'")


def load_config(env_path: Optional[str] = None) -> GameConfig:
    path = env_path or DEFAULT_ENV_PATH
    if os.path.exists(path):
        load_dotenv(path, override=False)
    return GameConfig(
        board_size=geti("KOMI_BOARD_SIZE", DEFAULT_BOARD_SIZE),
        win_threshold=geti("KOMI_WIN_THRESHOLD", DEFAULT_WIN_THRESHOLD),
        first_to_move=gets("KOMI_FIRST_TO_MOVE", WHITE),
    )
