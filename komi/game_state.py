# game_state.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

from komi.goban_model import BLACK, WHITE, opponent

DEFAULT_WIN_THRESHOLD = 10


@dataclass
class GameState:
    """
    Turn, score and restriction bookkeeping for one game.
    - captures: stones captured *by* each colour
    - restricted: points vacated by a capture; they stay unplayable until reset
    """
    first_to_move: str = WHITE
    win_threshold: int = DEFAULT_WIN_THRESHOLD
    to_move: str = field(init=False)
    captures: Dict[str, int] = field(init=False)
    restricted: Set[Tuple[int, int]] = field(init=False)

    def __post_init__(self):
        if self.first_to_move not in (BLACK, WHITE):
            raise ValueError("first_to_move must be 'B' or 'W'")
        if self.win_threshold <= 0:
            raise ValueError("win_threshold must be positive")
        self.reset()

    def reset(self):
        self.to_move = self.first_to_move
        self.captures = {BLACK: 0, WHITE: 0}
        self.restricted = set()

    def flip_turn(self):
        self.to_move = opponent(self.to_move)

    @property
    def black_captures(self) -> int:
        return self.captures[BLACK]

    @property
    def white_captures(self) -> int:
        return self.captures[WHITE]

    def winner(self) -> Optional[str]:
        # Black is checked first
        if self.captures[BLACK] >= self.win_threshold:
            return BLACK
        if self.captures[WHITE] >= self.win_threshold:
            return WHITE
        return None
