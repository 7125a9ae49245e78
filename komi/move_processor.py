# move_processor.py
from collections import namedtuple
from typing import Set, Tuple

from komi.game_state import GameState
from komi.goban_model import (
    BLACK, WHITE, Grid, IllegalMove, OccupiedPoint, OutOfBounds, RestrictedPoint, WrongTurn, opponent,
)
from komi.liberties import is_surrounded

DEBUG = False

MoveResult = namedtuple('MoveResult', [
    'point', 'color', 'captured', 'black_captures', 'white_captures', 'win_reached',
])


class MoveProcessor:
    """
    Places a stone and resolves captures on a Grid + GameState pair.
    Does not flip the turn and knows nothing about game-over handling;
    the controller owns both.
    """

    def __init__(self, grid: Grid, state: GameState):
        self.grid = grid
        self.state = state

    def legal(self, row, col, color):
        """Raise IllegalMove subclass if illegal, otherwise return True."""
        if color not in (BLACK, WHITE):
            raise IllegalMove(f"Unknown color {color!r}")
        try:
            cell = self.grid.cell_at(row, col)
        except OutOfBounds as e:
            raise IllegalMove("Out of bounds") from e
        if color != self.state.to_move:
            raise WrongTurn(f"{color} played but {self.state.to_move} is to move")
        if not cell.is_empty():
            raise OccupiedPoint("Point occupied")
        if (row, col) in self.state.restricted:
            raise RestrictedPoint("Point was vacated by a capture")
        return True

    def _find_captures(self, row, col, color) -> Set[Tuple[int, int]]:
        """Union of opposing groups left without liberties by the stone at (row, col)."""
        enemy = opponent(color)
        visited = set()
        captured = set()
        for nr, nc in self.grid.neighbors(row, col):
            adjacent = self.grid.cell_at(nr, nc)
            if adjacent.stone != enemy or adjacent.point in captured:
                continue
            surrounded, group = is_surrounded(self.grid, adjacent, visited)
            if surrounded:
                captured.update(cell.point for cell in group)
        return captured

    # --- main API ---
    def apply_move(self, row, col, color) -> MoveResult:
        """Apply move or raise IllegalMove subclass. Nothing changes when the move is illegal."""
        self.legal(row, col, color)
        self.grid.cell_at(row, col).stone = color
        captured = self._find_captures(row, col, color)
        for r, c in captured:
            self.grid.cell_at(r, c).stone = None
            self.state.restricted.add((r, c))
        self.state.captures[color] += len(captured)
        if DEBUG and captured:
            print("[MoveProcessor]", color, "at", (row, col), "captured", sorted(captured))
        return MoveResult(
            point=(row, col),
            color=color,
            captured=frozenset(captured),
            black_captures=self.state.black_captures,
            white_captures=self.state.white_captures,
            win_reached=self.state.winner() is not None,
        )
