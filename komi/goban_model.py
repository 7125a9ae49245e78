# goban_model.py
from typing import Iterator, List, Optional, Tuple

BLACK = 'B'
WHITE = 'W'
EMPTY = None

COLOR_NAMES = {BLACK: 'Black', WHITE: 'White'}


# Exceptions
class IllegalMove(Exception): pass


class OccupiedPoint(IllegalMove): pass


class RestrictedPoint(IllegalMove): pass


class WrongTurn(IllegalMove): pass


class OutOfBounds(IndexError):
    def __init__(self, row, col, size):
        super().__init__(f"({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col


def opponent(color):
    return WHITE if color == BLACK else BLACK


class Cell:
    """
    A single board point.
    - row, col: fixed position inside the owning Grid
    - stone: None / 'B' / 'W'
    """
    __slots__ = ("row", "col", "stone")

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.stone: Optional[str] = EMPTY

    @property
    def point(self) -> Tuple[int, int]:
        return self.row, self.col

    def is_empty(self) -> bool:
        return self.stone is EMPTY

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, {self.stone or '.'})"


class Grid:
    def __init__(self, size=9):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Board size must be a positive integer")
        self.size = size
        self._cells = [[Cell(r, c) for c in range(size)] for r in range(size)]

    # --- helpers ---
    def in_bounds(self, r, c):
        # only integer coordinates address a point
        if not isinstance(r, int) or not isinstance(c, int):
            return False
        return 0 <= r < self.size and 0 <= c < self.size

    def cell_at(self, r, c) -> Cell:
        if not self.in_bounds(r, c):
            raise OutOfBounds(r, c, self.size)
        return self._cells[r][c]

    def get(self, point):
        if point is None: return None
        r, c = point
        return self.cell_at(r, c).stone

    def neighbors(self, r, c) -> List[Tuple[int, int]]:
        """Orthogonal neighbours in fixed order: down, up, right, left."""
        result = []
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                result.append((nr, nc))
        return result

    def occupied(self) -> Iterator[Cell]:
        for row in self._cells:
            for cell in row:
                if cell.stone is not EMPTY:
                    yield cell

    def clear(self):
        for row in self._cells:
            for cell in row:
                cell.stone = EMPTY

    # utility for tests
    def pretty(self):
        rows = []
        for row in self._cells:
            rows.append(''.join('.' if x.stone is None else x.stone for x in row))
        return '\n'.join(rows)

    def get_board(self) -> List[List[Optional[str]]]:
        """Return a copy of the board: list of lists with None/'B'/'W'."""
        return [[cell.stone for cell in row] for row in self._cells]
