# liberties.py
# Group / liberty analysis used by the move processor to find captures.
from typing import Optional, Set, Tuple

from komi.goban_model import Cell, Grid


def is_surrounded(grid: Grid, start: Cell, visited: Optional[Set[Tuple[int, int]]] = None):
    """
    Return (surrounded, group) for the same-colour group containing `start`.

    Depth-first walk over stones of start's colour. The walk stops as soon as
    any member touches an Empty point: the group has a liberty and is safe.
    Opposing stones and the board edge give no liberty.

    `visited` is shared between calls made for one move so a group reached
    from two sides of the new stone is analysed once. A start point found in
    `visited` was already decided and yields (False, set()).
    """
    if start.is_empty():
        raise ValueError(f"cannot analyse an empty point {start.point}")
    if visited is None:
        visited = set()
    if start.point in visited:
        return False, set()

    color = start.stone
    group = {start}
    visited.add(start.point)
    stack = [start]
    while stack:
        cell = stack.pop()
        for nr, nc in grid.neighbors(cell.row, cell.col):
            adjacent = grid.cell_at(nr, nc)
            if adjacent.is_empty():
                return False, group
            if adjacent.stone == color and adjacent not in group:
                group.add(adjacent)
                visited.add(adjacent.point)
                stack.append(adjacent)
    return True, group
