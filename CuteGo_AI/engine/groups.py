"""Connected groups and liberties (4-neighbour flood fill)."""

from collections import deque
from dataclasses import dataclass, field

from ..Board import EMPTY


@dataclass
class Group:
    color: int
    stones: list = field(default_factory=list)
    liberty_points: list = field(default_factory=list)

    @property
    def liberties(self):
        return len(self.liberty_points)

    def __len__(self):
        return len(self.stones)


def neighbors(x, y, size):
    """Orthogonal neighbours of (x, y) that lie on a size x size board."""
    result = []
    if x > 0:
        result.append((x - 1, y))
    if x < size - 1:
        result.append((x + 1, y))
    if y > 0:
        result.append((x, y - 1))
    if y < size - 1:
        result.append((x, y + 1))
    return result


def get_group(board, start):
    """
    Breadth-first walk over same-colour stones from `start`.
    Returns None when `start` is empty.
    """
    x0, y0 = start
    color = board.cells[y0][x0]
    if color == EMPTY:
        return None

    size = board.size
    cells = board.cells
    visited = {start}
    liberties = set()
    stones = []
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        stones.append((x, y))
        for nx, ny in neighbors(x, y, size):
            val = cells[ny][nx]
            if val == EMPTY:
                liberties.add((nx, ny))
            elif val == color and (nx, ny) not in visited:
                visited.add((nx, ny))
                queue.append((nx, ny))

    return Group(color=color, stones=stones, liberty_points=sorted(liberties))


def get_all_groups(board):
    """Partition every stone on the board into its group (order unspecified)."""
    seen = set()
    groups = []
    for x, y, _ in board.stones():
        if (x, y) in seen:
            continue
        group = get_group(board, (x, y))
        seen.update(group.stones)
        groups.append(group)
    return groups
