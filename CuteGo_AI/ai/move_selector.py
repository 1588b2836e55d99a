"""Candidate move generation (neighbourhood of existing stones, opening points on an empty board)."""

DEFAULT_RANGE = 2


def opening_points(size: int) -> list[tuple[int, int]]:
    """Centre, plus the four 4-4 points on boards of size 9 and up."""
    center = size // 2
    points = [(center, center)]
    if size >= 9:
        far = size - 4
        for corner in ((3, 3), (far, 3), (3, far), (far, far)):
            if corner not in points:
                points.append(corner)
    return points


def get_candidate_moves(board, size=None, radius=DEFAULT_RANGE):
    """
    Empty points within Chebyshev distance `radius` of any stone, in row-major order.
    - Empty board: canonical opening points.
    - Nothing nearby (degenerate full board): every empty point.
    """
    size = size or board.size
    cells = board.cells
    occupied = [(x, y) for y in range(size) for x in range(size) if cells[y][x] != 0]
    if not occupied:
        return opening_points(size)

    found = set()
    for ox, oy in occupied:
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                nx, ny = ox + dx, oy + dy
                if nx < 0 or nx >= size or ny < 0 or ny >= size:
                    continue
                if cells[ny][nx] != 0:
                    continue
                found.add((nx, ny))

    if not found:
        return [(x, y) for y in range(size) for x in range(size) if cells[y][x] == 0]
    return sorted(found, key=lambda p: (p[1], p[0]))
