"""Board state container: a square grid of empty/black/white intersections."""

BLACK = -1
WHITE = 1
EMPTY = 0

GO = "Go"
GOMOKU = "Gomoku"
RULE_SETS = (GO, GOMOKU)

CELL_CODES = {BLACK: "B", WHITE: "W", EMPTY: "."}
CODE_CELLS = {v: k for k, v in CELL_CODES.items()}


def opponent(color):
    return -color


def color_name(color):
    return "black" if color == BLACK else "white"


def color_from_name(name):
    """Map 'black'/'white' (or 'B'/'W') to a color value; None if unknown."""
    if not isinstance(name, str):
        return None
    key = name.strip().lower()
    if key in ("black", "b"):
        return BLACK
    if key in ("white", "w"):
        return WHITE
    return None


class Board:
    def __init__(self, size=9):
        # Store cells as -1 (black), 0 (empty), 1 (white)
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows):
        """Build a board from row strings of 'B'/'W'/'.' codes."""
        board = cls(len(rows))
        for y, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError("rows must form a square grid")
            for x, ch in enumerate(row):
                if ch not in CODE_CELLS:
                    raise ValueError(f"unknown cell code {ch!r}")
                board.cells[y][x] = CODE_CELLS[ch]
        return board

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == EMPTY

    def get(self, x, y):
        return self.cells[y][x]

    def place(self, x, y, color):
        """Place a stone for position setup; raise if out of bounds or occupied."""
        if color not in (BLACK, WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        if not self.in_bounds(x, y):
            raise ValueError("move out of bounds")
        if self.cells[y][x] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[y][x] = color

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    def _push_stone(self, x, y, color):
        """Scratch placement for search; callers must pair with _pop_stone."""
        self.cells[y][x] = color

    def _pop_stone(self, x, y):
        self.cells[y][x] = EMPTY

    def stones(self):
        """Yield (x, y, color) for every occupied intersection."""
        for y in range(self.size):
            row = self.cells[y]
            for x in range(self.size):
                if row[x] != EMPTY:
                    yield x, y, row[x]

    def empty_points(self):
        return [(x, y) for y in range(self.size) for x in range(self.size) if self.cells[y][x] == EMPTY]

    def stone_count(self):
        return sum(1 for row in self.cells for v in row if v != EMPTY)

    def is_board_empty(self):
        return all(v == EMPTY for row in self.cells for v in row)

    def fill_ratio(self):
        return self.stone_count() / float(self.size * self.size)

    def has_five_or_more(self, x, y):
        """Check for 5+ in any direction through (x, y)."""
        return self.max_line_length(x, y) >= 5

    def max_line_length(self, x, y):
        """Return the maximum contiguous line length through (x, y)."""
        color = self.cells[y][x]
        if color not in (BLACK, WHITE):
            return 0
        directions = [(1, 0), (0, 1), (1, 1), (1, -1)]
        best = 0
        for dx, dy in directions:
            forward = self._count_dir(x, y, dx, dy, color)
            backward = self._count_dir(x, y, -dx, -dy, color)
            best = max(best, 1 + forward + backward)
        return best

    def _count_dir(self, x, y, dx, dy, color):
        """Count contiguous stones of color from (x,y) (exclusive) in (dx,dy)."""
        count = 0
        cx, cy = x + dx, y + dy
        while self.in_bounds(cx, cy) and self.cells[cy][cx] == color:
            count += 1
            cx += dx
            cy += dy
        return count

    def fingerprint(self):
        """One character per cell, row-major: 'B', 'W' or '.'."""
        return "".join(CELL_CODES[v] for row in self.cells for v in row)

    def to_rows(self):
        return ["".join(CELL_CODES[v] for v in row) for row in self.cells]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self):
        return f"Board(size={self.size}, stones={self.stone_count()})"
