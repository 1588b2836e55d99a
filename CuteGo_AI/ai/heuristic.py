"""Pattern and weight definitions for Gomoku evaluation (open threes, fours, etc.)."""

import yaml

from ..Board import EMPTY
from ..settings import resolve_project_path

# Shape weights, one order of magnitude apart.
FIVE = 10_000_000
OPEN_FOUR = 1_000_000
FOUR = 100_000          # closed or broken four
OPEN_THREE = 10_000
THREE = 1_000           # closed three
OPEN_TWO = 100
TWO = 10                # closed two

WIN = FIVE
DEFENSE_WEIGHT = 0.9

# '1' = own stone, '0' = empty, '2' = opponent stone or board edge.
# Default patterns; can be overridden by loading config/patterns.yaml if desired.
DEFAULT_PATTERNS = [
    ("11111", FIVE),
    ("011110", OPEN_FOUR),
    ("211110", FOUR),
    ("011112", FOUR),
    ("10111", FOUR),
    ("11011", FOUR),
    ("11101", FOUR),
    ("01110", OPEN_THREE),
    ("010110", OPEN_THREE),
    ("011010", OPEN_THREE),
    ("211100", THREE),
    ("001112", THREE),
    ("211010", THREE),
    ("010112", THREE),
    ("210110", THREE),
    ("011012", THREE),
    ("10011", THREE),
    ("11001", THREE),
    ("10101", THREE),
    ("001100", OPEN_TWO),
    ("01010", OPEN_TWO),
    ("010010", OPEN_TWO),
    ("211000", TWO),
    ("000112", TWO),
    ("210100", TWO),
    ("001012", TWO),
]

DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]
WINDOW_RADIUS = 5
MIN_LINE = 5


def load_patterns(path="config/patterns.yaml"):
    """Pattern weights from YAML, highest first; built-in defaults if the file is missing or unreadable."""
    try:
        with open(resolve_project_path(path), "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (FileNotFoundError, yaml.YAMLError):
        return DEFAULT_PATTERNS

    entries = data.get("patterns") if isinstance(data, dict) else None
    loaded = []
    for entry in entries or []:
        if not isinstance(entry, dict) or not entry.get("pattern"):
            continue
        shapes = entry["pattern"]
        if not isinstance(shapes, list):
            shapes = [shapes]
        loaded.extend((str(shape), entry.get("score", 0)) for shape in shapes)
    if not loaded:
        return DEFAULT_PATTERNS
    # point evaluation stops at the first (heaviest) match
    return sorted(loaded, key=lambda item: item[1], reverse=True)


def _encode(values, color):
    """Cells as a pattern string from `color`'s side, both ends closed with '2'."""
    codes = {color: "1", -color: "2", EMPTY: "0"}
    return "2" + "".join(codes[v] for v in values) + "2"


def _pattern_total(text, patterns):
    return sum(text.count(pat) * val for pat, val in patterns)


def score_lines(lines, color, patterns=None):
    """Own shapes minus the opponent's, summed over `lines`."""
    patterns = patterns or DEFAULT_PATTERNS
    total = 0
    for line in lines:
        total += _pattern_total(_encode(line, color), patterns)
        total -= _pattern_total(_encode(line, -color), patterns)
    return total


def _walk(board, x, y, dx, dy, override_at=None, override=None):
    values = []
    while board.in_bounds(x, y):
        values.append(override if (x, y) == override_at else board.cells[y][x])
        x += dx
        y += dy
    return values


def _all_lines(board):
    """Every full row, column and diagonal that can hold five stones."""
    size = board.size
    for dx, dy in DIRECTIONS:
        for y in range(size):
            for x in range(size):
                if board.in_bounds(x - dx, y - dy):
                    continue   # not the first cell of its line
                line = _walk(board, x, y, dx, dy)
                if len(line) >= MIN_LINE:
                    yield line


def lines_through(board, x, y, override=None):
    """Full lines through (x, y) on the four axes; with `override`, (x, y) reads as that value."""
    at = (x, y) if override is not None else None
    lines = []
    for dx, dy in DIRECTIONS:
        sx, sy = x, y
        while board.in_bounds(sx - dx, sy - dy):
            sx -= dx
            sy -= dy
        line = _walk(board, sx, sy, dx, dy, at, override)
        if len(line) >= MIN_LINE:
            lines.append(line)
    return lines


def score_board(board, color, patterns=None):
    """Pattern score of the whole board; positive favours `color`."""
    return score_lines(_all_lines(board), color, patterns)


def update_score_after_move(board, x, y, move_color, eval_color, prev_score, patterns=None):
    """
    Rescore only the four lines through a stone just placed at (x, y).
    The stone must already be on the board; scores are from eval_color's side.
    """
    after = score_lines(lines_through(board, x, y), eval_color, patterns)
    before = score_lines(lines_through(board, x, y, override=EMPTY), eval_color, patterns)
    return prev_score + after - before


def _window(board, x, y, dx, dy, color):
    """Cells along (dx, dy) centred on (x, y), with (x, y) treated as `color`."""
    chars = []
    cells = board.cells
    for i in range(-WINDOW_RADIUS, WINDOW_RADIUS + 1):
        cx, cy = x + dx * i, y + dy * i
        if i == 0:
            chars.append("1")
        elif not board.in_bounds(cx, cy):
            chars.append("2")
        else:
            v = cells[cy][cx]
            chars.append("0" if v == EMPTY else ("1" if v == color else "2"))
    return "".join(chars)


def _covers_center(window, pat):
    start = window.find(pat)
    while start != -1:
        if start <= WINDOW_RADIUS < start + len(pat):
            return True
        start = window.find(pat, start + 1)
    return False


def shape_score(window, patterns=None):
    """Weight of the strongest pattern in `window` that includes its centre cell."""
    if window.count("1") < 2:
        return 0
    for pat, val in patterns or DEFAULT_PATTERNS:
        if _covers_center(window, pat):
            return val
    return 0


def evaluate_point(board, x, y, color, patterns=None):
    """Shape value of `color` playing the empty point (x, y), summed over the four axes."""
    patterns = patterns or DEFAULT_PATTERNS
    return sum(shape_score(_window(board, x, y, dx, dy, color), patterns) for dx, dy in DIRECTIONS)


def combined_score(board, x, y, color, patterns=None):
    """Attack value for `color` plus the discounted value of denying the point to the opponent."""
    attack = evaluate_point(board, x, y, color, patterns)
    defense = evaluate_point(board, x, y, -color, patterns)
    return attack + DEFENSE_WEIGHT * defense
