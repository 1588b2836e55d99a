"""
SGF (Smart Game Format) export and import.

Export writes a single game tree: a root node with the header and setup
stones (AB/AW, plus PL[W] when White moves first), then one ;B[..] / ;W[..]
node per history entry. Passes are written as empty values. Coordinates use
'a' + index with no skipped letters.

Import follows the main line only, replays every move through the rules
engine to rebuild history and capture totals, and ignores properties it does
not use. Anything structurally broken, or a move the engine rejects, makes the
import return None.
"""

import datetime
import re
from dataclasses import dataclass, field

from ..Board import Board, BLACK, WHITE, GO, GOMOKU
from ..engine.history import HistoryEntry
from ..engine.rules import attempt_move
from ..engine.scoring import KOMI

GAME_TYPES = {GO: "1", GOMOKU: "4"}
MAX_SIZE = 26
DEFAULT_SIZE = 19

_TOKEN = re.compile(
    r"\s*(?:(?P<open>\()|(?P<close>\))|(?P<node>;)"
    r"|(?P<ident>[A-Za-z]+)(?P<values>(?:\s*\[(?:\\.|[^\]\\])*\])+))",
    re.S,
)
_VALUE = re.compile(r"\[((?:\\.|[^\]\\])*)\]", re.S)
_TRAILING_SPACE = re.compile(r"\s*\Z")


@dataclass
class SgfGame:
    board: Board
    initial_board: Board
    size: int
    komi: float
    rule_set: str
    current_player: int
    initial_stones: list = field(default_factory=list)   # [(x, y, color)]
    history: list = field(default_factory=list)          # [HistoryEntry]
    black_captures: int = 0
    white_captures: int = 0
    consecutive_passes: int = 0
    last_move: tuple | None = None
    black_name: str = ""
    white_name: str = ""
    date: str = ""


def encode_point(x, y):
    return chr(ord("a") + x) + chr(ord("a") + y)


def decode_point(value):
    """'cd' -> (2, 3); None for anything that is not two lowercase letters."""
    if len(value) != 2 or not value.isalpha() or not value.islower():
        return None
    return ord(value[0]) - ord("a"), ord(value[1]) - ord("a")


def _escape(text):
    return str(text).replace("\\", "\\\\").replace("]", "\\]")


def _unescape(text):
    return re.sub(r"\\(.)", r"\1", text, flags=re.S)


def generate_sgf(history, board_size, komi=KOMI, initial_stones=(), rule_set=GO,
                 black_name="Black", white_name="White", date=None, first_player=BLACK):
    """Serialise setup stones and the move history as an SGF game tree."""
    date = date or datetime.date.today().isoformat()
    parts = [
        "(;GM[{}]FF[4]CA[UTF-8]AP[CuteGo]".format(GAME_TYPES.get(rule_set, "1")),
        "SZ[{}]KM[{}]".format(board_size, komi),
        "DT[{}]PB[{}]PW[{}]".format(_escape(date), _escape(black_name), _escape(white_name)),
    ]

    black_setup = [encode_point(x, y) for x, y, color in initial_stones if color == BLACK]
    white_setup = [encode_point(x, y) for x, y, color in initial_stones if color == WHITE]
    if black_setup:
        parts.append("AB" + "".join("[{}]".format(p) for p in black_setup))
    if white_setup:
        parts.append("AW" + "".join("[{}]".format(p) for p in white_setup))
    if first_player == WHITE:
        parts.append("PL[W]")

    for entry in history:
        tag = "B" if entry.mover == BLACK else "W"
        coord = "" if entry.last_move is None else encode_point(*entry.last_move)
        parts.append("\n;{}[{}]".format(tag, coord))
    parts.append(")")
    return "".join(parts)


def _main_line_nodes(text):
    """Property dicts of the main-line nodes, or None if the text is not a valid game tree."""
    text = text.strip()
    if not text.startswith("(") or not text.endswith(")"):
        return None

    nodes = []
    branches = []   # per open level: has a child variation already been read?
    depth = 0
    skip_depth = 0
    pos = 0
    while pos < len(text):
        if _TRAILING_SPACE.match(text, pos):
            break
        match = _TOKEN.match(text, pos)
        if match is None:
            return None
        pos = match.end()

        if match.group("open"):
            depth += 1
            if skip_depth:
                continue
            if branches and branches[-1]:
                skip_depth = depth   # side variation
                continue
            branches.append(False)
        elif match.group("close"):
            if depth == 0:
                return None
            if skip_depth:
                if depth == skip_depth:
                    skip_depth = 0
                depth -= 1
                continue
            branches.pop()
            depth -= 1
            if branches:
                branches[-1] = True
            if depth == 0:
                break
        elif match.group("node"):
            if skip_depth:
                continue
            if depth == 0:
                return None
            nodes.append({})
        else:
            if skip_depth:
                continue
            if not nodes:
                return None
            values = [_unescape(v) for v in _VALUE.findall(match.group("values"))]
            nodes[-1].setdefault(match.group("ident").upper(), []).extend(values)

    if depth != 0 or not nodes:
        return None
    return nodes


def _expand_points(values, size):
    """AB/AW values, including 'aa:cc' rectangles. None on a bad coordinate."""
    points = []
    for value in values:
        if ":" in value:
            first, _, second = value.partition(":")
            a, b = decode_point(first), decode_point(second)
            if a is None or b is None:
                return None
            for y in range(min(a[1], b[1]), max(a[1], b[1]) + 1):
                for x in range(min(a[0], b[0]), max(a[0], b[0]) + 1):
                    points.append((x, y))
        else:
            point = decode_point(value)
            if point is None:
                return None
            points.append(point)
    if any(not (0 <= x < size and 0 <= y < size) for x, y in points):
        return None
    return points


def _first(props, key, default=""):
    values = props.get(key)
    return values[0] if values else default


def parse_sgf(text):
    """Rebuild a game from SGF text; None if the record is malformed or contains an illegal move."""
    if not isinstance(text, str):
        return None
    nodes = _main_line_nodes(text)
    if nodes is None:
        return None
    root = nodes[0]

    try:
        size = int(_first(root, "SZ").split(":")[0].strip() or DEFAULT_SIZE)
        # an empty KM[] means the default komi
        komi = float(_first(root, "KM").strip() or KOMI)
    except ValueError:
        return None
    if not 1 <= size <= MAX_SIZE:
        return None
    rule_set = GOMOKU if _first(root, "GM", "1").strip() == GAME_TYPES[GOMOKU] else GO

    board = Board(size)
    initial_stones = []
    for key, color in (("AB", BLACK), ("AW", WHITE)):
        points = _expand_points(root.get(key, []), size)
        if points is None:
            return None
        for x, y in points:
            if board.cells[y][x] != 0:
                return None
            board.cells[y][x] = color
            initial_stones.append((x, y, color))
    initial_board = board.clone()

    to_play = {"B": BLACK, "W": WHITE}.get(_first(root, "PL").upper(), BLACK)
    history = []
    captures = {BLACK: 0, WHITE: 0}
    passes = 0
    last_move = None
    previous_fingerprint = None

    for props in nodes:
        for key, color in (("B", BLACK), ("W", WHITE)):
            if key not in props:
                continue
            value = props[key][0].strip()
            before = board
            # 'tt' is the old pass notation on boards up to 19x19
            if value == "" or (value == "tt" and size <= 19):
                move = None
                passes += 1
            else:
                move = decode_point(value)
                if move is None:
                    return None
                result = attempt_move(board, move[0], move[1], color, rule_set, previous_fingerprint)
                if result is None:
                    return None
                board = result.board
                captures[color] += result.captured
                passes = 0
            history.append(HistoryEntry(
                board=before,
                next_player=-color,
                black_captures=captures[BLACK],
                white_captures=captures[WHITE],
                last_move=move,
                consecutive_passes=passes,
            ))
            previous_fingerprint = before.fingerprint()
            last_move = move
            to_play = -color

    return SgfGame(
        board=board,
        initial_board=initial_board,
        size=size,
        komi=komi,
        rule_set=rule_set,
        current_player=to_play,
        initial_stones=initial_stones,
        history=history,
        black_captures=captures[BLACK],
        white_captures=captures[WHITE],
        consecutive_passes=passes,
        last_move=last_move,
        black_name=_first(root, "PB"),
        white_name=_first(root, "PW"),
        date=_first(root, "DT"),
    )
