"""Compact game snapshot: base64-encoded JSON of board cells, turn, rule set and captures."""

import base64
import binascii
import json
from dataclasses import dataclass

from ..Board import Board, BLACK, RULE_SETS, CELL_CODES, CODE_CELLS, color_from_name, color_name


@dataclass
class Snapshot:
    board: Board
    current_player: int
    rule_set: str
    black_captures: int = 0
    white_captures: int = 0

    @property
    def size(self):
        return self.board.size


def serialize_game(board, current_player=BLACK, rule_set="Go", black_captures=0, white_captures=0):
    payload = {
        "board": [[CELL_CODES[v] for v in row] for row in board.cells],
        "size": board.size,
        "turn": color_name(current_player),
        "type": rule_set,
        "bCaps": int(black_captures),
        "wCaps": int(white_captures),
    }
    raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def deserialize_game(text):
    """Decode a snapshot string; None if it is malformed or inconsistent."""
    if not isinstance(text, str):
        return None
    try:
        raw = base64.b64decode(text.strip(), validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None

    size = data.get("size")
    grid = data.get("board")
    turn = color_from_name(data.get("turn"))
    rule_set = data.get("type")
    b_caps = data.get("bCaps", 0)
    w_caps = data.get("wCaps", 0)

    if not isinstance(size, int) or isinstance(size, bool) or size < 1:
        return None
    if not isinstance(grid, list) or len(grid) != size:
        return None
    if turn is None or rule_set not in RULE_SETS:
        return None
    if not all(isinstance(c, int) and not isinstance(c, bool) and c >= 0 for c in (b_caps, w_caps)):
        return None

    board = Board(size)
    for y, row in enumerate(grid):
        if isinstance(row, str):
            row = list(row)
        if not isinstance(row, list) or len(row) != size:
            return None
        for x, code in enumerate(row):
            if not isinstance(code, str) or code not in CODE_CELLS:
                return None
            board.cells[y][x] = CODE_CELLS[code]

    return Snapshot(board=board, current_player=turn, rule_set=rule_set, black_captures=b_caps, white_captures=w_caps)
