"""Move legality for Go (capture, suicide, simple ko) and Gomoku, plus five-in-a-row detection."""

from dataclasses import dataclass

from ..Board import EMPTY, GO, GOMOKU, opponent
from .groups import get_group, neighbors


@dataclass
class MoveResult:
    board: object
    captured: int = 0


def board_fingerprint(board):
    return board.fingerprint()


def attempt_move(board, x, y, color, rule_set=GO, previous_fingerprint=None):
    """
    Try to play `color` at (x, y). Returns a MoveResult holding a new board,
    or None when the move is illegal. The input board is never modified.
    """
    if not board.in_bounds(x, y) or board.cells[y][x] != EMPTY:
        return None

    next_board = board.clone()
    next_board.cells[y][x] = color

    if rule_set == GOMOKU:
        return MoveResult(next_board, 0)

    # Captures are resolved before the mover's own liberties are looked at.
    captured = 0
    opp = opponent(color)
    for nx, ny in neighbors(x, y, board.size):
        if next_board.cells[ny][nx] != opp:
            continue
        group = get_group(next_board, (nx, ny))
        if group.liberties == 0:
            for sx, sy in group.stones:
                next_board.cells[sy][sx] = EMPTY
            captured += len(group.stones)

    if captured == 0 and get_group(next_board, (x, y)).liberties == 0:
        return None

    if previous_fingerprint and next_board.fingerprint() == previous_fingerprint:
        return None

    return MoveResult(next_board, captured)


def is_legal(board, x, y, color, rule_set=GO, previous_fingerprint=None):
    return attempt_move(board, x, y, color, rule_set, previous_fingerprint) is not None


def check_win(board, last_move):
    """Five or more in a row through `last_move` for the stone sitting there."""
    if last_move is None:
        return False
    x, y = last_move
    if not board.in_bounds(x, y):
        return False
    return board.has_five_or_more(x, y)
