"""
Heuristic Go player: one-ply move scoring with a single-reply lookahead.

Each legal candidate near the existing stones is scored for captures, ataris,
own-group safety, local shape and board position. On Medium/Hard the best
opponent answer to the candidate is subtracted. The AI skips its own simple
eyes, passes late in the game when nothing scores positively, and resigns when
clearly behind.
"""

import random

from ..Board import GO, opponent
from ..engine.groups import get_group, neighbors
from ..engine.rules import attempt_move
from ..engine.scoring import KOMI, score_difference
from . import move_selector
from .difficulty import EASY, MEDIUM, HARD, normalize_difficulty

RESIGN = "RESIGN"

CAPTURE_BASE = 2000
CAPTURE_PER_STONE = 150
ATARI_BONUS = 800
SELF_ATARI_PENALTY = 800
SAFE_LIBERTY_BONUS = 100
SHAPE_WEIGHT = 2
TIGER_MOUTH_BONUS = 15
CUT_BONUS = 10

REPLY_CAPTURE_BASE = 5000
REPLY_CAPTURE_PER_STONE = 100
REPLY_ATARI = 1200

NOISE = {EASY: 150.0, MEDIUM: 20.0, HARD: 0.0}
EASY_POOL = 5

RESIGN_MIN_FILL = 0.3
RESIGN_DEFICIT = 50
RESIGN_LATE_DEFICIT = 35
LATE_FILL = 0.6

DIAGONALS = [(-1, -1), (1, -1), (-1, 1), (1, 1)]


def is_simple_eye(board, x, y, color):
    """
    Empty point whose orthogonal neighbours are all `color` and at least three
    of whose four diagonals are `color` or off the board.
    """
    if not board.is_empty(x, y):
        return False
    for nx, ny in neighbors(x, y, board.size):
        if board.cells[ny][nx] != color:
            return False
    friendly = 0
    for dx, dy in DIAGONALS:
        nx, ny = x + dx, y + dy
        if not board.in_bounds(nx, ny) or board.cells[ny][nx] == color:
            friendly += 1
    return friendly >= 3


def shape_bonus(board, x, y, color):
    bonus = 0
    opp = opponent(color)
    for dx, dy in DIAGONALS:
        nx, ny = x + dx, y + dy
        if not board.in_bounds(nx, ny) or board.cells[ny][nx] != color:
            continue
        # diagonal link that the opponent has not already cut
        if board.cells[y][nx] != opp and board.cells[ny][x] != opp:
            bonus += TIGER_MOUTH_BONUS
    adjacent_opp = sum(1 for nx, ny in neighbors(x, y, board.size) if board.cells[ny][nx] == opp)
    if adjacent_opp >= 2:
        bonus += CUT_BONUS
    return bonus


def position_bonus(size, x, y):
    line = min(x, y, size - 1 - x, size - 1 - y) + 1
    if size >= 13:
        if line in (3, 4):
            return 40
        if line == 2:
            return -15
        if line == 1:
            return -40
        return 0
    if line == 1:
        return -20
    if line == 3:
        return 10
    return 0


def evaluate_move(board, result, x, y, color):
    """Single-ply value of `color` playing (x, y); `result` is the engine outcome."""
    new_board = result.board
    opp = opponent(color)
    score = 0

    if result.captured:
        score += CAPTURE_BASE + CAPTURE_PER_STONE * result.captured

    seen = set()
    for nx, ny in neighbors(x, y, board.size):
        if new_board.cells[ny][nx] != opp or (nx, ny) in seen:
            continue
        group = get_group(new_board, (nx, ny))
        seen.update(group.stones)
        if group.liberties == 1 and get_group(board, (nx, ny)).liberties > 1:
            score += ATARI_BONUS

    own = get_group(new_board, (x, y))
    if own.liberties == 1:
        score -= SELF_ATARI_PENALTY
    elif own.liberties >= 3:
        score += SAFE_LIBERTY_BONUS

    score += SHAPE_WEIGHT * shape_bonus(board, x, y, color)
    score += position_bonus(board.size, x, y)
    return score


def best_reply_score(board_before, board_after, color):
    """
    Value of the opponent's strongest answer: capturing mover stones, or putting
    a mover group into atari. Only liberties of short mover groups can do either.
    """
    opp = opponent(color)
    ko_fingerprint = board_before.fingerprint()
    replies = set()
    for x, y, stone in board_after.stones():
        if stone != color:
            continue
        group = get_group(board_after, (x, y))
        if group.liberties <= 2:
            replies.update(group.liberty_points)

    best = 0
    for px, py in replies:
        reply = attempt_move(board_after, px, py, opp, GO, ko_fingerprint)
        if reply is None:
            continue
        if reply.captured:
            value = REPLY_CAPTURE_BASE + REPLY_CAPTURE_PER_STONE * reply.captured
        else:
            value = 0
            for nx, ny in neighbors(px, py, board_after.size):
                if reply.board.cells[ny][nx] == color and get_group(reply.board, (nx, ny)).liberties == 1:
                    value = REPLY_ATARI
                    break
        best = max(best, value)
    return best


def should_resign(board, color, level, komi=KOMI):
    if level == EASY:
        return False
    fill = board.fill_ratio()
    if fill <= RESIGN_MIN_FILL:
        return False
    lead = score_difference(board, color, komi)
    return lead < -RESIGN_DEFICIT or (lead < -RESIGN_LATE_DEFICIT and fill > LATE_FILL)


def score_candidates(board, color, level, previous_fingerprint=None, candidate_range=move_selector.DEFAULT_RANGE, rng=None):
    """Return [(score, (x, y))] for every legal, non-eye-filling candidate, best first."""
    rng = rng or random
    noise = NOISE[level]
    scored = []
    for x, y in move_selector.get_candidate_moves(board, board.size, candidate_range):
        if is_simple_eye(board, x, y, color):
            continue
        result = attempt_move(board, x, y, color, GO, previous_fingerprint)
        if result is None:
            continue
        score = evaluate_move(board, result, x, y, color)
        if level in (MEDIUM, HARD):
            score -= best_reply_score(board, result.board, color)
        if noise:
            score += rng.uniform(0, noise)
        scored.append((score, (x, y)))
    scored.sort(key=lambda item: (-item[0], item[1][1], item[1][0]))
    return scored


def choose_move(board, color, difficulty=MEDIUM, previous_fingerprint=None, komi=KOMI, candidate_range=move_selector.DEFAULT_RANGE, rng=None, rank_table=None):
    """
    Return a point, None (pass) or RESIGN. The board is never modified.
    """
    rng = rng or random
    level = normalize_difficulty(difficulty, rank_table)

    if should_resign(board, color, level, komi):
        return RESIGN

    scored = score_candidates(board, color, level, previous_fingerprint, candidate_range, rng)
    if not scored:
        return None

    best_score, best_move = scored[0]
    if best_score <= 0 and board.fill_ratio() > LATE_FILL:
        return None

    if level == EASY:
        return rng.choice(scored[:EASY_POOL])[1]
    return best_move
