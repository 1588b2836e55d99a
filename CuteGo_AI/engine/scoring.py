"""Area scoring (Chinese rules) and the static win-rate estimate built on it."""

import math
from collections import deque

from ..Board import BLACK, WHITE, EMPTY
from .groups import get_all_groups, neighbors

KOMI = 7.5

ATARI_PENALTY = 1.5       # per stone of a group with one liberty
SHORT_PENALTY = 0.5       # per stone of a group with two liberties
SAFE_GROUP_BONUS = 2.0    # flat, group with five or more liberties
SAFE_LIBERTIES = 5
INFLUENCE_BONUS = 0.2     # per stone close to the centre
INFLUENCE_RADIUS = 0.6    # normalised Manhattan distance
K_EMPTY = 0.08
K_FULL = 0.35


def calculate_score(board, komi=KOMI):
    """Return {'black': .., 'white': ..}: stones + single-colour empty regions, komi to White."""
    size = board.size
    cells = board.cells
    black = 0
    white = 0
    visited = set()

    for y in range(size):
        for x in range(size):
            if (x, y) in visited:
                continue
            val = cells[y][x]
            if val == BLACK:
                black += 1
                continue
            if val == WHITE:
                white += 1
                continue

            region = 0
            touches_black = False
            touches_white = False
            visited.add((x, y))
            queue = deque([(x, y)])
            while queue:
                px, py = queue.popleft()
                region += 1
                for nx, ny in neighbors(px, py, size):
                    nval = cells[ny][nx]
                    if nval == BLACK:
                        touches_black = True
                    elif nval == WHITE:
                        touches_white = True
                    elif (nx, ny) not in visited:
                        visited.add((nx, ny))
                        queue.append((nx, ny))

            if touches_black and not touches_white:
                black += region
            elif touches_white and not touches_black:
                white += region

    return {"black": black, "white": white + komi}


def heuristic_scores(board, komi=KOMI):
    """Territory score adjusted for group safety and centre influence."""
    score = calculate_score(board, komi)
    totals = {BLACK: float(score["black"]), WHITE: float(score["white"])}

    for group in get_all_groups(board):
        libs = group.liberties
        if libs == 1:
            totals[group.color] -= len(group) * ATARI_PENALTY
        elif libs == 2:
            totals[group.color] -= len(group) * SHORT_PENALTY
        elif libs >= SAFE_LIBERTIES:
            totals[group.color] += SAFE_GROUP_BONUS

    center = (board.size - 1) / 2.0
    max_dist = 2 * center if center > 0 else 1.0
    for x, y, color in board.stones():
        dist = (abs(x - center) + abs(y - center)) / max_dist
        if dist < INFLUENCE_RADIUS:
            totals[color] += INFLUENCE_BONUS

    return {"black": totals[BLACK], "white": totals[WHITE]}


def score_difference(board, color, komi=KOMI):
    """Heuristic lead of `color` over its opponent."""
    scores = heuristic_scores(board, komi)
    diff = scores["black"] - scores["white"]
    return diff if color == BLACK else -diff


def logistic_slope(fill_ratio):
    return K_EMPTY + (K_FULL - K_EMPTY) * fill_ratio * fill_ratio


def calculate_win_rate(board, komi=KOMI):
    """Black's estimated win rate in [0, 100]; steeper as the board fills."""
    diff = score_difference(board, BLACK, komi)
    k = logistic_slope(board.fill_ratio())
    z = -k * diff
    # exp overflow guard for absurd komi values
    if z > 700:
        return 0.0
    return 100.0 / (1.0 + math.exp(z))
