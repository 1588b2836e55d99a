"""Gomoku search: immediate win/block, then fixed-depth alpha-beta over the best candidates."""

import time

from . import heuristic
from . import move_selector
from .difficulty import EASY, MEDIUM, HARD, normalize_difficulty


INF = float("inf")
WIN_SCORE = 10 ** 9
CENTER_WEIGHT = 0.1

# difficulty -> (search depth, root candidates kept)
SEARCH_PROFILES = {
    EASY: (2, 4),
    MEDIUM: (3, 6),
    HARD: (4, 8),
}
WIDE_BEAM = 12   # plies with 3+ levels left below them
NARROW_BEAM = 8


class MinimaxSearcher:
    """Alpha-beta search for one side, with per-search node counting."""

    def __init__(self, board_size, color, depth, top_k, patterns=None, candidate_range=move_selector.DEFAULT_RANGE, stats=None):
        self.board_size = board_size
        self.color = color
        self.depth = depth
        self.top_k = top_k
        self.patterns = patterns or heuristic.DEFAULT_PATTERNS
        self.candidate_range = candidate_range
        self.stats_list = stats

        # reset by every choose_move call
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """Return the best point for self.color. The caller's board is not modified."""
        self.start_time = time.time()
        self.node_counter = 0
        center = self.board_size // 2
        if board.is_board_empty():
            return (center, center)

        work = board.clone()
        candidates = self._candidates(work)
        if not candidates:
            return None

        # a five now, or the opponent's five next turn, settles it without searching
        win_move = self._find_immediate_win(work, candidates, self.color)
        if win_move is not None:
            return win_move
        block_move = self._find_immediate_win(work, candidates, -self.color)
        if block_move is not None:
            return block_move

        ranked = self._order_moves(work, candidates, self.color)[: self.top_k]
        root_score = heuristic.score_board(work, self.color, patterns=self.patterns)

        best_move = ranked[0]
        best_score = -INF
        alpha = -INF
        for move in ranked:
            x, y = move
            work._push_stone(x, y, self.color)
            try:
                new_score = heuristic.update_score_after_move(
                    work, x, y, self.color, self.color, root_score, patterns=self.patterns
                )
                score = self._minimax(work, -self.color, self.depth - 1, alpha, INF, new_score, move)
            finally:
                work._pop_stone(x, y)

            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)

        if self.stats_list is not None:
            self._record_stats()
        return best_move

    def _candidates(self, board):
        return move_selector.get_candidate_moves(board, self.board_size, self.candidate_range)

    def _find_immediate_win(self, board, candidates, color):
        for x, y in candidates:
            if heuristic.evaluate_point(board, x, y, color, self.patterns) >= heuristic.WIN:
                return (x, y)
        return None

    def _minimax(self, board, node_color, depth, alpha, beta, current_score, last_move):
        self.node_counter += 1

        # The stone just played belongs to the other side.
        lx, ly = last_move
        if board.has_five_or_more(lx, ly):
            return WIN_SCORE if -node_color == self.color else -WIN_SCORE

        if depth == 0:
            return current_score

        candidates = self._candidates(board)
        if not candidates:
            return current_score  # board full
        beam = WIDE_BEAM if depth >= 3 else NARROW_BEAM
        ordered_moves = self._order_moves(board, candidates, node_color)[:beam]

        maximizing = node_color == self.color
        best_score = -INF if maximizing else INF
        for move in ordered_moves:
            x, y = move
            board._push_stone(x, y, node_color)
            try:
                new_score = heuristic.update_score_after_move(
                    board, x, y, node_color, self.color, current_score, patterns=self.patterns
                )
                score = self._minimax(board, -node_color, depth - 1, alpha, beta, new_score, move)
            finally:
                board._pop_stone(x, y)

            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return best_score

    def _order_moves(self, board, candidates, node_color):
        """Candidates sorted by attack + 0.9 * defense, nearer the centre first on ties."""
        center = (self.board_size - 1) / 2.0
        scored = []
        for x, y in candidates:
            score = heuristic.combined_score(board, x, y, node_color, self.patterns)
            score += CENTER_WEIGHT * (self.board_size - abs(x - center) - abs(y - center))
            scored.append((score, (x, y)))
        scored.sort(key=lambda item: (-item[0], item[1][1], item[1][0]))
        return [move for _, move in scored]

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, color, difficulty=MEDIUM, patterns=None, candidate_range=move_selector.DEFAULT_RANGE, stats=None, rank_table=None):
    """Best Gomoku point for `color` at the given difficulty, or None on a full board."""
    level = normalize_difficulty(difficulty, rank_table)
    depth, top_k = SEARCH_PROFILES[level]
    searcher = MinimaxSearcher(
        board_size=board.size,
        color=color,
        depth=depth,
        top_k=top_k,
        patterns=patterns,
        candidate_range=candidate_range,
        stats=stats,
    )
    return searcher.choose_move(board)
