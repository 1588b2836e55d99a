"""Computer player: routes to the Go heuristic AI or the Gomoku searcher."""

from .Player import Player, PASS
from .ai import agent
from .ai.difficulty import MEDIUM
from .ai.move_selector import DEFAULT_RANGE


class AIPlayer(Player):
    def __init__(self, color, difficulty=MEDIUM, patterns=None, candidate_range=DEFAULT_RANGE, rank_table=None, rng=None, stats=None):
        super().__init__(color)
        self.difficulty = difficulty
        self.patterns = patterns
        self.candidate_range = candidate_range
        self.rank_table = rank_table
        self.rng = rng
        self.stats = stats

    def next_move(self, game):
        outcome = agent.get_ai_move(
            game.board,
            self.color,
            game.rule_set,
            self.difficulty,
            game.previous_fingerprint,
            patterns=self.patterns,
            candidate_range=self.candidate_range,
            stats=self.stats,
            rank_table=self.rank_table,
            komi=game.komi,
            rng=self.rng,
        )
        if outcome is None:
            return PASS
        return outcome
