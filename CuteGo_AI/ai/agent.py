"""Single entry point for AI moves under either rule set."""

from ..Board import GO, GOMOKU
from . import go_ai, search_minimax
from .difficulty import MEDIUM
from .go_ai import RESIGN
from .move_selector import DEFAULT_RANGE
from ..engine.scoring import KOMI


def get_ai_move(board, color, rule_set=GO, difficulty=MEDIUM, previous_fingerprint=None, **options):
    """
    Gomoku: a point (or None if the board is full).
    Go: a point, None for a pass, or RESIGN.
    """
    if rule_set == GOMOKU:
        return search_minimax.choose_move(
            board,
            color,
            difficulty=difficulty,
            patterns=options.get("patterns"),
            candidate_range=options.get("candidate_range", DEFAULT_RANGE),
            stats=options.get("stats"),
            rank_table=options.get("rank_table"),
        )
    return go_ai.choose_move(
        board,
        color,
        difficulty=difficulty,
        previous_fingerprint=previous_fingerprint,
        komi=options.get("komi", KOMI),
        candidate_range=options.get("candidate_range", DEFAULT_RANGE),
        rng=options.get("rng"),
        rank_table=options.get("rank_table"),
    )


__all__ = ["get_ai_move", "RESIGN"]
