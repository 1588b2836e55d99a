"""Validation of externally supplied moves (human input, peer, neural backend)."""

from . import rules


def _coords(move):
    try:
        x, y = move
    except (TypeError, ValueError):
        return None
    if not isinstance(x, int) or not isinstance(y, int) or isinstance(x, bool) or isinstance(y, bool):
        return None
    return x, y


def check_move(move, board, color, rule_set, previous_fingerprint=None):
    """
    Validate a move against bounds, occupancy, suicide and ko.
    Returns the engine's MoveResult, or None when the move is rejected.
    """
    coords = _coords(move)
    if coords is None:
        return None
    return rules.attempt_move(board, coords[0], coords[1], color, rule_set, previous_fingerprint)


def rejection_reason(move, board, color, rule_set, previous_fingerprint=None):
    """Human-readable reason a move would be rejected, or None if it is legal."""
    coords = _coords(move)
    if coords is None:
        return "malformed move"
    x, y = coords
    if not board.in_bounds(x, y):
        return "move out of bounds"
    if not board.is_empty(x, y):
        return "cell already occupied"
    if rules.attempt_move(board, x, y, color, rule_set, None) is None:
        return "suicide"
    if rules.attempt_move(board, x, y, color, rule_set, previous_fingerprint) is None:
        return "ko: board position would repeat"
    return None
