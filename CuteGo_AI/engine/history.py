"""History entries recorded by the game session after every move or pass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryEntry:
    """
    board: the board before the action (restored by undo, used for ko).
    next_player: side to move after the action; the mover is its opponent.
    black_captures / white_captures: running totals after the action.
    last_move: the point played, or None for a pass.
    consecutive_passes: pass streak after the action.
    """

    board: object
    next_player: int
    black_captures: int
    white_captures: int
    last_move: tuple | None
    consecutive_passes: int

    @property
    def mover(self):
        return -self.next_player

    @property
    def is_pass(self):
        return self.last_move is None
