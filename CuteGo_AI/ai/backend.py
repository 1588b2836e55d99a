"""Request/response contract for an external neural-network move engine (not implemented here)."""

from dataclasses import dataclass, field

from ..Board import color_name
from .difficulty import visit_budget


@dataclass
class BackendRequest:
    board: list              # row strings of 'B'/'W'/'.'
    history: list            # [(x, y) or None for a pass, ...]
    color: str               # side to move, 'black' or 'white'
    size: int
    visits: int

    def to_payload(self):
        return {
            "board": list(self.board),
            "history": [list(mv) if mv is not None else None for mv in self.history],
            "color": self.color,
            "size": self.size,
            "simulations": self.visits,
        }


@dataclass
class BackendResponse:
    move: tuple | None = None
    win_rate: float = 50.0
    resign: bool = False
    extra: dict = field(default_factory=dict)


def build_request(game, difficulty, custom_visits=None, rank_table=None):
    return BackendRequest(
        board=game.board.to_rows(),
        history=[entry.last_move for entry in game.history],
        color=color_name(game.current_player),
        size=game.size,
        visits=visit_budget(difficulty, custom_visits, rank_table),
    )


def parse_response(message):
    """
    Turn a backend message into a BackendResponse; None for anything malformed.
    Accepted shapes: {'type': 'ai-response', 'data': {'move': {'x','y'}|None, 'winRate'}}
    and {'type': 'ai-resign', 'data': {'winRate'}}.
    """
    if not isinstance(message, dict):
        return None
    kind = message.get("type")
    data = message.get("data") or {}
    if not isinstance(data, dict):
        return None
    try:
        win_rate = float(data.get("winRate", 50.0))
    except (TypeError, ValueError):
        return None

    if kind == "ai-resign":
        return BackendResponse(move=None, win_rate=win_rate, resign=True)
    if kind != "ai-response":
        return None

    raw = data.get("move")
    if raw is None:
        return BackendResponse(move=None, win_rate=win_rate)
    try:
        move = (int(raw["x"]), int(raw["y"]))
    except (KeyError, TypeError, ValueError):
        return None
    extra = {k: v for k, v in data.items() if k not in ("move", "winRate")}
    return BackendResponse(move=move, win_rate=win_rate, extra=extra)
