"""Terminal rendering of the board and game status."""

from ..Board import BLACK, WHITE

STONES = {BLACK: "X", WHITE: "O", 0: "."}
LAST_MARK = {BLACK: "x", WHITE: "o"}


def render_text(game):
    """ASCII board: column numbers on top, row numbers on the left, last move in lower case."""
    size = game.size
    width = len(str(size - 1))
    lines = [" " * (width + 1) + " ".join(str(x % 10) for x in range(size))]
    for y in range(size):
        cells = []
        for x in range(size):
            val = game.board.cells[y][x]
            if game.last_move == (x, y) and val in LAST_MARK:
                cells.append(LAST_MARK[val])
            else:
                cells.append(STONES[val])
        lines.append(str(y).rjust(width) + " " + " ".join(cells))

    status = f"{game.rule_set} | captures B {game.captures[BLACK]} W {game.captures[WHITE]}"
    if game.game_over:
        status += f" | game over: {game.win_reason}"
    else:
        status += f" | to move: {'Black (X)' if game.current_player == BLACK else 'White (O)'}"
    lines.append(status)
    return "\n".join(lines)


class AsciiView:
    def __init__(self, output=print):
        self.output = output

    def render(self, game):
        self.output(render_text(game))
