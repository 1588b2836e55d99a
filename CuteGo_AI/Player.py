"""Abstract player interface for human or AI controllers."""

from .ai.go_ai import RESIGN

PASS = "PASS"
UNDO = "UNDO"

COMMANDS = {"pass": PASS, "resign": RESIGN, "undo": UNDO}


class Player:
    is_human = False

    def __init__(self, color):
        self.color = color

    def next_move(self, game):
        """Return (x, y), PASS, RESIGN or UNDO for the game's side to move."""
        raise NotImplementedError


def parse_command(raw):
    """'x y' -> (x, y); 'pass' / 'undo' / 'resign' -> the matching action."""
    text = raw.strip().lower()
    if text in COMMANDS:
        return COMMANDS[text]
    try:
        x_str, y_str = text.replace(",", " ").split()
        return int(x_str), int(y_str)
    except ValueError as exc:
        raise ValueError("Invalid input; expected 'x y', 'pass', 'undo' or 'resign'") from exc


class HumanPlayer(Player):
    """Text-input player; re-prompts until the line parses."""

    is_human = True

    def __init__(self, color, input_fn=input, output=print):
        super().__init__(color)
        self.input_fn = input_fn
        self.output = output

    def next_move(self, game):
        prompt = "Enter move as 'x y' (0-indexed), or pass / undo / resign: "
        while True:
            raw = self.input_fn(prompt)
            try:
                return parse_command(raw)
            except ValueError as exc:
                self.output(exc)
