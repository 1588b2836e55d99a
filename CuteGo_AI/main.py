"""Entry point for terminal Go/Gomoku games. Load config, wire players, start play_match."""

from pathlib import Path

from .AIPlayer import AIPlayer
from .Board import BLACK, WHITE, GO, GOMOKU, RULE_SETS
from .Game import GameState, play_match, DRAW
from .Player import HumanPlayer
from .ai import heuristic
from .gui.ascii_view import AsciiView
from .settings import load_settings
from .utils.cli import MODES, parse_args
from .utils.logger import log_event

# smallest and largest side per rule set; a Gomoku board must fit a five
BOARD_SIZES = {GO: (4, 19), GOMOKU: (5, 26)}


def _pick(cli_value, settings, key):
    return cli_value if cli_value is not None else settings[key]


def build_game(args, settings):
    if args.import_sgf:
        text = Path(args.import_sgf).read_text(encoding="utf-8")
        game = GameState.from_sgf(text, logger=log_event)
        if game is None:
            raise ValueError(f"Could not import SGF record: {args.import_sgf}")
        game.difficulty = _pick(args.difficulty, settings, "difficulty")
        return game

    rule_set = _pick(args.rule_set, settings, "rule_set")
    if rule_set not in RULE_SETS:
        raise ValueError(f"Unsupported rule set: {rule_set}")
    board_size = _pick(args.board_size, settings, "board_size")
    low, high = BOARD_SIZES[rule_set]
    if not isinstance(board_size, int) or not low <= board_size <= high:
        raise ValueError(f"Unsupported board size: {board_size}")

    game = GameState(
        size=board_size,
        rule_set=rule_set,
        komi=_pick(args.komi, settings, "komi"),
        difficulty=_pick(args.difficulty, settings, "difficulty"),
        logger=log_event,
    )
    game.black_name = settings["black_name"]
    game.white_name = settings["white_name"]
    return game


def build_players(mode, game, settings, patterns, candidate_range):
    def ai(color):
        return AIPlayer(
            color=color,
            difficulty=game.difficulty,
            patterns=patterns,
            candidate_range=candidate_range,
            rank_table=settings.get("ranks") or None,
        )

    if mode == "ai-vs-ai":
        return ai(BLACK), ai(WHITE)
    if mode == "human-vs-ai":
        return HumanPlayer(color=BLACK), ai(WHITE)
    if mode == "ai-vs-human":
        return ai(BLACK), HumanPlayer(color=WHITE)
    if mode == "human-vs-human":
        return HumanPlayer(color=BLACK), HumanPlayer(color=WHITE)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    mode = _pick(args.mode, settings, "mode")
    if mode not in MODES:
        raise ValueError(f"Unsupported mode: {mode}")
    candidate_range = _pick(args.candidate_range, settings, "candidate_range")
    patterns = heuristic.load_patterns(args.patterns)

    game = build_game(args, settings)
    black, white = build_players(mode, game, settings, patterns, candidate_range)
    view = AsciiView()

    try:
        result = play_match(black, white, game=game, renderer=view.render, logger=log_event, max_moves=args.max_moves)
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted")
        return None

    outcome = {BLACK: "Black wins", WHITE: "White wins", DRAW: "Draw"}
    print(f"{outcome.get(result, 'Unknown result')} ({game.win_reason})")
    if game.rule_set == GO:
        print(f"Black win rate estimate: {game.win_rate():.1f}%")

    if args.export_sgf:
        Path(args.export_sgf).write_text(game.to_sgf(), encoding="utf-8")
        log_event(f"Saved SGF to {args.export_sgf}")
    return result


if __name__ == "__main__":
    main()
