"""CLI options for selecting players, board size, rule set, and config paths."""

MODES = ["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"]


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="CuteGo: Go and Gomoku against a heuristic AI")
    parser.add_argument("--board-size", type=int, help="Board size (9/13/19 for Go, 15 for Gomoku)")
    parser.add_argument("--rule-set", choices=["Go", "Gomoku"], default=None, help="Rule set (default from settings)")
    parser.add_argument("--difficulty", default=None, help="Easy / Medium / Hard, or a rank such as 12k or 2d")
    parser.add_argument("--komi", type=float, default=None, help="Komi added to White's score")
    parser.add_argument("--candidate-range", type=int, default=None, help="Neighbourhood radius for AI candidates")
    parser.add_argument("--mode", choices=MODES, default=None, help="Play mode (who plays black/white)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--patterns", default="config/patterns.yaml", help="Path to Gomoku pattern weights YAML")
    parser.add_argument("--import-sgf", default=None, help="Continue the game recorded in this SGF file")
    parser.add_argument("--export-sgf", default=None, help="Write the finished game to this SGF file")
    parser.add_argument("--max-moves", type=int, default=None, help="Stop and score after this many actions")
    return parser.parse_args(argv)
