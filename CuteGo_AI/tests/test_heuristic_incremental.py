"""Incremental heuristic update should match full recomputation; pattern loading and point values."""

from CuteGo_AI.Board import Board, BLACK, WHITE
from CuteGo_AI.ai import heuristic


def test_incremental_matches_full():
    b = Board(size=7)
    eval_color = BLACK
    base = heuristic.score_board(b, eval_color)

    b.place(3, 3, BLACK)
    full = heuristic.score_board(b, eval_color)
    inc = heuristic.update_score_after_move(
        b, 3, 3, BLACK, eval_color, base, patterns=heuristic.DEFAULT_PATTERNS
    )
    assert full == inc

    b.place(4, 4, WHITE)
    full2 = heuristic.score_board(b, eval_color)
    inc2 = heuristic.update_score_after_move(
        b, 4, 4, WHITE, eval_color, inc, patterns=heuristic.DEFAULT_PATTERNS
    )
    assert full2 == inc2

    b.place(4, 3, BLACK)
    full3 = heuristic.score_board(b, eval_color)
    inc3 = heuristic.update_score_after_move(
        b, 4, 3, BLACK, eval_color, inc2, patterns=heuristic.DEFAULT_PATTERNS
    )
    assert full3 == inc3


def test_point_values_follow_shape_weights():
    b = Board(size=15)
    for x in (7, 8, 9):
        b.place(x, 7, BLACK)
    # extending an open three gives an open four
    assert heuristic.evaluate_point(b, 6, 7, BLACK) == heuristic.OPEN_FOUR
    # completing four stones into five is a win
    b.place(10, 7, BLACK)
    assert heuristic.evaluate_point(b, 11, 7, BLACK) >= heuristic.WIN
    # a lone stone far from anything has no shape
    assert heuristic.evaluate_point(b, 0, 0, BLACK) == 0


def test_combined_score_weighs_defense():
    b = Board(size=15)
    for x in (7, 8, 9):
        b.place(x, 7, BLACK)
    attack = heuristic.evaluate_point(b, 6, 7, WHITE)
    defense = heuristic.evaluate_point(b, 6, 7, BLACK)
    assert heuristic.combined_score(b, 6, 7, WHITE) == attack + heuristic.DEFENSE_WEIGHT * defense


def test_load_patterns_from_package_config():
    patterns = heuristic.load_patterns()
    assert patterns[0] == ("11111", heuristic.FIVE)
    assert sorted(patterns) == sorted(heuristic.DEFAULT_PATTERNS)


def test_load_patterns_falls_back_on_missing_or_bad_file(tmp_path):
    assert heuristic.load_patterns(tmp_path / "missing.yaml") is heuristic.DEFAULT_PATTERNS
    bad = tmp_path / "bad.yaml"
    bad.write_text("patterns: [unclosed", encoding="utf-8")
    assert heuristic.load_patterns(bad) is heuristic.DEFAULT_PATTERNS


def test_load_patterns_custom_weights(tmp_path):
    custom = tmp_path / "patterns.yaml"
    custom.write_text(
        "patterns:\n"
        "  - pattern: '011'\n"
        "    score: 5\n"
        "  - pattern: ['11111', '011110']\n"
        "    score: 50\n",
        encoding="utf-8",
    )
    patterns = heuristic.load_patterns(custom)
    assert patterns == [("11111", 50), ("011110", 50), ("011", 5)]
