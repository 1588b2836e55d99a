"""Area scoring, heuristic adjustments and the win-rate estimate."""

import pytest

from CuteGo_AI.Board import Board, BLACK, WHITE
from CuteGo_AI.engine import scoring


def test_single_stone_owns_the_board():
    b = Board(size=9)
    b.place(4, 4, BLACK)
    assert scoring.calculate_score(b) == {"black": 81, "white": 7.5}


def test_empty_board_is_komi_only():
    assert scoring.calculate_score(Board(size=9)) == {"black": 0, "white": 7.5}


def test_regions_touching_both_colors_are_neutral():
    b = Board(size=5)
    for y in range(5):
        b.place(1, y, BLACK)
        b.place(3, y, WHITE)
    score = scoring.calculate_score(b, komi=0.5)
    assert score == {"black": 10, "white": 10.5}


def test_score_is_idempotent():
    b = Board(size=9)
    b.place(2, 2, BLACK)
    b.place(6, 6, WHITE)
    before = [row[:] for row in b.cells]
    assert scoring.calculate_score(b) == scoring.calculate_score(b)
    assert b.cells == before


def test_heuristic_penalises_short_groups():
    b = Board(size=5)
    b.place(0, 0, BLACK)   # one liberty
    b.place(1, 0, WHITE)   # two liberties
    assert scoring.heuristic_scores(b) == {"black": -0.5, "white": 8.0}


def test_logistic_slope_bounds():
    assert scoring.logistic_slope(0.0) == pytest.approx(0.08)
    assert scoring.logistic_slope(1.0) == pytest.approx(0.35)


def test_win_rate_is_even_without_komi_on_empty_board():
    assert scoring.calculate_win_rate(Board(size=9), komi=0) == pytest.approx(50.0)
    assert scoring.calculate_win_rate(Board(size=9)) < 50.0


def test_win_rate_grows_with_advantage_at_fixed_fill():
    b = Board(size=9)
    b.place(4, 4, BLACK)
    b.place(0, 0, WHITE)
    strong = scoring.calculate_win_rate(b)

    c = Board(size=9)
    c.place(0, 8, BLACK)
    c.place(4, 4, WHITE)
    weak = scoring.calculate_win_rate(c)

    assert 0.0 <= weak < strong <= 100.0
    # lower komi never hurts Black
    assert scoring.calculate_win_rate(b, komi=0.5) >= strong
