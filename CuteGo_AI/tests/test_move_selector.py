"""Candidate generation around existing stones."""

from CuteGo_AI.Board import Board, BLACK
from CuteGo_AI.ai import move_selector


def test_empty_board_opening_points():
    assert move_selector.get_candidate_moves(Board(size=9)) == [(4, 4), (3, 3), (5, 3), (3, 5), (5, 5)]
    assert move_selector.get_candidate_moves(Board(size=5)) == [(2, 2)]


def test_neighbourhood_of_corner_stone():
    b = Board(size=9)
    b.place(0, 0, BLACK)
    moves = move_selector.get_candidate_moves(b)
    expected = [(x, y) for y in range(3) for x in range(3) if (x, y) != (0, 0)]
    assert moves == expected


def test_radius_is_a_square_neighbourhood():
    b = Board(size=9)
    b.place(4, 4, BLACK)
    assert len(move_selector.get_candidate_moves(b, radius=1)) == 8
    moves = move_selector.get_candidate_moves(b)
    assert len(moves) == 24
    assert (2, 2) in moves and (6, 6) in moves
    assert (4, 1) not in moves


def test_candidates_are_empty_and_unique():
    b = Board(size=9)
    for x, y in [(2, 2), (3, 2), (6, 6)]:
        b.place(x, y, BLACK)
    moves = move_selector.get_candidate_moves(b)
    assert len(moves) == len(set(moves))
    assert all(b.is_empty(x, y) for x, y in moves)
