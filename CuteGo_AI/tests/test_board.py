"""Sanity tests for Board line detection, placement validity and encoding."""

import pytest

from CuteGo_AI.Board import Board, BLACK, WHITE


def test_five_or_more_detected_but_four_is_not():
    b = Board(size=15)
    for x in range(3, 7):
        b.place(x, 5, BLACK)
    assert not b.has_five_or_more(6, 5)
    b.place(7, 5, BLACK)
    assert b.has_five_or_more(5, 5)
    # freestyle: an overline still counts
    b.place(8, 5, BLACK)
    assert b.has_five_or_more(8, 5)
    assert b.max_line_length(8, 5) == 6


def test_diagonal_five():
    b = Board(size=9)
    for i in range(5):
        b.place(i + 2, 6 - i, WHITE)
    assert b.has_five_or_more(4, 4)


def test_place_rejects_occupied_and_out_of_bounds():
    b = Board(size=9)
    b.place(4, 4, BLACK)
    with pytest.raises(ValueError):
        b.place(4, 4, WHITE)
    with pytest.raises(ValueError):
        b.place(9, 0, BLACK)
    with pytest.raises(ValueError):
        b.place(0, 0, 0)


def test_fingerprint_is_row_major():
    b = Board(size=3)
    b.place(0, 0, BLACK)
    b.place(2, 1, WHITE)
    assert b.fingerprint() == "B....W..."
    assert b.to_rows() == ["B..", "..W", "..."]
    assert Board.from_rows(b.to_rows()) == b


def test_clone_is_independent():
    b = Board(size=5)
    b.place(1, 1, BLACK)
    c = b.clone()
    c.place(2, 2, WHITE)
    assert b.is_empty(2, 2)
    assert b.stone_count() == 1
    assert c.stone_count() == 2
