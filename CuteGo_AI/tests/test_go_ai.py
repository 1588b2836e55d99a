"""Heuristic Go AI: move scoring terms, eyes, captures, passing, resignation and randomness."""

import random

from CuteGo_AI.Board import Board, BLACK, WHITE
from CuteGo_AI.ai import go_ai
from CuteGo_AI.engine import rules


def test_simple_eye_detection():
    b = Board(size=5)
    for x, y in [(1, 0), (0, 1), (1, 1)]:
        b.place(x, y, BLACK)
    assert go_ai.is_simple_eye(b, 0, 0, BLACK)
    assert not go_ai.is_simple_eye(b, 0, 0, WHITE)
    assert not go_ai.is_simple_eye(b, 2, 2, BLACK)


def test_own_eye_is_never_a_candidate():
    b = Board(size=5)
    for x, y in [(1, 0), (0, 1), (1, 1)]:
        b.place(x, y, BLACK)
    moves = [mv for _, mv in go_ai.score_candidates(b, BLACK, "Hard")]
    assert (0, 0) not in moves
    assert moves


def test_prefers_capture():
    b = Board(size=9)
    b.place(4, 4, WHITE)
    for x, y in [(3, 4), (5, 4), (4, 3)]:
        b.place(x, y, BLACK)
    before = [row[:] for row in b.cells]
    assert go_ai.choose_move(b, BLACK, "Hard") == (4, 5)
    assert b.cells == before


def test_passes_when_only_own_eyes_remain():
    b = Board(size=5)
    for y in range(5):
        for x in range(5):
            if (x, y) not in ((0, 0), (2, 2), (4, 4)):
                b.place(x, y, BLACK)
    assert go_ai.choose_move(b, BLACK, "Medium") is None


def test_resigns_when_far_behind():
    b = Board(size=9)
    for y in range(4):
        for x in range(9):
            b.place(x, y, WHITE)
    assert go_ai.should_resign(b, BLACK, "Medium")
    assert go_ai.choose_move(b, BLACK, "Hard") == go_ai.RESIGN
    # Easy never resigns, and the leader never resigns
    assert go_ai.choose_move(b, BLACK, "Easy", rng=random.Random(1)) != go_ai.RESIGN
    assert not go_ai.should_resign(b, WHITE, "Hard")


def test_no_resignation_early():
    b = Board(size=9)
    for x in range(9):
        b.place(x, 0, WHITE)
    assert b.fill_ratio() <= go_ai.RESIGN_MIN_FILL
    assert not go_ai.should_resign(b, BLACK, "Hard")


def test_easy_is_reproducible_with_seeded_rng_and_legal():
    b = Board(size=9)
    b.place(4, 4, WHITE)
    b.place(3, 3, BLACK)
    first = go_ai.choose_move(b, BLACK, "Easy", rng=random.Random(7))
    second = go_ai.choose_move(b, BLACK, "Easy", rng=random.Random(7))
    assert first == second
    assert rules.attempt_move(b, first[0], first[1], BLACK) is not None


def test_respects_ko():
    b = Board(size=5)
    for x, y in [(1, 0), (0, 1), (1, 2)]:
        b.place(x, y, BLACK)
    for x, y in [(2, 0), (1, 1), (3, 1), (2, 2)]:
        b.place(x, y, WHITE)
    take = rules.attempt_move(b, 2, 1, BLACK)
    scored = go_ai.score_candidates(take.board, WHITE, "Hard", previous_fingerprint=b.fingerprint())
    assert (1, 1) not in [mv for _, mv in scored]


def test_position_bonus_by_board_size():
    assert go_ai.position_bonus(19, 3, 3) == 40
    assert go_ai.position_bonus(19, 0, 9) == -40
    assert go_ai.position_bonus(19, 1, 9) == -15
    assert go_ai.position_bonus(9, 0, 4) == -20
    assert go_ai.position_bonus(9, 2, 4) == 10


class ZeroNoise:
    def uniform(self, low, high):
        return 0.0


def test_atari_bonus():
    b = Board(size=9)
    b.place(4, 4, WHITE)
    b.place(3, 4, BLACK)
    b.place(5, 4, BLACK)
    result = rules.attempt_move(b, 4, 3, BLACK)
    score = go_ai.evaluate_move(b, result, 4, 3, BLACK)
    assert score == go_ai.ATARI_BONUS + go_ai.SAFE_LIBERTY_BONUS


def test_self_atari_penalty():
    b = Board(size=9)
    b.place(1, 0, WHITE)
    result = rules.attempt_move(b, 0, 0, BLACK)
    score = go_ai.evaluate_move(b, result, 0, 0, BLACK)
    assert score == -go_ai.SELF_ATARI_PENALTY + go_ai.position_bonus(9, 0, 0)


def test_tiger_mouth_and_cut_shapes():
    b = Board(size=9)
    b.place(3, 3, BLACK)
    assert go_ai.shape_bonus(b, 4, 4, BLACK) == go_ai.TIGER_MOUTH_BONUS
    # the diagonal link is already cut
    b.place(3, 4, WHITE)
    assert go_ai.shape_bonus(b, 4, 4, BLACK) == 0

    b = Board(size=9)
    b.place(4, 3, WHITE)
    b.place(4, 5, WHITE)
    assert go_ai.shape_bonus(b, 4, 4, BLACK) == go_ai.CUT_BONUS


def test_best_reply_capture_and_atari():
    before = Board(size=9)
    before.place(1, 0, WHITE)
    after = rules.attempt_move(before, 0, 0, BLACK).board
    assert go_ai.best_reply_score(before, after, BLACK) == go_ai.REPLY_CAPTURE_BASE + go_ai.REPLY_CAPTURE_PER_STONE

    before = Board(size=9)
    before.place(3, 4, WHITE)
    before.place(5, 4, WHITE)
    after = rules.attempt_move(before, 4, 4, BLACK).board
    assert go_ai.best_reply_score(before, after, BLACK) == go_ai.REPLY_ATARI


def test_stronger_levels_subtract_best_reply():
    b = Board(size=9)
    b.place(1, 0, WHITE)
    result = rules.attempt_move(b, 0, 0, BLACK)
    own = go_ai.evaluate_move(b, result, 0, 0, BLACK)
    reply = go_ai.best_reply_score(b, result.board, BLACK)
    assert reply > 0

    hard = {mv: s for s, mv in go_ai.score_candidates(b, BLACK, "Hard")}
    medium = {mv: s for s, mv in go_ai.score_candidates(b, BLACK, "Medium", rng=ZeroNoise())}
    easy = {mv: s for s, mv in go_ai.score_candidates(b, BLACK, "Easy", rng=ZeroNoise())}
    assert hard[(0, 0)] == own - reply
    assert medium[(0, 0)] == own - reply
    assert easy[(0, 0)] == own


def test_passes_late_when_every_move_loses():
    b = Board(size=5)
    for y in range(5):
        for x in range(5):
            if (x, y) not in ((0, 0), (1, 0)):
                b.place(x, y, BLACK)
    assert b.fill_ratio() > go_ai.LATE_FILL
    scored = go_ai.score_candidates(b, BLACK, "Hard")
    assert scored and all(score <= 0 for score, _ in scored)
    assert not go_ai.should_resign(b, BLACK, "Hard")
    assert go_ai.choose_move(b, BLACK, "Hard") is None
