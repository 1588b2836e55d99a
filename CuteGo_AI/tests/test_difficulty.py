"""Difficulty labels, rank strings and backend visit budgets."""

import pytest

from CuteGo_AI.ai import difficulty


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Easy", "Easy"),
        ("hard", "Hard"),
        (" MEDIUM ", "Medium"),
        ("18k", "Easy"),
        ("10k", "Easy"),
        ("9k", "Medium"),
        ("1k", "Medium"),
        ("3d", "Hard"),
        ("9 dan", "Hard"),
        ("grandmaster", "Medium"),
        (None, "Medium"),
    ],
)
def test_normalize_difficulty(label, expected):
    assert difficulty.normalize_difficulty(label) == expected


def test_rank_table_override():
    table = {"dan_level": "Medium", "easy_min_kyu": 15}
    assert difficulty.normalize_difficulty("3d", table) == "Medium"
    assert difficulty.normalize_difficulty("12k", table) == "Medium"
    assert difficulty.normalize_difficulty("16k", table) == "Easy"


def test_rank_config_local_for_weak_kyu():
    cfg = difficulty.rank_config("12k")
    assert cfg.use_model is False
    assert cfg.simulations == 0
    assert difficulty.visit_budget("12k") == difficulty.VISITS["Easy"]


def test_rank_config_model_for_strong_ranks():
    assert difficulty.rank_config("5k").simulations == 5
    assert difficulty.rank_config("1k").simulations == 25
    assert difficulty.rank_config("1d").simulations == 30
    assert difficulty.rank_config("3d").simulations == 60
    assert difficulty.rank_config("3d").use_model is True
    assert difficulty.rank_config("???").simulations == 35


def test_visit_budget():
    assert difficulty.visit_budget("Easy") == 1
    assert difficulty.visit_budget("Medium") == 10
    assert difficulty.visit_budget("Hard") == 100
    assert difficulty.visit_budget("Custom", custom_visits=250) == 250
    assert difficulty.visit_budget("3d") == 60
    assert difficulty.visit_budget("12k") == 1
