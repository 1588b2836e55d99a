"""Difficulty labels: Easy/Medium/Hard plus kyu/dan rank strings ('18k', '3d')."""

import re
from dataclasses import dataclass

EASY = "Easy"
MEDIUM = "Medium"
HARD = "Hard"
CUSTOM = "Custom"
LEVELS = (EASY, MEDIUM, HARD)

# Overridable through the `ranks` section of config/settings.yaml.
DEFAULT_RANK_TABLE = {
    "easy_min_kyu": 10,     # 18k..10k -> Easy
    "local_min_kyu": 6,     # 18k..6k stay on the local heuristic AI
    "dan_level": HARD,
    "default_level": MEDIUM,
}

VISITS = {EASY: 1, MEDIUM: 10, HARD: 100}
DEFAULT_VISITS = 10

_KYU = re.compile(r"^\s*(\d+)\s*k", re.IGNORECASE)
_DAN = re.compile(r"^\s*(\d+)\s*d", re.IGNORECASE)


@dataclass
class RankConfig:
    use_model: bool
    simulations: int


def _table(table):
    merged = dict(DEFAULT_RANK_TABLE)
    if table:
        merged.update(table)
    return merged


def normalize_difficulty(label, table=None):
    """Map any difficulty label onto Easy/Medium/Hard."""
    cfg = _table(table)
    if isinstance(label, str):
        for level in LEVELS:
            if label.strip().lower() == level.lower():
                return level
        kyu = _KYU.match(label)
        if kyu:
            return EASY if int(kyu.group(1)) >= cfg["easy_min_kyu"] else MEDIUM
        if _DAN.match(label):
            return cfg["dan_level"]
    return cfg["default_level"]


def rank_config(label, table=None):
    """
    Engine settings for a rank label. Weaker kyu ranks stay on the local
    heuristic AI; stronger ranks hand off to the neural backend with a
    growing visit budget.
    """
    cfg = _table(table)
    label = label if isinstance(label, str) else ""
    kyu = _KYU.match(label)
    if kyu:
        k = int(kyu.group(1))
        if k >= cfg["local_min_kyu"]:
            return RankConfig(use_model=False, simulations=0)
        return RankConfig(use_model=True, simulations=round(5 + (5 - k) * 5))
    dan = _DAN.match(label)
    if dan:
        d = int(dan.group(1))
        return RankConfig(use_model=True, simulations=round(30 + (d - 1) * 15))
    return RankConfig(use_model=True, simulations=35)


def visit_budget(label, custom_visits=None, table=None):
    """Simulation budget for the neural backend."""
    if label == CUSTOM and custom_visits:
        return int(custom_visits)
    if label in VISITS:
        return VISITS[label]
    config = rank_config(label, table)
    if config.use_model and config.simulations:
        return config.simulations
    return VISITS.get(normalize_difficulty(label, table), DEFAULT_VISITS)
