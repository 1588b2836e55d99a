"""Settings loader: YAML defaults for board size, rule set, komi and difficulty."""

from pathlib import Path

import yaml

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 9,
    "rule_set": "Go",
    "komi": 7.5,
    "difficulty": "Medium",
    "candidate_range": 2,
    "mode": "human-vs-ai",
    "black_name": "Black",
    "white_name": "White",
    "ranks": {},
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `CuteGo_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Defaults overlaid with the YAML file; a missing file yields the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    settings.update(data)
    return settings
