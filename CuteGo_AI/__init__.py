"""CuteGo_AI package exports."""

from .Board import Board, BLACK, WHITE, EMPTY, GO, GOMOKU
from .Game import GameState, play_match
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer

# Subpackages for rule engine, AI, serialization, rendering, and helpers
from . import ai, engine, gui, serialization, utils

__all__ = [
    "Board",
    "BLACK",
    "WHITE",
    "EMPTY",
    "GO",
    "GOMOKU",
    "GameState",
    "play_match",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "gui",
    "serialization",
    "utils",
]
