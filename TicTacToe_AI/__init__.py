"""TicTacToe_AI package exports."""

from .Board import Board, EMPTY, PLAYER, COMPUTER
from .Tictactoegame import Tictactoegame, GameState
from .Player import Player, HumanPlayer, MinimaxPlayer

# Subpackages for move validation, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "EMPTY",
    "PLAYER",
    "COMPUTER",
    "Tictactoegame",
    "GameState",
    "Player",
    "HumanPlayer",
    "MinimaxPlayer",
    "ai",
    "engine",
    "utils",
]
