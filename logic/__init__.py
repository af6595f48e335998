"""
Logic module for terminal TicTacToe.
Handles the board, game state, rules, and AI opponent.
"""

__version__ = "1.0.0"

from .symbol import Symbol
from .axes import Axis, AxisOrientation, Position, generate_axes
from .board import Board
from .errors import (
    TicTacToeError,
    InvalidSymbol,
    OccupiedCell,
    OutOfBounds,
    BoardFull,
    GameOver,
)
from .game_state import GameState, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .config import GameConfig
