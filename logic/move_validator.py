"""
Move validator for TicTacToe.
Turns what the player typed into a move, or explains why it isn't one.
"""

from dataclasses import dataclass
from typing import List, Optional

from .axes import Position
from .game_state import GameState
from .symbol import Symbol


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    position: Optional[Position] = None


class MoveValidator:
    """
    Validates TicTacToe moves typed by a player.

    Cells are numbered from 1, left to right and top to bottom.

    Rules:
    1. Input must be a cell number on the board
    2. Can only place on empty cells
    3. Game must not be over

    Problems are reported in the result, never raised, so the caller can
    simply ask again.
    """

    def parse_move(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Validate a move typed as a 1-based cell number.

        Args:
            game_state: Current game state.
            text: Raw input from the player.

        Returns:
            ValidationResult with is_valid, error_message and, when valid,
            the position.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        cell_count = game_state.size * game_state.size

        try:
            number = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Please enter a number between 1 and {cell_count}."
            )

        if not 1 <= number <= cell_count:
            return ValidationResult(
                is_valid=False,
                error_message=f"Please enter a number between 1 and {cell_count}."
            )

        position = Position.from_index(number - 1, game_state.size)

        if game_state.board[position] != Symbol.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message="Position already marked."
            )

        return ValidationResult(is_valid=True, position=position)

    def get_valid_moves(self, game_state: GameState) -> List[Position]:
        """
        Get all valid moves for the current player.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
