"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional

from loguru import logger

from .axes import Axis
from .game_state import GameState
from .symbol import Symbol


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: one symbol on every cell of a row, column or diagonal.
    The board itself knows its winning lines; this class turns that into
    a game result.
    """

    # Order in which symbols are checked when deciding the winner
    PLAYERS = (Symbol.X, Symbol.O)

    def check_winner(self, game_state: GameState) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        for symbol in self.PLAYERS:
            if game_state.board.has_won(symbol):
                return symbol

        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw: board full and nobody has won.
        """
        if self.check_winner(game_state) is not None:
            return False

        return game_state.board.is_full()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
            logger.info(f"{winner.name} wins after {len(game_state.moves)} moves")
        elif self.check_draw(game_state):
            game_state.is_draw = True
            game_state.is_game_over = True
            logger.info(f"Draw after {len(game_state.moves)} moves")

        return game_state

    def get_winning_axis(self, game_state: GameState) -> Optional[Axis]:
        """
        Get the winning line if there is one.

        Returns:
            The winning Axis, or None.
        """
        for symbol in self.PLAYERS:
            axis = game_state.board.get_winning_axis(symbol)
            if axis is not None:
                return axis
        return None
