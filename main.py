"""
Terminal TicTacToe.

This script ties together:
- The board (grid, win detection, rendering)
- Game logic (game state, move validation, win checking)
- The AI opponent

Run this script to play TicTacToe against the computer!
"""

import argparse
import random
import sys
import time
from typing import Callable, Optional

from loguru import logger

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.errors import InvalidSymbol
from logic.game_state import GameState
from logic.move_validator import MoveValidator
from logic.symbol import Symbol
from logic.win_checker import WinChecker


class TicTacToeGame:
    """
    Main controller for a game of TicTacToe in the terminal.

    Game flow:
    1. Human picks X or O, the computer gets the other one
    2. Human types a cell number
    3. Computer wins, blocks, or picks a cell by position
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        size: int = GameConfig.BOARD_SIZE,
        human_symbol: Optional[Symbol] = None,
        delay: float = GameConfig.TURN_DELAY_SECONDS,
        seed: Optional[int] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[..., None] = print,
        sleep_func: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the game.

        Args:
            size: Cells per side of the board.
            human_symbol: The human's mark. Asked for when None.
            delay: Pause between turns in seconds (0 disables pacing).
            seed: Seed for the AI's tie breaking.
            input_func: Reads a line from the player.
            output_func: Shows a line to the player.
            sleep_func: Used for pacing.
        """
        self.size = size
        self.human_symbol = human_symbol
        self.delay = delay
        self.result_delay = min(delay, GameConfig.RESULT_DELAY_SECONDS)
        self.seed = seed

        self._input = input_func
        self._output = output_func
        self._sleep = sleep_func

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.game_state: Optional[GameState] = None
        self.ai: Optional[AIPlayer] = None

    def choose_symbol(self) -> Symbol:
        """Ask the human for X or O until they give one."""
        self._output("Please pick a letter (either X or O)")
        while True:
            try:
                return Symbol.parse(self._input(""))
            except InvalidSymbol:
                self._output("Please enter either X or O.")

    def start(self) -> Optional[Symbol]:
        """
        Play one game.

        Returns:
            The winning Symbol, or None for a tie.
        """
        if self.human_symbol is None:
            self.human_symbol = self.choose_symbol()

        computer_symbol = self.human_symbol.opposite()
        self.ai = AIPlayer(computer_symbol, random.Random(self.seed))
        self.game_state = GameState(size=self.size, first_player=self.human_symbol)

        logger.info(
            f"New {self.size}x{self.size} game: human {self.human_symbol.name}, "
            f"computer {computer_symbol.name}"
        )

        self._game_loop()
        return self.game_state.winner

    def _game_loop(self):
        """Main game loop."""
        while not self.game_state.is_game_over:
            self._output(self.game_state.board.render())
            self._output()

            self._human_turn()
            if self._show_game_result():
                break

            self._output(self.game_state.board.render())
            self._pause(self.result_delay)
            self._output()

            self._output("The computer's move:")
            self._computer_turn()
            if self._show_game_result():
                break

    def _human_turn(self):
        """Ask for a move until a valid one is given, then play it."""
        cell_count = self.size * self.size

        while True:
            self._output(f"Please pick a number between 1 and {cell_count}:")
            result = self.validator.parse_move(self.game_state, self._input(""))
            if result.is_valid:
                break
            self._output(result.error_message)

        self._pause(self.delay)

        self.game_state.make_move(result.position)
        self.win_checker.update_game_state(self.game_state)

    def _computer_turn(self):
        """Let the AI play its move."""
        position = self.ai.get_best_move(self.game_state.board)
        self.game_state.make_move(position)
        self.win_checker.update_game_state(self.game_state)

    def _show_game_result(self) -> bool:
        """
        Show the result if the game just ended.

        Returns:
            True if the game is over.
        """
        if not self.game_state.is_game_over:
            return False

        winner = self.game_state.winner
        if winner is not None:
            self._pause(self.result_delay)
            if winner == self.human_symbol:
                self._output("You've won!")
            else:
                self._output("The computer has won!")
            self._output(self.game_state.render())
        else:
            self._output(self.game_state.board.render())
            self._output("The board is full! It's a tie.")

        return True

    def _pause(self, seconds: float):
        if seconds > 0:
            self._sleep(seconds)


def configure_logging(debug: bool = False):
    """Send loguru output to stderr at the configured level."""
    logger.remove()
    level = GameConfig.DEBUG_LOG_LEVEL if debug else GameConfig.LOG_LEVEL
    logger.add(sys.stderr, level=level)


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe in the terminal")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Cells per side of the board (default: %(default)s)"
    )
    parser.add_argument(
        "--symbol",
        help="Play as X or O instead of being asked"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.TURN_DELAY_SECONDS,
        help="Pause between turns in seconds, 0 to disable (default: %(default)s)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the computer's tie breaking for a repeatable game"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be at least 1")

    human_symbol = None
    if args.symbol is not None:
        try:
            human_symbol = Symbol.parse(args.symbol)
        except InvalidSymbol:
            parser.error("--symbol must be X or O")

    configure_logging(args.debug)

    game = TicTacToeGame(
        size=args.size,
        human_symbol=human_symbol,
        delay=max(args.delay, 0.0),
        seed=args.seed
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
