"""
Game state management for TicTacToe.
Tracks the board, whose turn it is and the moves played so far.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .axes import Position
from .board import Board
from .errors import GameOver
from .symbol import Symbol


@dataclass
class Move:
    """
    A move in the game.
    """
    symbol: Symbol          # Who made the move
    position: Position      # Where the mark went
    move_number: int        # 0 for the first move of the game


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board
    - Current player
    - Move history (for display only, there is no undo)
    - Game status (ongoing, won, draw)

    Winner and draw are filled in by WinChecker.update_game_state().
    """

    size: int = 3

    # Whoever moves first
    first_player: Symbol = Symbol.X

    board: Optional[Board] = None
    current_player: Optional[Symbol] = None

    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Symbol] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        if self.board is None:
            self.board = Board(self.size)
        self.size = self.board.size
        if self.current_player is None:
            self.current_player = self.first_player

    def make_move(self, position: Position) -> Move:
        """
        Put the current player's mark at a position and pass the turn.

        Args:
            position: (column, row) of the cell.

        Returns:
            The recorded Move.

        Raises:
            GameOver: if the game has already ended.
            OutOfBounds: if the position is off the board.
            OccupiedCell: if the cell is taken.
        """
        if self.is_game_over:
            raise GameOver("Game is already over!")

        column, row = position
        self.board.place(column, row, self.current_player)

        move = Move(
            symbol=self.current_player,
            position=Position(column, row),
            move_number=len(self.moves)
        )
        self.moves.append(move)
        logger.debug(f"Move {move.move_number}: {move.symbol.name} at {tuple(move.position)}")

        self.current_player = self.current_player.opposite()

        return move

    def get_empty_cells(self) -> List[Position]:
        """Get all empty cells on the board."""
        return self.board.empty_cells()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            size=self.size,
            first_player=self.first_player,
            board=self.board.clone(),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def render(self) -> str:
        """
        Draw the board, with the winning line struck through once someone has won.
        """
        if self.winner is not None:
            return self.board.render_with_win(self.winner)
        return self.board.render()
