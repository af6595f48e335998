"""
AI player for TicTacToe.
Looks one move ahead to win or block, otherwise plays by position.
"""

import random
from typing import List, Optional, Tuple

from loguru import logger

from .axes import Position
from .board import Board
from .errors import BoardFull, InvalidSymbol
from .symbol import Symbol


def preferred_cells(size: int) -> Tuple[List[Position], List[Position], List[Position]]:
    """
    Group the cells of a board by how attractive they are.

    Returns:
        (corners, center, edges). The center only exists on odd-sized
        boards; every cell that is neither a corner nor the center counts
        as an edge.
    """
    last = size - 1
    corners = []
    for position in (Position(0, 0), Position(last, 0), Position(0, last), Position(last, last)):
        if position not in corners:
            corners.append(position)

    center = []
    if size % 2 == 1 and Position(size // 2, size // 2) not in corners:
        center.append(Position(size // 2, size // 2))

    edges = [
        Position(column, row)
        for row in range(size)
        for column in range(size)
        if Position(column, row) not in corners and Position(column, row) not in center
    ]

    return corners, center, edges


class AIPlayer:
    """
    A simple TicTacToe opponent.

    It does not search the game tree. For each move it:
    1. Takes a cell that wins right away
    2. Otherwise takes a cell the opponent would win with (block)
    3. Otherwise prefers a corner, then the center, then an edge
       (ties are broken randomly)
    """

    def __init__(self, symbol: Symbol = Symbol.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            symbol: Which mark the AI plays (default: O).
            rng: Random source for breaking ties between equal cells.
        """
        if symbol == Symbol.EMPTY:
            raise InvalidSymbol("The AI must play X or O")

        self.symbol = symbol
        self.opponent = symbol.opposite()
        self.rng = rng if rng is not None else random.Random()

    def get_best_move(self, board: Board) -> Position:
        """
        Pick the cell to play.

        The board passed in is never modified; every try happens on a clone.

        Args:
            board: Current board.

        Returns:
            Position of the chosen cell.

        Raises:
            BoardFull: if there is no empty cell.
        """
        empty = board.empty_cells()
        if not empty:
            raise BoardFull("Board full")

        move = self._find_completing_move(board, empty, self.symbol)
        if move is not None:
            logger.debug(f"AI {self.symbol.name} wins at {tuple(move)}")
            return move

        move = self._find_completing_move(board, empty, self.opponent)
        if move is not None:
            logger.debug(f"AI {self.symbol.name} blocks at {tuple(move)}")
            return move

        move = self._pick_by_position(board)
        logger.debug(f"AI {self.symbol.name} plays by position at {tuple(move)}")
        return move

    def _find_completing_move(
        self,
        board: Board,
        empty: List[Position],
        symbol: Symbol
    ) -> Optional[Position]:
        """Find the first empty cell that would complete an axis for symbol."""
        for position in empty:
            trial = board.clone()
            trial[position] = symbol
            if trial.has_won(symbol):
                return position
        return None

    def _pick_by_position(self, board: Board) -> Position:
        """Corner first, then center, then edge."""
        corners, center, edges = preferred_cells(board.size)
        corners = list(corners)
        edges = list(edges)
        self.rng.shuffle(corners)
        self.rng.shuffle(edges)

        for position in corners + center + edges:
            if board[position] == Symbol.EMPTY:
                return position

        raise BoardFull("Board full")
