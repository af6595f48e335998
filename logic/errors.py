"""
Errors raised by the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""


class InvalidSymbol(TicTacToeError, ValueError):
    """A mark is neither X nor O (or EMPTY was given where a mark is needed)."""


class OutOfBounds(TicTacToeError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, column: int, row: int, size: int):
        super().__init__(f"Position ({column}, {row}) is outside a {size}x{size} board")
        self.column = column
        self.row = row
        self.size = size


class OccupiedCell(TicTacToeError):
    """A mark was placed on a cell that already holds one."""

    def __init__(self, column: int, row: int, symbol):
        super().__init__(f"Cell ({column}, {row}) is already occupied by {symbol.name}")
        self.column = column
        self.row = row
        self.symbol = symbol


class BoardFull(TicTacToeError):
    """No empty cell is left to move into."""


class GameOver(TicTacToeError):
    """A move was attempted after the game ended."""
