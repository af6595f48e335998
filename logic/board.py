"""
The TicTacToe board.
Holds the grid of symbols, checks for wins and draws itself as text.
"""

from typing import List, Optional

import numpy as np

from .axes import Axis, Position, generate_axes
from .errors import InvalidSymbol, OccupiedCell, OutOfBounds
from .symbol import Symbol


# Glyph used for the separator lines between rows
SEPARATOR_DASH = "─"
CELL_WALL = "|"


class Board:
    """
    A square TicTacToe board of any size.

    Cells are addressed as (column, row), both 0-indexed, and stored in a
    numpy array indexed [row, column] so rows can be drawn in order.

    The board is mutable. Use clone() before trying out hypothetical
    moves; clones share the (read-only) axes but never the cells.

    Example:
        board = Board()
        board.set(1, 1, Symbol.X)
        print(board)
    """

    def __init__(self, size: int = 3):
        """
        Create an empty board.

        Args:
            size: Number of cells per side (default: 3).
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")

        self.size = size
        self.axes = generate_axes(size)
        self._cells = np.full((size, size), Symbol.EMPTY, dtype=object)

    # ==================== CELL ACCESS ====================

    def _check_bounds(self, column: int, row: int):
        if not (0 <= column < self.size and 0 <= row < self.size):
            raise OutOfBounds(column, row, self.size)

    def get(self, column: int, row: int) -> Symbol:
        """Get the symbol at (column, row)."""
        self._check_bounds(column, row)
        return self._cells[row, column]

    def set(self, column: int, row: int, symbol: Symbol):
        """
        Overwrite the cell at (column, row), whatever it holds.

        Use place() to refuse occupied cells.
        """
        if not isinstance(symbol, Symbol):
            raise InvalidSymbol(f"Invalid symbol: {symbol!r}")
        self._check_bounds(column, row)
        self._cells[row, column] = symbol

    def place(self, column: int, row: int, symbol: Symbol):
        """
        Put a mark on an empty cell.

        Raises:
            InvalidSymbol: if symbol is EMPTY (or not a Symbol).
            OutOfBounds: if the cell is off the board.
            OccupiedCell: if the cell already holds a mark.
        """
        if symbol == Symbol.EMPTY or not isinstance(symbol, Symbol):
            raise InvalidSymbol(f"Cannot place {symbol!r}")

        current = self.get(column, row)
        if current != Symbol.EMPTY:
            raise OccupiedCell(column, row, current)

        self._cells[row, column] = symbol

    def __getitem__(self, position: Position) -> Symbol:
        column, row = position
        return self.get(column, row)

    def __setitem__(self, position: Position, symbol: Symbol):
        column, row = position
        self.set(column, row, symbol)

    def clone(self) -> "Board":
        """Create a copy with its own cells and the same axes."""
        board = Board.__new__(Board)
        board.size = self.size
        board.axes = self.axes
        board._cells = self._cells.copy()
        return board

    # ==================== STATE QUERIES ====================

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not np.any(self._cells == Symbol.EMPTY)

    def empty_cells(self) -> List[Position]:
        """
        Get all empty cells.

        Returns:
            Positions scanned column by column, top to bottom.
        """
        return [
            Position(column, row)
            for column in range(self.size)
            for row in range(self.size)
            if self._cells[row, column] == Symbol.EMPTY
        ]

    def get_winning_axis(self, symbol: Symbol) -> Optional[Axis]:
        """
        Find the first axis fully held by a symbol.

        Axes are tried in generation order (columns, rows, descending
        diagonal, ascending diagonal), so when several are complete the
        earliest one is reported.

        Args:
            symbol: The mark to check for.

        Returns:
            The winning Axis, or None. Always None for EMPTY.
        """
        if symbol == Symbol.EMPTY:
            return None

        for axis in self.axes:
            for column, row in axis:
                if self._cells[row, column] != symbol:
                    break  # This axis can't win, try the next one
            else:
                return axis

        return None

    def has_won(self, symbol: Symbol) -> bool:
        """Check if a symbol holds a complete axis."""
        return self.get_winning_axis(symbol) is not None

    # ==================== RENDERING ====================

    def render(self) -> str:
        """
        Draw the board as text.

        Each row is drawn as "| X | O |   |" and followed (except for the
        last one) by a separator made from the same row: walls become
        spaces and everything else becomes a dash.
        """
        lines = []

        for row_index, row in enumerate(self._cells):
            row_line = "".join(f"{CELL_WALL} {symbol} " for symbol in row) + CELL_WALL
            lines.append(row_line)

            if row_index < self.size - 1:
                lines.append("".join(
                    " " if char == CELL_WALL else SEPARATOR_DASH
                    for char in row_line
                ))

        return "\n".join(lines)

    def render_with_win(self, symbol: Symbol) -> Optional[str]:
        """
        Draw the board with a line struck through the winning axis.

        Args:
            symbol: The mark whose win should be drawn.

        Returns:
            The rendered board, or None if the symbol has not won.
        """
        axis = self.get_winning_axis(symbol)
        if axis is None:
            return None

        lines = self.render().split("\n")
        glyph = axis.orientation.strikethrough

        for column, row in axis:
            # Separator lines sit between rows, and each cell is 4 chars wide
            line_index = row * 2
            char_index = column * 4 + 2
            line = lines[line_index]
            lines[line_index] = line[:char_index] + glyph + line[char_index + 1:]

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(size={self.size}, empty={len(self.empty_cells())})"
