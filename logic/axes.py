"""
Winning lines ("axes") of a TicTacToe board.

A board of size N has 2N+2 axes, generated in a fixed order:
- N vertical axes, one per column (left to right)
- N horizontal axes, one per row (top to bottom)
- the descending diagonal, top-left to bottom-right
- the ascending diagonal, top-right to bottom-left

Axes only depend on the board size, so they are generated once per size
and shared by every board of that size.
"""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Tuple


class Position(NamedTuple):
    """A cell on the board, 0-indexed."""
    column: int
    row: int

    @staticmethod
    def from_index(index: int, size: int) -> "Position":
        """Convert a linear cell index (row-major) to a position."""
        return Position(index % size, index // size)

    def to_index(self, size: int) -> int:
        """Convert the position back to its linear cell index."""
        return self.row * size + self.column


class AxisOrientation(Enum):
    """Direction of an axis, valued by the glyph used to strike it through."""
    VERTICAL = "|"
    HORIZONTAL = "─"
    DESCENDING = "\\"
    ASCENDING = "/"

    @property
    def strikethrough(self) -> str:
        return self.value


@dataclass(frozen=True)
class Axis:
    """
    One straight line of cells that wins when a single symbol holds all of them.
    """
    index: int                          # Position in generation order
    orientation: AxisOrientation
    positions: Tuple[Position, ...]     # Exactly `size` cells

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position) -> bool:
        return position in self.positions


@functools.lru_cache(maxsize=None)
def generate_axes(size: int) -> Tuple[Axis, ...]:
    """
    Build every axis for a board of the given size.

    Args:
        size: Board size (>= 1).

    Returns:
        Tuple of 2*size+2 axes in generation order.
    """
    if size < 1:
        raise ValueError(f"Board size must be at least 1, got {size}")

    lines = []

    for column in range(size):
        lines.append((AxisOrientation.VERTICAL,
                      [Position(column, i) for i in range(size)]))

    for row in range(size):
        lines.append((AxisOrientation.HORIZONTAL,
                      [Position(i, row) for i in range(size)]))

    lines.append((AxisOrientation.DESCENDING,
                  [Position(i, i) for i in range(size)]))
    lines.append((AxisOrientation.ASCENDING,
                  [Position(size - 1 - i, i) for i in range(size)]))

    return tuple(
        Axis(index=index, orientation=orientation, positions=tuple(positions))
        for index, (orientation, positions) in enumerate(lines)
    )
