"""
Cell markers for the TicTacToe board.
"""

from enum import Enum

from .errors import InvalidSymbol


class Symbol(Enum):
    """What a cell holds: nothing, an X or an O."""
    EMPTY = " "
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value

    def opposite(self) -> "Symbol":
        """Get the opposing mark."""
        if self == Symbol.X:
            return Symbol.O
        if self == Symbol.O:
            return Symbol.X
        raise InvalidSymbol(f"Invalid symbol: {self.name}")

    @classmethod
    def parse(cls, text: str) -> "Symbol":
        """
        Turn user input into a mark.

        Args:
            text: Raw input, e.g. "x" or " O ".

        Returns:
            Symbol.X or Symbol.O.

        Raises:
            InvalidSymbol: if the text is anything else.
        """
        letter = text.strip().upper()
        if letter == "X":
            return cls.X
        if letter == "O":
            return cls.O
        raise InvalidSymbol(f"Invalid symbol: {text!r}")
