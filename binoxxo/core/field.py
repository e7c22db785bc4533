from enum import Enum


class Field(Enum):
    """Value held by a single board cell."""

    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Field":
        """Parse a one-character symbol ('X', 'O', '_' or '.'), case insensitive."""
        field = _FROM_SYMBOL.get(symbol.upper())
        if field is None:
            raise ValueError(f"Unknown field symbol: {symbol!r}")
        return field

    def next(self) -> "Field":
        """Player toggle cycle: EMPTY -> X -> O -> EMPTY."""
        return _NEXT[self]

    def opposite(self) -> "Field":
        if self is Field.X:
            return Field.O
        if self is Field.O:
            return Field.X
        return Field.EMPTY

    def __str__(self):
        return self.symbol


_SYMBOLS = {Field.EMPTY: "_", Field.X: "X", Field.O: "O"}
_FROM_SYMBOL = {"_": Field.EMPTY, ".": Field.EMPTY, "X": Field.X, "O": Field.O}
_NEXT = {Field.EMPTY: Field.X, Field.X: Field.O, Field.O: Field.EMPTY}
