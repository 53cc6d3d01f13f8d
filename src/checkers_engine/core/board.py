"""
Board primitives and square geometry for English draughts.

Squares are addressed by (column, row), both in [0, 8). White starts on
rows 0-2 and moves toward row 7; Red starts on rows 5-7 and moves toward
row 0. Geometry here is pure: it knows nothing about board contents.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

BOARD_SIZE = 8
HOME_ROWS = 3  # Rows filled per side at the start

# Diagonal offsets as (column delta, row delta), in generation order
_DIRECTIONS = ((1, -1), (1, 1), (-1, -1), (-1, 1))


class Colour(Enum):
    """Side of the board; owner of a piece."""

    RED = "red"
    WHITE = "white"

    @property
    def opponent(self) -> "Colour":
        return Colour.WHITE if self is Colour.RED else Colour.RED

    @property
    def back_rank(self) -> int:
        """Row on which a piece of this colour is crowned."""
        return 0 if self is Colour.RED else BOARD_SIZE - 1


@dataclass(frozen=True)
class Piece:
    """A single draughts piece. Crowning is one-way."""

    colour: Colour
    crowned: bool = False

    def crown(self) -> "Piece":
        """Return the crowned form of this piece."""
        if self.crowned:
            return self
        return Piece(colour=self.colour, crowned=True)


@dataclass(frozen=True)
class Square:
    """A board coordinate."""

    column: int
    row: int

    def __post_init__(self) -> None:
        if not (0 <= self.column < BOARD_SIZE and 0 <= self.row < BOARD_SIZE):
            raise ValueError(
                f"Square ({self.column}, {self.row}) is off the {BOARD_SIZE}x{BOARD_SIZE} board"
            )

    def jump_targets(self) -> List["Square"]:
        return jump_targets(self)

    def move_targets(self) -> List["Square"]:
        return move_targets(self)

    def __str__(self) -> str:
        return f"({self.column}, {self.row})"


def _diagonal_targets(square: Square, distance: int) -> List[Square]:
    targets = []
    for dc, dr in _DIRECTIONS:
        column = square.column + dc * distance
        row = square.row + dr * distance
        if 0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE:
            targets.append(Square(column, row))
    return targets


def jump_targets(square: Square) -> List[Square]:
    """
    Squares two diagonal steps away from a square.

    Order is (+2,-2), (+2,+2), (-2,-2), (-2,+2) relative to (column, row),
    with anything off the board dropped. The jumped-over square is not
    considered here.

    Args:
        square: Origin square

    Returns:
        Between 1 and 4 destination squares
    """
    return _diagonal_targets(square, 2)


def move_targets(square: Square) -> List[Square]:
    """
    Diagonal neighbours of a square.

    Same ordering convention as jump_targets: (+1,-1), (+1,+1), (-1,-1), (-1,+1).

    Args:
        square: Origin square

    Returns:
        Between 1 and 4 neighbouring squares
    """
    return _diagonal_targets(square, 1)
