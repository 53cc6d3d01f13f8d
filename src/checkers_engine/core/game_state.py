"""
Game state representation.

A draughts game state consists of:
- Board contents (8 columns of 8 optional pieces)
- Side to move
- Number of moves applied so far, and the moves themselves in order

States are immutable: applying a move builds a new GameState, so a
rejected move can never leave a half-updated position behind.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .board import BOARD_SIZE, Colour, Piece, Square

# board[column][row]
Board = Tuple[Tuple[Optional[Piece], ...], ...]

_GLYPHS = {Colour.WHITE: "x ", Colour.RED: "o "}
_EMPTY_GLYPH = "  "


@dataclass(frozen=True)
class Move:
    """A move from one square to another. Equality is structural."""

    from_square: Square
    to_square: Square

    @property
    def is_jump(self) -> bool:
        """True for a two-row capturing move."""
        return abs(self.to_square.row - self.from_square.row) == 2

    @property
    def midpoint(self) -> Square:
        """The square jumped over. Only meaningful for jumps."""
        if not self.is_jump:
            raise ValueError(f"{self} is not a jump")
        return Square(
            (self.from_square.column + self.to_square.column) // 2,
            (self.from_square.row + self.to_square.row) // 2,
        )

    def __str__(self) -> str:
        return f"{self.from_square} -> {self.to_square}"


def create_empty_board() -> Board:
    """Board with no pieces on it."""
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


def board_from_pieces(pieces: Dict[Square, Piece]) -> Board:
    """
    Build a board from a square -> piece mapping.

    Args:
        pieces: Pieces to place; every other cell is empty

    Returns:
        Immutable board
    """
    columns = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for square, piece in pieces.items():
        columns[square.column][square.row] = piece
    return tuple(tuple(column) for column in columns)


def render_board(board: Board) -> str:
    """
    Plain text drawing of a board, row 0 at the top.

    White pieces are drawn as "x", Red as "o". The frame is a "+--...--+"
    line above and below, with "|" at the start and end of each row.
    """
    border = "+" + "--" * BOARD_SIZE + "+\n"
    lines = [border]
    for row in range(BOARD_SIZE):
        cells = []
        for column in range(BOARD_SIZE):
            piece = board[column][row]
            cells.append(_EMPTY_GLYPH if piece is None else _GLYPHS[piece.colour])
        lines.append("|" + "".join(cells) + "|\n")
    lines.append(border)
    return "".join(lines)


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state.

    Board layout (row 0 at the top, White home rows first):

        row 0  x . x . x . x .
        row 1  . x . x . x . x
        row 2  x . x . x . x .
        ...
        row 7  . o . o . o . o
    """

    board: Board
    turn: Colour = Colour.WHITE
    move_count: int = 0
    move_log: Tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.board) != BOARD_SIZE or any(
            len(column) != BOARD_SIZE for column in self.board
        ):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        if not isinstance(self.turn, Colour):
            raise ValueError(f"Invalid turn {self.turn!r}")
        if self.move_count != len(self.move_log):
            raise ValueError(
                f"Move count {self.move_count} doesn't match log length {len(self.move_log)}"
            )

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.board[square.column][square.row]

    def pieces(self, colour: Optional[Colour] = None) -> Dict[Square, Piece]:
        """Occupied squares, optionally restricted to one colour."""
        found = {}
        for column in range(BOARD_SIZE):
            for row in range(BOARD_SIZE):
                piece = self.board[column][row]
                if piece is not None and (colour is None or piece.colour is colour):
                    found[Square(column, row)] = piece
        return found

    def __str__(self) -> str:
        return render_board(self.board)
