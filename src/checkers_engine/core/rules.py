"""
English draughts rules implementation.

Implements the move rules of the engine:
- Steps: one diagonal square into an empty cell, forward only unless crowned
- Jumps: two diagonal squares over an opposing piece, which is removed
- Crowning on the opposite back rank
- Strict turn alternation
"""

import logging
from typing import List

from .board import BOARD_SIZE, HOME_ROWS, Colour, Piece, Square
from .game_state import Board, GameState, Move, board_from_pieces

logger = logging.getLogger(__name__)


class MoveError(ValueError):
    """Base class for a move that cannot be applied."""

    message = "Move cannot be applied"

    def __init__(self, move: Move):
        self.move = move
        super().__init__(f"{self.message}: {move}")


class IllegalMove(MoveError):
    """Move is not in the legal set for the side to move."""

    message = "Move not allowed"


class OccupiedDestination(MoveError):
    """Destination square already holds a piece."""

    message = "Destination square is already occupied"


class EmptySource(MoveError):
    """Source square holds no piece."""

    message = "No piece on the source square"


def create_starting_state() -> GameState:
    """
    Create the standard starting position, White to move.

    Both sides sit on the playing squares, where (column + row) is even:
    White on rows 0-2, Red on rows 5-7.

    Returns:
        Starting GameState
    """
    pieces = {}
    for row in range(BOARD_SIZE):
        if HOME_ROWS <= row < BOARD_SIZE - HOME_ROWS:
            continue
        colour = Colour.WHITE if row < HOME_ROWS else Colour.RED
        for column in range(BOARD_SIZE):
            if (column + row) % 2 == 0:
                pieces[Square(column, row)] = Piece(colour)

    return GameState(board=board_from_pieces(pieces), turn=Colour.WHITE)


def reaches_back_rank(piece: Piece, square: Square) -> bool:
    """True if landing on square crowns this piece's colour."""
    return square.row == piece.colour.back_rank


def is_forward(piece: Piece, from_square: Square, to_square: Square) -> bool:
    """
    Check the row direction of a move against piece facing.

    Red heads toward row 0, White toward row 7. Crowned pieces go either way.
    """
    if piece.crowned:
        return to_square.row != from_square.row
    if piece.colour is Colour.RED:
        return to_square.row < from_square.row
    return to_square.row > from_square.row


def _legal_jump(board: Board, piece: Piece, move: Move) -> bool:
    midpoint = move.midpoint
    jumped = board[midpoint.column][midpoint.row]
    return jumped is not None and jumped.colour is not piece.colour


def _legal_step(board: Board, piece: Piece, move: Move) -> bool:
    target = move.to_square
    if board[target.column][target.row] is not None:
        return False
    return is_forward(piece, move.from_square, target)


def moves_from_square(board: Board, square: Square) -> List[Move]:
    """
    Legal moves for the piece on a square, jumps before steps.

    Jump legality only looks at the jumped-over square; whether the landing
    square is free is checked when the move is applied.

    Args:
        board: Board contents
        square: Square holding the piece

    Returns:
        Moves for that piece (empty if the square is empty)
    """
    piece = board[square.column][square.row]
    if piece is None:
        return []

    jumps = [
        move
        for move in (Move(square, target) for target in square.jump_targets())
        if _legal_jump(board, piece, move)
    ]
    steps = [
        move
        for move in (Move(square, target) for target in square.move_targets())
        if _legal_step(board, piece, move)
    ]
    return jumps + steps


def generate_legal_moves(state: GameState) -> List[Move]:
    """
    Generate all legal moves for the side to move.

    The side to move is taken from state.turn. Cells are scanned column by
    column, then row by row within a column.

    Args:
        state: Current game state

    Returns:
        List of legal moves in scan order
    """
    legal_moves = []
    for column in range(BOARD_SIZE):
        for row in range(BOARD_SIZE):
            piece = state.board[column][row]
            if piece is not None and piece.colour is state.turn:
                legal_moves.extend(moves_from_square(state.board, Square(column, row)))

    return legal_moves


def apply_move(state: GameState, move: Move) -> GameState:
    """
    Apply a move and return the resulting state.

    1. Reject moves outside the legal set, onto an occupied square or from an
       empty square
    2. Remove the jumped piece, if any
    3. Move the piece, crowning it on the opposite back rank
    4. Count the move, log it and pass the turn

    Args:
        state: Current game state
        move: Move to apply

    Returns:
        New GameState after move

    Raises:
        IllegalMove: move is not legal for the side to move
        OccupiedDestination: destination square is taken
        EmptySource: source square is empty
    """
    # Validate move
    legal_moves = generate_legal_moves(state)
    if move not in legal_moves:
        logger.debug(
            f"Rejected {move} for {state.turn.value}; legal: "
            + ", ".join(str(m) for m in legal_moves)
        )
        raise IllegalMove(move)

    if state.piece_at(move.to_square) is not None:
        logger.debug(f"Rejected {move}: destination occupied")
        raise OccupiedDestination(move)

    piece = state.piece_at(move.from_square)
    if piece is None:
        raise EmptySource(move)

    # Create mutable board copy
    columns = [list(column) for column in state.board]

    if move.is_jump:
        captured = move.midpoint
        columns[captured.column][captured.row] = None

    if reaches_back_rank(piece, move.to_square):
        piece = piece.crown()

    columns[move.to_square.column][move.to_square.row] = piece
    columns[move.from_square.column][move.from_square.row] = None

    logger.debug(f"Move {state.move_count + 1}: {state.turn.value} {move}")

    return GameState(
        board=tuple(tuple(column) for column in columns),
        turn=state.turn.opponent,
        move_count=state.move_count + 1,
        move_log=state.move_log + (move,),
    )
