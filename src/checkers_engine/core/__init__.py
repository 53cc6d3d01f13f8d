"""Core board representation and rules."""

from .board import (
    BOARD_SIZE,
    Colour,
    Piece,
    Square,
    jump_targets,
    move_targets,
)
from .game_state import (
    Board,
    GameState,
    Move,
    board_from_pieces,
    create_empty_board,
    render_board,
)
from .hash import zobrist_hash, init_zobrist_table
from .rules import (
    MoveError,
    IllegalMove,
    OccupiedDestination,
    EmptySource,
    create_starting_state,
    generate_legal_moves,
    moves_from_square,
    apply_move,
)

__all__ = [
    "BOARD_SIZE",
    "Colour",
    "Piece",
    "Square",
    "jump_targets",
    "move_targets",
    "Board",
    "GameState",
    "Move",
    "board_from_pieces",
    "create_empty_board",
    "render_board",
    "zobrist_hash",
    "init_zobrist_table",
    "MoveError",
    "IllegalMove",
    "OccupiedDestination",
    "EmptySource",
    "create_starting_state",
    "generate_legal_moves",
    "moves_from_square",
    "apply_move",
]
