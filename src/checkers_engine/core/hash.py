"""
Zobrist hashing for fast position hashing and transposition detection.

Zobrist hashing uses pre-generated random numbers to create unique hashes
for game positions. A position is the board contents plus the side to move;
the move count and move log are not part of it.
"""

import random
from typing import Dict, Tuple

from .board import BOARD_SIZE, Colour
from .game_state import GameState


# Global Zobrist table (initialized once)
_zobrist_table: Dict[Tuple[int, int, Colour, bool], int] = {}
_zobrist_turn: Dict[Colour, int] = {}


def init_zobrist_table(seed: int = 42) -> None:
    """
    Initialize Zobrist hash table with random 64-bit numbers.

    Args:
        seed: Random seed for reproducibility
    """
    global _zobrist_table, _zobrist_turn

    rng = random.Random(seed)
    _zobrist_table = {}

    # One random number per (square, piece kind) pair
    for column in range(BOARD_SIZE):
        for row in range(BOARD_SIZE):
            for colour in Colour:
                for crowned in (False, True):
                    _zobrist_table[(column, row, colour, crowned)] = rng.getrandbits(64)

    _zobrist_turn = {colour: rng.getrandbits(64) for colour in Colour}


def zobrist_hash(state: GameState) -> int:
    """
    Compute Zobrist hash for a game state.

    Args:
        state: GameState to hash

    Returns:
        64-bit hash value
    """
    if not _zobrist_table:
        # Auto-initialize if not done already
        init_zobrist_table()

    h = 0
    for column in range(BOARD_SIZE):
        for row in range(BOARD_SIZE):
            piece = state.board[column][row]
            if piece is not None:
                h ^= _zobrist_table[(column, row, piece.colour, piece.crowned)]

    h ^= _zobrist_turn[state.turn]

    return h
