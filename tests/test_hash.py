"""Tests for Zobrist hashing."""

from checkers_engine.core import (
    Colour,
    GameState,
    Move,
    Piece,
    Square,
    apply_move,
    board_from_pieces,
    create_starting_state,
    init_zobrist_table,
    zobrist_hash,
)


def test_hash_is_deterministic():
    init_zobrist_table(seed=42)
    first = zobrist_hash(create_starting_state())

    init_zobrist_table(seed=42)
    assert zobrist_hash(create_starting_state()) == first


def test_hash_depends_on_turn():
    board = create_starting_state().board

    assert zobrist_hash(GameState(board=board, turn=Colour.WHITE)) != zobrist_hash(
        GameState(board=board, turn=Colour.RED)
    )


def test_hash_depends_on_crowning():
    plain = GameState(board=board_from_pieces({Square(3, 3): Piece(Colour.RED)}))
    king = GameState(
        board=board_from_pieces({Square(3, 3): Piece(Colour.RED, crowned=True)})
    )

    assert zobrist_hash(plain) != zobrist_hash(king)


def test_transpositions_hash_equal():
    """Test move order and move log don't affect the hash."""
    start = create_starting_state()
    a = Move(Square(0, 2), Square(1, 3))
    b = Move(Square(4, 2), Square(5, 3))
    reply_1 = Move(Square(1, 5), Square(0, 4))
    reply_2 = Move(Square(7, 5), Square(6, 4))

    line_1 = start
    for move in (a, reply_1, b, reply_2):
        line_1 = apply_move(line_1, move)

    line_2 = start
    for move in (b, reply_2, a, reply_1):
        line_2 = apply_move(line_2, move)

    assert line_1.move_log != line_2.move_log
    assert zobrist_hash(line_1) == zobrist_hash(line_2)
