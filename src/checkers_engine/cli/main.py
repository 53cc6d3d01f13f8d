"""
Main CLI for the draughts engine.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from ..core import (
    GameState,
    Move,
    Square,
    apply_move,
    create_starting_state,
    generate_legal_moves,
)
from ..solver import GameTreeExplorer
from ..utils.rich_display import GameDisplay


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_moves(raw_moves: Optional[List[Sequence[int]]]) -> List[Move]:
    """Turn --move FC FR TC TR groups into Move values."""
    moves = []
    for from_column, from_row, to_column, to_row in raw_moves or []:
        moves.append(Move(Square(from_column, from_row), Square(to_column, to_row)))
    return moves


def play_moves(
    state: GameState, moves: List[Move], display: Optional[GameDisplay] = None
) -> GameState:
    """
    Apply moves in order, optionally drawing the board after each.

    Raises:
        MoveError: first move that cannot be applied
    """
    for move in moves:
        state = apply_move(state, move)
        if display:
            display.log_success(f"Played {move}")
            display.show_board(state)
    return state


def show_command(args, display: GameDisplay) -> int:
    """Draw the starting position."""
    display.show_board(create_starting_state())
    return 0


def moves_command(args, display: GameDisplay) -> int:
    """List legal moves after an optional sequence of moves."""
    logger = logging.getLogger(__name__)

    try:
        state = play_moves(create_starting_state(), parse_moves(args.move))
    except ValueError as e:  # MoveError or an off-board square
        display.log_error(str(e))
        return 1

    moves = generate_legal_moves(state)
    logger.info(f"{len(moves)} legal moves for {state.turn.value}")
    display.show_board(state)
    display.show_moves(state, moves)
    return 0


def play_command(args, display: GameDisplay) -> int:
    """Apply moves from the starting position."""
    state = create_starting_state()
    display.show_board(state)

    try:
        state = play_moves(state, parse_moves(args.move), display)
    except ValueError as e:
        display.log_error(str(e))
        return 1

    return 0


def explore_command(args, display: GameDisplay) -> int:
    """Count positions reachable within a number of plies."""
    try:
        explorer = GameTreeExplorer(max_depth=args.depth)
    except ValueError as e:
        display.log_error(str(e))
        return 1

    display.show_header(f"Move tree to depth {args.depth}")
    stats = explorer.explore(show_progress=not args.no_progress)
    display.show_explore_stats(stats)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="English draughts rules engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    move_kwargs = dict(
        action="append",
        nargs=4,
        type=int,
        metavar=("FROM_COL", "FROM_ROW", "TO_COL", "TO_ROW"),
    )

    # Show command
    show_parser = subparsers.add_parser("show", help="Draw the starting position")
    show_parser.set_defaults(func=show_command)

    # Moves command
    moves_parser = subparsers.add_parser("moves", help="List legal moves")
    moves_parser.add_argument(
        "--move", help="Move to play first (repeatable)", **move_kwargs
    )
    moves_parser.set_defaults(func=moves_command)

    # Play command
    play_parser = subparsers.add_parser("play", help="Play moves from the start")
    play_parser.add_argument(
        "--move", required=True, help="Move to play (repeatable)", **move_kwargs
    )
    play_parser.set_defaults(func=play_command)

    # Explore command
    explore_parser = subparsers.add_parser("explore", help="Explore the move tree")
    explore_parser.add_argument(
        "--depth", type=int, default=4, help="Number of plies to expand"
    )
    explore_parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    explore_parser.set_defaults(func=explore_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level)
    return args.func(args, GameDisplay())


if __name__ == "__main__":
    sys.exit(main())
