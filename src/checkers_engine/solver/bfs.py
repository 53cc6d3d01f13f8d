"""
Breadth-first exploration of the draughts move tree.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from tqdm import tqdm

from ..core import (
    GameState,
    MoveError,
    apply_move,
    create_starting_state,
    generate_legal_moves,
    init_zobrist_table,
    zobrist_hash,
)

logger = logging.getLogger(__name__)


@dataclass
class DepthStats:
    """Counts for one level of the tree."""

    depth: int
    positions: int  # Unique positions at this depth
    generated: int = 0  # Moves generated from the previous depth
    rejected: int = 0  # Generated moves that apply_move refused


class GameTreeExplorer:
    """
    Level-by-level move tree explorer.

    Expands every position at depth d with every generated move to get
    depth d + 1, keeping one state per Zobrist hash within a depth.
    """

    def __init__(self, max_depth: int, start_state: Optional[GameState] = None):
        """
        Initialize explorer.

        Args:
            max_depth: Number of plies to expand
            start_state: Root position (default: standard starting position)
        """
        if max_depth < 0:
            raise ValueError(f"Invalid depth {max_depth}, must be >= 0")

        self.max_depth = max_depth
        self.start_state = start_state or create_starting_state()

        init_zobrist_table()

        self.total_generated = 0
        self.total_unique = 0

    def explore(self, show_progress: bool = True) -> List[DepthStats]:
        """
        Explore the tree down to max_depth.

        Returns:
            One DepthStats per depth, starting with the root at depth 0
        """
        logger.info(f"Starting exploration to depth {self.max_depth}")

        frontier: Dict[int, GameState] = {zobrist_hash(self.start_state): self.start_state}
        stats = [DepthStats(depth=0, positions=1)]

        with tqdm(
            total=self.max_depth, desc="Explore", unit=" depth", disable=not show_progress
        ) as pbar:
            for depth in range(1, self.max_depth + 1):
                pbar.set_description(f"Depth {depth} ({len(frontier):,} parents)")

                next_frontier: Dict[int, GameState] = {}
                level = DepthStats(depth=depth, positions=0)

                for state in frontier.values():
                    for move in generate_legal_moves(state):
                        level.generated += 1
                        try:
                            next_state = apply_move(state, move)
                        except MoveError as e:
                            logger.debug(f"Skipping generated move: {e}")
                            level.rejected += 1
                            continue

                        next_hash = zobrist_hash(next_state)
                        if next_hash not in next_frontier:
                            next_frontier[next_hash] = next_state

                level.positions = len(next_frontier)
                stats.append(level)

                self.total_generated += level.generated
                self.total_unique += level.positions

                logger.info(
                    f"Depth {depth}: {len(frontier):,} positions -> "
                    f"generated {level.generated:,} moves "
                    f"({level.rejected:,} rejected) -> {level.positions:,} unique"
                )

                pbar.update(1)
                frontier = next_frontier

                if not frontier:
                    logger.info(f"No moves left at depth {depth}")
                    break

        logger.info(
            f"Exploration complete! Duplication rate: "
            f"{(1 - self.total_unique / self.total_generated) * 100:.1f}%"
            if self.total_generated > 0
            else "Exploration complete! No moves generated"
        )

        return stats
