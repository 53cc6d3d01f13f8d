"""Move tree exploration."""

from .bfs import DepthStats, GameTreeExplorer

__all__ = [
    "DepthStats",
    "GameTreeExplorer",
]
