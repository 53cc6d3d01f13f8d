"""Utility modules for the draughts engine."""

from .rich_display import GameDisplay

__all__ = [
    "GameDisplay",
]
