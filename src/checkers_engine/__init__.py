"""Rules engine for English draughts."""

__version__ = "0.1.0"
