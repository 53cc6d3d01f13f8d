"""
Rich-based terminal output for the game driver.

Provides:
- Board drawing (verbatim plain text)
- Legal move tables
- Exploration statistics
- Status lines
"""

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core import GameState, Move
from ..solver import DepthStats


class GameDisplay:
    """
    Rich-based display for a draughts game.

    The board itself is printed as plain text, exactly as render_board
    produces it.
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize game display.

        Args:
            console: Console to print to (default: a new stdout console)
        """
        self.console = console or Console()

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def show_board(self, state: GameState):
        """Print the board and whose turn it is."""
        self.console.print(Text(str(state)), end="")
        self.console.print(
            f"Move {state.move_count}, [bold]{state.turn.value.capitalize()}[/bold] to move"
        )

    def moves_table(self, state: GameState, moves: List[Move]) -> Table:
        """Create legal move table."""
        table = Table(title=f"Legal moves for {state.turn.value.capitalize()}")
        table.add_column("#", style="dim", justify="right")
        table.add_column("From", style="cyan")
        table.add_column("To", style="cyan")
        table.add_column("Kind")

        for i, move in enumerate(moves, start=1):
            kind = "[bold red]jump[/bold red]" if move.is_jump else "step"
            table.add_row(str(i), str(move.from_square), str(move.to_square), kind)

        return table

    def show_moves(self, state: GameState, moves: List[Move]):
        if not moves:
            self.log_info(f"No legal moves for {state.turn.value.capitalize()}")
            return
        self.console.print(self.moves_table(state, moves))

    def show_explore_stats(self, stats: List[DepthStats]):
        """Print one row per explored depth."""
        table = Table(title="Move tree")
        table.add_column("Depth", justify="right")
        table.add_column("Generated", justify="right")
        table.add_column("Rejected", justify="right")
        table.add_column("Unique positions", justify="right", style="bold")

        for level in stats:
            table.add_row(
                str(level.depth),
                f"{level.generated:,}",
                f"{level.rejected:,}",
                f"{level.positions:,}",
            )

        self.console.print(table)
