"""
Rich-based output for the command-line harness.

Provides:
- Board rendering as a table inside a panel
- Legal move and result lines
- Playout summary table
- Rich logging setup
"""

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core import (
    NUM_PITS,
    TOTAL_PITS,
    MancalaState,
    generate_legal_moves,
    get_game_result,
    get_home_pit,
    player_totals,
)

console = Console()
logger = logging.getLogger(__name__)


class MancalaDisplay:
    """
    Rich display for boards and playout statistics.

    Shows:
    - Board with pit indices in the header row
    - Whose turn it is and the legal moves
    - Result once the game is over
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def board_table(self, state: MancalaState) -> Table:
        """
        Build the board table.

        Layout mirrors the plain board string: P1's pits 13..8 on top,
        stores at the sides, P0's pits 1..6 at the bottom.
        """
        table = Table(show_header=False, box=None, padding=(0, 1))
        for _ in range(NUM_PITS + 2):
            table.add_column(justify="center")

        p1_pits = [TOTAL_PITS - 1 - i for i in range(NUM_PITS)]
        p0_pits = [i + 1 for i in range(NUM_PITS)]
        p1_store = get_home_pit(1)
        p0_store = get_home_pit(0)

        table.add_row("", *[f"[dim]{pit}[/dim]" for pit in p1_pits], "")
        table.add_row("", *[f"[magenta]{state.board[pit]}[/magenta]" for pit in p1_pits], "")
        table.add_row(
            f"[bold magenta]{state.board[p1_store]}[/bold magenta]",
            *([""] * NUM_PITS),
            f"[bold cyan]{state.board[p0_store]}[/bold cyan]",
        )
        table.add_row("", *[f"[cyan]{state.board[pit]}[/cyan]" for pit in p0_pits], "")
        table.add_row("", *[f"[dim]{pit}[/dim]" for pit in p0_pits], "")

        return table

    def show_board(self, state: MancalaState):
        """Show the board, the player to move and the legal moves."""
        p0_total, p1_total = player_totals(state)
        title = f"Move {state.num_moves} | P0 {p0_total} - P1 {p1_total}"
        self.console.print(Panel(self.board_table(state), title=title, expand=False))

        result = get_game_result(state)
        if result is not None:
            self.log_success(result)
        else:
            moves = " ".join(str(move) for move in generate_legal_moves(state))
            self.log_info(f"Player {state.current_player} to move: {moves}")

    def show_summary(self, stats) -> Table:
        """Show playout statistics (a simulation.PlayoutStats)."""
        table = Table(title="Random playouts", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Games", f"{stats.games:,}")
        table.add_row("Player 0 wins", f"{stats.wins[0]:,} ({stats.win_rate(0):.1%})")
        table.add_row("Player 1 wins", f"{stats.wins[1]:,} ({stats.win_rate(1):.1%})")
        table.add_row("Draws", f"{stats.draws:,}")
        table.add_row("Mean length", f"{stats.mean_length:.1f} moves")
        table.add_row("Min / max length", f"{stats.min_length} / {stats.max_length}")
        table.add_row("Extra turns", f"{stats.extra_turns:,}")

        self.console.print(table)
        return table


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
