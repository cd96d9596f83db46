"""Rich renderables for boards and solutions."""

from __future__ import annotations

import rich.box
from rich.console import Group
from rich.table import Table
from rich.text import Text

from fifteen.engine.gamesolver import Solution
from fifteen.engine.heuristic import full_heuristic
from fifteen.models.board import SIZE, PuzzleState


def render_board(state: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=3, justify="center")

    for r, row in enumerate(state.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif state.is_tile_correct(r * SIZE + c):
                cells.append(f"[bold green]{val:>2}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>2}[/bold white]")
        table.add_row(*cells)

    return table


def render_summary(state: PuzzleState) -> Table:
    """Key facts about *state* as a two-column table."""
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(style="bold")
    table.add_row("Encoding", state.encode())
    table.add_row("Identifier", f"{state.unique_id:#018x}")
    table.add_row("Manhattan", str(full_heuristic(state)))
    solvable = "[green]yes[/green]" if state.is_solvable() else "[red]no[/red]"
    table.add_row("Solvable", solvable)
    table.add_row("Solved", "yes" if state.is_goal() else "no")
    return table


def render_solution(solution: Solution, show_states: bool = False) -> Group:
    """Move count and move letters, optionally followed by every state."""
    header = Text()
    header.append(str(len(solution)), style="bold yellow")
    header.append(" Moves:", style="bold")

    parts: list[Text | Table] = [header, Text(solution.notation() or "-", style="cyan")]
    if show_states:
        steps = Table(box=rich.box.SIMPLE_HEAD, show_edge=False)
        steps.add_column("#", justify="right", style="dim")
        steps.add_column("Move", style="cyan")
        steps.add_column("State")
        steps.add_row("0", "", solution.states[0].encode())
        for i, (move, state) in enumerate(zip(solution.moves, solution.states[1:]), 1):
            steps.add_row(str(i), move.value, state.encode())
        parts.append(steps)
    return Group(*parts)
