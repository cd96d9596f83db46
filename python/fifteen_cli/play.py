"""Interactive Rich terminal session — move the blank, ask for hints, auto-solve."""

from __future__ import annotations

import random

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gameplay import GamePlay
from fifteen.engine.gamesolver import MAX_STEPS, Algorithm, Solver
from fifteen.errors import FifteenError
from fifteen.models.board import Move
from fifteen_cli.input_handler import get_key
from fifteen_cli.render import render_board

console = Console()

_DIRECTIONS = {
    "up": Move.UP,
    "down": Move.DOWN,
    "left": Move.LEFT,
    "right": Move.RIGHT,
}


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay, max_steps: int) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    try:
        hint = Solver.hint(game.state, max_steps=max_steps)
    except FifteenError as exc:
        return f"[red]{exc}[/red]"
    if hint is None:
        return "[green]Already solved![/green]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] moved blank [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay, algorithm: Algorithm, max_steps: int) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    try:
        solution = Solver.solve(game.state, algorithm=algorithm, max_steps=max_steps)
    except FifteenError as exc:
        return f"[red]{exc}[/red]"

    game.apply(solution.moves)
    return (
        f"[bold green]Solved in {len(solution)} moves ({algorithm.value}):[/bold green] "
        f"{solution.notation() or '-'}"
    )


# -- screens ------------------------------------------------------------------


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move blank   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve (A*)   ", style="dim")
    controls.append("I", style="bold cyan")
    controls.append("  solve (IDA*)   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  scramble   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw(game: GamePlay, title: str, footer: Text | None = None, status: str = "") -> None:
    console.clear()

    panel = Panel(
        Align.center(render_board(game.state)),
        title=title,
        subtitle=f"[dim]{game.state.encode()}[/dim]",
        border_style="bold green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if footer is not None:
        console.print(Align.center(footer))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))


# -- game loop ----------------------------------------------------------------


def run(
    game: GamePlay,
    max_steps: int = MAX_STEPS,
    scramble: int = 40,
    rng: random.Random | None = None,
) -> None:
    """Run the interactive loop until the player quits."""
    rng = rng or random.Random()
    status = ""

    while True:
        title = (
            "[bold green]Solved![/bold green]"
            if game.is_won
            else "[bold cyan]15-Puzzle[/bold cyan]"
        )
        _draw(game, title=title, footer=_controls(), status=status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            if not game.move(_DIRECTIONS[key]):
                status = "[yellow]Bad move[/yellow]"
        elif key == "hint":
            status = _apply_hint(game, max_steps)
        elif key == "solve":
            status = _auto_solve(game, Algorithm.ASTAR, max_steps)
        elif key == "solve-ida":
            status = _auto_solve(game, Algorithm.IDASTAR, max_steps)
        elif key == "restart":
            game = GamePlay.from_state(GameGenerator.generate(scramble, rng))
            status = "[yellow]Scrambled![/yellow]"
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
