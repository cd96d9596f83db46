#!/usr/bin/env python3
"""15-puzzle solver.

Usage::

    fifteen solve 5134207896ACDEBF             # A*, prints "8 Moves:"
    fifteen solve 5134207896ACDEBF -a idastar  # IDA*
    fifteen inspect 16245A3709C8DEBF           # heuristic, parity, board
    fifteen scramble --moves 30 --seed 7       # random solvable state
    fifteen play                               # interactive Rich terminal
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from fifteen.engine.gamegenerator import DEFAULT_SCRAMBLE, GameGenerator
from fifteen.engine.gameplay import GamePlay
from fifteen.engine.gamesolver import MAX_STEPS, Algorithm, Solver
from fifteen.errors import FormatError, NoSolutionError, StepLimitExceeded, UnsolvableError
from fifteen.models.board import PuzzleState
from fifteen_cli.render import render_board, render_solution, render_summary

console = Console()

app = typer.Typer(add_completion=False, help="Solve the 15-puzzle with A* or IDA*.")


# -- helpers ------------------------------------------------------------------


def _parse(text: str) -> PuzzleState:
    # Shell input may carry a 0x prefix, lower case or stray whitespace.
    raw = text.strip()
    if raw[:2] in ("0x", "0X"):
        raw = raw[2:]
    try:
        return PuzzleState.parse(raw.upper())
    except FormatError as exc:
        raise typer.BadParameter(str(exc), param_hint="STATE") from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# -- CLI entry points ---------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve the 15-puzzle with A* or IDA*."""
    _configure_logging(verbose)


@app.command()
def solve(
    state: str = typer.Argument(..., help="16 hex digits, row-major, 0 is the blank."),
    algorithm: Algorithm = typer.Option(
        Algorithm.ASTAR, "-a", "--algorithm",
        help="Search engine.",
    ),
    max_steps: int = typer.Option(
        MAX_STEPS, "--max-steps",
        min=1, envvar="FIFTEEN_MAX_STEPS",
        help="Give up after this many A* steps / IDA* expansions.",
    ),
    states: bool = typer.Option(
        False, "--states",
        help="Also list every intermediate state.",
    ),
) -> None:
    """Print a shortest move sequence for STATE."""
    field = _parse(state)

    try:
        solution = Solver.solve(field, algorithm=algorithm, max_steps=max_steps)
    except UnsolvableError:
        console.print("[red]Field isn't solvable![/red]")
        raise typer.Exit(code=1)
    except StepLimitExceeded:
        console.print("[red]Step limit exceeded![/red]")
        raise typer.Exit(code=1)
    except NoSolutionError as exc:
        console.print(f"[red]Something went wrong...[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(render_solution(solution, show_states=states))


@app.command()
def inspect(
    state: str = typer.Argument(..., help="16 hex digits, row-major, 0 is the blank."),
) -> None:
    """Show the board, its identifier, heuristic and solvability."""
    field = _parse(state)
    console.print(render_board(field))
    console.print(render_summary(field))


@app.command()
def scramble(
    moves: int = typer.Option(
        DEFAULT_SCRAMBLE, "-m", "--moves",
        min=0,
        help="Length of the random walk from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Print a random solvable state."""
    field = GameGenerator.generate(moves, random.Random(seed))
    console.print(field.encode(), highlight=False)


@app.command()
def play(
    state: Optional[str] = typer.Argument(
        None, help="Starting state. Omit for a random scramble.",
    ),
    moves: int = typer.Option(
        DEFAULT_SCRAMBLE, "-m", "--moves",
        min=1,
        help="Scramble length for new games.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible scrambles.",
    ),
    max_steps: int = typer.Option(
        MAX_STEPS, "--max-steps",
        min=1, envvar="FIFTEEN_MAX_STEPS",
        help="Solver budget for hints and auto-solve.",
    ),
) -> None:
    """Play interactively (arrow keys / WASD move the blank)."""
    from fifteen_cli import play as session

    rng = random.Random(seed)
    if state is None:
        field = GameGenerator.generate(moves, rng)
    else:
        field = _parse(state)
        if not field.is_solvable():
            console.print("[red]Field isn't solvable![/red]")
            raise typer.Exit(code=1)

    session.run(GamePlay.from_state(field), max_steps=max_steps, scramble=moves, rng=rng)


if __name__ == "__main__":
    app()
