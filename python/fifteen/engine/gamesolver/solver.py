"""15-puzzle solver front door: validation, engine choice, step budget."""

from __future__ import annotations

import logging
from enum import StrEnum

from fifteen.engine.gamesolver.astar import AStar
from fifteen.engine.gamesolver.idastar import IDAStar
from fifteen.engine.gamesolver.node import Solution
from fifteen.errors import StepLimitExceeded, UnsolvableError
from fifteen.models.board import Move, PuzzleState

logger = logging.getLogger(__name__)

# Upper bound on A* steps (or IDA* expansions) before giving up.
MAX_STEPS = 160_000_000


class Algorithm(StrEnum):
    ASTAR = "astar"
    IDASTAR = "idastar"


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        state: PuzzleState,
        algorithm: Algorithm = Algorithm.ASTAR,
        max_steps: int = MAX_STEPS,
    ) -> Solution:
        """Return an optimal solution for *state*.

        Raises :class:`UnsolvableError` before searching if *state* is in
        the wrong parity class, and :class:`StepLimitExceeded` when the
        engine needs more than *max_steps* steps.
        """
        if not Solver.is_solvable(state):
            raise UnsolvableError(f"{state.encode()} cannot reach the goal.")

        if state.is_goal():
            return Solution(moves=(), states=(state,))

        if algorithm is Algorithm.IDASTAR:
            solution = Solver._run_idastar(state, max_steps)
        else:
            solution = Solver._run_astar(state, max_steps)

        logger.info(
            "%s solved %s in %d moves", algorithm.value, state.encode(), len(solution)
        )
        return solution

    @staticmethod
    def hint(state: PuzzleState, max_steps: int = MAX_STEPS) -> Move | None:
        """Return the first move of an optimal solution, or ``None`` if solved."""
        if state.is_goal():
            return None
        solution = Solver.solve(state, max_steps=max_steps)
        return solution.moves[0]

    @staticmethod
    def is_solvable(state: PuzzleState) -> bool:
        """Return True if *state* can reach the goal state."""
        return state.is_solvable()

    # -- engines --------------------------------------------------------------

    @staticmethod
    def _run_astar(state: PuzzleState, max_steps: int) -> Solution:
        star = AStar(state)
        for _ in range(max_steps):
            solution = star.step()
            if solution is not None:
                logger.debug(
                    "A* finished: %d expanded, %d generated, %d left in frontier",
                    star.expanded, star.generated, star.frontier_size,
                )
                return solution

        logger.warning("A* gave up on %s after %d steps", state.encode(), max_steps)
        raise StepLimitExceeded(max_steps)

    @staticmethod
    def _run_idastar(state: PuzzleState, max_steps: int) -> Solution:
        ida = IDAStar(state)
        try:
            return ida.run(should_stop=lambda: ida.expanded >= max_steps)
        except StepLimitExceeded:
            logger.warning(
                "IDA* gave up on %s at bound %d after %d expansions",
                state.encode(), ida.bound, ida.expanded,
            )
            raise
