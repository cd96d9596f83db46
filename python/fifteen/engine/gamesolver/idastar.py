"""Iterative-deepening A* (IDA*)."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from fifteen.engine.gamesolver.node import SearchNode, Solution, reconstruct
from fifteen.engine.heuristic import full_heuristic, incremental_delta
from fifteen.errors import NoSolutionError, StepLimitExceeded
from fifteen.models.board import Move, PuzzleState

logger = logging.getLogger(__name__)

# Every 15-puzzle position is solvable in at most 80 moves; recursion
# depth follows the bound, so nothing beyond it is ever searched.
MAX_BOUND = 80

FOUND = -1


class IDAStar:
    """Repeated cost-bounded depth-first search with a rising threshold.

    Only the inverse of the previous move is pruned; there is no visited
    set, so a state may be revisited through a longer path within one
    iteration.  Generated nodes are appended to ``_nodes`` and kept until
    the solve ends.
    """

    def __init__(self, start: PuzzleState) -> None:
        self.start = start
        self._nodes: list[SearchNode] = []
        self._goal_id: int | None = None
        self._should_stop: Callable[[], bool] | None = None

        self.bound: int = 0
        self.iterations: int = 0
        self.expanded: int = 0

    def run(self, should_stop: Callable[[], bool] | None = None) -> Solution:
        """Search until the goal is found.

        *should_stop* is polled once per visited node; when it returns
        true the search is abandoned with :class:`StepLimitExceeded`.
        Raises :class:`NoSolutionError` when no threshold is left to try,
        which only happens for states that cannot reach the goal.
        """
        self._should_stop = should_stop
        root = SearchNode(
            state=self.start, id=len(self._nodes), parent_id=len(self._nodes),
            move=None, g=0, h=full_heuristic(self.start),
        )
        self._nodes.append(root)

        self.bound = root.h
        while True:
            if self.bound > MAX_BOUND:
                raise NoSolutionError(
                    f"No solution within {MAX_BOUND} moves from {self.start.encode()}."
                )
            self.iterations += 1
            logger.debug("IDA* iteration %d, bound %d", self.iterations, self.bound)
            t = self._search(root.id, 0, self.bound)
            if t == FOUND:
                assert self._goal_id is not None
                return reconstruct(self._nodes, self._goal_id)
            if t == math.inf:
                raise NoSolutionError(f"Search space of {self.start.encode()} exhausted.")
            self.bound = int(t)

    def _search(self, node_id: int, g: int, bound: int) -> float:
        if self._should_stop is not None and self._should_stop():
            raise StepLimitExceeded(self.expanded)

        node = self._nodes[node_id]
        # node.h is kept equal to full_heuristic(node.state) incrementally.
        f = g + node.h
        if f > bound:
            return f
        if node.state.is_goal():
            self._goal_id = node_id
            return FOUND

        self.expanded += 1
        minimum = math.inf
        for child_id in self._successors(node):
            t = self._search(child_id, g + 1, bound)
            if t == FOUND:
                return FOUND
            if t < minimum:
                minimum = t
        return minimum

    def _successors(self, node: SearchNode) -> list[int]:
        ids: list[int] = []
        for move in Move:
            if node.move is not None and move is node.move.inverse:
                continue
            if not node.state.is_legal_move(move):
                continue
            child = SearchNode(
                state=node.state.apply_move(move),
                id=len(self._nodes),
                parent_id=node.id,
                move=move,
                g=node.g + 1,
                h=node.h + incremental_delta(node.state, move),
            )
            self._nodes.append(child)
            ids.append(child.id)
        return ids
