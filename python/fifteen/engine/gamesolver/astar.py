"""Best-first (A*) search, driven one expansion at a time."""

from __future__ import annotations

import heapq
import itertools
import logging

from fifteen.engine.gamesolver.node import SearchNode, Solution, reconstruct
from fifteen.engine.heuristic import full_heuristic, incremental_delta
from fifteen.errors import NoSolutionError, SearchInvariantError
from fifteen.models.board import Move, PuzzleState

logger = logging.getLogger(__name__)


class AStar:
    """Resumable A* over puzzle states.

    Each :meth:`step` pops one node and expands it, so a host loop can
    bound the work and interleave it with other things.  States are
    deduplicated when they are *generated*: the first path that reaches
    a state is the one kept, and there is no decrease-key.  With the
    consistent Manhattan heuristic this still yields optimal solutions.
    """

    def __init__(self, start: PuzzleState) -> None:
        self.start = start
        self._nodes: list[SearchNode] = []
        self._open: list[tuple[int, int, int, int]] = []
        self._added: set[int] = set()
        self._closed: dict[int, int] = {}
        self._counter = itertools.count()

        self.expanded: int = 0
        self.generated: int = 0

        h = full_heuristic(start)
        self._push(SearchNode(state=start, id=0, parent_id=0, move=None, g=0, h=h))

    # -- queries --------------------------------------------------------------

    @property
    def frontier_size(self) -> int:
        return len(self._open)

    @property
    def closed_size(self) -> int:
        return len(self._closed)

    # -- search ---------------------------------------------------------------

    def step(self) -> Solution | None:
        """Expand the most promising node.

        Returns the solution once the goal is popped, ``None`` when the
        search must continue, and raises :class:`NoSolutionError` once the
        frontier is empty.
        """
        if not self._open:
            raise NoSolutionError(
                f"Frontier exhausted after {self.expanded} expansions "
                f"from {self.start.encode()}."
            )

        *_, node_id = heapq.heappop(self._open)
        node = self._nodes[node_id]
        state = node.state

        if state.is_goal():
            logger.debug(
                "A* reached the goal at depth %d (%d expanded, %d generated, %d closed)",
                node.g, self.expanded, self.generated, self.closed_size,
            )
            return reconstruct(self._nodes, node.id)

        key = state.unique_id
        if key in self._closed:
            raise SearchInvariantError(
                f"State {state.encode()} expanded twice "
                f"(nodes {self._closed[key]} and {node.id})."
            )
        self._closed[key] = node.id
        self.expanded += 1

        for move in Move:
            if node.move is not None and move is node.move.inverse:
                continue
            if not state.is_legal_move(move):
                continue

            child = state.apply_move(move)
            if child.unique_id in self._added:
                continue

            self._push(
                SearchNode(
                    state=child,
                    id=len(self._nodes),
                    parent_id=node.id,
                    move=move,
                    g=node.g + 1,
                    h=node.h + incremental_delta(state, move),
                )
            )
            self.generated += 1

        return None

    # -- helpers --------------------------------------------------------------

    def _push(self, node: SearchNode) -> None:
        self._nodes.append(node)
        self._added.add(node.state.unique_id)
        # Ties on f go to the node closer to the goal, then first-in.
        heapq.heappush(self._open, (node.f, node.h, next(self._counter), node.id))
