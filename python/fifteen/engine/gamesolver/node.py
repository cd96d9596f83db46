"""Search-tree nodes shared by both engines, and solution reconstruction."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from fifteen.models.board import Move, PuzzleState


@dataclass(frozen=True)
class SearchNode:
    """One generated node.

    ``id`` is the node's index in its engine's append-only node list;
    the root is its own parent.
    """

    state: PuzzleState
    id: int
    parent_id: int
    move: Move | None
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def is_root(self) -> bool:
        return self.parent_id == self.id


@dataclass(frozen=True)
class Solution:
    """Moves from the start to the goal, and every state along the way.

    ``states`` has one more entry than ``moves``: it starts with the
    start state and ends with the goal.
    """

    moves: tuple[Move, ...]
    states: tuple[PuzzleState, ...]

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def notation(self) -> str:
        """Compact form, e.g. ``"LURD"``."""
        return "".join(m.symbol for m in self.moves)


def reconstruct(nodes: Sequence[SearchNode], goal_id: int) -> Solution:
    """Walk parent links from *goal_id* back to the root and reverse."""
    moves: list[Move] = []
    states: list[PuzzleState] = []
    node = nodes[goal_id]
    while True:
        states.append(node.state)
        if node.is_root:
            break
        assert node.move is not None
        moves.append(node.move)
        node = nodes[node.parent_id]
    moves.reverse()
    states.reverse()
    return Solution(moves=tuple(moves), states=tuple(states))
