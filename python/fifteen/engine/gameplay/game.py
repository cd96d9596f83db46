"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

from collections.abc import Iterable

from fifteen.engine.gamegenerator import DEFAULT_SCRAMBLE, GameGenerator
from fifteen.models.board import Move, PuzzleState


class GamePlay:
    """Orchestrates a single game session on an immutable board.

    Every accepted move replaces ``state`` with the successor state.
    """

    def __init__(self, scramble: int = DEFAULT_SCRAMBLE) -> None:
        self.state = GameGenerator.generate(scramble)
        self.moves: int = 0

    @classmethod
    def from_state(cls, state: PuzzleState) -> GamePlay:
        """Create a game session from an existing state (e.g. typed in by the user)."""
        obj = object.__new__(cls)
        obj.state = state
        obj.moves = 0
        return obj

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, move: Move) -> bool:
        """Slide the blank in *move*'s direction.

        Returns True if the move was valid.
        """
        if not self.state.is_legal_move(move):
            return False
        self.state = self.state.apply_move(move)
        self.moves += 1
        return True

    def apply(self, moves: Iterable[Move]) -> int:
        """Play *moves* in order, stopping at the first invalid one.

        Returns how many moves were applied.
        """
        applied = 0
        for m in moves:
            if not self.move(m):
                break
            applied += 1
        return applied

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_goal()
