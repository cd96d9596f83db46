"""Generates solvable 15-puzzle states."""

from __future__ import annotations

import random

from fifteen.models.board import Move, PuzzleState

DEFAULT_SCRAMBLE = 40


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved() -> PuzzleState:
        """Return the goal state (all tiles in order, blank bottom-right)."""
        return PuzzleState.solved()

    @staticmethod
    def scramble(moves: int, rng: random.Random | None = None) -> PuzzleState:
        """Apply *moves* random legal moves to the goal, never undoing the last one."""
        rng = rng or random.Random()
        state = PuzzleState.solved()
        prev: Move | None = None

        for _ in range(moves):
            candidates = state.legal_moves()
            if prev is not None and prev.inverse in candidates:
                candidates.remove(prev.inverse)
            prev = rng.choice(candidates)
            state = state.apply_move(prev)
        return state

    @staticmethod
    def generate(
        moves: int = DEFAULT_SCRAMBLE, rng: random.Random | None = None
    ) -> PuzzleState:
        """Return a random *solvable* state that is not already solved."""
        rng = rng or random.Random()
        state = GameGenerator.scramble(moves, rng)

        # A short walk can loop back to the goal.
        if moves > 0 and state.is_goal():
            return GameGenerator.generate(moves, rng)

        return state
