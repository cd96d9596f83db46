"""Manhattan heuristic tests."""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.heuristic import full_heuristic, incremental_delta
from fifteen.errors import IllegalMoveError
from fifteen.models.board import Move, PuzzleState


@pytest.mark.parametrize(
    ("encoded", "expected"),
    [
        ("123456789ABCDEF0", 0),
        ("123456789ABCDE0F", 1),
        ("1234067859ACDEBF", 5),
        ("5134207896ACDEBF", 8),
        ("0123456789ABCDEF", 24),
    ],
)
def test_full_heuristic(encoded: str, expected: int) -> None:
    assert full_heuristic(PuzzleState.parse(encoded)) == expected


@pytest.mark.parametrize(
    ("encoded", "move", "expected"),
    [
        ("5134207896ACDEBF", Move.UP, 1),
        ("5134207896ACDEBF", Move.DOWN, -1),
        ("5134207896ACDEBF", Move.LEFT, -1),
        ("5134207896ACDEBF", Move.RIGHT, 1),
        ("123456789ABCDEF0", Move.UP, 1),
        ("123456789ABCDEF0", Move.LEFT, 1),
    ],
)
def test_incremental_delta(encoded: str, move: Move, expected: int) -> None:
    assert incremental_delta(PuzzleState.parse(encoded), move) == expected


def test_incremental_delta_rejects_illegal_move() -> None:
    with pytest.raises(IllegalMoveError):
        incremental_delta(PuzzleState.solved(), Move.DOWN)


def test_delta_matches_full_recomputation() -> None:
    rng = random.Random(2024)
    states = [GameGenerator.scramble(rng.randrange(0, 80), rng) for _ in range(300)]
    for state in states:
        h = full_heuristic(state)
        for move in state.legal_moves():
            child = state.apply_move(move)
            assert full_heuristic(child) == h + incremental_delta(state, move), (
                f"{state.encode()} {move.value}"
            )


def test_delta_on_unsolvable_states_too() -> None:
    rng = random.Random(7)
    for _ in range(100):
        cells = list(range(16))
        rng.shuffle(cells)
        state = PuzzleState.from_cells(cells)
        for move in state.legal_moves():
            delta = incremental_delta(state, move)
            assert delta in (-1, 1)
            assert full_heuristic(state.apply_move(move)) == full_heuristic(state) + delta
