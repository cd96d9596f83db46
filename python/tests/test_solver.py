"""Solver test suite — both engines against known optimal lengths.

Boards are pre-built JSON fixtures under ``<project_root>/fixtures/``.
Every test is hard-killed by ``pytest-timeout`` (configured in
``pyproject.toml``).  Returned move lists are replayed through the game
engine to verify correctness.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fifteen.engine.gameplay import GamePlay
from fifteen.engine.gamesolver import AStar, Algorithm, IDAStar, Solution, Solver
from fifteen.engine.gamesolver import idastar as idastar_module
from fifteen.errors import (
    NoSolutionError,
    SearchInvariantError,
    StepLimitExceeded,
    UnsolvableError,
)
from fifteen.models.board import Move, PuzzleState

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

# The 45-move and deeper fixtures outrun the per-test timeout under IDA*;
# they only feed the parity tests.
MAX_TEST_DEPTH = 35


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = [
    b for b in _load("boards.json")
    if b["solvable"] and b["moves"] <= MAX_TEST_DEPTH
]
_UNSOLVABLE = [b for b in _load("boards.json") if not b["solvable"]]


# -- helpers ------------------------------------------------------------------


def _run_astar(state: PuzzleState) -> Solution:
    star = AStar(state)
    while True:
        solution = star.step()
        if solution is not None:
            return solution


def _assert_solution(data: dict, solution: Solution) -> None:
    """Check the solution's shape and replay it from the start state."""
    start = PuzzleState.parse(data["state"])

    # ---- shape --------------------------------------------------------------
    assert len(solution) == data["moves"], f"wrong length ({data['id']})"
    assert len(solution.states) == len(solution.moves) + 1
    assert solution.states[0] == start
    assert solution.states[-1].is_goal()
    assert all(isinstance(m, Move) for m in solution.moves)

    # ---- replay states ------------------------------------------------------
    state = start
    for move, expected in zip(solution.moves, solution.states[1:]):
        state = state.apply_move(move)
        assert state == expected

    # ---- apply moves via the game engine and check win ----------------------
    game = GamePlay.from_state(start)
    applied = game.apply(solution.moves)
    assert applied == len(solution), (
        f"Move {applied} was invalid at blank {game.state.blank} ({data['id']})"
    )
    assert game.is_won, f"Board not solved after {len(solution)} moves ({data['id']})"


# -- engines ------------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_astar(board_data: dict) -> None:
    solution = _run_astar(PuzzleState.parse(board_data["state"]))
    _assert_solution(board_data, solution)


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_idastar(board_data: dict) -> None:
    solution = IDAStar(PuzzleState.parse(board_data["state"])).run()
    _assert_solution(board_data, solution)


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_engines_agree_on_length(board_data: dict) -> None:
    state = PuzzleState.parse(board_data["state"])
    assert len(_run_astar(state)) == len(IDAStar(state).run())


def test_astar_step_is_resumable() -> None:
    star = AStar(PuzzleState.parse("5134207896ACDEBF"))
    assert star.step() is None
    assert star.expanded == star.closed_size == 1
    assert star.frontier_size == star.generated == 4

    steps = 1
    solution = None
    while solution is None:
        solution = star.step()
        steps += 1
    assert len(solution) == 8
    assert steps > 1


def test_astar_breaks_ties_by_h_then_insertion_order() -> None:
    start = PuzzleState.parse("5134207896ACDEBF")
    star = AStar(start)
    star.step()
    # DOWN and LEFT both reach f=8 with h=7; DOWN was generated first.
    f, h, *_ = star._open[0]
    assert (f, h) == (8, 7)
    star.step()
    assert start.apply_move(Move.DOWN).unique_id in star._closed
    assert start.apply_move(Move.LEFT).unique_id not in star._closed


def test_astar_root_generates_every_legal_move() -> None:
    star = AStar(PuzzleState.solved().apply_move(Move.UP))
    star.step()
    # Blank at cell 11: UP, DOWN, LEFT are legal.
    assert star.generated == 3


def test_astar_reports_exhausted_frontier() -> None:
    star = AStar(PuzzleState.parse("5134207896ACDEBF"))
    star._open.clear()
    with pytest.raises(NoSolutionError):
        star.step()


def test_astar_refuses_to_expand_a_state_twice() -> None:
    star = AStar(PuzzleState.parse("5134207896ACDEBF"))
    assert star.step() is None
    # Put the already-closed root back on the frontier.
    star._open[:] = [(0, 0, 0, 0)]
    with pytest.raises(SearchInvariantError):
        star.step()


def test_idastar_bound_rises_to_solution_length() -> None:
    ida = IDAStar(PuzzleState.parse("1723068459ACDEBF"))
    solution = ida.run()
    assert ida.bound == len(solution) == 13
    assert ida.iterations >= 1


def test_idastar_gives_up_past_max_bound(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(idastar_module, "MAX_BOUND", 3)
    with pytest.raises(NoSolutionError):
        IDAStar(PuzzleState.parse("16245A3709C8DEBF")).run()


def test_idastar_polls_should_stop() -> None:
    calls = 0

    def stop() -> bool:
        nonlocal calls
        calls += 1
        return calls > 10

    with pytest.raises(StepLimitExceeded):
        IDAStar(PuzzleState.parse("12345678A0BE9FCD")).run(should_stop=stop)


# -- facade -------------------------------------------------------------------


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solver_solve(board_data: dict, algorithm: Algorithm) -> None:
    solution = Solver.solve(PuzzleState.parse(board_data["state"]), algorithm=algorithm)
    _assert_solution(board_data, solution)


@pytest.mark.parametrize("board_data", _UNSOLVABLE, ids=_ids)
def test_solver_rejects_unsolvable(board_data: dict) -> None:
    state = PuzzleState.parse(board_data["state"])
    assert not Solver.is_solvable(state)
    with pytest.raises(UnsolvableError):
        Solver.solve(state)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_solver_step_limit(algorithm: Algorithm) -> None:
    state = PuzzleState.parse("12345678A0BE9FCD")
    with pytest.raises(StepLimitExceeded):
        Solver.solve(state, algorithm=algorithm, max_steps=5)


def test_solver_goal_needs_no_search() -> None:
    solution = Solver.solve(PuzzleState.solved(), max_steps=1)
    assert solution.moves == ()
    assert solution.states == (PuzzleState.solved(),)


def test_hint() -> None:
    assert Solver.hint(PuzzleState.solved()) is None
    assert Solver.hint(PuzzleState.parse("1234067859ACDEBF")) is Move.DOWN


def test_solution_notation() -> None:
    solution = Solver.solve(PuzzleState.parse("1234067859ACDEBF"))
    assert solution.notation() == "DRRDR"
    assert list(solution) == list(solution.moves)
