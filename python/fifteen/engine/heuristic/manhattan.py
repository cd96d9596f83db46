"""Manhattan-distance heuristic, full and incremental."""

from __future__ import annotations

from fifteen.errors import IllegalMoveError
from fifteen.models.board import CELLS, SIZE, Move, PuzzleState

# Goal row / column of each tile value (index 0, the blank, is unused).
_GOAL_ROW = [0] + [(v - 1) // SIZE for v in range(1, CELLS)]
_GOAL_COL = [0] + [(v - 1) % SIZE for v in range(1, CELLS)]


def full_heuristic(state: PuzzleState) -> int:
    """Sum of the Manhattan distances of the 15 tiles to their goal cells."""
    total = 0
    for index, value in enumerate(state.cells()):
        if value == 0:
            continue
        r, c = divmod(index, SIZE)
        total += abs(r - _GOAL_ROW[value]) + abs(c - _GOAL_COL[value])
    return total


def incremental_delta(state: PuzzleState, move: Move) -> int:
    """Change in :func:`full_heuristic` caused by applying *move* to *state*.

    Only the tile next to the blank moves, along one axis, so the delta is
    always +1 or -1.  *move* must be legal.
    """
    if not state.is_legal_move(move):
        raise IllegalMoveError(f"Blank at cell {state.blank} cannot move {move.value}.")
    blank = state.blank
    tile_index = blank + move.offset
    value = state.cell(tile_index)

    if move is Move.UP or move is Move.DOWN:
        goal = _GOAL_ROW[value]
        before, after = tile_index // SIZE, blank // SIZE
    else:
        goal = _GOAL_COL[value]
        before, after = tile_index % SIZE, blank % SIZE
    return abs(goal - after) - abs(goal - before)
