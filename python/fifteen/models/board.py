"""Board model for the 15-puzzle."""

from __future__ import annotations

from bisect import bisect_left, insort
from dataclasses import dataclass, field
from enum import StrEnum

from fifteen.errors import FormatError, IllegalMoveError

SIZE = 4
CELLS = SIZE * SIZE

# 1, 2, ..., 15, 0 packed one nibble per cell, cell 0 most significant.
GOAL_ID = 0x123456789ABCDEF0

_HEX_DIGITS = "0123456789ABCDEF"


class Move(StrEnum):
    """Direction the *blank* travels; the neighbouring tile slides the other way."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> Move:
        return _INVERSE[self]

    @property
    def offset(self) -> int:
        """Change of the blank's cell index."""
        return _OFFSET[self]

    @property
    def symbol(self) -> str:
        return self.value[0].upper()


_INVERSE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

_OFFSET = {
    Move.UP: -SIZE,
    Move.DOWN: SIZE,
    Move.LEFT: -1,
    Move.RIGHT: 1,
}


def _shift(index: int) -> int:
    return (CELLS - 1 - index) * 4


@dataclass(frozen=True)
class PuzzleState:
    """One arrangement of the 4×4 board.

    The sixteen cells are packed row-major into ``packed``, four bits per
    cell with cell 0 in the most significant nibble, so the hexadecimal
    spelling of ``packed`` is the state's 16-character encoding.  ``0``
    marks the blank, whose index is cached in ``blank``.

    Equality and hashing look at ``packed`` only.
    """

    packed: int
    blank: int = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> PuzzleState:
        return cls(packed=GOAL_ID, blank=CELLS - 1)

    @classmethod
    def parse(cls, text: str) -> PuzzleState:
        """Create a state from its hex-nibble encoding.

        Example::

            PuzzleState.parse("123456789ABCDEF0")

        Only the upper-case digits ``0-9A-F`` are accepted, with no prefix
        or surrounding whitespace.
        """
        if len(text) != CELLS:
            raise FormatError(
                f"Expected {CELLS} hex digits, got {len(text)}: {text!r}."
            )

        values: list[int] = []
        for ch in text:
            value = _HEX_DIGITS.find(ch)
            if value < 0:
                raise FormatError(f"Invalid character {ch!r} in {text!r}.")
            values.append(value)
        return cls._from_values(values, text)

    @classmethod
    def from_id(cls, unique_id: int) -> PuzzleState:
        """Rebuild a state from its 64-bit identifier."""
        if not 0 <= unique_id < 1 << (CELLS * 4):
            raise FormatError(f"Identifier {unique_id:#x} does not fit in 64 bits.")
        values = [(unique_id >> _shift(i)) & 0xF for i in range(CELLS)]
        return cls._from_values(values, f"{unique_id:#018x}")

    @classmethod
    def from_cells(cls, values: list[int]) -> PuzzleState:
        """Create a state from a flat row-major list of tile values."""
        return cls._from_values(list(values), repr(values))

    @classmethod
    def _from_values(cls, values: list[int], source: str) -> PuzzleState:
        if sorted(values) != list(range(CELLS)):
            raise FormatError(
                f"{source} is not a permutation of 0..{CELLS - 1}."
            )
        packed = 0
        for value in values:
            packed = (packed << 4) | value
        return cls(packed=packed, blank=values.index(0))

    # -- queries --------------------------------------------------------------

    @property
    def unique_id(self) -> int:
        return self.packed

    def encode(self) -> str:
        return f"{self.packed:016X}"

    def cell(self, index: int) -> int:
        return (self.packed >> _shift(index)) & 0xF

    def cells(self) -> tuple[int, ...]:
        return tuple(self.cell(i) for i in range(CELLS))

    def rows(self) -> tuple[tuple[int, ...], ...]:
        flat = self.cells()
        return tuple(flat[r * SIZE : (r + 1) * SIZE] for r in range(SIZE))

    def is_goal(self) -> bool:
        return self.packed == GOAL_ID

    def is_tile_correct(self, index: int) -> bool:
        """Check if cell *index* holds its goal value."""
        return self.cell(index) == (index + 1) % CELLS

    def is_solvable(self) -> bool:
        """Return True if the goal is reachable from this state.

        The inversion count of the 15 tiles plus the blank's row counted
        from the bottom must be even.
        """
        inversions = 0
        seen: list[int] = []
        for value in self.cells():
            if value == 0:
                continue
            inversions += len(seen) - bisect_left(seen, value)
            insort(seen, value)
        blank_from_bottom = SIZE - 1 - self.blank // SIZE
        return (inversions + blank_from_bottom) % 2 == 0

    # -- moves ----------------------------------------------------------------

    def is_legal_move(self, move: Move) -> bool:
        blank = self.blank
        if move is Move.UP:
            return blank >= SIZE
        if move is Move.DOWN:
            return blank < CELLS - SIZE
        if move is Move.LEFT:
            return blank % SIZE > 0
        return blank % SIZE < SIZE - 1

    def legal_moves(self) -> list[Move]:
        return [m for m in Move if self.is_legal_move(m)]

    def apply_move(self, move: Move) -> PuzzleState:
        """Return the state reached by sliding the blank in *move*'s direction."""
        if not self.is_legal_move(move):
            raise IllegalMoveError(
                f"Blank at cell {self.blank} cannot move {move.value} "
                f"({self.encode()})."
            )
        target = self.blank + move.offset
        value = self.cell(target)
        packed = self.packed - (value << _shift(target)) + (value << _shift(self.blank))
        return PuzzleState(packed=packed, blank=target)

    def __repr__(self) -> str:
        return f"PuzzleState({self.encode()!r})"

    def __str__(self) -> str:
        return self.encode()
