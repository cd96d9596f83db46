"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class FifteenError(Exception):
    """Base class for every error raised by :mod:`fifteen`."""


class FormatError(FifteenError, ValueError):
    """A state encoding is malformed or does not describe a permutation."""


class IllegalMoveError(FifteenError, ValueError):
    """The blank cannot move in the requested direction."""


class UnsolvableError(FifteenError):
    """The state lies in the parity class unreachable from the goal."""


class NoSolutionError(FifteenError):
    """A search exhausted its state space without reaching the goal."""


class StepLimitExceeded(FifteenError):
    """A host-imposed step budget ran out before the search finished."""

    def __init__(self, steps: int) -> None:
        super().__init__(f"Step limit of {steps} exceeded.")
        self.steps = steps


class SearchInvariantError(FifteenError, RuntimeError):
    """An engine reached a state its own bookkeeping says is impossible."""
