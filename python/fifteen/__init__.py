"""15-puzzle core: board model, heuristic, and A* / IDA* search engines."""

__version__ = "0.1.0"
