from fifteen.engine.gamesolver.astar import AStar
from fifteen.engine.gamesolver.idastar import IDAStar
from fifteen.engine.gamesolver.node import SearchNode, Solution
from fifteen.engine.gamesolver.solver import MAX_STEPS, Algorithm, Solver

__all__ = [
    "AStar",
    "Algorithm",
    "IDAStar",
    "MAX_STEPS",
    "SearchNode",
    "Solution",
    "Solver",
]
