from fifteen.models.board import CELLS, GOAL_ID, SIZE, Move, PuzzleState

__all__ = ["CELLS", "GOAL_ID", "SIZE", "Move", "PuzzleState"]
