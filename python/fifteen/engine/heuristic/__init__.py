from fifteen.engine.heuristic.manhattan import full_heuristic, incremental_delta

__all__ = ["full_heuristic", "incremental_delta"]
