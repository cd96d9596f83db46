"""Terminal frontend for the 15-puzzle solver."""
