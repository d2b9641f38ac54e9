"""Programming-lab exercises: a token scanner, grade reports, quicksort, a
binary search tree, a train yard, a hot-plate simulation and smaller tools."""

__version__ = "0.1.0"