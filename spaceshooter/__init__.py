"""A top-down arcade space shooter on tile maps, with A* pathfinding enemies."""

__version__ = "0.1.0"