"""Game logic of a top-down arena shooter: vectors, A* pathfinding, scenes, collisions, input, player and enemies."""

__version__ = "0.1.0"