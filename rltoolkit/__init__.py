"""Roguelike building blocks: random generators, geometry, field of view, A* pathfinding and map generators."""

__version__ = "0.1.0"