"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .dfs import DfsStrategy
from .astar import AStarStrategy

__all__ = [
    "DfsStrategy",
    "AStarStrategy",
]
