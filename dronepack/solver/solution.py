"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .action import Coordinate
from .state import State


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of states expanded
        pruned_branches: Number of branches cut by the bound
        frontier_peak: Largest frontier size (best-first search only)
        memory_rss_mb: Resident memory of the process after the search
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    pruned_branches: int = 0
    frontier_peak: int = 0
    memory_rss_mb: float = 0.0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        score: Maximum packages covered
        placements: Drone positions achieving the score, in placement order
        final_state: State that achieved the score, if any drone was placed
        metrics: Performance statistics
    """
    score: int = 0
    placements: List[Coordinate] = field(default_factory=list)
    final_state: Optional[State] = None
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def placement_count(self) -> int:
        """Number of drones placed in the best solution."""
        return len(self.placements)

    @property
    def has_placements(self) -> bool:
        """Check if the solution places any drone."""
        return len(self.placements) > 0
