"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import psutil

from .action import Action
from .context import SolutionContext
from .solution import Solution, SolutionMetrics
from .state import State

logger = logging.getLogger(__name__)


def memory_rss_mb() -> float:
    """Resident memory of the current process in megabytes."""
    try:
        return psutil.Process().memory_info().rss / (1024 * 1024)
    except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
        logger.debug(f"Memory usage unavailable: {e}")
        return 0.0


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the optimal placement for the context's problem.

        Args:
            context: Solution context with problem and progress reporting

        Returns:
            Solution with score, placements and metrics
        """
        pass

    def ordered_actions(self, context: SolutionContext,
                        state: State) -> List[Action]:
        """
        Legal actions sorted by descending package count of their target.

        Ties keep row-major order.

        Args:
            context: Solution context
            state: State to expand

        Returns:
            Sorted list of legal actions
        """
        board = state.board
        actions = context.problem.actions(state)
        actions.sort(key=lambda a: board.packages_at(a.coord), reverse=True)
        return actions

    def _build_solution(
        self,
        context: SolutionContext,
        best_state: Optional[State],
        score: int,
        states_explored: int,
        pruned_branches: int = 0,
        frontier_peak: int = 0,
    ) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = context.elapsed_time() * 1000
        placements = []
        if best_state is not None:
            placements = [action.coord for action in best_state.history]

        return Solution(
            score=score,
            placements=placements,
            final_state=best_state,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                pruned_branches=pruned_branches,
                frontier_peak=frontier_peak,
                memory_rss_mb=memory_rss_mb(),
                strategy_name=self.name,
            )
        )
