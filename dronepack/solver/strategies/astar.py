"""
A* Strategy - Best-first search with an admissible bound.

Pops states in descending order of score + eligible upper bound. Since the
bound never underestimates, the first terminal state popped is optimal.
"""

import heapq
import itertools
import logging
from typing import List, Set, Tuple

from ..base import SolverStrategy
from ..context import SolutionContext
from ..errors import SearchExhaustedError
from ..solution import Solution
from ..state import State
from ..factory import Algorithm, register_strategy

logger = logging.getLogger(__name__)

# (negated priority, insertion order, state)
FrontierEntry = Tuple[int, int, State]


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    Best-first search over drone placements.

    Algorithm:
        1. Seed the frontier with the initial state
        2. Pop the state with highest f = score + eligible upper bound
        3. Goal test at pop time: no drones left, or no legal action left
        4. Otherwise mark explored and enqueue children that are neither
           explored nor already waiting in the frontier

    States compare by their set of placements, so the same drones placed
    in a different order are expanded once. Equal priorities pop in
    insertion order.
    """
    name = Algorithm.ASTAR.value
    description = "A* best-first search (exact)"

    def __init__(self, progress_interval: int = 1000):
        """
        Initialize A* strategy.

        Args:
            progress_interval: Expansions between progress reports
        """
        self.progress_interval = progress_interval

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the optimum by best-first search.

        Args:
            context: Solution context with problem

        Returns:
            Solution with best score, placements and metrics

        Raises:
            SearchExhaustedError: If the frontier empties without a goal
        """
        counter = itertools.count()

        initial = context.problem.initial_state
        frontier: List[FrontierEntry] = []
        in_frontier: Set[State] = set()
        explored: Set[State] = set()
        expansions = 0

        heapq.heappush(frontier, (-initial.estimate(), next(counter), initial))
        in_frontier.add(initial)
        frontier_peak = 1

        while frontier:
            _, _, state = heapq.heappop(frontier)
            in_frontier.discard(state)

            if state.is_goal:
                return self._finish(context, state, expansions, frontier_peak)

            actions = context.problem.actions(state)
            if not actions:
                # Drones left but nowhere to put them
                return self._finish(context, state, expansions, frontier_peak)

            explored.add(state)
            expansions += 1
            for action in actions:
                child = context.problem.step(state, action)
                if child in explored or child in in_frontier:
                    continue
                heapq.heappush(frontier, (-child.estimate(), next(counter), child))
                in_frontier.add(child)

            frontier_peak = max(frontier_peak, len(frontier))

            if expansions % self.progress_interval == 0:
                budget = initial.num_drones_left
                context.report_progress(
                    min(0.99, state.num_drones_placed / budget),
                    f"{expansions} explored, {len(frontier)} in frontier"
                )
                logger.debug(
                    f"[AStar] {expansions} explored, "
                    f"{len(frontier)} in frontier, depth {state.num_drones_placed}"
                )

        raise SearchExhaustedError(
            f"Frontier exhausted after {expansions} expansions"
        )

    def _finish(self, context: SolutionContext, state: State,
                expansions: int, frontier_peak: int) -> Solution:
        score = state.score()
        logger.info(
            f"[AStar] Solution complete: score {score}, "
            f"{expansions} states explored, frontier peak {frontier_peak}"
        )
        return self._build_solution(
            context, state, score, expansions,
            frontier_peak=frontier_peak
        )
