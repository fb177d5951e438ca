"""
DFS Strategy - Exhaustive depth-first branch and bound.

Explores placements depth first, most packages first, and cuts any branch
whose score plus eligible upper bound cannot beat the best score found so
far. Uses an explicit stack so deep budgets never hit the interpreter's
recursion limit.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..base import SolverStrategy
from ..action import Action
from ..context import SolutionContext
from ..solution import Solution
from ..state import State
from ..factory import Algorithm, register_strategy

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """
    Expansion point on the DFS stack.

    Attributes:
        state: State being expanded
        bound: score + eligible upper bound of the state
        actions: Remaining children, best first
    """
    state: State
    bound: int
    actions: Iterator[Action]


@register_strategy
class DfsStrategy(SolverStrategy):
    """
    Depth-first branch and bound over drone placements.

    Algorithm:
        1. A state with no drones left is terminal and scores itself
        2. Prune when score + bound <= best found so far
        3. Expand children by descending package count of the target
        4. Stop expanding siblings once the best reaches this node's bound
        5. A state with drones left but no legal action is terminal too

    The search is exact: the bound never underestimates what a subtree can
    add, so a pruned subtree never holds a better placement.
    """
    name = Algorithm.DFS.value
    description = "Depth-first branch and bound (exact)"

    def __init__(self):
        self._best_score = 0
        self._best_state: Optional[State] = None
        self._states_explored = 0
        self._pruned = 0

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the optimum by depth-first branch and bound.

        Args:
            context: Solution context with problem

        Returns:
            Solution with best score, placements and metrics
        """
        self._best_score = 0
        self._best_state = None
        self._states_explored = 0
        self._pruned = 0

        stack: List[_Frame] = []
        frame = self._enter(context, context.problem.initial_state)
        if frame is not None:
            stack.append(frame)

        root_total = len(context.problem.actions(frame.state)) if frame else 0
        root_done = 0

        while stack:
            top = stack[-1]

            # Incumbent reached this node's bound: siblings cannot do better
            if self._best_score >= top.bound:
                stack.pop()
                continue

            action = next(top.actions, None)
            if action is None:
                stack.pop()
                continue

            if len(stack) == 1:
                context.report_progress(
                    root_done / root_total,
                    f"best {self._best_score}, {self._states_explored} states"
                )
                root_done += 1

            child = context.problem.step(top.state, action)
            child_frame = self._enter(context, child)
            if child_frame is not None:
                stack.append(child_frame)

        logger.info(
            f"[DFS] Solution complete: score {self._best_score}, "
            f"{self._states_explored} states explored, "
            f"{self._pruned} branches pruned"
        )

        return self._build_solution(
            context, self._best_state, self._best_score,
            self._states_explored, pruned_branches=self._pruned
        )

    def _enter(self, context: SolutionContext,
               state: State) -> Optional[_Frame]:
        """
        Visit a state, returning a frame if it needs expansion.

        Terminal states update the incumbent, bounded-out states are
        counted as pruned.
        """
        self._states_explored += 1

        if state.is_goal:
            self._record(state)
            return None

        score = state.score()
        bound = score + state.eligible_upper_bound()
        if bound <= self._best_score:
            self._pruned += 1
            return None

        actions = self.ordered_actions(context, state)
        if not actions:
            # Drones left but nowhere to put them
            self._record(state)
            return None

        return _Frame(state=state, bound=bound, actions=iter(actions))

    def _record(self, state: State) -> None:
        """Keep state as the incumbent if it improves the best score."""
        score = state.score()
        if score > self._best_score:
            logger.debug(
                f"[DFS] New best {score} at "
                f"{' '.join(str(a.coord) for a in state.history)}"
            )
            self._best_score = score
            self._best_state = state
        elif self._best_state is None:
            self._best_state = state
