"""
Problem Module - Facade wiring the initial state, rules and strategies.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .action import Action
from .board import Board
from .context import SolutionContext
from .errors import (
    InvalidBoardSizeError,
    InvalidBudgetError,
    UnknownAlgorithmError,
)
from .factory import create_strategy
from .rules import apply_action, legal_actions
from .solution import Solution
from .state import State

logger = logging.getLogger(__name__)


class Problem:
    """
    Drone placement problem.

    Holds the initial state only; actions() and step() work on any state
    handed to them, so the same Problem serves every strategy and every
    branch of a search.

    Example:
        problem = Problem.from_packages(4, 2, [(0, 0), (1, 3), (1, 3)])
        best = problem.solve("astar")
    """

    def __init__(self, initial_state: State):
        self._initial_state = initial_state

    @classmethod
    def from_packages(
        cls,
        board_size: int,
        num_drones: int,
        packages: Iterable[Tuple[int, int]],
        validate: bool = True,
    ) -> 'Problem':
        """
        Build a problem from board size, budget and package coordinates.

        Args:
            board_size: Board dimension n
            num_drones: Drone budget d
            packages: (x, y) pairs, one per package; repeats stack
            validate: Reject a non-positive size and an out-of-range
                budget. Package coordinates are checked regardless.

        Returns:
            Problem with a fresh initial state

        Raises:
            InvalidBoardSizeError: If board_size < 1
            InvalidCoordinateError: If a package lies outside the board
            InvalidBudgetError: If num_drones < 0 or > board_size ** 2
        """
        packages = list(packages)
        if validate:
            if board_size < 1:
                raise InvalidBoardSizeError(
                    f"Board size must be positive, got {board_size}"
                )
            if num_drones < 0 or num_drones > board_size * board_size:
                raise InvalidBudgetError(num_drones, board_size)

        board = Board.from_packages(board_size, packages)
        logger.debug(
            f"Problem created: {board_size}x{board_size} board, "
            f"{num_drones} drones, {len(packages)} packages"
        )
        return cls(State.initial(board, num_drones))

    @property
    def initial_state(self) -> State:
        return self._initial_state

    @property
    def board_size(self) -> int:
        return self._initial_state.board.size

    def actions(self, state: State) -> List[Action]:
        """Legal placements from state."""
        return legal_actions(state)

    def step(self, state: State, action: Action) -> State:
        """Apply action to state, returning a new state."""
        return apply_action(state, action)

    def run(
        self,
        algorithm: str,
        progress_callback: Optional[Callable[[float, str], None]] = None,
    ) -> Solution:
        """
        Solve with the named strategy and return the full result.

        Args:
            algorithm: "dfs" or "astar"
            progress_callback: Optional callback(percent, message)

        Returns:
            Solution with score, placements and metrics

        Raises:
            UnknownAlgorithmError: If algorithm is not recognized
        """
        strategy = create_strategy(algorithm)
        context = SolutionContext(problem=self,
                                  progress_callback=progress_callback)
        logger.info(f"Solving with {strategy.name}: {strategy.description}")
        return strategy.solve(context)

    def solve(self, algorithm: str) -> int:
        """
        Solve with the named strategy and return the optimum score.

        An unrecognized algorithm is reported and yields 0, which callers
        must not confuse with a genuine zero optimum.

        Args:
            algorithm: "dfs" or "astar"

        Returns:
            Maximum packages coverable, or 0 for an unknown algorithm
        """
        try:
            solution = self.run(algorithm)
        except UnknownAlgorithmError as e:
            logger.error(f"Invalid argument algorithm -- {e}")
            return 0
        return solution.score
