"""
Solver Package - State-space search for the drone placement puzzle.

Drones are placed on an n x n board one at a time; each drone covers its
row, column and both diagonals, and no later drone may sit on a covered
cell. The goal is to maximise the packages on cells bearing a drone.

Public API:
    - Problem: Facade for actions, transitions and solving
    - State: Immutable search state with score and bound queries
    - Board, Cell: Immutable board snapshot and cell view
    - Action, Coordinate: Placement value types
    - Solution, SolutionMetrics: Result of strategy computation
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - Algorithm: Recognized algorithm names
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from dronepack.solver import Problem

    problem = Problem.from_packages(3, 2, [(0, 0), (2, 1), (2, 1)])
    print(problem.solve("dfs"))

    solution = problem.run("astar")
    for coord in solution.placements:
        print(f"Drone at {coord}")
"""

# Core data structures
from .action import Action, Coordinate
from .board import Board, Cell, render_board
from .state import State
from .rules import legal_actions, apply_action
from .solution import Solution, SolutionMetrics
from .context import SolutionContext
from .errors import (
    SolverError,
    InvalidBoardSizeError,
    InvalidCoordinateError,
    InvalidBudgetError,
    IllegalActionError,
    BudgetExhaustedError,
    UnknownAlgorithmError,
    SearchExhaustedError,
)

# Strategy framework
from .base import SolverStrategy
from .factory import (
    Algorithm,
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    register_strategy,
)
from .problem import Problem

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Action",
    "Coordinate",
    "Board",
    "Cell",
    "render_board",
    "State",
    "legal_actions",
    "apply_action",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    "Problem",
    # Errors
    "SolverError",
    "InvalidBoardSizeError",
    "InvalidCoordinateError",
    "InvalidBudgetError",
    "IllegalActionError",
    "BudgetExhaustedError",
    "UnknownAlgorithmError",
    "SearchExhaustedError",
    # Strategy framework
    "SolverStrategy",
    "Algorithm",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "register_strategy",
]
