"""
Solver Errors Module - Exception hierarchy for the placement solver.
"""


class SolverError(Exception):
    """Base class for all solver errors."""


class InvalidBoardSizeError(SolverError):
    """Board dimension is not a positive integer."""


class InvalidCoordinateError(SolverError):
    """A package or placement coordinate lies outside the board."""

    def __init__(self, x: int, y: int, board_size: int):
        super().__init__(
            f"Coordinate ({x},{y}) outside {board_size}x{board_size} board"
        )
        self.x = x
        self.y = y
        self.board_size = board_size


class InvalidBudgetError(SolverError):
    """Drone budget is negative or larger than the number of cells."""

    def __init__(self, num_drones: int, board_size: int):
        super().__init__(
            f"Drone budget {num_drones} invalid for "
            f"{board_size}x{board_size} board"
        )
        self.num_drones = num_drones
        self.board_size = board_size


class IllegalActionError(SolverError):
    """Action targets a covered cell or a cell outside the board."""


class BudgetExhaustedError(SolverError):
    """Transition requested with no drones left."""


class UnknownAlgorithmError(SolverError, ValueError):
    """Algorithm name does not match any registered strategy."""


class SearchExhaustedError(SolverError, RuntimeError):
    """Frontier emptied without reaching a terminal state."""
