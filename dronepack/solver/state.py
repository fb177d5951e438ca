"""
State Module - Search state snapshot with score and bound queries.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .action import Action, Coordinate
from .board import Board, render_board


ORIENTATIONS = ("row", "col", "diag1", "diag2")


def _iter_lines(array: np.ndarray, orientation: str) -> Iterator[np.ndarray]:
    """
    Yield the 1-D lines of a square array along one orientation.

    "diag1" lines have constant x - y, "diag2" lines constant x + y.
    """
    size = array.shape[0]
    if orientation == "row":
        yield from array
    elif orientation == "col":
        yield from array.T
    elif orientation == "diag1":
        for offset in range(-(size - 1), size):
            yield array.diagonal(offset)
    elif orientation == "diag2":
        flipped = np.fliplr(array)
        for offset in range(-(size - 1), size):
            yield flipped.diagonal(offset)
    else:
        raise ValueError(f"Unknown orientation: {orientation}")


def _top_sum(values: List[int], count: int) -> int:
    """Sum of the `count` largest values."""
    if count <= 0:
        return 0
    return sum(sorted(values, reverse=True)[:count])


@dataclass(frozen=True, eq=False)
class State:
    """
    Immutable search state.

    Equality and hashing only look at the set of placed coordinates, so
    two states reached by placing the same drones in a different order
    are the same state.

    Attributes:
        board: Board snapshot owned by this state
        history: Placements in the order they were made
        num_drones_placed: Drones already on the board
        num_drones_left: Drones still to place
    """
    board: Board
    history: Tuple[Action, ...] = ()
    num_drones_placed: int = 0
    num_drones_left: int = 0

    @classmethod
    def initial(cls, board: Board, num_drones: int) -> 'State':
        """Create the root state with the full drone budget."""
        return cls(board=board, history=(), num_drones_placed=0,
                   num_drones_left=num_drones)

    @property
    def placement_key(self) -> Tuple[Coordinate, ...]:
        """Canonical sorted tuple of placed coordinates."""
        return tuple(sorted(action.coord for action in self.history))

    @property
    def budget(self) -> int:
        """Initial drone budget of the run this state belongs to."""
        return self.num_drones_placed + self.num_drones_left

    @property
    def is_goal(self) -> bool:
        """True when every drone has been placed."""
        return self.num_drones_left == 0

    def score(self) -> int:
        """Total packages on cells bearing a drone."""
        return self.board.covered_packages()

    def orientation_bound(self, orientation: str) -> int:
        """
        Upper bound on additional packages for one line orientation.

        Takes the best uncovered cell of every drone-free line and sums the
        largest `num_drones_left` of them.
        """
        available = np.where(self.board.covered, 0, self.board.packages)
        maxima = []
        for values, drones in zip(_iter_lines(available, orientation),
                                  _iter_lines(self.board.drones, orientation)):
            if not drones.any():
                maxima.append(int(values.max()))
        return _top_sum(maxima, self.num_drones_left)

    def eligible_upper_bound(self) -> int:
        """
        Admissible upper bound on packages the remaining drones can add.

        Minimum of the four per-orientation bounds.
        """
        return min(self.orientation_bound(o) for o in ORIENTATIONS)

    def naive_upper_bound(self) -> int:
        """Sum of the largest uncovered cell values, ignoring lines."""
        values = self.board.packages[~self.board.covered].tolist()
        return _top_sum(values, self.num_drones_left)

    def estimate(self) -> int:
        """Score plus eligible upper bound."""
        return self.score() + self.eligible_upper_bound()

    def render(self) -> str:
        """Render a debugging summary followed by the board."""
        header = [
            f"Placed: {self.num_drones_placed:3d}",
            f"Left  : {self.num_drones_left:3d}",
            f"Score : {self.score():3d}",
            f"Eligib: {self.eligible_upper_bound():3d}",
        ]
        return "\n".join(header) + "\n" + render_board(self.board)

    def __hash__(self):
        return hash(self.placement_key)

    def __eq__(self, other):
        if not isinstance(other, State):
            return False
        return self.placement_key == other.placement_key

    def __str__(self) -> str:
        return self.render()
