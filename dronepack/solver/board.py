"""
Board Module - Immutable board snapshot for the drone placement puzzle.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .action import Coordinate
from .errors import InvalidCoordinateError


@dataclass(frozen=True)
class Cell:
    """
    Value view of a single board cell.

    Attributes:
        num_packages: Packages on this cell
        covered: True once a drone shares its row, column or a diagonal
        drone_placed: True if a drone sits on this cell
    """
    num_packages: int = 0
    covered: bool = False
    drone_placed: bool = False


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class Board:
    """
    Immutable n x n board snapshot.

    Backed by three read-only numpy arrays indexed [x, y]. Placing a drone
    copies the coverage and drone masks and returns a new Board; the
    package counts never change and are shared between snapshots.

    Attributes:
        packages: Package count per cell (int64)
        covered: Coverage mask (bool)
        drones: Drone occupancy mask (bool)
    """
    packages: np.ndarray
    covered: np.ndarray
    drones: np.ndarray

    @classmethod
    def empty(cls, size: int) -> 'Board':
        """Create a board with no packages, coverage or drones."""
        return cls(
            packages=_frozen(np.zeros((size, size), dtype=np.int64)),
            covered=_frozen(np.zeros((size, size), dtype=bool)),
            drones=_frozen(np.zeros((size, size), dtype=bool)),
        )

    @classmethod
    def from_packages(cls, size: int,
                      packages: Iterable[Tuple[int, int]]) -> 'Board':
        """
        Create a board from package coordinates.

        Coincident coordinates stack, so a cell listed twice holds two
        packages.

        Args:
            size: Board dimension n
            packages: (x, y) pairs, one per package

        Returns:
            Board with package counts filled in

        Raises:
            InvalidCoordinateError: If a package lies outside the board
        """
        counts = np.zeros((size, size), dtype=np.int64)
        coords = list(packages)
        # numpy would wrap negative indices onto the far edge
        for x, y in coords:
            if not (0 <= x < size and 0 <= y < size):
                raise InvalidCoordinateError(x, y, size)
        if coords:
            xs, ys = zip(*coords)
            np.add.at(counts, (list(xs), list(ys)), 1)
        return cls(
            packages=_frozen(counts),
            covered=_frozen(np.zeros((size, size), dtype=bool)),
            drones=_frozen(np.zeros((size, size), dtype=bool)),
        )

    @property
    def size(self) -> int:
        """Board dimension n."""
        return self.packages.shape[0]

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the board."""
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        """Get a value view of the cell at (x, y)."""
        return Cell(
            num_packages=int(self.packages[x, y]),
            covered=bool(self.covered[x, y]),
            drone_placed=bool(self.drones[x, y]),
        )

    def packages_at(self, coord: Coordinate) -> int:
        return int(self.packages[coord.x, coord.y])

    def is_covered(self, coord: Coordinate) -> bool:
        return bool(self.covered[coord.x, coord.y])

    def uncovered(self) -> List[Coordinate]:
        """
        List uncovered cells in row-major order.

        Returns:
            Coordinates of every cell still eligible for a drone
        """
        return [Coordinate(int(x), int(y))
                for x, y in np.argwhere(~self.covered)]

    def drone_positions(self) -> List[Coordinate]:
        """Coordinates of placed drones in row-major order."""
        return [Coordinate(int(x), int(y))
                for x, y in np.argwhere(self.drones)]

    def covered_packages(self) -> int:
        """Total packages on cells bearing a drone."""
        return int(self.packages[self.drones].sum())

    def attack_mask(self, coord: Coordinate) -> np.ndarray:
        """
        Mask of cells sharing a row, column or diagonal with coord.

        Includes coord itself.
        """
        rows, cols = np.indices(self.packages.shape)
        return ((rows == coord.x)
                | (cols == coord.y)
                | (rows - cols == coord.x - coord.y)
                | (rows + cols == coord.x + coord.y))

    def place_drone(self, coord: Coordinate) -> 'Board':
        """
        Place a drone and cover its row, column and both diagonals.

        Original board is unchanged.

        Args:
            coord: Target cell

        Returns:
            New Board with the drone placed
        """
        covered = self.covered | self.attack_mask(coord)
        drones = self.drones.copy()
        drones[coord.x, coord.y] = True
        return Board(
            packages=self.packages,
            covered=_frozen(covered),
            drones=_frozen(drones),
        )

    def __str__(self) -> str:
        return render_board(self)


def _separator(size: int) -> str:
    return "+----" * size + "+"


def _row(board: Board, x: int) -> str:
    parts = []
    for y in range(board.size):
        cell = board.cell(x, y)
        drone_mark = "x" if cell.drone_placed else " "
        cover_mark = "+" if cell.covered and cell.num_packages > 0 else " "
        package_mark = f"{cell.num_packages:2d}" if cell.num_packages > 0 else "  "
        parts.append(f"|{drone_mark}{cover_mark}{package_mark}")
    return "".join(parts) + "|"


def render_board(board: Board) -> str:
    """
    Render the board as ASCII art for debugging.

    Each cell shows "x" for a drone, "+" for covered cells holding
    packages, then the package count.
    """
    lines = []
    for x in range(board.size):
        lines.append(_separator(board.size))
        lines.append(_row(board, x))
    lines.append(_separator(board.size))
    return "\n".join(lines)
