"""
Action Module - Board coordinates and drone placement actions.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coordinate:
    """
    Cell position on the board.

    Ordered lexicographically so that a set of coordinates has a single
    canonical sorted form.

    Attributes:
        x: Row index
        y: Column index
    """
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Action:
    """
    Place the next drone at a coordinate.

    Attributes:
        coord: Target cell
    """
    coord: Coordinate

    @classmethod
    def at(cls, x: int, y: int) -> 'Action':
        """Create an Action targeting (x, y)."""
        return cls(coord=Coordinate(x, y))

    @property
    def x(self) -> int:
        return self.coord.x

    @property
    def y(self) -> int:
        return self.coord.y

    def __str__(self) -> str:
        return f"Place{self.coord}"
