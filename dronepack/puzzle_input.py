"""
Puzzle Input Module - Parse the textual puzzle description.

Format:
    n d p          board size, drone budget, package count
                   (whitespace separated, may span lines)
    algorithm      "dfs" or "astar"
    x,y            one line per package, p lines

Example:
    4
    2
    3
    astar
    0,0
    1,3
    1,3
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("board size", "drone count", "package count")


class PuzzleFormatError(ValueError):
    """Malformed puzzle input."""

    def __init__(self, message: str, line_number: int = 0):
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


@dataclass
class PuzzleInput:
    """
    Parsed puzzle description.

    Attributes:
        board_size: Board dimension n
        num_drones: Drone budget d
        algorithm: Algorithm selector as written in the input
        packages: Package coordinates, repeats allowed
    """
    board_size: int
    num_drones: int
    algorithm: str
    packages: List[Tuple[int, int]] = field(default_factory=list)


def _parse_int(token: str, what: str, line_number: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise PuzzleFormatError(f"{what} must be an integer, got {token!r}",
                                line_number) from None
    if value < 0:
        raise PuzzleFormatError(f"{what} must be non-negative, got {value}",
                                line_number)
    return value


def parse_puzzle(text: str) -> PuzzleInput:
    """
    Parse a puzzle description.

    Args:
        text: Full input text

    Returns:
        PuzzleInput with header values and package coordinates

    Raises:
        PuzzleFormatError: On missing fields, non-integers, malformed
            coordinate lines or coordinates outside the board
    """
    lines = [(number, line.strip())
             for number, line in enumerate(text.splitlines(), start=1)]
    lines = [(number, line) for number, line in lines if line]
    position = 0

    # Header integers may share a line or be split across lines
    header: List[int] = []
    while len(header) < len(HEADER_FIELDS):
        if position >= len(lines):
            missing = HEADER_FIELDS[len(header)]
            raise PuzzleFormatError(f"missing {missing}")
        number, line = lines[position]
        position += 1
        for token in line.split():
            if len(header) == len(HEADER_FIELDS):
                raise PuzzleFormatError(f"unexpected token {token!r}", number)
            header.append(_parse_int(token, HEADER_FIELDS[len(header)], number))

    board_size, num_drones, num_packages = header
    if board_size == 0:
        raise PuzzleFormatError("board size must be positive")

    if position >= len(lines):
        raise PuzzleFormatError("missing algorithm")
    algorithm = lines[position][1]
    position += 1

    packages: List[Tuple[int, int]] = []
    for _ in range(num_packages):
        if position >= len(lines):
            raise PuzzleFormatError(
                f"expected {num_packages} packages, found {len(packages)}"
            )
        number, line = lines[position]
        position += 1
        parts = line.split(",")
        if len(parts) != 2:
            raise PuzzleFormatError(f"expected 'x,y', got {line!r}", number)
        x = _parse_int(parts[0].strip(), "x", number)
        y = _parse_int(parts[1].strip(), "y", number)
        if x >= board_size or y >= board_size:
            raise PuzzleFormatError(
                f"package ({x},{y}) outside {board_size}x{board_size} board",
                number
            )
        packages.append((x, y))

    if position < len(lines):
        logger.warning(
            f"Ignoring {len(lines) - position} trailing line(s) after "
            f"{num_packages} packages"
        )

    logger.debug(
        f"Parsed puzzle: n={board_size}, d={num_drones}, "
        f"p={num_packages}, algorithm={algorithm}"
    )
    return PuzzleInput(board_size=board_size, num_drones=num_drones,
                       algorithm=algorithm, packages=packages)


def load_puzzle(path: Union[str, Path]) -> PuzzleInput:
    """
    Read and parse a puzzle file.

    Args:
        path: Input file path

    Returns:
        Parsed PuzzleInput
    """
    with open(path, 'r', encoding='utf-8') as f:
        return parse_puzzle(f.read())
