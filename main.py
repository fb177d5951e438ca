"""
Drone Placement Solver - Entry Point

Reads a puzzle description, solves it with the selected algorithm and
prints the maximum number of packages covered.

Example:
    python main.py input.txt
    python main.py input.txt --algorithm astar --show-board
    python main.py < input.txt
"""

import sys
import logging
import argparse
from pathlib import Path

from dronepack.puzzle_input import PuzzleFormatError, load_puzzle, parse_puzzle
from dronepack.settings import SETTINGS_FILE, load_settings, save_settings
from dronepack.solver import (
    Problem,
    SolverError,
    UnknownAlgorithmError,
    get_strategy_info,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log output to stderr so stdout carries only the result."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    strategies = ", ".join(info["name"] for info in get_strategy_info())
    parser = argparse.ArgumentParser(
        description="Drone Placement Solver - maximise packages covered by drones"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Puzzle file (default: read from stdin)"
    )
    parser.add_argument(
        "--algorithm", "-a",
        help=f"Override the algorithm named in the input ({strategies})"
    )
    parser.add_argument(
        "--show-board", "-b",
        action="store_true",
        help="Log the board of the best placement"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=SETTINGS_FILE,
        help=f"Settings file (default: {SETTINGS_FILE})"
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Write the effective settings back to the settings file"
    )
    return parser.parse_args(argv)


def run(args) -> int:
    """
    Solve the puzzle described by args.

    Returns:
        Exit code
    """
    settings = load_settings(args.config)
    if args.debug:
        settings["log_level"] = "DEBUG"
    if args.show_board:
        settings["show_board"] = True
    configure_logging(settings["log_level"])

    if args.save_config:
        save_settings(settings, args.config)

    try:
        if args.input:
            puzzle = load_puzzle(args.input)
        else:
            puzzle = parse_puzzle(sys.stdin.read())
    except (PuzzleFormatError, OSError) as e:
        logger.error(f"Input error: {e}")
        return 1

    algorithm = args.algorithm or puzzle.algorithm

    try:
        problem = Problem.from_packages(
            puzzle.board_size,
            puzzle.num_drones,
            puzzle.packages,
            validate=settings["validate_input"],
        )
        solution = problem.run(algorithm)
    except UnknownAlgorithmError as e:
        logger.error(f"Invalid argument algorithm -- {e}")
        print(0)
        return 0
    except SolverError as e:
        logger.error(f"Solver error: {e}")
        return 1

    metrics = solution.metrics
    logger.info(
        f"{metrics.strategy_name}: {metrics.states_explored} states, "
        f"{metrics.computation_time_ms:.1f}ms, "
        f"{metrics.memory_rss_mb:.1f}MB resident"
    )
    if settings["show_board"] and solution.final_state is not None:
        logger.info("Best placement:\n" + solution.final_state.render())

    print(solution.score)
    return 0


def main():
    """Parse arguments and run the solver."""
    sys.exit(run(parse_args()))


if __name__ == "__main__":
    main()
