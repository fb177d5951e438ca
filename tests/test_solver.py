"""
Solver tests

Covers:
1. Problem construction and validation
2. Known scenarios for both strategies
3. DFS and A* agreement with each other and with exhaustive search
4. Strategy registry and unknown algorithm handling
5. Solution placements and metrics
"""

import logging
import random
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dronepack.solver import (
    Algorithm,
    InvalidBoardSizeError,
    InvalidBudgetError,
    InvalidCoordinateError,
    Problem,
    SolutionContext,
    State,
    UnknownAlgorithmError,
    create_strategy,
    get_strategy_info,
    get_strategy_names,
)

ALGORITHMS = ["dfs", "astar"]


def _exhaustive_optimum(problem: Problem) -> int:
    """Best score by trying every placement set."""
    memo: Dict = {}

    def best(state: State) -> int:
        key = state.placement_key
        if key not in memo:
            value = state.score()
            if not state.is_goal:
                for action in problem.actions(state):
                    value = max(value, best(problem.step(state, action)))
            memo[key] = value
        return memo[key]

    return best(problem.initial_state)


def _random_problem(rng: random.Random, min_size: int,
                    max_size: int) -> Tuple[Problem, Tuple]:
    size = rng.randint(min_size, max_size)
    drones = rng.randint(0, min(size + 1, size * size))
    packages = [(rng.randrange(size), rng.randrange(size))
                for _ in range(rng.randint(0, 2 * size * size))]
    problem = Problem.from_packages(size, drones, packages)
    return problem, (size, drones, packages)


def _uniform_packages(size: int) -> List[Tuple[int, int]]:
    return [(x, y) for x in range(size) for y in range(size)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_single_cell(algorithm):
    problem = Problem.from_packages(1, 1, [(0, 0)])

    assert problem.solve(algorithm) == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_prefers_heavier_cell(algorithm):
    """Two coincident packages outweigh one."""
    problem = Problem.from_packages(2, 1, [(0, 0), (0, 0), (1, 1)])

    assert problem.solve(algorithm) == 2


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_two_by_two_fits_one_drone(algorithm):
    """Second drone has nowhere to go; search still terminates."""
    problem = Problem.from_packages(2, 2, [(0, 0), (0, 0), (1, 1)])

    solution = problem.run(algorithm)

    assert solution.score == 2
    assert solution.placements == [problem.initial_state.board.uncovered()[0]]
    assert solution.final_state.num_drones_left == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_zero_budget(algorithm):
    problem = Problem.from_packages(3, 0, [(1, 1)])

    solution = problem.run(algorithm)

    assert solution.score == 0
    assert not solution.has_placements


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_no_packages(algorithm):
    problem = Problem.from_packages(4, 3, [])

    assert problem.solve(algorithm) == 0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("size,drones,expected", [
    (3, 3, 2),  # at most two non-attacking drones on 3x3
    (4, 4, 4),  # four-queens solution exists
    (5, 5, 5),
])
def test_uniform_board(algorithm, size, drones, expected):
    problem = Problem.from_packages(size, drones, _uniform_packages(size))

    assert problem.solve(algorithm) == expected


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_placements_are_non_attacking_and_score_matches(algorithm):
    packages = [(0, 0), (0, 1), (0, 1), (1, 3), (2, 0), (2, 0), (2, 0),
                (3, 2), (3, 3), (1, 1)]
    problem = Problem.from_packages(4, 3, packages)

    solution = problem.run(algorithm)

    board = problem.initial_state.board
    assert solution.score == sum(board.packages_at(c) for c in solution.placements)
    for i, a in enumerate(solution.placements):
        for b in solution.placements[i + 1:]:
            assert a.x != b.x and a.y != b.y
            assert a.x - a.y != b.x - b.y
            assert a.x + a.y != b.x + b.y
    assert solution.placement_count == solution.final_state.num_drones_placed


@pytest.mark.parametrize("seed", range(30))
def test_dfs_and_astar_agree(seed):
    """Both strategies find the same optimum on random small boards."""
    problem, params = _random_problem(random.Random(seed), 2, 5)

    dfs = problem.solve("dfs")
    astar = problem.solve("astar")

    assert dfs == astar, params


@pytest.mark.parametrize("seed", range(15))
def test_matches_exhaustive_search(seed):
    problem, params = _random_problem(random.Random(1000 + seed), 1, 4)

    expected = _exhaustive_optimum(problem)

    assert problem.solve("dfs") == expected, params
    assert problem.solve("astar") == expected, params


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_repeat_runs_are_deterministic(algorithm):
    problem, _ = _random_problem(random.Random(7), 4, 5)

    first = problem.run(algorithm)
    second = problem.run(algorithm)

    assert first.score == second.score
    assert first.placements == second.placements


def test_solve_does_not_change_initial_state():
    problem = Problem.from_packages(4, 2, [(0, 0), (3, 1)])

    problem.solve("dfs")
    problem.solve("astar")

    initial = problem.initial_state
    assert initial.history == ()
    assert initial.num_drones_left == 2
    assert not initial.board.covered.any()


def test_unknown_algorithm_returns_zero(caplog):
    """Unknown names are reported, not raised, by solve()."""
    problem = Problem.from_packages(2, 1, [(0, 0)])

    with caplog.at_level(logging.ERROR):
        assert problem.solve("bfs") == 0

    assert "bfs" in caplog.text


def test_unknown_algorithm_raises_from_run():
    problem = Problem.from_packages(2, 1, [(0, 0)])

    with pytest.raises(UnknownAlgorithmError):
        problem.run("beam")
    with pytest.raises(ValueError):
        create_strategy("beam")


def test_registry():
    assert set(get_strategy_names()) == {"dfs", "astar"}
    assert {info["name"] for info in get_strategy_info()} == {"dfs", "astar"}
    assert create_strategy(Algorithm.ASTAR).name == "astar"


def test_metrics_are_filled_in():
    problem = Problem.from_packages(5, 4, _uniform_packages(5))

    dfs = problem.run("dfs")
    astar = problem.run("astar")

    assert dfs.metrics.strategy_name == "dfs"
    assert dfs.metrics.states_explored > 0
    assert dfs.metrics.computation_time_ms >= 0.0
    assert astar.metrics.strategy_name == "astar"
    assert astar.metrics.frontier_peak > 0
    assert astar.metrics.memory_rss_mb >= 0.0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_computation_time_is_measured_from_context_start(algorithm):
    """Elapsed time runs from when the context was created."""
    problem = Problem.from_packages(3, 1, [(0, 0)])
    context = SolutionContext(problem=problem,
                              start_time=time.perf_counter() - 2.0)

    solution = create_strategy(algorithm).solve(context)

    assert solution.score == 1
    assert solution.metrics.computation_time_ms >= 2000.0


def test_astar_expands_each_placement_set_once():
    """Orderings of the same drones collapse into a single expansion."""
    problem = Problem.from_packages(5, 3, _uniform_packages(5))

    # Every state A* may expand has 0, 1 or 2 drones placed
    distinct = set()
    layer = [problem.initial_state]
    for _ in range(3):
        distinct.update(state.placement_key for state in layer)
        layer = [problem.step(state, action)
                 for state in layer for action in problem.actions(state)]

    solution = problem.run("astar")

    assert len(distinct) == 1 + 25 + 140
    assert solution.score == 3
    assert 0 < solution.metrics.states_explored <= len(distinct)


def test_progress_callback_is_called():
    problem = Problem.from_packages(4, 2, [(0, 0), (1, 2), (3, 3), (3, 3)])
    reports = []

    problem.run("dfs", progress_callback=lambda p, m: reports.append((p, m)))

    assert reports
    assert all(0.0 <= p <= 1.0 for p, _ in reports)


def test_from_packages_validates_coordinates():
    with pytest.raises(InvalidCoordinateError):
        Problem.from_packages(3, 1, [(0, 0), (3, 1)])
    with pytest.raises(InvalidCoordinateError):
        Problem.from_packages(3, 1, [(-1, 0)])


def test_from_packages_validates_budget():
    with pytest.raises(InvalidBudgetError):
        Problem.from_packages(2, 5, [])
    with pytest.raises(InvalidBudgetError):
        Problem.from_packages(2, -1, [])


def test_from_packages_validates_size():
    with pytest.raises(InvalidBoardSizeError):
        Problem.from_packages(0, 0, [])


def test_from_packages_without_validation_allows_large_budget():
    problem = Problem.from_packages(2, 5, [(1, 0)], validate=False)

    assert problem.board_size == 2
    assert problem.solve("astar") == 1


def test_from_packages_without_validation_still_checks_coordinates():
    with pytest.raises(InvalidCoordinateError):
        Problem.from_packages(3, 1, [(-1, 0)], validate=False)
    with pytest.raises(InvalidCoordinateError):
        Problem.from_packages(3, 1, [(1, 3)], validate=False)
