"""
Strategy Factory Module - Maps algorithm selectors to search strategies.

Strategies register themselves on import; Problem.run() looks them up by
the selector read from the puzzle input.
"""

from enum import Enum
from typing import Dict, List, Type, Any

from .base import SolverStrategy
from .errors import UnknownAlgorithmError


class Algorithm(str, Enum):
    """Algorithm selectors accepted in puzzle input."""
    DFS = "dfs"
    ASTAR = "astar"


# Selector -> strategy class
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy under its `name` selector.

    A later registration with the same name replaces the earlier one.
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate the strategy for an algorithm selector.

    Args:
        name: Selector ("dfs", "astar") or an Algorithm member
        **kwargs: Passed to the strategy constructor

    Returns:
        Fresh strategy instance

    Raises:
        UnknownAlgorithmError: If no strategy is registered under name
    """
    key = name.value if isinstance(name, Algorithm) else name
    if key not in _STRATEGIES:
        raise UnknownAlgorithmError(
            f"Unknown algorithm: {name}. "
            f"Available: {', '.join(get_strategy_names())}"
        )
    return _STRATEGIES[key](**kwargs)


def get_strategy_names() -> List[str]:
    """Registered selectors in registration order."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """Selector and description of every registered strategy."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]
