"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy
from .board import Board
from .context import SolutionContext
from .solution import Solution

logger = logging.getLogger(__name__)


# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "centrality"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "centrality", "naive")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available strategy names.

    Returns:
        List of registered strategy names
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        "centrality" if available, else first registered
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""


def solve_board(board: Optional[Board] = None,
                strategy_name: Optional[str] = None,
                **context_kwargs: Any) -> Solution:
    """
    Solve a board with a registered strategy.

    Args:
        board: Board to solve (default: the standard starting position)
        strategy_name: Registered strategy (default: get_default_strategy_name())
        **context_kwargs: Extra SolutionContext fields (max_depth, timeout_sec, ...)

    Returns:
        Solution from the strategy
    """
    if board is None:
        board = Board.initial()
    strategy = create_strategy(strategy_name or get_default_strategy_name())
    context = SolutionContext(board=board, **context_kwargs)

    logger.info(f"Solving with '{strategy.name}' (max depth {context.max_depth}, "
                f"{board.remaining_piece_count()} pegs)")
    solution = strategy.solve(context)

    metrics = solution.metrics
    if solution.solved:
        logger.info(f"Solved in {solution.move_count} moves: {metrics.states_explored} states, "
                    f"{metrics.computation_time_ms:.0f}ms")
    elif solution.was_cancelled:
        logger.warning(f"Search cancelled after {metrics.states_explored} states")
    else:
        logger.info(f"No solution after {metrics.states_explored} states, "
                    f"{metrics.computation_time_ms:.0f}ms")
    return solution
