"""
Solver Package - Backtracking solver for the Resta Um peg solitaire puzzle.

Public API:
    - Board: Mutable 7x7 cross-shaped board
    - Cell: Cell states (INVALID, EMPTY, OCCUPIED)
    - Move: Single jump definition
    - SearchState: Per-search trace, visited set and counters
    - Solution: Result of strategy computation
    - SolutionMetrics: Performance statistics
    - SolutionContext: Board, limits and cancellation for a search
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - solve_board(): Solve with a named strategy in one call
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from resta_um.solver import Board, SolutionContext, create_strategy

    context = SolutionContext(board=Board.initial())
    strategy = create_strategy("centrality")
    solution = strategy.solve(context)

    if solution.solved:
        for move in solution.moves:
            print(move.describe())
"""

# Core data structures
from .board import Board, Cell
from .move import Move, DIRECTIONS, CENTER
from .state import SearchState
from .solution import Solution, SolutionMetrics
from .context import SolutionContext, MAX_DEPTH

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    solve_board,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Board",
    "Cell",
    "Move",
    "DIRECTIONS",
    "CENTER",
    "SearchState",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    "MAX_DEPTH",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve_board",
]
